"""
Command line interface for Reverie.

Usage:
  reverie new user -a alice1
  reverie new project -a alice1 -p journal
  reverie new log -a alice1 -p journal went for a walk
  reverie list log -p journal --page 2 --size 20
"""

import argparse
import asyncio
import sys

from reverie.application.exceptions import ServiceError
from reverie.application.services.log_service import LogService
from reverie.domain.entities import Log, Project, User
from reverie.domain.exceptions import ValidationException
from reverie.domain.pagination import Page, get_page
from reverie.domain.value_objects import ProjectName, Username
from reverie.infrastructure.config.settings import Settings, get_settings
from reverie.infrastructure.persistence import (create_engine,
                                                create_session_factory,
                                                create_sql_service,
                                                init_models)
from reverie.shared.telemetry.logging import setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reverie",
        description="Keep timestamped logs for your projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--database-url", help="Database URL (default: REVERIE_DB)")
    parser.add_argument(
        "-p", "--project", default=settings.default_project, help="Project name"
    )
    parser.add_argument(
        "-a", "--author", default=settings.default_author, help="Username of the author"
    )
    parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")
    parser.add_argument(
        "--size", type=int, default=settings.default_page_size, help="Page size"
    )
    parser.add_argument("command", choices=["new", "list"])
    parser.add_argument("target", choices=["log", "user", "project"])
    parser.add_argument("text", nargs="*", help="Log text (new log only)")
    return parser


def format_user(user: User) -> str:
    return f"{user.id}  {user.name}"


def format_project(project: Project) -> str:
    return f"{project.id}  {project.name}  (owner {project.owner})"


def format_log(log: Log) -> str:
    created = log.meta.created_at.strftime("%Y-%m-%d %H:%M:%S")
    return f"{created}  {log.text}"


async def _new(args: argparse.Namespace, service: LogService) -> int:
    if args.target == "user":
        user = await service.new_user(Username.parse(args.author))
        print(f"user {user.name} created ({user.id})")
        return EXIT_OK

    author = await service.user_by_name(Username.parse(args.author))
    if author is None:
        print("author not found")
        return EXIT_FAILURE

    if args.target == "project":
        project = await service.new_project(ProjectName.parse(args.project), author.id)
        print(f"created project {project.name} ({project.id})")
        return EXIT_OK

    project = await service.project_by_name(ProjectName.parse(args.project))
    if project is None:
        print("project not found")
        return EXIT_FAILURE
    log = await service.add_log(author.id, project.id, " ".join(args.text))
    print(f"log {log.id} added to {project.name}")
    return EXIT_OK


async def _list(args: argparse.Namespace, service: LogService) -> int:
    page = Page.new(args.page, args.size)

    if args.target == "user":
        users = await service.list_users(page)
        print(f"page {users.page}")
        for user in users.data:
            print(format_user(user))
        return EXIT_OK

    if args.target == "project":
        author = await service.user_by_name(Username.parse(args.author))
        if author is None:
            print("author not found")
            return EXIT_FAILURE
        projects = get_page(await service.projects_of(author.id), page)
        print(f"page {projects.page}")
        for project in projects.data:
            print(format_project(project))
        return EXIT_OK

    project = await service.project_by_name(ProjectName.parse(args.project))
    if project is None:
        print("project not found")
        return EXIT_FAILURE
    logs = await service.logs(project.id, page)
    print(f"page {logs.page}")
    for log in logs.data:
        print(format_log(log))
    return EXIT_OK


async def run(args: argparse.Namespace, service: LogService) -> int:
    """Execute one parsed command against ``service`` and return the exit code"""
    try:
        if args.command == "new":
            return await _new(args, service)
        return await _list(args, service)
    except ValidationException as e:
        print(e.message, file=sys.stderr)
        return EXIT_INVALID
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return EXIT_FAILURE


async def run_with_database(args: argparse.Namespace, settings: Settings) -> int:
    engine = create_engine(settings.database_url, echo=settings.database_echo)
    try:
        await init_models(engine)
        service = create_sql_service(create_session_factory(engine))
        return await run(args, service)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point"""
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    if args.database_url:
        settings = Settings(database_url=args.database_url)

    setup_logging(settings.debug)
    return asyncio.run(run_with_database(args, settings))


if __name__ == "__main__":
    sys.exit(main())
