"""Tests for LogService"""

from unittest.mock import AsyncMock

import pytest

from reverie.application.exceptions import (CreateUserError, QueryError,
                                            TechnicalError)
from reverie.application.services.log_service import LogService
from reverie.domain.exceptions import InvalidPageError
from reverie.domain.pagination import Page, Paged
from reverie.domain.value_objects import (ProjectId, ProjectName, UserId,
                                          Username)


@pytest.fixture(params=["memory", "sql"])
def service(request, memory_service, sql_service) -> LogService:
    """The same behaviour is expected from both repository families"""
    if request.param == "memory":
        return memory_service
    return sql_service


@pytest.mark.asyncio
async def test_user_project_log_scenario(service):
    """
    GIVEN a new user and a project they own
    WHEN a log is added and the first page of logs is read
    THEN the page holds exactly that log.
    """
    alice = await service.new_user(Username("alice1"))
    project = await service.new_project(ProjectName("proj-x"), alice.id)
    log = await service.add_log(alice.id, project.id, "hello")

    paged = await service.logs(project.id, Page(1, 10))

    assert paged.page == 1
    assert paged.data == [log]
    assert paged.data[0].text == "hello"
    assert paged.data[0].author == alice.id


@pytest.mark.asyncio
async def test_logs_are_paged_oldest_first(service):
    alice = await service.new_user(Username("alice1"))
    project = await service.new_project(ProjectName("proj-x"), alice.id)
    for i in range(5):
        await service.add_log(alice.id, project.id, f"entry {i}")

    first = await service.logs(project.id, Page(1, 2))
    third = await service.logs(project.id, Page(3, 2))
    beyond = await service.logs(project.id, Page(4, 2))

    assert [log.text for log in first.data] == ["entry 0", "entry 1"]
    assert [log.text for log in third.data] == ["entry 4"]
    assert beyond == Paged(page=4, data=[])


@pytest.mark.asyncio
async def test_logs_of_unknown_project_is_empty(service):
    paged = await service.logs(ProjectId.create(), Page())

    assert paged.data == []


@pytest.mark.asyncio
async def test_logs_are_scoped_to_their_project(service):
    alice = await service.new_user(Username("alice1"))
    one = await service.new_project(ProjectName("one"), alice.id)
    two = await service.new_project(ProjectName("two"), alice.id)
    await service.add_log(alice.id, one.id, "in one")

    assert (await service.logs(two.id, Page())).data == []


@pytest.mark.asyncio
async def test_projects_of(service):
    alice = await service.new_user(Username("alice1"))
    bob = await service.new_user(Username("bob-the-builder"))
    first = await service.new_project(ProjectName("first"), alice.id)
    second = await service.new_project(ProjectName("second"), alice.id)
    await service.new_project(ProjectName("bobs"), bob.id)

    assert await service.projects_of(alice.id) == [first, second]
    assert await service.projects_of(UserId.create()) == []


@pytest.mark.asyncio
async def test_lookups(service):
    alice = await service.new_user(Username("alice1"))
    project = await service.new_project(ProjectName("journal"), alice.id)

    assert await service.user_by_name(Username("alice1")) == alice
    assert await service.user_by_id(alice.id) == alice
    assert await service.project_by_name(ProjectName("journal")) == project
    assert await service.project_by_id(project.id) == project
    assert await service.user_by_name(Username("nobody1")) is None
    assert await service.project_by_id(ProjectId.create()) is None


@pytest.mark.asyncio
async def test_list_users(service):
    created = [await service.new_user(Username(f"user-{i:03d}")) for i in range(3)]

    paged = await service.list_users(Page(1, 2))

    assert paged.data == created[:2]
    assert (await service.list_users(Page(2, 2))).data == created[2:]


@pytest.mark.asyncio
async def test_duplicate_user_name_is_technical_error(service):
    await service.new_user(Username("alice1"))

    with pytest.raises(TechnicalError) as exc_info:
        await service.new_user(Username("alice1"))

    assert exc_info.value.message.startswith("error: ")
    assert isinstance(exc_info.value.__cause__, CreateUserError)


@pytest.mark.asyncio
async def test_duplicate_project_name_is_technical_error(service):
    alice = await service.new_user(Username("alice1"))
    await service.new_project(ProjectName("journal"), alice.id)

    with pytest.raises(TechnicalError):
        await service.new_project(ProjectName("journal"), alice.id)


@pytest.mark.asyncio
async def test_unknown_owner_is_technical_error(service):
    with pytest.raises(TechnicalError):
        await service.new_project(ProjectName("journal"), UserId.create())


@pytest.mark.asyncio
async def test_unknown_project_or_author_is_technical_error(service):
    alice = await service.new_user(Username("alice1"))
    project = await service.new_project(ProjectName("journal"), alice.id)

    with pytest.raises(TechnicalError):
        await service.add_log(alice.id, ProjectId.create(), "lost")
    with pytest.raises(TechnicalError):
        await service.add_log(UserId.create(), project.id, "ghost")

    assert (await service.logs(project.id, Page())).data == []


def test_invalid_page_fails_before_any_call():
    with pytest.raises(InvalidPageError):
        Page.new(0, 10)


@pytest.mark.asyncio
async def test_query_errors_are_lifted():
    """
    GIVEN a repository that fails with a query error
    WHEN the service reads through it
    THEN a TechnicalError carrying the storage message is raised.
    """
    user_repo = AsyncMock()
    user_repo.get_by_id.side_effect = QueryError("database is locked")
    service = LogService(user_repo=user_repo, project_repo=AsyncMock(), log_repo=AsyncMock())

    with pytest.raises(TechnicalError) as exc_info:
        await service.user_by_id(UserId.create())

    assert exc_info.value.message == "error: database is locked"
    assert exc_info.value.details == {"reason": "database is locked"}


@pytest.mark.asyncio
async def test_requests_are_built_from_arguments():
    log_repo = AsyncMock()
    service = LogService(user_repo=AsyncMock(), project_repo=AsyncMock(), log_repo=log_repo)
    author, project = UserId.create(), ProjectId.create()

    await service.add_log(author, project, "text")

    request = log_repo.create.call_args.args[0]
    assert (request.author, request.project, request.text) == (author, project, "text")
