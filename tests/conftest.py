"""Shared test fixtures for pytest"""
import pytest
from httpx import ASGITransport, AsyncClient

from reverie.domain.value_objects import ProjectName, Username
from reverie.infrastructure.config.settings import Settings, get_settings
from reverie.infrastructure.persistence import (create_engine,
                                                create_memory_service,
                                                create_session_factory,
                                                create_sql_service,
                                                init_models)
from reverie.presentation.api import create_app


@pytest.fixture
def test_database_url(tmp_path):
    """SQLite database file, one per test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'reverie_test.db'}"


@pytest.fixture
async def test_engine(test_database_url):
    """Create test database engine with all tables"""
    engine = create_engine(test_database_url)
    await init_models(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Session factory bound to the test engine"""
    return create_session_factory(test_engine)


@pytest.fixture
def sql_service(session_factory):
    """LogService backed by the SQLite test database"""
    return create_sql_service(session_factory)


@pytest.fixture
def memory_service():
    """LogService backed by in-memory repositories"""
    return create_memory_service()


@pytest.fixture
async def alice(sql_service):
    """A stored user"""
    return await sql_service.new_user(Username("alice1"))


@pytest.fixture
async def journal(sql_service, alice):
    """A stored project owned by alice"""
    return await sql_service.new_project(ProjectName("journal"), alice.id)


@pytest.fixture
def test_settings(test_database_url):
    """Settings pointing at the test database, admin endpoints off"""
    return Settings(database_url=test_database_url, admin_enabled=False)


@pytest.fixture
def app(test_settings, test_engine, sql_service):
    """
    Application wired to the test database.

    ASGITransport does not run the lifespan handler, so the state it would
    set up is installed here.
    """
    app = create_app(test_settings)
    app.state.engine = test_engine
    app.state.log_service = sql_service
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """HTTP client for API testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
