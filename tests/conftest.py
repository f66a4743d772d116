# tests/conftest.py

import os
import tempfile

# The module-level app in linkvault_api.app.main is built on import;
# keep it away from any database.json in the working tree.
os.environ["DATABASE_PATH"] = os.path.join(tempfile.mkdtemp(prefix="linkvault-"), "database.json")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from linkvault_api.app.core.config import Settings  # noqa: E402
from linkvault_api.app.core.store import JsonStore  # noqa: E402
from linkvault_api.app.main import create_app  # noqa: E402
from linkvault_api.app.services import LinkService, UserService  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.json"


@pytest.fixture
def store(db_path):
    store = JsonStore(str(db_path))
    store.load()
    return store


@pytest.fixture
def user_service(store):
    return UserService(store)


@pytest.fixture
def link_service(store):
    return LinkService(store)


@pytest.fixture
def app(store, db_path):
    return create_app(Settings(database_path=str(db_path)), store)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
