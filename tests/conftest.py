import secrets

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestClient, TestServer, make_mocked_request

from csrfstore import (
    TOKEN_LENGTH,
    CookieTokenStore,
    InvalidTokenError,
    NotFoundError,
    StoreConfig,
)

HASH_KEY = b"2f1d0c3b9e8a7f6e5d4c3b2a19087f6e"


@pytest.fixture
def token():
    return secrets.token_bytes(TOKEN_LENGTH)


@pytest.fixture
def config():
    return StoreConfig(hash_key=HASH_KEY, max_age=3600)


@pytest.fixture
def store(config):
    """
    Create cookie token store
    """
    return CookieTokenStore(config)


@pytest.fixture
def make_request():
    """
    Build request with given cookies
    """

    def factory(**cookies):
        headers = {}
        if cookies:
            headers["Cookie"] = "; ".join(
                f"{name}={value}" for name, value in cookies.items()
            )
        return make_mocked_request("GET", "/", headers=headers)

    return factory


@pytest_asyncio.fixture
async def http_client(store):
    """
    Create client of application which issues token once and reuses it later
    """

    async def handler(request):
        try:
            token = store.get(request)
            issued = False
        except (NotFoundError, InvalidTokenError):
            token = secrets.token_bytes(TOKEN_LENGTH)
            issued = True
        response = web.json_response({"token": token.hex(), "issued": issued})
        store.save(token, response)
        return response

    app = web.Application()
    app.router.add_get("/token", handler)
    client = TestClient(TestServer(app))
    await client.start_server()
    yield client
    await client.close()
