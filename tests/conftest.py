"""Shared fixtures: a fresh location store and a TestClient wired to it."""

import httpx
import pytest
from fastapi.testclient import TestClient

from geowoot.main import app
from geowoot.services.country_metadata import get_metadata_client
from geowoot.services.location_store import LocationStore, get_location_store
from geowoot.utils.http import make_client


@pytest.fixture
def store():
    return LocationStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_location_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upstream(client):
    """Point the metadata proxy at a MockTransport.

    Usage: ``upstream(handler)``; every request the proxy makes is appended to
    the returned list.
    """
    seen: list[httpx.Request] = []

    def install(handler):
        def recording(request: httpx.Request):
            seen.append(request)
            return handler(request)

        async def override():
            async with make_client(transport=httpx.MockTransport(recording)) as c:
                yield c

        app.dependency_overrides[get_metadata_client] = override
        return seen

    return install
