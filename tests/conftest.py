import pytest
from fastapi.testclient import TestClient

from foobar_server.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
