"""Test configuration and shared fixtures"""

import os

import pytest
from fastapi.testclient import TestClient

from cattags.app import app
from cattags.config import Config, get_config
from cattags.db import DatabaseConnection
from cattags.errors.upstream import UpstreamUnavailable
from cattags.external.cataas import get_cataas_client
from cattags.schemas.picture import CatPictureSchema

DEFAULT_UPSTREAM_TAGS = ["cute", "funny", "sleepy", "orange", "box", "tired", "Grumpy"]


class FakeCataasClient:
    """In-memory stand-in for the cat image service, records every call"""

    base_url = "https://cataas.test"

    def __init__(self, tags: list[str]):
        self.tags = list(tags)
        self.available = True
        self.calls: list[tuple[str, ...]] = []

    def get_tags(self) -> list[str]:
        self.calls.append(("get_tags",))
        if not self.available:
            raise UpstreamUnavailable(f"unable to fetch tags from {self.base_url}")
        return list(self.tags)

    def get_random_picture(self, tag: str) -> CatPictureSchema | None:
        self.calls.append(("get_random_picture", tag))
        if not self.available:
            raise UpstreamUnavailable(f"unable to fetch picture from {self.base_url}")
        if tag.lower() not in {t.lower() for t in self.tags}:
            return None
        return CatPictureSchema(
            id=f"id-{tag}", url=f"{self.base_url}/cat/id-{tag}", tags=[tag]
        )


# test classes may set `upstream_tags` to change what the fake service knows
@pytest.fixture(scope="class")
def cataas(request) -> FakeCataasClient:
    return FakeCataasClient(getattr(request.cls, "upstream_tags", DEFAULT_UPSTREAM_TAGS))


# each test class have it's own empty database
@pytest.fixture(scope="class")
def test_app(cataas: FakeCataasClient):
    test_config = Config(
        # overwrite application name so it will use another database file
        app_name="cattags-test",
        database_url_env=None,
    )
    app.dependency_overrides = {
        get_config: lambda: test_config,
        get_cataas_client: lambda: cataas,
    }

    db_conn = DatabaseConnection(config=test_config)
    db_conn.create_tables()

    client = TestClient(app)
    yield client
    app.dependency_overrides = {}
    # clean up test database file after tests
    db_conn.engine.dispose()
    if os.path.exists(test_config.database_path):
        os.remove(test_config.database_path)
