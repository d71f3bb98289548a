"""Pytest configuration and fixtures."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from core import nocodb
from main import app

NOCODB_URL = "https://nocodb.example.com/api/v2/tables/"
TABLE_ID = "m7citizens"
TOKEN = "test-xc-token"

ENV_NAMES = (
    "NOCODB_API_URL",
    "NOCODB_URL",
    "NOCODB_TABLE_ID",
    "TABLE_ID",
    "NOCODB_API_TOKEN",
    "NOCODB_TOKEN",
    "NOCODB_PAGE_SIZE",
    "NOCODB_MAX_RECORDS",
    "NOCODB_TIMEOUT_S",
)


def make_citizens(count: int) -> list[dict]:
    return [{"Id": i + 1, "Name": f"Citizen {i + 1}", "Region": "Kyiv"} for i in range(count)]


class FakeNocoDB:
    """
    In-memory stand-in for the NocoDB records endpoint, served through
    httpx.MockTransport.
    """

    def __init__(self) -> None:
        self.records: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.body_key = "list"
        # offset -> status code to answer with instead of a page
        self.fail_at: dict[int, int] = {}
        self.raise_error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error

        limit = int(request.url.params.get("limit", "25"))
        offset = int(request.url.params.get("offset", "0"))
        if offset in self.fail_at:
            return httpx.Response(self.fail_at[offset], json={"msg": "upstream failure"})

        page = self.records[offset : offset + limit]
        return httpx.Response(
            200,
            json={
                self.body_key: page,
                "pageInfo": {"totalRows": len(self.records), "page": offset // limit + 1, "pageSize": limit},
            },
        )

    @property
    def offsets(self) -> list[int]:
        return [int(r.url.params["offset"]) for r in self.requests]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def nocodb_env(clean_env):
    clean_env.setenv("NOCODB_API_URL", NOCODB_URL)
    clean_env.setenv("NOCODB_TABLE_ID", TABLE_ID)
    clean_env.setenv("NOCODB_API_TOKEN", TOKEN)
    return clean_env


@pytest.fixture
def fake_nocodb(monkeypatch):
    fake = FakeNocoDB()
    real_client = nocodb._client

    def _client(*, timeout_s: float) -> httpx.AsyncClient:
        return real_client(timeout_s=timeout_s, transport=httpx.MockTransport(fake))

    monkeypatch.setattr(nocodb, "_client", _client)
    return fake


@pytest.fixture
def client():
    return TestClient(app)
