"""Pytest fixtures: a CMA client wired to an in-memory httpx transport."""

import json
from pathlib import Path
from typing import Callable

import httpx
import pytest

from contentful_cma.adapters.http_client import CMA_CONTENT_TYPE, HTTPTransport, build_client
from contentful_cma.client import CMAClient
from contentful_cma.core.config import CMASettings

FIXTURES = Path(__file__).parent / "fixtures"

SPACE_ID = "id1"
CMA_TOKEN = "b4c0n73n7fu1"
BASE_URL = "https://api.test"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def fixture_json(name: str) -> dict:
    return json.loads(read_fixture(name))


def json_response(status_code: int, fixture: str | None = None) -> httpx.Response:
    """Response with a fixture body, or empty when `fixture` is None."""

    content = read_fixture(fixture).encode("utf-8") if fixture else b""
    return httpx.Response(status_code, content=content)


def payload_response(status_code: int, data: dict) -> httpx.Response:
    return httpx.Response(status_code, json=data)


def assert_headers(request: httpx.Request) -> None:
    assert request.headers["Authorization"] == f"Bearer {CMA_TOKEN}"
    assert request.headers["Content-Type"] == CMA_CONTENT_TYPE


class RecordingHandler:
    """Route every request to `handler` and keep them for later assertions."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def settings():
    """Settings isolated from the developer's env/.env files."""
    return CMASettings(
        _env_file=None,
        access_token=CMA_TOKEN,
        base_url=BASE_URL,
        environment=None,
        default_locale="en-US",
        page_limit=100,
    )


@pytest.fixture
def make_cma(settings):
    """Build a `CMAClient` whose HTTP calls go to `handler`."""

    clients = []

    def factory(handler, environment=None):
        recorder = handler if isinstance(handler, RecordingHandler) else RecordingHandler(handler)
        http = build_client(settings, transport=httpx.MockTransport(recorder))
        cma = CMAClient(settings, transport=HTTPTransport(settings, client=http), environment=environment)
        clients.append(http)
        return cma

    yield factory

    for http in clients:
        http.close()
