from __future__ import annotations

import json
from typing import *

import pytest

from geocodeutils.geocode import Geocode


class FakeTransport:
    """Serves a canned body (or raises) and records every requested URL."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self.body = body
        self.error = error
        self.urls: list[str] = []
        self.closed = False

    async def get(self, url: str) -> str:
        self.urls.append(url)

        if self.error is not None:
            raise self.error

        return self.body

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeTransport:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@pytest.fixture
def transport(ok_payload: dict[str, Any]) -> FakeTransport:
    return FakeTransport(body=json.dumps(ok_payload))


@pytest.fixture
def geocoder(api_key: str, transport: FakeTransport) -> Geocode:
    return Geocode(api_key=api_key, transport=transport)


@pytest.fixture
def fake_transport() -> type[FakeTransport]:
    return FakeTransport
