from __future__ import annotations

import asyncio
from typing import *

import pytest
import requests

from geocodeutils.geocode.misc import ComponentType, LocationType, Status
from geocodeutils.utils import (
    API_KEY_ENV_VAR,
    ConfigurationError,
    GoogleAPIException,
    RequestsTransport,
    Transport,
    format_coordinate,
    get_url_params,
    load_api_key,
    raise_for_status,
    redact_url_param,
    update_url_params,
)


def test_update_url_params_keeps_order():
    url = update_url_params("https://example.com/json", [("key", "K"), ("address", "a b"), ("bounds", "1,2|3,4")])

    assert url == "https://example.com/json?key=K&address=a+b&bounds=1%2C2%7C3%2C4"


def test_update_url_params_dict_and_existing_query():
    url = update_url_params("https://example.com/json?sensor=false", {"key": "K"})

    assert url == "https://example.com/json?key=K&sensor=false"
    assert get_url_params(url) == {"key": ["K"], "sensor": ["false"]}


def test_redact_url_param():
    url = redact_url_param("https://example.com/json?key=SECRET&address=Toledo")

    assert "SECRET" not in url
    assert get_url_params(url)["address"] == ["Toledo"]


def test_format_coordinate():
    assert format_coordinate(41) == "41"
    assert format_coordinate(-74.0) == "-74"
    assert format_coordinate(37.7954252) == "37.7954252"
    assert format_coordinate(-0.5) == "-0.5"


def test_format_coordinate_small_values():
    assert format_coordinate(1e-05) == "0.00001"
    assert format_coordinate(-2.5e-07) == "-0.00000025"

    url = update_url_params("https://example.com/json", [("bounds", f"{format_coordinate(1e-05)},1")])

    assert "e-" not in url


def test_load_api_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(API_KEY_ENV_VAR, "FROM_ENV")

    assert load_api_key("EXPLICIT") == "EXPLICIT"
    assert load_api_key() == "FROM_ENV"

    monkeypatch.delenv(API_KEY_ENV_VAR)

    with pytest.raises(ConfigurationError):
        load_api_key()


def test_raise_for_status_unexpected():
    raise_for_status("OK")
    raise_for_status("ZERO_RESULTS")

    with pytest.raises(GoogleAPIException):
        raise_for_status("NOT_A_STATUS")


def test_lookup_tables():
    assert Status.from_str("OVER_QUERY_LIMIT") == Status.OVER_QUERY_LIMIT
    assert LocationType.from_str("GEOMETRIC_CENTER") == LocationType.GEOMETRIC_CENTER
    assert ComponentType.from_str("administrative_area_level_5") == ComponentType.ADMINISTRATIVE_AREA_LEVEL_5
    assert ComponentType.from_str("transit_station") == ComponentType.TRANSIT_STATION
    assert ComponentType.from_str("some_future_type") == ComponentType.OTHER
    assert ComponentType.from_str("other") == ComponentType.OTHER

    with pytest.raises(ValueError):
        Status.from_str("WAT")

    with pytest.raises(ValueError):
        LocationType.from_str("rooftop")


class _StubResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class _StubSession:
    def __init__(self, response: _StubResponse):
        self.response = response
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        return self.response

    def close(self) -> None:
        pass


def test_requests_transport():
    session = _StubSession(_StubResponse('{"status": "OK"}'))

    with RequestsTransport(session=session, timeout=5) as transport:  # type: ignore
        assert isinstance(transport, Transport)

        body = asyncio.run(transport.get("https://example.com/json"))

    assert body == '{"status": "OK"}'
    assert session.calls == [("https://example.com/json", 5)]


def test_requests_transport_http_error():
    session = _StubSession(_StubResponse("", status_code=500))
    transport = RequestsTransport(session=session)  # type: ignore

    with pytest.raises(requests.HTTPError):
        asyncio.run(transport.get("https://example.com/json"))
