from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

import requests
from loguru import logger

from geocodeutils.utils.misc import DEFAULT_TIMEOUT


class GoogleAPIException(Exception):
    pass


class ConfigurationError(GoogleAPIException):
    pass


class DecodeError(GoogleAPIException):
    """The response body did not match the shape of a geocoding response."""


class InvalidRequestError(GoogleAPIException):
    pass


class OverQueryLimitError(GoogleAPIException):
    pass


class RequestDeniedError(GoogleAPIException):
    pass


class UnknownError(GoogleAPIException):
    pass


def raise_for_status(status: str, message: str | None = None) -> None:
    """Raise the exception matching a service status string.

    "OK" and "ZERO_RESULTS" are successful outcomes and never raise.
    """
    if status in ("OK", "ZERO_RESULTS"):
        return

    if status == "INVALID_REQUEST":
        raise InvalidRequestError(message or "The request was invalid.")
    elif status == "OVER_QUERY_LIMIT":
        raise OverQueryLimitError(message or "You are over your query limit.")
    elif status == "REQUEST_DENIED":
        raise RequestDeniedError(message or "Your request was denied.")
    elif status == "UNKNOWN_ERROR":
        raise UnknownError(message or "An unknown error occurred.")
    else:
        raise GoogleAPIException(message or f"An unexpected status was returned: {status}")


@runtime_checkable
class Transport(Protocol):
    """Performs a GET and returns the raw body; errors are raised as-is."""

    async def get(self, url: str) -> str: ...


class RequestsTransport:
    """Default transport: a requests Session, run off the event loop in a worker thread.

    No retries are configured; failures (connection errors, timeouts, non-2xx responses)
    surface as the usual requests exceptions.

    Args:
        session (requests.Session, optional): The session to use. A new one is created if None.
        timeout (float, optional): Per-request timeout in seconds. Defaults to DEFAULT_TIMEOUT.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get(self, url: str) -> str:
        r = self.session.get(url, timeout=self.timeout)
        r.raise_for_status()

        return r.text

    async def get(self, url: str) -> str:
        return await asyncio.to_thread(self._get, url)

    def close(self) -> None:
        self.session.close()
        logger.debug("HTTP session closed")

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *args) -> None:
        self.close()
