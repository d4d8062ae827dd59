from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from geocodeutils.geocode.request import (
    Component,
    GeocodingRequest,
    LatLng,
    request_for_address,
    request_for_components,
    request_url,
    with_address,
    with_bounds,
    with_language,
    with_region,
)
from geocodeutils.geocode.response import Response, decode_response
from geocodeutils.utils.http import RequestsTransport, Transport
from geocodeutils.utils.misc import GEOCODE_URL
from geocodeutils.utils.utils import load_api_key, redact_url_param


async def send(request: GeocodingRequest, transport: Transport | None = None) -> Response:
    """Send a request and decode its response.

    Service-level failures (ZERO_RESULTS, OVER_QUERY_LIMIT, ...) come back as the
    Response's status; use Response.raise_for_status() to turn them into exceptions.

    Args:
        request: The request to send.
        transport: Performs the GET. Defaults to a RequestsTransport that is closed
            once the call completes.

    Raises:
        DecodeError: If the body isn't a well-formed geocoding response.
        Whatever the transport raises (e.g. requests.HTTPError) is propagated as-is.
    """
    if transport is None:
        with RequestsTransport() as owned:
            return await send(request, transport=owned)

    url = request_url(request)
    logger.debug(f"GET {redact_url_param(url)}")

    body = await transport.get(url)

    return decode_response(body)


class Geocode:
    """A wrapper around the Google Maps Geocoding API.

    Args:
        api_key (str, optional): The API key to use. If None, the GEOCODING_API_KEY env var is tried.
        transport (Transport, optional): Performs the HTTP GET. Defaults to a RequestsTransport,
            which is owned by this client and released by close(). A transport passed in is
            left for the caller to close.
    """

    URL = GEOCODE_URL

    def __init__(self, api_key: str | None = None, transport: Transport | None = None):
        self.api_key = load_api_key(api_key)

        self._owns_transport = transport is None
        self.transport = transport if transport is not None else RequestsTransport()

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> Geocode:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def request(
        self,
        address: str | None = None,
        components: Iterable[Component] | None = None,
    ) -> GeocodingRequest:
        """Build a request with this client's API key from an address, components, or both."""
        if components is not None:
            request = request_for_components(components, self.api_key)
            return with_address(address, request) if address is not None else request
        elif address is not None:
            return request_for_address(address, self.api_key)

        raise ValueError("Either an address or components must be provided.")

    async def send(self, request: GeocodingRequest) -> Response:
        return await send(request, transport=self.transport)

    async def geocode(
        self,
        address: str | None = None,
        components: Iterable[Component] | None = None,
        bounds: tuple[LatLng, LatLng] | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> Response:
        """Geocode an address and/or component filters.

        Args:
            address: The street address or plus code to geocode.
            components: (value, ComponentKind) filters, e.g. [("ES", ComponentKind.COUNTRY)].
            bounds: A (southwest, northeast) pair of (lat, lng) to bias results towards.
            language: The language to return results in.
            region: A ccTLD region code to bias results towards.
        """
        request = self.request(address=address, components=components)

        if bounds is not None:
            request = with_bounds(*bounds, request)
        if language is not None:
            request = with_language(language, request)
        if region is not None:
            request = with_region(region, request)

        return await self.send(request)
