from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from geocodeutils.geocode.misc import ComponentKind
from geocodeutils.geocode.response import Location, Viewport
from geocodeutils.utils.misc import GEOCODE_URL
from geocodeutils.utils.utils import format_coordinate, update_url_params

Component = tuple[str, ComponentKind]
LatLng = tuple[float, float]

# Unique filter values, ordered by descending value.
ComponentMap = tuple[Component, ...]


def insert_component(components: ComponentMap, component: Component) -> ComponentMap:
    """Insert or overwrite one entry of a component map, keyed by its filter value."""
    value, kind = component

    d = dict(components)
    d[value] = kind

    return tuple(sorted(d.items(), key=lambda item: item[0], reverse=True))


@dataclass(frozen=True)
class Address:
    text: str


@dataclass(frozen=True)
class Components:
    components: ComponentMap


@dataclass(frozen=True)
class AddressAndComponents:
    text: str
    components: ComponentMap


# There's no variant for "neither": every request has an address, components, or both.
RequestInfo = Address | Components | AddressAndComponents


def add_address(text: str, info: RequestInfo) -> RequestInfo:
    match info:
        case Address():
            return Address(text)
        case Components(components):
            return AddressAndComponents(text, components)
        case AddressAndComponents(_, components):
            return AddressAndComponents(text, components)
    raise TypeError(f"Unexpected request info: {info!r}")


def add_component(component: Component, info: RequestInfo) -> RequestInfo:
    match info:
        case Address(text):
            return AddressAndComponents(text, insert_component((), component))
        case Components(components):
            return Components(insert_component(components, component))
        case AddressAndComponents(text, components):
            return AddressAndComponents(text, insert_component(components, component))
    raise TypeError(f"Unexpected request info: {info!r}")


def request_info_params(info: RequestInfo) -> list[tuple[str, str]]:
    def fmt(components: ComponentMap) -> str:
        return "|".join(f"{kind.value}:{value}" for value, kind in components)

    match info:
        case Address(text):
            return [("address", text)]
        case Components(components):
            return [("components", fmt(components))]
        case AddressAndComponents(text, components):
            return [("address", text), ("components", fmt(components))]
    raise TypeError(f"Unexpected request info: {info!r}")


@dataclass(frozen=True)
class GeocodingRequest:
    """An immutable geocoding request. Every builder call returns a new request.

    Build one with `request_for_address` or `request_for_components`, then refine it:
    >>> req = request_for_address("Toledo", "KEY").with_component(("Spain", ComponentKind.COUNTRY))
    >>> req.url
    'https://maps.googleapis.com/maps/api/geocode/json?key=KEY&address=Toledo&components=country%3ASpain'
    """

    request_info: RequestInfo
    api_key: str = dataclasses.field(repr=False)
    # A viewport to bias results towards; not a hard filter.
    bounds: Viewport | None = None
    language: str | None = None
    region: str | None = None

    def with_address(self, text: str) -> GeocodingRequest:
        return with_address(text, self)

    def with_component(self, component: Component) -> GeocodingRequest:
        return with_component(component, self)

    def with_language(self, code: str) -> GeocodingRequest:
        return with_language(code, self)

    def with_region(self, code: str) -> GeocodingRequest:
        return with_region(code, self)

    def with_bounds(self, southwest: LatLng, northeast: LatLng) -> GeocodingRequest:
        return with_bounds(southwest, northeast, self)

    @property
    def url(self) -> str:
        return request_url(self)


def request_for_address(text: str, api_key: str) -> GeocodingRequest:
    return GeocodingRequest(request_info=Address(text), api_key=api_key)


def request_for_components(components: Iterable[Component], api_key: str) -> GeocodingRequest:
    """Create a request filtered by components; for duplicate filter values the last pair wins.

    Raises:
        ValueError: If no components are given.
    """
    component_map: ComponentMap = ()
    for component in components:
        component_map = insert_component(component_map, component)

    if not component_map:
        raise ValueError("At least one component filter is required.")

    return GeocodingRequest(request_info=Components(component_map), api_key=api_key)


def with_address(text: str, request: GeocodingRequest) -> GeocodingRequest:
    return dataclasses.replace(request, request_info=add_address(text, request.request_info))


def with_component(component: Component, request: GeocodingRequest) -> GeocodingRequest:
    return dataclasses.replace(request, request_info=add_component(component, request.request_info))


def with_language(code: str, request: GeocodingRequest) -> GeocodingRequest:
    return dataclasses.replace(request, language=code)


def with_region(code: str, request: GeocodingRequest) -> GeocodingRequest:
    return dataclasses.replace(request, region=code)


def with_bounds(southwest: LatLng, northeast: LatLng, request: GeocodingRequest) -> GeocodingRequest:
    sw_lat, sw_lng = southwest
    ne_lat, ne_lng = northeast

    bounds = Viewport(
        southwest=Location(lat=sw_lat, lng=sw_lng),
        northeast=Location(lat=ne_lat, lng=ne_lng),
    )

    return dataclasses.replace(request, bounds=bounds)


def format_bounds(bounds: Viewport) -> str:
    sw, ne = bounds.southwest, bounds.northeast
    return "|".join(f"{format_coordinate(p.lat)},{format_coordinate(p.lng)}" for p in (sw, ne))


def query_params(request: GeocodingRequest) -> list[tuple[str, str]]:
    """The request's query parameters, in the order: key, address, components, bounds, language, region."""
    params = [("key", request.api_key)]
    params += request_info_params(request.request_info)

    if request.bounds is not None:
        params.append(("bounds", format_bounds(request.bounds)))
    if request.language is not None:
        params.append(("language", request.language))
    if request.region is not None:
        params.append(("region", request.region))

    return params


def request_url(request: GeocodingRequest) -> str:
    return update_url_params(GEOCODE_URL, query_params(request))
