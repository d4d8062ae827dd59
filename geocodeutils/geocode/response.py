from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from geocodeutils.geocode.misc import ComponentType, LocationType, Status
from geocodeutils.utils.http import DecodeError, raise_for_status


def component_types(value: Any) -> Any:
    if not isinstance(value, list | tuple | set | frozenset):
        # Let pydantic report the shape mismatch.
        return value

    types = []
    for t in value:
        if isinstance(t, ComponentType):
            types.append(t)
        elif isinstance(t, str):
            types.append(ComponentType.from_str(t))
        else:
            raise ValueError(f"Expected a type string, got {t!r}")
    return types


class GeocodeModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Location(GeocodeModel):
    lat: float
    lng: float


class Viewport(GeocodeModel):
    """A bounding box: southwest and northeast corners."""

    northeast: Location
    southwest: Location


class Geometry(GeocodeModel):
    location: Location
    location_type: LocationType
    viewport: Viewport
    # Only present for results that cover an area, e.g. a locality.
    bounds: Viewport | None = None

    @field_validator("location_type", mode="before")
    @classmethod
    def validate_location_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LocationType.from_str(value)
        return value


class AddressComponent(GeocodeModel):
    long_name: str | None = None
    short_name: str | None = None
    types: frozenset[ComponentType]

    validate_types = field_validator("types", mode="before")(component_types)


class GeocodingResult(GeocodeModel):
    address_components: tuple[AddressComponent, ...]
    formatted_address: str
    geometry: Geometry
    place_id: str
    types: frozenset[ComponentType]
    partial_match: bool = False
    postcode_localities: tuple[str, ...] = ()

    validate_types = field_validator("types", mode="before")(component_types)

    def component(self, t: ComponentType) -> AddressComponent | None:
        """The first address component tagged with the given type, if any."""
        for c in self.address_components:
            if t in c.types:
                return c
        return None


class Response(GeocodeModel):
    status: Status
    results: tuple[GeocodingResult, ...]
    error_message: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Status.from_str(value)
        return value

    def first(self) -> GeocodingResult | None:
        return self.results[0] if len(self.results) else None

    def raise_for_status(self) -> None:
        """Raise for error statuses; OK and ZERO_RESULTS pass through."""
        raise_for_status(self.status.value, self.error_message)


def decode_response(data: str | bytes | Mapping[str, Any]) -> Response:
    """Decode a geocoding service response into a Response.

    Decoding is all-or-nothing: a malformed result anywhere fails the whole document.

    Args:
        data: The raw JSON body, or an already-parsed JSON object.

    Raises:
        DecodeError: On malformed JSON, a missing required field, or an unknown
            status or location type. Unknown component types decode to ComponentType.OTHER.
    """
    try:
        if isinstance(data, str | bytes):
            response = Response.model_validate_json(data)
        else:
            response = Response.model_validate(data)
    except ValidationError as e:
        logger.error(f"Failed to decode geocoding response: {e}")
        raise DecodeError(str(e)) from e

    logger.debug(f"Decoded geocoding response: {response.status.name}, {len(response.results)} result(s)")

    return response
