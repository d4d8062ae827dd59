from __future__ import annotations

from enum import Enum


class ComponentKind(Enum):
    """Filter categories accepted by the `components` query parameter.

    The value of each member is its token in the query string, e.g. `country:ES`.
    """

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class Status(Enum):
    """The overall outcome of a geocoding request.

    Strict: an unrecognized status string is a decoding failure, as it most likely
    signals a change in the service's contract.
    """

    # At least one result was returned.
    OK = "OK"
    # The request was valid, but nothing matched.
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    # Usually a missing address/components parameter.
    INVALID_REQUEST = "INVALID_REQUEST"
    # A server error; the request may succeed if tried again.
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @classmethod
    def from_str(cls, s: str) -> Status:
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"Unknown geocoding status: {s!r}") from None


class LocationType(Enum):
    """The location type of a geocode. Strict, like Status."""

    # Represents a precise geocode.
    ROOFTOP = "ROOFTOP"
    # Represents an interpolated geocode.
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    # Represents the geometric center of a result such as a polyline (for example, a street) or polygon (region).
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    # Represents a result that is approximate.
    APPROXIMATE = "APPROXIMATE"

    @classmethod
    def from_str(cls, s: str) -> LocationType:
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"Unknown location type: {s!r}") from None


class ComponentType(Enum):
    """What kind of entity a result, or one of its address components, is.

    The vocabulary is large and grows on the service side, so decoding is tolerant:
    any string outside the known set becomes OTHER. See:
    https://developers.google.com/maps/documentation/geocoding/requests-geocoding#Types
    """

    STREET_ADDRESS = "street_address"
    STREET_NUMBER = "street_number"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    WARD = "ward"
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUBPREMISE = "subpremise"
    PLUS_CODE = "plus_code"
    POSTAL_CODE = "postal_code"
    POSTAL_CODE_PREFIX = "postal_code_prefix"
    POSTAL_CODE_SUFFIX = "postal_code_suffix"
    POSTAL_TOWN = "postal_town"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    ESTABLISHMENT = "establishment"
    FLOOR = "floor"
    PARKING = "parking"
    POST_BOX = "post_box"
    ROOM = "room"
    BUS_STATION = "bus_station"
    TRAIN_STATION = "train_station"
    TRANSIT_STATION = "transit_station"

    # Catch-all for anything not listed above.
    OTHER = "other"

    @classmethod
    def from_str(cls, s: str) -> ComponentType:
        return component_type_from_str(s)


def component_type_from_str(s: str) -> ComponentType:
    """Reverse lookup from a type string to its ComponentType; never fails.

    >>> component_type_from_str("locality")
    ComponentType.LOCALITY
    >>> component_type_from_str("some_future_type")
    ComponentType.OTHER
    """
    try:
        return ComponentType(s)
    except ValueError:
        return ComponentType.OTHER
