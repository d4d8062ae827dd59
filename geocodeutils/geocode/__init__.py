from .geocode import Geocode, send
from .misc import ComponentKind, ComponentType, LocationType, Status
from .request import (
    Address,
    AddressAndComponents,
    Components,
    GeocodingRequest,
    RequestInfo,
    query_params,
    request_for_address,
    request_for_components,
    request_url,
    with_address,
    with_bounds,
    with_component,
    with_language,
    with_region,
)
from .response import (
    AddressComponent,
    GeocodingResult,
    Geometry,
    Location,
    Response,
    Viewport,
    decode_response,
)
