from .geocode import (
    ComponentKind,
    ComponentType,
    Geocode,
    GeocodingRequest,
    GeocodingResult,
    LocationType,
    Response,
    Status,
    decode_response,
    request_for_address,
    request_for_components,
    request_url,
    send,
    with_address,
    with_bounds,
    with_component,
    with_language,
    with_region,
)
from .utils import (
    ConfigurationError,
    DecodeError,
    GoogleAPIException,
    InvalidRequestError,
    OverQueryLimitError,
    RequestDeniedError,
    RequestsTransport,
    Transport,
    UnknownError,
)
