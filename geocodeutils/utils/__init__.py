from .http import (
    ConfigurationError,
    DecodeError,
    GoogleAPIException,
    InvalidRequestError,
    OverQueryLimitError,
    RequestDeniedError,
    RequestsTransport,
    Transport,
    UnknownError,
    raise_for_status,
)
from .misc import API_KEY_ENV_VAR, DEFAULT_TIMEOUT, GEOCODE_URL
from .utils import (
    format_coordinate,
    get_url_params,
    load_api_key,
    redact_url_param,
    update_url_params,
)
