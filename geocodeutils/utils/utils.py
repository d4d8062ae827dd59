from __future__ import annotations

import os
import urllib.parse
from collections.abc import Iterable
from decimal import Decimal

from geocodeutils.utils.http import ConfigurationError
from geocodeutils.utils.misc import API_KEY_ENV_VAR, REDACTED

QueryParams = dict[str, str] | Iterable[tuple[str, str]]


def get_url_params(url: str) -> dict[str, list[str]]:
    """Get the components of the given URL."""
    return urllib.parse.parse_qs(urllib.parse.urlparse(url).query)


def update_url_params(url: str, params: QueryParams) -> str:
    """Append the given params to the query of the given URL.

    Order is preserved: the given params come first, in iteration order, followed by
    any parameters already present on the URL.
    """
    url_obj = urllib.parse.urlparse(url)

    pairs = list(params.items()) if isinstance(params, dict) else list(params)
    pairs.extend(urllib.parse.parse_qsl(url_obj.query))

    query = urllib.parse.urlencode(pairs)

    url_obj = urllib.parse.ParseResult(
        url_obj.scheme,
        url_obj.netloc,
        url_obj.path,
        url_obj.params,
        query,
        url_obj.fragment,
    )

    return url_obj.geturl()


def redact_url_param(url: str, name: str = "key") -> str:
    """Replace the value of the named query parameter, e.g. for logging."""
    url_obj = urllib.parse.urlparse(url)

    pairs = [
        (k, REDACTED if k == name else v)
        for k, v in urllib.parse.parse_qsl(url_obj.query, keep_blank_values=True)
    ]

    return url_obj._replace(query=urllib.parse.urlencode(pairs)).geturl()


def format_coordinate(x: float) -> str:
    """Render a coordinate for a query string: integral values drop their fractional part.

    >>> format_coordinate(41.0)
    '41'
    >>> format_coordinate(1e-05)
    '0.00001'
    """
    x = float(x)

    if x.is_integer():
        return str(int(x))

    # Shortest round-tripping digits, in plain decimal rather than exponent form.
    return format(Decimal(repr(x)), "f")


def load_api_key(api_key: str | None = None) -> str:
    # An explicit key wins; otherwise fall back to the environment.
    if api_key is None:
        api_key = os.environ.get(API_KEY_ENV_VAR, None)

    if not api_key:
        raise ConfigurationError(
            f"No API key found. Please provide an api_key, or set the {API_KEY_ENV_VAR} environment variable."
        )

    return api_key
