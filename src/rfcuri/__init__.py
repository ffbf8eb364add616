from __future__ import annotations

from .authority import Authority, UserInfo, parse_authority, parse_user_info
from .exceptions import URIException, URISyntaxError
from .ports import normalize_port
from .query import Query, parse_query
from .uri import (
    URI,
    Components,
    parse_uri,
    split_uri,
    validate_raw,
    validate_scheme,
)
from .version import version as __version__  # noqa: F401


__all__ = [
    # .authority
    "Authority",
    "UserInfo",
    "parse_authority",
    "parse_user_info",
    # .exceptions
    "URIException",
    "URISyntaxError",
    # .ports
    "normalize_port",
    # .query
    "Query",
    "parse_query",
    # .uri
    "URI",
    "Components",
    "parse_uri",
    "split_uri",
    "validate_raw",
    "validate_scheme",
]
