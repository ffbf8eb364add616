from __future__ import annotations

import dataclasses
import logging
from typing import Any, NamedTuple

from . import grammar
from .authority import Authority, UserInfo, parse_authority
from .exceptions import URISyntaxError
from .ports import normalize_port
from .query import Query, parse_query


__all__ = [
    "parse_uri",
    "split_uri",
    "validate_raw",
    "validate_scheme",
    "Components",
    "URI",
]


logger = logging.getLogger(__name__)


class Components(NamedTuple):
    """
    Raw components of a URI reference, before any validation.

    :obj:`None` means that the delimiter introducing the component isn't in
    the URI, while an empty string means that the component is empty.

    """

    scheme: str | None
    authority: str | None
    path: str
    query: str | None
    fragment: str | None


@dataclasses.dataclass(frozen=True)
class URI:
    """
    URI reference.

    Build instances with :func:`parse_uri`.

    Attributes:
        scheme: Scheme, or an empty string for a relative reference.
        authority_component: Authority following ``//``, or :obj:`None` when
            there's no ``//``. Its host may be empty, for example in
            ``file:///etc/hosts``. Its port is normalized.
        path: Path, exactly as it appears in the URI.
        query: Query, or :obj:`None` when there's no ``?`` or it's empty.
        fragment: Fragment, or an empty string when there's no ``#``.

    """

    scheme: str = ""
    authority_component: Authority | None = None
    path: str = ""
    query: Query | None = None
    fragment: str = ""

    def __str__(self) -> str:
        return self.compose()

    @property
    def has_authority(self) -> bool:
        """
        Whether the URI contains ``//``, even if the authority is empty.

        """
        return self.authority_component is not None

    @property
    def authority(self) -> Authority | None:
        """
        Authority, when its host isn't empty.

        """
        if self.authority_component is None or not self.authority_component.host:
            return None
        return self.authority_component

    @property
    def authority_string(self) -> str:
        authority = self.authority
        return "" if authority is None else str(authority)

    @property
    def user_info(self) -> UserInfo | None:
        authority = self.authority
        return None if authority is None else authority.user_info

    @property
    def user_info_string(self) -> str:
        user_info = self.user_info
        return "" if user_info is None else str(user_info)

    @property
    def host(self) -> str:
        authority = self.authority
        return "" if authority is None else authority.host

    @property
    def port(self) -> int | None:
        authority = self.authority
        return None if authority is None else authority.port

    @property
    def query_string(self) -> str:
        return "" if self.query is None else self.query.serialize()

    def compose(self) -> str:
        """
        Build a string from the components of the URI.

        When the host is empty, only the path, query, and fragment are kept.
        An empty query or fragment is left out.

        """
        path = self.path
        if self.host:
            if path and not path.startswith("/"):
                path = "/" + path
            uri = f"//{self.authority_string}{path}"
            if self.scheme:
                uri = f"{self.scheme}:{uri}"
        else:
            uri = path
        query_string = self.query_string
        if query_string:
            uri += f"?{query_string}"
        if self.fragment:
            uri += f"#{self.fragment}"
        return uri


def validate_raw(uri: str) -> None:
    """
    Reject control characters.

    Raises:
        URISyntaxError: If ``uri`` contains a character in the range
            U+0000 to U+001F or U+007F.

    """
    match = grammar.control_chars_re.search(uri)
    if match is not None:
        raise URISyntaxError(
            uri, f"invalid character at position {match.start()}: {match[0]!r}"
        )


def validate_scheme(scheme: str, uri: str) -> None:
    """
    Check that a non-empty ``scheme`` matches the scheme grammar.

    Raises:
        URISyntaxError: If ``scheme`` isn't valid.

    """
    if scheme and not grammar.scheme_re.fullmatch(scheme):
        raise URISyntaxError(uri, f"invalid scheme: {scheme}")


def split_uri(uri: str) -> Components:
    """
    Split a URI reference into its five components.

    This applies the regular expression in appendix B of RFC 3986. It never
    fails because every string can be split.

    """
    match = grammar.uri_reference_re.fullmatch(uri)
    assert match is not None, "the URI reference pattern matches every string"
    return Components(
        match["scheme"],
        match["authority"],
        match["path"],
        match["query"],
        match["fragment"],
    )


def parse_uri(uri: Any) -> URI:
    """
    Parse and validate a URI reference.

    Args:
        uri: URI reference. Objects that aren't strings are converted with
            :func:`str`.

    Returns:
        Parsed URI. If the port is the standard port for the scheme, it's
        dropped.

    Raises:
        URISyntaxError: If ``uri`` contains control characters, or if its
            scheme, user information, host, or port is invalid.

    """
    if not isinstance(uri, str):
        uri = str(uri)

    try:
        validate_raw(uri)
        scheme, raw_authority, path, raw_query, fragment = split_uri(uri)
        scheme = scheme or ""
        validate_scheme(scheme, uri)
        authority: Authority | None = None
        if raw_authority is not None:
            authority = parse_authority(raw_authority, uri)
    except URISyntaxError as exc:
        logger.debug("! rejected URI: %s", exc.msg)
        raise

    if authority is not None and authority.port is not None:
        port = normalize_port(scheme, authority.port)
        if port is None:
            logger.debug(
                "- dropped standard port %d for scheme %s", authority.port, scheme
            )
            authority = dataclasses.replace(authority, port=None)

    return URI(scheme, authority, path, parse_query(raw_query), fragment or "")
