from __future__ import annotations

import dataclasses
from typing import NamedTuple

from . import grammar
from .exceptions import URISyntaxError
from .ports import MAX_PORT


__all__ = ["parse_authority", "parse_user_info", "Authority", "UserInfo"]


class UserInfo(NamedTuple):
    """
    `User Information`_ of an authority, split on the first ``:``.

    ``password`` is :obj:`None` when there's no ``:``, which isn't the same
    as an empty password.

    .. _User Information: https://datatracker.ietf.org/doc/html/rfc3986#section-3.2.1

    """

    user: str
    password: str | None = None

    def __str__(self) -> str:
        if self.password is None:
            return self.user
        return f"{self.user}:{self.password}"


@dataclasses.dataclass(frozen=True)
class Authority:
    """
    Authority component of a URI.

    Attributes:
        user_info: Available when the authority contains a ``@``.
        host: Registered name, IPv4 address, or IP literal with its brackets.
            May be empty.
        port: Port number, or :obj:`None` if it isn't provided.

    """

    user_info: UserInfo | None = None
    host: str = ""
    port: int | None = None

    def __str__(self) -> str:
        authority = self.host
        if self.user_info is not None:
            authority = f"{self.user_info}@{authority}"
        if self.port is not None:
            authority += f":{self.port}"
        return authority


def parse_user_info(user_info: str, uri: str | None = None) -> UserInfo:
    """
    Parse and validate the user information of an authority.

    Args:
        user_info: Text before the last ``@`` of an authority.
        uri: URI being parsed, for error messages.

    Raises:
        URISyntaxError: If ``user_info`` contains invalid characters.

    """
    if not grammar.userinfo_re.fullmatch(user_info):
        raise URISyntaxError(
            user_info if uri is None else uri, f"invalid user info: {user_info}"
        )
    user, sep, password = user_info.partition(":")
    return UserInfo(user, password if sep else None)


def parse_port(port: str | None, uri: str) -> int | None:
    """
    Parse and validate a port number.

    An empty port is allowed by RFC 3986 and means no port.

    """
    if not port:
        return None
    if not grammar.port_re.fullmatch(port):
        raise URISyntaxError(uri, f"invalid port: {port}")
    number = int(port)
    if number > MAX_PORT:
        raise URISyntaxError(uri, f"port out of range: {port}")
    return number


def parse_authority(authority: str, uri: str | None = None) -> Authority:
    """
    Parse and validate an authority.

    Args:
        authority: Text between ``//`` and the following ``/``, ``?``, ``#``,
            or the end of the URI.
        uri: URI being parsed, for error messages.

    Returns:
        Parsed authority. Its port isn't normalized.

    Raises:
        URISyntaxError: If the user information, the host, or the port is
            invalid.

    """
    if uri is None:
        uri = authority

    # User information may contain "@" only when it's percent-encoded, so
    # the last "@" is the delimiter.
    raw_user_info, sep, host_port = authority.rpartition("@")
    user_info = parse_user_info(raw_user_info, uri) if sep else None

    # IPv6 addresses contain ":" but they're always enclosed in brackets.
    host, sep, raw_port = host_port.rpartition(":")
    if not sep or "]" in raw_port:
        host, raw_port = host_port, None

    if not grammar.host_re.fullmatch(host):
        raise URISyntaxError(uri, f"invalid host: {host}")

    return Authority(user_info, host, parse_port(raw_port, uri))
