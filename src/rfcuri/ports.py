from __future__ import annotations

import types


__all__ = ["STANDARD_PORTS", "MAX_PORT", "normalize_port"]


# Well-known ports of schemes with an authority. Keys are lower case and
# lookups are case-sensitive.

STANDARD_PORTS = types.MappingProxyType(
    {
        "ftp": 21,
        "telnet": 23,
        "tn3270": 23,
        "http": 80,
        "gopher": 70,
        "pop": 110,
        "nntp": 119,
        "news": 119,
        "imap": 143,
        "ldap": 389,
        "https": 443,
    }
)

MAX_PORT = 0xFFFF


def normalize_port(scheme: str, port: int | None) -> int | None:
    """
    Drop ``port`` when it's the standard port for ``scheme``.

    Schemes that aren't in :data:`STANDARD_PORTS` keep their port.

    """
    if port is not None and STANDARD_PORTS.get(scheme) == port:
        return None
    return port
