"""
:mod:`rfcuri.grammar` defines regular expressions for the generic URI syntax.

Character classes are plain strings meant to be embedded in bracket
expressions or alternations. Grammar fragments are built from them following
the ABNF of https://datatracker.ietf.org/doc/html/rfc3986#appendix-A.

Patterns are compiled when this module is imported and never change after.

"""

from __future__ import annotations

import re


__all__ = [
    "ALPHA",
    "DIGIT",
    "HEXDIG",
    "UNRESERVED",
    "GEN_DELIMS",
    "SUB_DELIMS",
    "RESERVED",
    "PCT_ENCODED",
    "CONTROL_CHARS",
    "SCHEME",
    "USERINFO",
    "DEC_OCTET",
    "IPV4_ADDRESS",
    "H16",
    "LS32",
    "IPV6_ADDRESS",
    "ZONE_ID",
    "IPVFUTURE",
    "IP_LITERAL",
    "REG_NAME",
    "HOST",
    "PORT",
    "URI_REFERENCE",
]


# Character classes

# See https://datatracker.ietf.org/doc/html/rfc5234#appendix-B.1.

ALPHA = "A-Za-z"

DIGIT = "0-9"

HEXDIG = "0-9A-Fa-f"

# See https://datatracker.ietf.org/doc/html/rfc3986#section-2.3.

UNRESERVED = r"A-Za-z0-9\-._~"

# See https://datatracker.ietf.org/doc/html/rfc3986#section-2.2.

GEN_DELIMS = r":/?#\[\]@"

SUB_DELIMS = r"!$&'()*+,;="

RESERVED = GEN_DELIMS + SUB_DELIMS

# See https://datatracker.ietf.org/doc/html/rfc3986#section-2.1.

PCT_ENCODED = f"%[{HEXDIG}]{{2}}"

# C0 controls and DEL can't appear anywhere in a URI, encoded or not.

CONTROL_CHARS = r"\x00-\x1f\x7f"


# Grammar fragments

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )

SCHEME = rf"[{ALPHA}][{ALPHA}{DIGIT}+\-.]*"

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )

USERINFO = rf"(?:[{UNRESERVED}{SUB_DELIMS}:]|{PCT_ENCODED})*"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35

DEC_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet

IPV4_ADDRESS = rf"{DEC_OCTET}(?:\.{DEC_OCTET}){{3}}"

# h16 = 1*4HEXDIG

H16 = f"[{HEXDIG}]{{1,4}}"

# ls32 = ( h16 ":" h16 ) / IPv4address

LS32 = f"(?:{H16}:{H16}|{IPV4_ADDRESS})"

# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"

IPV6_ADDRESS = (
    "(?:"
    + "|".join(
        [
            rf"(?:{H16}:){{6}}{LS32}",
            rf"::(?:{H16}:){{5}}{LS32}",
            rf"(?:{H16})?::(?:{H16}:){{4}}{LS32}",
            rf"(?:(?:{H16}:){{0,1}}{H16})?::(?:{H16}:){{3}}{LS32}",
            rf"(?:(?:{H16}:){{0,2}}{H16})?::(?:{H16}:){{2}}{LS32}",
            rf"(?:(?:{H16}:){{0,3}}{H16})?::{H16}:{LS32}",
            rf"(?:(?:{H16}:){{0,4}}{H16})?::{LS32}",
            rf"(?:(?:{H16}:){{0,5}}{H16})?::{H16}",
            rf"(?:(?:{H16}:){{0,6}}{H16})?::",
        ]
    )
    + ")"
)

# ZoneID = 1*( unreserved / pct-encoded ), see RFC 6874. Link-local addresses
# are also commonly written with a bare "%" rather than "%25", e.g. fe80::1%eth0.

ZONE_ID = rf"%(?:25)?(?:[{UNRESERVED}]|{PCT_ENCODED})+"

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )

IPVFUTURE = rf"[vV][{HEXDIG}]+\.[{UNRESERVED}{SUB_DELIMS}:]+"

# IP-literal = "[" ( IPv6address / IPv6addrz / IPvFuture ) "]"

IP_LITERAL = rf"\[(?:{IPV6_ADDRESS}(?:{ZONE_ID})?|{IPVFUTURE})\]"

# reg-name = *( unreserved / pct-encoded / sub-delims )

REG_NAME = rf"(?:[{UNRESERVED}{SUB_DELIMS}]|{PCT_ENCODED})*"

# host = IP-literal / IPv4address / reg-name

HOST = f"(?:{IP_LITERAL}|{IPV4_ADDRESS}|{REG_NAME})"

# port = *DIGIT

PORT = f"[{DIGIT}]*"

# See https://datatracker.ietf.org/doc/html/rfc3986#appendix-B. This pattern
# matches every string; it only splits a URI reference into components.

URI_REFERENCE = r"""
    (?:(?P<scheme>[^:/?#]+):)?
    (?://(?P<authority>[^/?#]*))?
    (?P<path>[^?#]*)
    (?:\?(?P<query>[^#]*))?
    (?:\#(?P<fragment>.*))?
"""


# Compiled patterns, meant to be used with fullmatch() or search().

control_chars_re = re.compile(f"[{CONTROL_CHARS}]")

scheme_re = re.compile(SCHEME)

userinfo_re = re.compile(USERINFO)

ipv4_address_re = re.compile(IPV4_ADDRESS)

ipv6_address_re = re.compile(IPV6_ADDRESS)

ip_literal_re = re.compile(IP_LITERAL)

host_re = re.compile(HOST)

port_re = re.compile(PORT)

uri_reference_re = re.compile(URI_REFERENCE, re.VERBOSE | re.DOTALL)
