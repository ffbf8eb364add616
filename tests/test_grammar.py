import re
import unittest

from rfcuri.grammar import *
from rfcuri.grammar import (
    control_chars_re,
    host_re,
    ip_literal_re,
    ipv4_address_re,
    ipv6_address_re,
    scheme_re,
    uri_reference_re,
    userinfo_re,
)


VALID_IPV4_ADDRESSES = [
    "0.0.0.0",
    "127.0.0.1",
    "192.0.2.1",
    "255.255.255.255",
    "10.20.199.249",
]

INVALID_IPV4_ADDRESSES = [
    "256.0.0.1",
    "1.2.3",
    "1.2.3.4.5",
    "01.2.3.4",
    "1.2.3.04",
    "a.b.c.d",
    "",
]

VALID_IPV6_ADDRESSES = [
    "::",
    "::1",
    "1::",
    "fe80::",
    "2001:db8::ff00:42:8329",
    "2001:0db8:0000:0000:0000:ff00:0042:8329",
    "1:2:3:4:5:6:7:8",
    "1:2:3:4:5:6:7::",
    "1::8",
    "1:2:3:4:5::8",
    "::2:3:4:5:6:7:8",
    "::ffff:192.0.2.1",
    "::ffff:0:192.0.2.1",
    "64:ff9b::192.0.2.33",
    "1:2:3:4:5:6:192.0.2.1",
    "FE80::ABCD",
]

INVALID_IPV6_ADDRESSES = [
    ":",
    ":::",
    "1:2:3:4:5:6:7:8:9",
    "1::2::3",
    "12345::",
    "g::",
    "::ffff:256.0.2.1",
    "1:2:3:4:5:6:7",
    "",
]


class CharacterClassTests(unittest.TestCase):
    def test_reserved_is_gen_delims_and_sub_delims(self):
        self.assertEqual(RESERVED, GEN_DELIMS + SUB_DELIMS)

    def test_unreserved(self):
        unreserved_re = re.compile(f"[{UNRESERVED}]+")
        self.assertTrue(unreserved_re.fullmatch("azAZ09-._~"))
        for char in ":/?#[]@!$&'()*+,;=% ":
            with self.subTest(char=char):
                self.assertIsNone(unreserved_re.fullmatch(char))

    def test_sub_delims(self):
        sub_delims_re = re.compile(f"[{SUB_DELIMS}]+")
        self.assertTrue(sub_delims_re.fullmatch("!$&'()*+,;="))
        self.assertIsNone(sub_delims_re.fullmatch("-"))

    def test_pct_encoded(self):
        pct_encoded_re = re.compile(PCT_ENCODED)
        self.assertTrue(pct_encoded_re.fullmatch("%2F"))
        self.assertTrue(pct_encoded_re.fullmatch("%af"))
        self.assertIsNone(pct_encoded_re.fullmatch("%2"))
        self.assertIsNone(pct_encoded_re.fullmatch("%zz"))

    def test_control_chars(self):
        for code in [*range(0x20), 0x7F]:
            with self.subTest(code=code):
                self.assertTrue(control_chars_re.search(f"a{chr(code)}b"))

    def test_no_control_chars(self):
        for char in " ~é\x80":
            with self.subTest(char=char):
                self.assertIsNone(control_chars_re.search(char))


class GrammarTests(unittest.TestCase):
    def test_valid_schemes(self):
        for scheme in ["http", "h", "coap+tcp", "soap.beep", "x-y", "H2", "svn+ssh"]:
            with self.subTest(scheme=scheme):
                self.assertTrue(scheme_re.fullmatch(scheme))

    def test_invalid_schemes(self):
        for scheme in ["", "1http", "+http", "-", "ht tp", "ht_tp", "ht,tp", "é"]:
            with self.subTest(scheme=scheme):
                self.assertIsNone(scheme_re.fullmatch(scheme))

    def test_valid_ipv4_addresses(self):
        for address in VALID_IPV4_ADDRESSES:
            with self.subTest(address=address):
                self.assertTrue(ipv4_address_re.fullmatch(address))

    def test_invalid_ipv4_addresses(self):
        for address in INVALID_IPV4_ADDRESSES:
            with self.subTest(address=address):
                self.assertIsNone(ipv4_address_re.fullmatch(address))

    def test_valid_ipv6_addresses(self):
        for address in VALID_IPV6_ADDRESSES:
            with self.subTest(address=address):
                self.assertTrue(ipv6_address_re.fullmatch(address))

    def test_invalid_ipv6_addresses(self):
        for address in INVALID_IPV6_ADDRESSES:
            with self.subTest(address=address):
                self.assertIsNone(ipv6_address_re.fullmatch(address))

    def test_ip_literals(self):
        for literal in [
            "[::1]",
            "[fe80::%eth0]",
            "[fe80::1%25en0]",
            "[::ffff:192.0.2.1]",
            "[v7.fe80::a+en1]",
        ]:
            with self.subTest(literal=literal):
                self.assertTrue(ip_literal_re.fullmatch(literal))

    def test_invalid_ip_literals(self):
        for literal in ["::1", "[::1", "[]", "[fe80::%]", "[v7.]", "[1.2.3.4]"]:
            with self.subTest(literal=literal):
                self.assertIsNone(ip_literal_re.fullmatch(literal))

    def test_valid_hosts(self):
        for host in [
            "",
            "localhost",
            "www.ics.uci.edu",
            "192.0.2.1",
            "999.0.0.1",
            "[::1]",
            "my%20host",
            "a!$&'()*+,;=b",
        ]:
            with self.subTest(host=host):
                self.assertTrue(host_re.fullmatch(host))

    def test_invalid_hosts(self):
        for host in ["a b", "a:b", "a/b", "a@b", "%zz", "[::1", "::1", "høst"]:
            with self.subTest(host=host):
                self.assertIsNone(host_re.fullmatch(host))

    def test_userinfo(self):
        self.assertTrue(userinfo_re.fullmatch("user:pa%20ss:word"))
        self.assertTrue(userinfo_re.fullmatch(""))
        self.assertIsNone(userinfo_re.fullmatch("us er"))
        self.assertIsNone(userinfo_re.fullmatch("us@er"))


class URIReferenceTests(unittest.TestCase):
    def test_split(self):
        match = uri_reference_re.fullmatch(
            "http://www.ics.uci.edu/pub/ietf/uri/#Related"
        )
        self.assertEqual(
            match.groupdict(),
            {
                "scheme": "http",
                "authority": "www.ics.uci.edu",
                "path": "/pub/ietf/uri/",
                "query": None,
                "fragment": "Related",
            },
        )

    def test_matches_every_string(self):
        for uri in ["", ":", "?", "#", "//", ":::", "a:b:c", "?#?#", "\n"]:
            with self.subTest(uri=uri):
                self.assertIsNotNone(uri_reference_re.fullmatch(uri))
