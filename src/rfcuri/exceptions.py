"""
:mod:`rfcuri.exceptions` defines the following exception hierarchy:

* :exc:`URIException`
    * :exc:`URISyntaxError`

"""

from __future__ import annotations


__all__ = [
    "URIException",
    "URISyntaxError",
]


class URIException(Exception):
    """
    Base class for all exceptions defined by rfcuri.

    """


class URISyntaxError(URIException, ValueError):
    """
    Raised when parsing a string that isn't a valid URI reference.

    It's a :exc:`ValueError` because it's always caused by a bad argument.

    Attributes:
        uri: The string that was being parsed.
        msg: What's wrong with it.

    """

    def __init__(self, uri: str, msg: str) -> None:
        self.uri = uri
        self.msg = msg

    def __str__(self) -> str:
        return f"{self.uri} isn't a valid URI: {self.msg}"
