from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


__all__ = ["parse_query", "Query"]


# Parsing doesn't decode percent-encoded octets, so serializing only encodes the
# delimiters that would split a key or a value differently: "&" and "#"
# everywhere, "=" in keys.

KEY_ESCAPES = str.maketrans({"&": "%26", "#": "%23", "=": "%3D"})
VALUE_ESCAPES = str.maketrans({"&": "%26", "#": "%23"})


class Query(Mapping[str, str]):
    """
    Immutable data structure for the key/value pairs of a query.

    Keys and values are kept exactly as they appear in the URI; percent-encoded
    octets aren't decoded.

    :class:`Query` follows this logic when a key occurs more than once:

    - ``query[key]`` returns the value of the last occurrence;
    - :meth:`get_all` returns the list of all values, in order;
    - comparisons and :meth:`serialize` only consider the last value.

    Keys ending with ``[]`` aren't special. ``foo[]=1&foo[]=2`` contains the
    key ``"foo[]"`` and ``query["foo[]"]`` is ``"2"``.

    Iterating a :class:`Query` yields each key once, in the order of its first
    occurrence. :meth:`raw_items` returns every ``(key, value)`` pair.

    """

    __slots__ = ["_dict", "_list"]

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._dict: dict[str, list[str]] = {}
        self._list: list[tuple[str, str]] = []
        for key, value in pairs:
            self._dict.setdefault(key, []).append(value)
            self._list.append((key, value))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._list!r})"

    # Collection methods

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def __iter__(self) -> Iterator[str]:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    # Mapping methods

    def __getitem__(self, key: str) -> str:
        return self._dict[key][-1]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self.items()))

    # Methods for handling multiple values

    def get_all(self, key: str) -> list[str]:
        """
        Return the (possibly empty) list of all values for a key.

        """
        return list(self._dict.get(key, []))

    def raw_items(self) -> Iterator[tuple[str, str]]:
        """
        Return an iterator of all ``(key, value)`` pairs.

        """
        return iter(self._list)

    def serialize(self) -> str:
        """
        Serialize the query, without the leading ``?``.

        Each key appears once, with its last value.

        """
        return "&".join(
            key.translate(KEY_ESCAPES) + "=" + value.translate(VALUE_ESCAPES)
            for key, value in self.items()
        )


def parse_query(query: str | None) -> Query | None:
    """
    Parse a query into key/value pairs.

    Pairs are separated by ``&``. Each pair is split on the first ``=``;
    the value is empty when there's no ``=``. Empty pairs are skipped, so a
    query made only of ``&`` gives an empty :class:`Query`.

    Args:
        query: Text after ``?`` and before ``#``, or :obj:`None` when the URI
            doesn't contain a ``?``.

    Returns:
        :obj:`None` if ``query`` is :obj:`None` or empty, else a
        :class:`Query`.

    """
    if not query:
        return None
    pairs = []
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        pairs.append((key, value))
    return Query(pairs)
