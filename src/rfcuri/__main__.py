from __future__ import annotations

import argparse
import sys

from .exceptions import URISyntaxError
from .uri import parse_uri
from .version import version as rfcuri_version


def format_components(uri: str) -> str:
    """
    Parse ``uri`` and describe its components, one per line.

    Raises:
        URISyntaxError: If ``uri`` isn't valid.

    """
    parsed = parse_uri(uri)
    components = [
        ("scheme", parsed.scheme),
        ("user info", parsed.user_info_string if parsed.user_info else None),
        ("host", parsed.host),
        ("port", None if parsed.port is None else str(parsed.port)),
        ("path", parsed.path),
        ("query", parsed.query_string if parsed.query is not None else None),
        ("fragment", parsed.fragment),
        ("composed", parsed.compose()),
    ]
    return "".join(f"{name}: {value or '-'}\n" for name, value in components)


def main(argv: list[str] | None = None) -> None:
    # Parse command line arguments.
    parser = argparse.ArgumentParser(
        prog="python -m rfcuri",
        description="Split a URI into its components.",
        add_help=False,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--version", action="store_true")
    group.add_argument("uri", metavar="<uri>", nargs="?")
    args = parser.parse_args(argv)

    if args.version:
        print(f"rfcuri {rfcuri_version}")
        return

    if args.uri is None:
        parser.error("the following arguments are required: <uri>")

    try:
        output = format_components(args.uri)
    except URISyntaxError as exc:
        print(f"Failed to parse {args.uri}: {exc.msg}.")
        sys.exit(1)

    sys.stdout.write(output)


if __name__ == "__main__":
    main()
