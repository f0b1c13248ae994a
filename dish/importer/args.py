"""Command-line argument access for importer commands.

Importer commands define their own flags, so parsing is lenient: the
recognised flags are typed fields and anything else of the form
``--key value`` or ``--key=value`` lands in ``extras``.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Optional

_FLAGS = frozenset({"file", "payload_file", "output_file", "url", "content_type"})


@dataclass(frozen=True)
class ImportArgs:
    """Arguments recognised by the import helpers."""
    file: Optional[str] = None
    payload_file: Optional[str] = None
    output_file: Optional[str] = None
    url: Optional[str] = None
    content_type: Optional[str] = None
    extras: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> Optional[str]:
        """Return the value of a flag, accepting ``payload-file`` or ``payload_file``."""
        key = name.replace("-", "_")
        if key in _FLAGS:
            return getattr(self, key)
        return self.extras.get(key)

    def is_arg(self, name: str) -> bool:
        """True if the flag was supplied with a non-empty value."""
        value = self.get(name)
        return isinstance(value, str) and len(value) > 0


_args: ImportArgs | None = None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="DHIS2 import helper",
        allow_abbrev=False,
    )
    parser.add_argument("--file", type=str, help="Source file (CSV, JSON or raw upload)")
    parser.add_argument(
        "--payload-file",
        type=str,
        nargs="?",
        const="",
        help="Write the outgoing JSON payload to this path",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        nargs="?",
        const="",
        help="Write the JSON response to this path instead of printing it",
    )
    parser.add_argument("--url", type=str, help="Target URL")
    parser.add_argument(
        "--content-type",
        type=str,
        help="Content-Type header for raw file uploads",
    )
    return parser


def _parse_extras(unknown: list[str]) -> dict[str, str]:
    """Collect leftover ``--key value`` / ``--key=value`` tokens."""
    extras: dict[str, str] = {}
    i = 0
    while i < len(unknown):
        token = unknown[i]
        i += 1
        if not token.startswith("--"):
            continue
        name = token[2:]
        if "=" in name:
            name, value = name.split("=", 1)
        elif i < len(unknown) and not unknown[i].startswith("--"):
            value = unknown[i]
            i += 1
        else:
            value = ""
        extras[name.replace("-", "_")] = value
    return extras


def parse_args(argv: list[str] | None = None) -> ImportArgs:
    """Parse ``argv`` (defaults to ``sys.argv[1:]``) into ImportArgs."""
    parser = build_parser()
    known, unknown = parser.parse_known_args(argv)
    return ImportArgs(
        file=known.file,
        payload_file=known.payload_file,
        output_file=known.output_file,
        url=known.url,
        content_type=known.content_type,
        extras=_parse_extras(unknown),
    )


def get_args(argv: list[str] | None = None) -> ImportArgs:
    """Return parsed arguments.

    Without ``argv`` the process arguments are parsed once and cached.
    """
    global _args
    if argv is not None:
        return parse_args(argv)
    if _args is None:
        _args = parse_args(sys.argv[1:])
    return _args


def is_arg(name: str, args: ImportArgs | None = None) -> bool:
    """Indicate whether the named argument was supplied and is non-empty."""
    return (args or get_args()).is_arg(name)
