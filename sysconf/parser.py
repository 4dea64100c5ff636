"""Tokenising and parsing of key/value configuration files."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, TextIO

DEFAULT_DELIMITERS = " \t\n\"':=;"

# Lines are read through a fixed-size buffer; longer lines arrive in pieces.
LINE_BUFFER_SIZE = 1024

_C_WHITESPACE = " \t\n\v\f\r"
_SKIP_PREFIXES = ("#", ";", "/", "*", "[")


@dataclass(frozen=True)
class ConfigEntry:
    """One parsed configuration line: the key followed by its values."""

    values: tuple[str, ...]

    @property
    def key(self) -> str:
        """The first token of the line."""
        return self.values[0]


def make_argv(text: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Split ``text`` into the non-empty runs between delimiter characters."""
    if not delimiters:
        return [text] if text else []
    pattern = "[^" + re.escape(delimiters) + "]+"
    return re.findall(pattern, text)


def count_tokens(text: str, delimiters: str = DEFAULT_DELIMITERS) -> int:
    """Return how many tokens ``make_argv`` would produce for ``text``."""
    return len(make_argv(text, delimiters))


def _read_buffered_lines(handle: TextIO) -> Iterator[str]:
    limit = LINE_BUFFER_SIZE - 1
    for line in handle:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def _is_content(line: str) -> bool:
    stripped = line.lstrip(_C_WHITESPACE)
    return bool(stripped) and not stripped.startswith(_SKIP_PREFIXES)


def parse_config(
    path: str | Path, delimiters: str = DEFAULT_DELIMITERS
) -> list[ConfigEntry]:
    """Parse a configuration file into entries.

    Blank lines and lines starting with ``#``, ``;``, ``/``, ``*`` or ``[``
    (after leading whitespace) are skipped. Raises OSError if the file
    cannot be read.
    """
    entries: list[ConfigEntry] = []
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        for line in _read_buffered_lines(handle):
            if not _is_content(line):
                continue
            tokens = make_argv(line.lstrip(_C_WHITESPACE), delimiters)
            if tokens:
                entries.append(ConfigEntry(tuple(tokens)))
    return entries


def find_config_item(entries: Iterable[ConfigEntry], name: str) -> ConfigEntry | None:
    """Return the first entry whose key equals ``name``."""
    return next((entry for entry in entries if entry.key == name), None)


def get_value(entries: Iterable[ConfigEntry], name: str) -> tuple[str, ...] | None:
    """Return the tokens of the first entry whose key is a prefix of ``name``."""
    for entry in entries:
        if name.startswith(entry.key):
            return entry.values
    return None


def print_config_item(
    entries: Iterable[ConfigEntry], name: str, out: TextIO | None = None
) -> None:
    """Print the first value of every entry whose key equals ``name``."""
    stream = sys.stdout if out is None else out
    for entry in entries:
        if entry.key == name:
            first = entry.values[1] if len(entry.values) > 1 else ""
            print(first, file=stream)