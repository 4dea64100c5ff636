"""Printing, appending and in-place rewriting of configuration values."""

from __future__ import annotations

import os
import sys
from contextlib import ExitStack
from itertools import takewhile
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TextIO

from sysconf.errors import AbortCode, TranslationAbort
from sysconf.parser import (
    DEFAULT_DELIMITERS,
    LINE_BUFFER_SIZE,
    ConfigEntry,
    get_value,
    make_argv,
)

TEMP_FILE_NAME = ".sys.conf.file.tmp"

_WHITESPACE = frozenset(" \t\n\v\f\r")
_KEY_REMOVED = "Last value for key removed. Key removed from file."
_OPEN_ERROR = "Unable to create temp file or read config file"


def format_config(entries: Iterable[ConfigEntry]) -> str:
    """Render every entry as an aligned ``key = values`` line.

    Each key is looked up with the prefix rule of ``get_value``, and the
    values shown stop at the first token starting with ``#``.
    """
    items = list(entries)
    lines = []
    for entry in items:
        values = get_value(items, entry.key)
        if values is None:
            break
        shown = takewhile(lambda token: not token.startswith("#"), values[1:])
        body = "".join(f"{token} " for token in shown)
        lines.append(f"{entry.key:<10}\t=\t{body}\n")
    return "".join(lines)


def print_config_file(entries: Iterable[ConfigEntry], out: TextIO | None = None) -> None:
    """Write ``format_config(entries)`` to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    stream.write(format_config(entries))


def assemble_strings(values: Sequence[str]) -> str:
    """Join every value after the first (the key) with single spaces."""
    return " ".join(values[1:])


def _buffered_lines(handle: TextIO) -> Iterator[str]:
    limit = LINE_BUFFER_SIZE - 1
    for line in handle:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def _run_length(text: str, accept) -> int:
    return sum(1 for _ in takewhile(accept, text))


def _rewrite_line(key: str, line: str, values: Sequence[str]) -> str | None:
    """Build the replacement for ``line``; None means the line is dropped."""
    separator = " "
    if "=" in line:
        separator = "="
    if ":" in line:
        separator = ":"
    terminator = ";" if ";" in line else " "

    pos = _run_length(line, lambda c: c not in _WHITESPACE and c != separator)
    spaces_before = _run_length(line[pos:], lambda c: c in _WHITESPACE and c != separator)
    pos += spaces_before
    if line.startswith(separator, pos):
        pos += 1
    spaces_after = _run_length(line[pos:], lambda c: c in _WHITESPACE)
    pos += spaces_after

    rest = line[pos:]
    quote = ""
    if rest.count('"') == 2:
        quote = '"'
    if rest.count("'") == 2:
        quote = "'"

    new_values = list(values)
    start = 1
    if "+" in new_values[0]:
        tokens = make_argv(line, DEFAULT_DELIMITERS)
        new_values.extend(tokens[1:])
        start = max(len(tokens), 1)

    if "-" in new_values[0]:
        if len(new_values) < 2:
            raise ValueError("a value to remove is required")
        removal = new_values[1]
        tokens = make_argv(line, DEFAULT_DELIMITERS)
        if len(tokens) == 2 and tokens[1].startswith(removal):
            return None
        kept = [token for token in tokens[start:] if not token.startswith(removal)]
        new_values = [new_values[0], *kept]

    assembled = assemble_strings(new_values)
    # The terminator survives only when the value is quoted.
    tail = terminator if quote else ""
    return (
        f"{key}{' ' * spaces_before}{separator}{' ' * spaces_after}"
        f"{quote}{assembled}{quote}{tail}\n"
    )


def replace_variable(
    key: str,
    values: Sequence[str],
    path: str | Path,
    out: TextIO | None = None,
) -> int:
    """Rewrite the first line starting with ``key`` using ``values``.

    ``values[0]`` is the requested key as typed: a ``+`` in it appends the
    existing values after the new ones, a ``-`` removes existing values that
    start with ``values[1]``. Later lines starting with ``key`` are dropped.
    Returns the number of lines written. Raises TranslationAbort when the
    file cannot be read or the temporary file cannot be created.
    """
    stream = sys.stdout if out is None else out
    target = Path(path)
    temp = target.with_name(TEMP_FILE_NAME)
    lines = 0
    found = False
    try:
        with ExitStack() as stack:
            try:
                source = stack.enter_context(
                    open(target, encoding="utf-8", errors="surrogateescape", newline="")
                )
                sink = stack.enter_context(
                    open(temp, "w", encoding="utf-8", errors="surrogateescape", newline="")
                )
            except OSError as exc:
                raise TranslationAbort(AbortCode.RUNTIME_ERROR, _OPEN_ERROR) from exc

            for line in _buffered_lines(source):
                if line.startswith(key):
                    if found:
                        continue
                    new_line = _rewrite_line(key, line, values)
                    if new_line is None:
                        print(_KEY_REMOVED, file=stream)
                        continue
                    sink.write(new_line)
                    found = True
                else:
                    sink.write(line)
                lines += 1
    except BaseException:
        temp.unlink(missing_ok=True)
        raise
    os.replace(temp, target)
    return lines


def write_variable(key: str, values: Sequence[str], path: str | Path) -> None:
    """Append ``key = "values"`` to the configuration file."""
    line = f'{key} = "{assemble_strings(values)}" \n'
    with open(path, "a", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        handle.write(line)