"""Command line entry point: list, query, add and change configuration values."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from sysconf.errors import AbortCode, TranslationAbort
from sysconf.parser import DEFAULT_DELIMITERS, get_value, make_argv, parse_config
from sysconf.writer import print_config_file, replace_variable, write_variable

PROGRAM_NAME = "sysconf"
PROGRAM_VERSION = "0.0.1"

_USAGE = "Usage: {prog} -f <configuration file> <value to get>"


def contains(items: Iterable[str], value: str) -> bool:
    """Return True when ``value`` equals one of ``items``."""
    return any(item == value for item in items)


def _usage_error(prog: str) -> TranslationAbort:
    print(_USAGE.format(prog=prog), file=sys.stderr)
    return TranslationAbort(AbortCode.INVALID_COMMAND_LINE_ARGS)


def _parse_arguments(words: Sequence[str]) -> tuple[str | None, str | None]:
    """Return the configuration file name and the key/value argument.

    ``-f`` takes the following word as the file name. The argument is the
    last word longer than one character that does not start with ``-``.
    """
    file_name: str | None = None
    arg_string: str | None = None
    words_iter = iter(words)
    for word in words_iter:
        if len(word) <= 1:
            continue
        if word.startswith("-f"):
            word = next(words_iter, None)
            file_name = word
            if word is None:
                break
            if len(word) <= 1:
                continue
        if not word.startswith("-"):
            arg_string = word
    return file_name, arg_string


def _run(args: Sequence[str]) -> int:
    prog = PROGRAM_NAME
    words = [prog, *args]
    if len(words) < 3:
        raise _usage_error(prog)

    file_name, arg_string = _parse_arguments(words)
    if not file_name:
        raise _usage_error(prog)

    try:
        entries = parse_config(file_name, DEFAULT_DELIMITERS)
    except OSError:
        print("Failed to parse the configuration file.")
        return 1

    if len(words) == 3:
        print_config_file(entries, sys.stdout)
        return 0

    arg_tokens = make_argv(arg_string, DEFAULT_DELIMITERS) if arg_string else []
    if not arg_tokens:
        return 0

    requested = arg_tokens[0]
    config_line = get_value(entries, requested)

    if config_line is None:
        if len(arg_tokens) == 1:
            return 1
        print(f"{file_name:<5}: {requested} = {arg_tokens[1]}")
        write_variable(requested, arg_tokens, file_name)
        return 1

    if len(arg_tokens) == 1:
        print("".join(f"{token} " for token in config_line[1:]))
        return 0

    key = config_line[0]
    new_value = arg_tokens[1]
    if not contains(config_line, new_value):
        operator = "+" if "+" in requested else "="
        print(f"{key:<5}\t- {operator} ->\t{new_value:<5}")
        replace_variable(key, arg_tokens, file_name, sys.stdout)
        return 0

    if "-" in requested:
        print(f"{key:<5}\t- - ->\t{new_value:<5}")
        replace_variable(key, arg_tokens, file_name, sys.stdout)
    else:
        print("Value found. No change made.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _run(args)
    except TranslationAbort as exc:
        if exc.detail:
            print(exc.detail, file=sys.stderr)
        print(str(exc), file=sys.stderr)
        return exc.exit_status


if __name__ == "__main__":
    sys.exit(main())