"""Utilities and constants for working with strings."""

import functools
import re
from typing import List, Sequence

import termcolor


def option_strings(name: str, prefixes: Sequence[str]) -> List[str]:
    """Build option strings for a flag name.

    ('verbose', ('-', '--')) => ['-verbose', '--verbose']
    """
    return [prefix + name for prefix in prefixes]


def dest_from_name(name: str) -> str:
    """Attribute name used for a flag in the parsed namespace.

    'dry-run' => 'dry_run'
    """
    return name.replace("-", "_")


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str):
    return _get_ansi_pattern().sub("", x)


def format_metavar(x: str, color: bool = True) -> str:
    if not color:
        return x
    return termcolor.colored(x, attrs=["bold"])
