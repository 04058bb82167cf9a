import argparse
import contextlib
import shutil
from typing import Any, ContextManager, Generator

import termcolor

from . import _strings


def monkeypatch_len(obj: Any) -> int:
    if isinstance(obj, str):
        return len(_strings.strip_ansi_sequences(obj))
    else:
        return len(obj)


def dummy_termcolor_context() -> ContextManager[None]:
    """Context for turning termcolor off."""

    def dummy_colored(*args, **kwargs) -> str:
        return args[0]

    @contextlib.contextmanager
    def inner() -> Generator[None, None, None]:
        orig_colored = termcolor.colored
        termcolor.colored = dummy_colored
        try:
            yield
        finally:
            termcolor.colored = orig_colored

    return inner()


def ansi_context() -> ContextManager[None]:
    """Context for working with ANSI codes + argparse. Applies a temporary monkey patch
    for making argparse ignore ANSI codes when wrapping usage text."""

    @contextlib.contextmanager
    def inner() -> Generator[None, None, None]:
        if not hasattr(argparse, "len"):
            # Sketchy, but seems to work.
            argparse.len = monkeypatch_len  # type: ignore
            try:
                yield
            finally:
                del argparse.len  # type: ignore
        else:
            # No-op when the context manager is nested.
            yield

    return inner()


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter that measures text without ANSI escape sequences, so colored
    metavars don't throw off alignment or wrapping."""

    def __init__(self, prog, indent_increment=2, max_help_position=None, width=None):
        if width is None:
            width = shutil.get_terminal_size().columns - 2
        if max_help_position is None:
            max_help_position = min(24, width // 3)  # Usual is 24.
        super().__init__(prog, indent_increment, max_help_position, width)

    def add_argument(self, action):
        # Invocation lengths are measured without escape sequences.
        with ansi_context():
            super().add_argument(action)

    def _split_lines(self, text, width):
        text = self._whitespace_matcher.sub(" ", text).strip()
        import textwrap as textwrap

        # Sketchy, but seems to work.
        textwrap.len = monkeypatch_len  # type: ignore
        try:
            return textwrap.wrap(text, width)
        finally:
            del textwrap.len  # type: ignore

    def format_help(self) -> str:
        with ansi_context():
            return super().format_help()
