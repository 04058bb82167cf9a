from __future__ import annotations

import argparse
import contextlib
import io
from typing import Callable

import pytest

import multiflag._argparse_formatter
import multiflag._strings


def get_helptext_with_checks(make_parser: Callable[[], argparse.ArgumentParser]) -> str:
    """Get the helptext for a parser, checking that output with and without termcolor
    only differs by ANSI sequences. `make_parser` is called once per check, since
    metavars are colored at registration time."""
    target = io.StringIO()
    with pytest.raises(SystemExit), contextlib.redirect_stdout(target):
        make_parser().parse_args(["--help"])

    target2 = io.StringIO()
    with pytest.raises(SystemExit), contextlib.redirect_stdout(target2):
        with multiflag._argparse_formatter.dummy_termcolor_context():
            make_parser().parse_args(["--help"])

    assert target2.getvalue() == multiflag._strings.strip_ansi_sequences(
        target.getvalue()
    )
    return target2.getvalue()
