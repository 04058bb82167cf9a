"""Registrars bind accumulators to a flag parser.

Any object with a matching `register()` method satisfies :class:`Registrar`. The
built-in implementation, :class:`ArgparseRegistrar`, adds one `argparse` argument per
name; the process-wide default wraps a global parser that :func:`parse()` reads from.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Union

from typing_extensions import Protocol, runtime_checkable

from . import _argparse_formatter, _settings, _strings
from ._accumulators import Accumulator

# Payload recorded for each occurrence of an argument-free flag.
ARGUMENT_FREE_PAYLOAD = "true"


@runtime_checkable
class Registrar(Protocol):
    """Anything that can bind a named flag to an accumulator."""

    def register(self, name: str, accumulator: Accumulator, usage: str) -> None:
        ...


class _AccumulateAction(argparse.Action):
    """Forwards each occurrence of a flag to its accumulator."""

    def __init__(self, option_strings, dest, accumulator: Accumulator, **kwargs):
        self.accumulator = accumulator
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        if self.accumulator.is_argument_free():
            self.accumulator.set(ARGUMENT_FREE_PAYLOAD)
        else:
            assert isinstance(values, str)
            self.accumulator.set(values)
        setattr(namespace, self.dest, self.accumulator)


class ArgparseRegistrar:
    """Registers accumulators as arguments of an `argparse` parser or argument group.

    Args:
        parser: Parser or argument group to add arguments to.
        config: Registration options. If not specified, the process-wide config at the
            time of each registration is used.
    """

    def __init__(
        self,
        parser: Union[argparse.ArgumentParser, argparse._ArgumentGroup],
        config: Optional[_settings.RegistrationConfig] = None,
    ) -> None:
        self.parser = parser
        self.config = config

    def register(self, name: str, accumulator: Accumulator, usage: str) -> None:
        config = self.config if self.config is not None else _settings.current_config()

        kwargs = dict(
            action=_AccumulateAction,
            accumulator=accumulator,
            dest=_strings.dest_from_name(name),
            # argparse renders this with str(), which gives the display string.
            default=accumulator,
            # Unescaped % signs would be read as format specifiers by argparse.
            help=usage.replace("%", "%%") + " (default: %(default)s)",
        )
        if accumulator.is_argument_free():
            kwargs["nargs"] = 0
        else:
            kwargs["metavar"] = _strings.format_metavar(name.upper(), config.color)

        # Duplicate names are reported by argparse.
        self.parser.add_argument(
            *_strings.option_strings(name, config.prefixes), **kwargs
        )


def resolve_registrar(
    registrar: Union[Registrar, argparse.ArgumentParser, argparse._ArgumentGroup, None],
    config: Optional[_settings.RegistrationConfig] = None,
) -> Registrar:
    """Get a registrar for a `registrar=` argument: `None` selects the default parser,
    and `argparse` parsers or groups are wrapped in an :class:`ArgparseRegistrar`."""
    if registrar is None:
        return ArgparseRegistrar(default_parser(), config)
    if isinstance(registrar, argparse._ActionsContainer):
        return ArgparseRegistrar(registrar, config)  # type: ignore
    return registrar


_default_parser: Optional[argparse.ArgumentParser] = None


def default_parser() -> argparse.ArgumentParser:
    """Get the process-wide parser, creating it on first use."""
    global _default_parser
    if _default_parser is None:
        _default_parser = argparse.ArgumentParser(
            formatter_class=_argparse_formatter.HelpFormatter
        )
    return _default_parser


def default_registrar() -> ArgparseRegistrar:
    """Get a registrar bound to the process-wide parser."""
    return ArgparseRegistrar(default_parser())


def parse(args: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments with the process-wide parser. Each flag occurrence
    is forwarded to its accumulator.

    Args:
        args: If set, parse arguments from a sequence of strings instead of the
            commandline. Mirrors argument from `argparse.ArgumentParser.parse_args()`.

    Returns:
        Namespace mapping each flag name to its accumulator.
    """
    with _argparse_formatter.ansi_context():
        return default_parser().parse_args(args=args)


def reset_default_parser() -> None:
    """Discard the process-wide parser and every flag registered with it."""
    global _default_parser
    _default_parser = None
