"""Accumulators count and collect repeated uses of a flag.

A counting accumulator tallies occurrences of an argument-free flag, which is useful
for flags where repetition implies intensity:

    verbosity = multiflag.counting(
        "verbose", "false", "Verbosity. Repeat as necessary", "v"
    )

A collecting accumulator consumes one argument per occurrence and records the
arguments in order:

    trace = multiflag.collecting("trace", "none", "Trace program sections", "t")

After `multiflag.parse()`, `-v -v -verbose --verbose` gives
`verbosity.occurrence_count() == 4`, and `-t parse -trace compile` gives
`trace.values() == ["parse", "compile"]`.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, List, Optional, Type, TypeVar, Union

from . import _settings

if TYPE_CHECKING:
    import argparse

    from ._registrars import Registrar

AccumulatorT = TypeVar("AccumulatorT", bound="Accumulator")


class Accumulator(abc.ABC):
    """Counts and collects repeated uses of a flag. Instances are normally created via
    :func:`counting()` or :func:`collecting()`, which also register them."""

    def __init__(self, display_value: str) -> None:
        self._display_value = display_value
        self._collected: List[str] = []

    @property
    def display_value(self) -> str:
        """Default value to display in help."""
        return self._display_value

    def set(self, argument: str) -> None:
        """Record a usage instance. Called once per occurrence of the flag."""
        self._collected.append(argument)

    def display_string(self) -> str:
        return self._display_value

    def __str__(self) -> str:
        return self.display_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(display_value={self._display_value!r},"
            f" occurrence_count={self.occurrence_count()})"
        )

    @abc.abstractmethod
    def is_argument_free(self) -> bool:
        """Whether the flag is complete without a following token."""

    @abc.abstractmethod
    def values(self) -> List[str]:
        """Collected flag arguments."""

    def occurrence_count(self) -> int:
        """Number of times the flag was given, under any of its names."""
        return len(self._collected)


class CountingAccumulator(Accumulator):
    """Accumulator for argument-free flags. Only the count is meaningful."""

    def is_argument_free(self) -> bool:
        return True

    def values(self) -> List[str]:
        # Placeholders passed to set() are never exposed.
        return []


class CollectingAccumulator(Accumulator):
    """Accumulator that consumes one argument per occurrence."""

    def is_argument_free(self) -> bool:
        return False

    def values(self) -> List[str]:
        return list(self._collected)


def _make(
    cls: Type[AccumulatorT],
    name: str,
    default: str,
    usage: str,
    aliases: tuple,
    registrar: Union[Registrar, argparse.ArgumentParser, argparse._ArgumentGroup, None],
    config: Optional[_settings.RegistrationConfig],
) -> AccumulatorT:
    from ._registrars import resolve_registrar

    if config is None:
        config = _settings.current_config()
    target = resolve_registrar(registrar, config)

    accumulator = cls(default)
    target.register(name, accumulator, usage)
    _settings.note_registration()

    for alias in aliases:
        # Usage text is generated now, not when help is printed.
        target.register(alias, accumulator, config.alias_usage(name, alias))
        _settings.note_registration()

    return accumulator


def counting(
    name: str,
    default: str,
    usage: str,
    *aliases: str,
    registrar: Union[
        Registrar, argparse.ArgumentParser, argparse._ArgumentGroup, None
    ] = None,
    config: Optional[_settings.RegistrationConfig] = None,
) -> CountingAccumulator:
    """Create a counting accumulator and register it, along with any aliases.

    Args:
        name: Canonical flag name, without prefix.
        default: Default value to display in help.
        usage: Usage text for the canonical flag.
        aliases: Alternate names bound to the same accumulator.

    Keyword Args:
        registrar: Where to register the flags. Either a :class:`Registrar`, an
            `argparse.ArgumentParser` or argument group, or `None` for the process-wide
            default parser.
        config: Registration options. If not specified, the process-wide config is
            used; see :func:`multiflag.configure()`.

    Returns:
        The registered accumulator.
    """
    return _make(CountingAccumulator, name, default, usage, aliases, registrar, config)


def collecting(
    name: str,
    default: str,
    usage: str,
    *aliases: str,
    registrar: Union[
        Registrar, argparse.ArgumentParser, argparse._ArgumentGroup, None
    ] = None,
    config: Optional[_settings.RegistrationConfig] = None,
) -> CollectingAccumulator:
    """Create a collecting accumulator and register it, along with any aliases.
    Arguments are the same as for :func:`counting()`."""
    return _make(
        CollectingAccumulator, name, default, usage, aliases, registrar, config
    )
