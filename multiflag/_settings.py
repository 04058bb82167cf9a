"""Configuration shared by every accumulator registration.

Alias usage text is generated eagerly, when an accumulator is registered. Changes made
through :func:`configure()` therefore only affect accumulators constructed afterward,
and should be applied before any flags are defined.
"""

from __future__ import annotations

import dataclasses
import os
import warnings
from typing import Callable, Tuple

from ._warnings import MultiflagWarning

AliasUsageFunc = Callable[[str, str], str]
"""Signature for alias usage functions: `(canonical_name, alias_name) -> usage`."""


def default_alias_usage(canonical_name: str, alias_name: str) -> str:
    """Default usage text for an alias."""
    return "Alias for " + canonical_name


_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def read_option(str_name: str, default: bool) -> bool:
    if str_name not in os.environ:
        return default
    value = os.environ[str_name].strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(
        f"{str_name}={os.environ[str_name]} should be one of {_TRUTHY + _FALSY}"
    )


@dataclasses.dataclass(frozen=True)
class RegistrationConfig:
    """Options applied when accumulators are registered with a registrar.

    Attributes:
        alias_usage: Produces the usage text for each alias.
        prefixes: Prefixes used to build option strings for each name. The default
            accepts both `-name` and `--name`.
        color: Whether metavars in help text are highlighted with termcolor.
    """

    alias_usage: AliasUsageFunc = default_alias_usage
    prefixes: Tuple[str, ...] = ("-", "--")
    color: bool = dataclasses.field(
        default_factory=lambda: read_option("PYTHON_MULTIFLAG_COLOR", True)
    )


_current_config = RegistrationConfig()
_registration_count = 0


def current_config() -> RegistrationConfig:
    """Get the process-wide registration config."""
    return _current_config


def configure(**changes) -> RegistrationConfig:
    """Update fields of the process-wide registration config. Keyword arguments mirror
    the fields of :class:`RegistrationConfig`.

    Should be called before any accumulators are constructed; earlier registrations
    keep the usage text that was generated for them."""
    global _current_config
    if _registration_count > 0:
        warnings.warn(
            f"Registration config changed after {_registration_count} flag(s) were"
            " registered. Usage text for existing flags will not be updated.",
            category=MultiflagWarning,
            stacklevel=2,
        )
    _current_config = dataclasses.replace(_current_config, **changes)
    return _current_config


def note_registration() -> None:
    global _registration_count
    _registration_count += 1


def reset() -> None:
    """Restore the default config and forget past registrations."""
    global _current_config, _registration_count
    _current_config = RegistrationConfig()
    _registration_count = 0
