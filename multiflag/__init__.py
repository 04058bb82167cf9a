from ._accumulators import (
    Accumulator,
    CollectingAccumulator,
    CountingAccumulator,
    collecting,
    counting,
)
from ._argparse_formatter import HelpFormatter
from ._registrars import (
    ArgparseRegistrar,
    Registrar,
    default_parser,
    default_registrar,
    parse,
)
from ._settings import (
    AliasUsageFunc,
    RegistrationConfig,
    configure,
    current_config,
    default_alias_usage,
)
from ._warnings import MultiflagWarning

__version__ = "0.1.0"

__all__ = [
    "Accumulator",
    "CollectingAccumulator",
    "CountingAccumulator",
    "collecting",
    "counting",
    "HelpFormatter",
    "ArgparseRegistrar",
    "Registrar",
    "default_parser",
    "default_registrar",
    "parse",
    "AliasUsageFunc",
    "RegistrationConfig",
    "configure",
    "current_config",
    "default_alias_usage",
    "MultiflagWarning",
]
