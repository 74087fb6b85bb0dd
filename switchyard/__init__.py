"""
Switchyard CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import ParserConfig, UnknownSwitchPolicy, load_config
from .exceptions import (
    MalformedArgument,
    RequiredArgumentMissing,
    SwitchDefinitionError,
    SwitchyardError,
)
from .parser import OptionParser, ParseResult, Switch, SwitchSet, SwitchType, to_switches
from .version import __version__

__all__ = [
    "OptionParser",
    "ParseResult",
    "ParserConfig",
    "Switch",
    "SwitchSet",
    "SwitchType",
    "UnknownSwitchPolicy",
    "MalformedArgument",
    "RequiredArgumentMissing",
    "SwitchDefinitionError",
    "SwitchyardError",
    "load_config",
    "to_switches",
    "__version__",
]
