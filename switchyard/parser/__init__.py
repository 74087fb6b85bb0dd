"""
Switchyard CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .option_parser import OptionParser
from .parser_types import ParseResult, ParserState
from .switch import Switch
from .switch_set import SwitchSet
from .switch_type import SwitchType
from .tokens import TokenShape, classify
from .utils import to_switches

__all__ = [
    "OptionParser",
    "ParseResult",
    "ParserState",
    "Switch",
    "SwitchSet",
    "SwitchType",
    "TokenShape",
    "classify",
    "to_switches",
]
