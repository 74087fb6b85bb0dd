# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SwitchType`, the closed set of value kinds a switch can carry.

The parser dispatches on this enum to decide how many tokens a switch consumes
and how they are turned into a value.

Supports alias coercion for shorthand or config-friendly values.

Example:
    SwitchType("numeric") → SwitchType.NUMERIC
    SwitchType("int")     → SwitchType.NUMERIC (via alias)
    SwitchType("list")    → SwitchType.ARRAY (via alias)
"""
from __future__ import annotations

from enum import Enum


class SwitchType(Enum):
    """
    Value kind of a switch or positional argument.

    Members:
        BOOLEAN: Flag; takes an optional literal "true"/"false".
        STRING: Exactly one token, verbatim.
        NUMERIC: One integer or decimal token.
        HASH: Greedy "key:value" tokens collected into a dict.
        ARRAY: Greedy plain tokens collected into a list.
        DEFAULT: STRING when a value follows, BOOLEAN otherwise.

    Aliases:
        - "bool" → "boolean"
        - "str" → "string"
        - "int", "float", "number" → "numeric"
        - "dict", "map" → "hash"
        - "list" → "array"
    """

    BOOLEAN = "boolean"
    STRING = "string"
    NUMERIC = "numeric"
    HASH = "hash"
    ARRAY = "array"
    DEFAULT = "default"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "str": "string",
            "int": "numeric",
            "float": "numeric",
            "number": "numeric",
            "dict": "hash",
            "map": "hash",
            "list": "array",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> SwitchType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """True if the type can only be satisfied by an explicit value token."""
        return self in (SwitchType.STRING, SwitchType.NUMERIC)

    def __str__(self) -> str:
        """Return the string representation of the switch type."""
        return self.value
