# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Switch` dataclass, the parser's description of one recognized
switch or positional argument.

Switches are plain immutable records. Build them with the two constructors,
which validate names, derive the result key and infer the value type from the
default when no type is given:

    Switch.option("--level", "-l", type="numeric")
    Switch.option("--force", "-f")                     # boolean
    Switch.option("--retries", default=3)              # numeric, inferred
    Switch.argument("path")                            # required string
    Switch.argument("mode", default="fast")            # optional string

Key Attributes:
- `canonical_name`: Primary switch token (`--level`); positional arguments get
  `--<name>`.
- `human_name`: Key used in parse results (`dry-run` → `dry_run`).
- `aliases`: Other accepted spellings (`-l`).
- `type`: `SwitchType` member driving value consumption.
- `required`: Whether a value must be supplied.
- `positional`: Whether this is a positional argument.
- `default`: Value used when the switch or argument is absent.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from switchyard.exceptions import SwitchDefinitionError
from switchyard.parser.switch_type import SwitchType
from switchyard.parser.tokens import LONG_RE, SHORT_RE

_DEFAULT_TYPES: dict[SwitchType, tuple[type, ...]] = {
    SwitchType.BOOLEAN: (bool,),
    SwitchType.STRING: (str,),
    SwitchType.NUMERIC: (int, float),
    SwitchType.HASH: (dict,),
    SwitchType.ARRAY: (list, tuple),
}


@dataclass(frozen=True)
class Switch:
    """
    Represents a recognized switch or positional argument.

    Attributes:
        canonical_name (str): The primary switch token, e.g. `--level`.
        human_name (str): The key used in parse results, e.g. `level`.
        aliases (tuple[str, ...]): Alternative spellings, e.g. `("-l",)`.
        type (SwitchType): The value kind.
        required (bool): True if a value must be supplied.
        positional (bool): True if this is a positional argument.
        default (Any): The value used when the switch is absent.
    """

    canonical_name: str
    human_name: str
    aliases: tuple[str, ...] = ()
    type: SwitchType = SwitchType.BOOLEAN
    required: bool = False
    positional: bool = False
    default: Any = None

    @classmethod
    def option(
        cls,
        *names: str,
        type: SwitchType | str | None = None,
        required: bool = False,
        default: Any = None,
    ) -> Switch:
        """
        Build a switch from its names.

        The first long name (`--name`) becomes the canonical form; when only
        short names are given the first one is used. All other names become
        aliases.

        Args:
            *names (str): Switch spellings, e.g. `"--level", "-l"`.
            type (SwitchType | str | None): The value kind, inferred from
                `default` when omitted.
            required (bool): True if the switch must be given.
            default (Any): Value used when the switch is absent.

        Raises:
            SwitchDefinitionError: If a name or the type is invalid.
        """
        _validate_names(names)
        canonical = next((name for name in names if name.startswith("--")), names[0])
        aliases: list[str] = []
        for name in names:
            if name != canonical and name not in aliases:
                aliases.append(name)

        switch_type = _resolve_type(type, default, positional=False)
        _validate_default(default, switch_type, canonical)
        return cls(
            canonical_name=canonical,
            human_name=_human_name(canonical),
            aliases=tuple(aliases),
            type=switch_type,
            required=required,
            positional=False,
            default=default,
        )

    @classmethod
    def argument(
        cls,
        name: str,
        type: SwitchType | str | None = None,
        required: bool | None = None,
        default: Any = None,
    ) -> Switch:
        """
        Build a positional argument.

        A positional argument is required unless it has a default or
        `required=False` is passed explicitly.

        Raises:
            SwitchDefinitionError: If the name or the type is invalid.
        """
        if not isinstance(name, str) or not name:
            raise SwitchDefinitionError("Positional argument name must be a non-empty string")
        if name.startswith("-"):
            raise SwitchDefinitionError(
                f"Positional argument '{name}' must not start with '-'"
            )
        human_name = _human_name(name)
        if not human_name.replace("_", "").isalnum() or human_name[0].isdigit():
            raise SwitchDefinitionError(
                f"Positional argument '{name}' must be a valid identifier "
                "(letters, digits, dashes and underscores only)"
            )

        switch_type = _resolve_type(type, default, positional=True)
        if switch_type is SwitchType.BOOLEAN:
            raise SwitchDefinitionError(
                f"Type '{switch_type}' is not valid for positional argument '{name}'"
            )
        _validate_default(default, switch_type, name)
        if required is None:
            required = default is None
        return cls(
            canonical_name=f"--{name}",
            human_name=human_name,
            type=switch_type,
            required=required,
            positional=True,
            default=default,
        )

    @property
    def input_required(self) -> bool:
        """
        True if the switch needs an explicit value token when it is given.

        STRING and NUMERIC switches always need one; ARRAY and HASH switches
        only when they are required. BOOLEAN and DEFAULT switches never do.
        """
        if self.type in (SwitchType.BOOLEAN, SwitchType.DEFAULT):
            return False
        return self.type.takes_value or self.required

    @property
    def display_name(self) -> str:
        """Name used in error messages."""
        return self.human_name if self.positional else self.canonical_name

    def __str__(self) -> str:
        kind = "argument" if self.positional else "switch"
        return (
            f"Switch({kind}={self.display_name!r}, type={self.type}, "
            f"required={self.required})"
        )


def _human_name(name: str) -> str:
    return name.lstrip("-").replace("-", "_")


def _validate_names(names: tuple[str, ...]) -> None:
    if not names:
        raise SwitchDefinitionError("No switch names provided")
    for name in names:
        if not isinstance(name, str):
            raise SwitchDefinitionError(f"Switch name '{name}' must be a string")
        if not name.startswith("-"):
            raise SwitchDefinitionError(
                f"Switch name '{name}' must start with '-'; "
                "use Switch.argument() for positional arguments"
            )
        if name.startswith("--"):
            if not LONG_RE.match(name):
                raise SwitchDefinitionError(
                    f"Switch name '{name}' must be '--' followed by letters, digits, "
                    "dashes or underscores"
                )
        elif not SHORT_RE.match(name):
            raise SwitchDefinitionError(
                f"Switch name '{name}' must be a single letter or start with '--'"
            )


def _resolve_type(
    type: SwitchType | str | None, default: Any, positional: bool
) -> SwitchType:
    if type is None:
        return _infer_type(default, positional)
    if isinstance(type, SwitchType):
        return type
    try:
        return SwitchType(type)
    except ValueError as error:
        raise SwitchDefinitionError(str(error)) from error


def _infer_type(default: Any, positional: bool) -> SwitchType:
    if default is None:
        return SwitchType.STRING if positional else SwitchType.BOOLEAN
    if isinstance(default, bool):
        return SwitchType.BOOLEAN
    if isinstance(default, (int, float)):
        return SwitchType.NUMERIC
    if isinstance(default, (list, tuple)):
        return SwitchType.ARRAY
    if isinstance(default, dict):
        return SwitchType.HASH
    if isinstance(default, str):
        return SwitchType.STRING
    raise SwitchDefinitionError(
        f"Cannot infer a switch type from default {default!r}; pass type= explicitly"
    )


def _validate_default(default: Any, switch_type: SwitchType, name: str) -> None:
    if default is None or switch_type is SwitchType.DEFAULT:
        return
    expected = _DEFAULT_TYPES[switch_type]
    valid = isinstance(default, expected)
    if switch_type is SwitchType.NUMERIC and isinstance(default, bool):
        valid = False
    if not valid:
        raise SwitchDefinitionError(
            f"Default value {default!r} for '{name}' is not a valid {switch_type} value"
        )
