# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SwitchSet`, the immutable lookup table an `OptionParser` parses against.

A `SwitchSet` is built once from a collection of `Switch` records and then
shared read-only by any number of parses. Building it:

- indexes every switch by its canonical name,
- builds the alias table, where the first switch declaring an alias keeps it and
  aliases that collide with any canonical name are dropped,
- records required switches and positional arguments in declaration order,
- rejects duplicate canonical or human names.

Resolution (`lookup`) treats `-` and `_` in long names alike, so `--dry-run`
finds a switch declared as `--dry_run`. It also understands negated spellings:
`--no-<name>` and `--skip-<name>` fall back to `--<name>` when the negated form
is not itself declared.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from switchyard.exceptions import SwitchDefinitionError
from switchyard.logger import logger
from switchyard.parser.switch import Switch
from switchyard.parser.tokens import NEGATED_RE


class SwitchSet:
    """
    Immutable collection of switches and positional arguments.

    Args:
        switches (Iterable[Switch]): The declared switches, in declaration order.
        skip_arguments (bool): Leave positional arguments out of the set.
    """

    def __init__(self, switches: Iterable[Switch] = (), skip_arguments: bool = False) -> None:
        by_name: dict[str, Switch] = {}
        by_human: dict[str, Switch] = {}
        shorts: dict[str, str] = {}

        for switch in switches:
            if not isinstance(switch, Switch):
                raise SwitchDefinitionError(f"Expected a Switch, got {type(switch).__name__}")
            if switch.positional and skip_arguments:
                continue
            if switch.canonical_name in by_name:
                raise SwitchDefinitionError(
                    f"Switch '{switch.canonical_name}' is already defined."
                )
            if switch.human_name in by_human:
                raise SwitchDefinitionError(
                    f"Name '{switch.human_name}' is already defined.\n"
                    "Every switch and positional argument needs a unique name."
                )
            by_human[switch.human_name] = switch
            for alias in switch.aliases:
                shorts.setdefault(alias, switch.canonical_name)
            by_name[switch.canonical_name] = switch

        for alias in list(shorts):
            if alias in by_name:
                logger.debug(
                    "[SwitchSet] Dropping alias '%s' of '%s': it is a canonical switch",
                    alias,
                    shorts[alias],
                )
                del shorts[alias]

        self._switches: Mapping[str, Switch] = MappingProxyType(by_name)
        self._shorts: Mapping[str, str] = MappingProxyType(shorts)
        self._by_human: Mapping[str, Switch] = MappingProxyType(by_human)
        self._positional: tuple[Switch, ...] = tuple(
            switch for switch in by_name.values() if switch.positional
        )
        self._required: tuple[Switch, ...] = tuple(
            switch for switch in by_name.values() if switch.required
        )

    @property
    def switches(self) -> Mapping[str, Switch]:
        """Switches keyed by canonical name."""
        return self._switches

    @property
    def aliases(self) -> Mapping[str, str]:
        """Alias table mapping each alias to its canonical name."""
        return self._shorts

    @property
    def positional(self) -> tuple[Switch, ...]:
        """Positional arguments in declaration order."""
        return self._positional

    @property
    def required(self) -> tuple[Switch, ...]:
        """Required switches and arguments in declaration order."""
        return self._required

    def get(self, human_name: str) -> Switch | None:
        """Return the switch stored under `human_name`, if any."""
        return self._by_human.get(human_name)

    def normalize(self, token: str) -> str:
        """Replace an alias by its canonical name; other tokens are returned as-is."""
        return self._shorts.get(token, token)

    def lookup(self, token: str) -> Switch | None:
        """
        Return the switch declared for `token`.

        Long spellings match regardless of `-` vs `_`, so `--dry-run` finds a
        switch declared as `--dry_run`. Negated forms (`--no-x`, `--skip-x`)
        resolve to `--x` when they are not declared themselves.
        """
        switch = self._find(token)
        if switch is None:
            match = NEGATED_RE.match(token)
            if match:
                switch = self._find(f"--{match.group(2)}")
        return switch

    def _find(self, token: str) -> Switch | None:
        switch = self._switches.get(token)
        if switch is None and token.startswith("--"):
            switch = self.get(token[2:].replace("-", "_"))
            if switch is not None and not switch.canonical_name.startswith("--"):
                return None
        return switch

    def is_known(self, token: str) -> bool:
        """Return True if `token` is a declared switch, a negated form, or an alias."""
        return self.lookup(token) is not None or token in self._shorts

    def is_negated(self, token: str) -> bool:
        """Return True if `token` is an undeclared `--no-x` / `--skip-x` spelling."""
        return self._find(token) is None and bool(NEGATED_RE.match(token))

    def __iter__(self) -> Iterator[Switch]:
        return iter(self._switches.values())

    def __len__(self) -> int:
        return len(self._switches)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.is_known(token)

    def __str__(self) -> str:
        return (
            f"SwitchSet(switches={len(self._switches)}, aliases={len(self._shorts)}, "
            f"positional={len(self._positional)}, required={len(self._required)})"
        )

    def __repr__(self) -> str:
        return str(self)
