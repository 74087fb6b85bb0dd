# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State and result models for the Switchyard option parser.

Contents:
- `ParserState`: The mutable working state of a single parse. One instance is
  created per `OptionParser.parse()` call and discarded afterwards.
- `ParseResult`: The immutable outcome of a successful parse: the options
  mapping, the positional values and the trailing tokens. It can render itself
  as a Rich table for inspection.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from switchyard.console import console as default_console
from switchyard.parser.switch import Switch


@dataclass
class ParserState:
    """
    Working state of one parse.

    Attributes:
        pending (deque): Remaining tokens; the left end is the next token.
        options (dict[str, Any]): Values by human name, in recognition order.
        arguments (list[Any]): Positional values in declaration order.
        trailing (list[Any]): Tokens that matched nothing.
        unsatisfied_required (dict[str, Switch]): Required switches not yet given,
            keyed by canonical name.
        unconsumed_positionals (deque): Positional arguments not yet assigned.
    """

    pending: deque = field(default_factory=deque)
    options: dict[str, Any] = field(default_factory=dict)
    arguments: list[Any] = field(default_factory=list)
    trailing: list[Any] = field(default_factory=list)
    unsatisfied_required: dict[str, Switch] = field(default_factory=dict)
    unconsumed_positionals: deque = field(default_factory=deque)

    @classmethod
    def start(
        cls,
        tokens: Iterable[Any],
        required: Iterable[Switch],
        positional: Iterable[Switch],
    ) -> ParserState:
        """Create a fresh state for parsing `tokens`."""
        return cls(
            pending=deque(tokens),
            unsatisfied_required={switch.canonical_name: switch for switch in required},
            unconsumed_positionals=deque(positional),
        )

    def peek(self) -> Any:
        """Return the next token without consuming it, or None."""
        return self.pending[0] if self.pending else None

    def shift(self) -> Any:
        """Consume and return the next token."""
        return self.pending.popleft()

    def unshift(self, *tokens: Any) -> None:
        """Push tokens back in front of the stream, keeping their order."""
        self.pending.extendleft(reversed(tokens))

    def satisfy(self, switch: Switch) -> None:
        """Mark a required switch as given."""
        self.unsatisfied_required.pop(switch.canonical_name, None)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a successful parse.

    Attributes:
        options (dict[str, Any]): Values by human name. Positional values are
            present here too.
        arguments (list[Any]): Positional values in declaration order.
        trailing (list[Any]): Tokens that matched neither a switch nor a
            positional argument.
    """

    options: dict[str, Any]
    arguments: list[Any]
    trailing: list[Any]

    def __iter__(self):
        """Unpack as `options, arguments, trailing = result`."""
        return iter((self.options, self.arguments, self.trailing))

    def build_table(self, title: str = "Parse Result") -> Table:
        """Return a Rich table listing options, arguments and trailing tokens."""
        table = Table(title=title, box=box.SIMPLE)
        table.add_column("Kind", style="bold")
        table.add_column("Name")
        table.add_column("Value")
        for name, value in self.options.items():
            table.add_row("option", escape(name), escape(repr(value)))
        for index, value in enumerate(self.arguments):
            table.add_row("argument", str(index), escape(repr(value)))
        for value in self.trailing:
            table.add_row("trailing", "", escape(repr(value)))
        return table

    def render(self, console: Console | None = None, title: str = "Parse Result") -> None:
        """Print the result as a Rich table."""
        (console or default_console).print(self.build_table(title))
