# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the engine that turns a flat list of
command-line tokens into options, positional arguments and trailing tokens
according to a `SwitchSet`.

Key Features:
- Long (`--level`), short (`-l`) and aliased switches
- `=`-joined values (`--level=3`, `-l=3`) and joined numbers (`-l3`)
- POSIX-style clusters of one-letter switches (`-xvf`)
- Negated booleans (`--no-color`, `--skip-tests`) without declaring them
- Typed values: boolean, string, numeric, array, hash and default
- Positional arguments filled in declaration order, leftovers kept as trailing
- Aggregate validation of required switches and arguments

Public Interface:
- `parse(tokens)`: Parse a token list into a `ParseResult`.
- `parse_arguments(tokens)`: Assign positional arguments only.
- `split(tokens)`: Split leading positional tokens from the rest.

Example Usage:
    parser = OptionParser(
        [
            Switch.option("--level", "-l", type="numeric", required=True),
            Switch.option("--force", "-f"),
            Switch.argument("path"),
        ]
    )
    result = parser.parse(["-f", "-l3", "./config.yml", "extra"])

    # result.options == {'force': True, 'level': 3, 'path': './config.yml'}
    # result.arguments == ['./config.yml']
    # result.trailing == ['extra']

A parse is all-or-nothing: `RequiredArgumentMissing` or `MalformedArgument`
abort it and nothing is returned. The parser keeps no state between calls, so
one instance can be shared freely.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Iterable

from switchyard.config import ParserConfig, UnknownSwitchPolicy
from switchyard.exceptions import (
    MalformedArgument,
    RequiredArgumentMissing,
    SwitchDefinitionError,
)
from switchyard.logger import logger
from switchyard.parser.parser_types import ParserState, ParseResult
from switchyard.parser.switch import Switch
from switchyard.parser.switch_set import SwitchSet
from switchyard.parser.switch_type import SwitchType
from switchyard.parser.tokens import (
    Classified,
    TokenShape,
    classify,
    is_numeric,
    is_value,
)


class OptionParser:
    """
    Parses token lists against a fixed set of switches.

    Args:
        switches (SwitchSet | Iterable[Switch]): The recognized switches and
            positional arguments.
        config (ParserConfig | None): Parser settings; defaults apply when omitted.
    """

    def __init__(
        self,
        switches: SwitchSet | Iterable[Switch] = (),
        config: ParserConfig | None = None,
    ) -> None:
        self.config: ParserConfig = config or ParserConfig()
        if isinstance(switches, SwitchSet) and not self.config.skip_arguments:
            self.switches: SwitchSet = switches
        else:
            self.switches = SwitchSet(switches, skip_arguments=self.config.skip_arguments)

    def parse(self, tokens: Iterable[Any]) -> ParseResult:
        """
        Parse tokens into options, positional arguments and trailing tokens.

        Args:
            tokens (Iterable[Any]): Raw tokens. Non-string tokens are taken as
                already-typed values.

        Returns:
            ParseResult: The options mapping, positional values and trailing tokens.

        Raises:
            RequiredArgumentMissing: If a required switch or argument has no value.
            MalformedArgument: If a value does not fit its switch type.
        """
        state = ParserState.start(
            tokens, self.switches.required, self.switches.positional
        )
        logger.debug("[OptionParser] Parsing %d tokens", len(state.pending))

        while state.pending:
            classified = self._classify(state.peek())
            if not classified.shape.is_switch:
                self._handle_value(state)
            elif classified.shape is TokenShape.CLUSTER or self.switches.is_known(
                classified.switch
            ):
                self._handle_switch(state, classified)
            else:
                self._handle_unknown_switch(state)

        self._check_validity(state)
        self._assign_defaults(state)
        return ParseResult(state.options, state.arguments, state.trailing)

    def parse_arguments(self, tokens: Iterable[Any]) -> dict[str, Any]:
        """
        Assign tokens to positional arguments only, in declaration order.

        Arguments without a token get their default. Switches are not
        recognized and required arguments are not enforced.

        Returns:
            dict[str, Any]: Values by human name.
        """
        state = ParserState.start(tokens, (), ())
        assigns: dict[str, Any] = {}
        for argument in self.switches.positional:
            if state.pending:
                assigns[argument.human_name] = self._consume(
                    state, argument.human_name, argument
                )
            else:
                assigns[argument.human_name] = deepcopy(argument.default)
        return assigns

    @staticmethod
    def split(tokens: Iterable[Any]) -> tuple[list[Any], list[Any]]:
        """
        Split tokens into the leading non-switch tokens and everything after.

            split(["a", "b", "--x", "c"]) == (["a", "b"], ["--x", "c"])
        """
        tokens = list(tokens)
        arguments: list[Any] = []
        for token in tokens:
            if isinstance(token, str) and token.startswith("-"):
                break
            arguments.append(token)
        return arguments, tokens[len(arguments) :]

    def _classify(self, token: Any) -> Classified:
        classified = classify(token)
        if classified.shape is TokenShape.CLUSTER and not any(
            self.switches.is_known(piece) for piece in classified.pieces
        ):
            return Classified(TokenShape.VALUE)
        return classified

    def _handle_switch(self, state: ParserState, classified: Classified) -> None:
        state.shift()
        state.unshift(*classified.pieces)
        if classified.shape is TokenShape.CLUSTER:
            logger.debug("[OptionParser] Expanded cluster into %s", classified.pieces)
            return

        assert classified.switch is not None, "switch should not be None"
        switch_token = self.switches.normalize(classified.switch)
        switch = self.switches.lookup(switch_token)
        assert switch is not None, f"'{switch_token}' should resolve: shouldn't happen"
        if switch.positional:
            logger.debug(
                "[OptionParser] Skipping '%s': positional arguments are not switches",
                switch_token,
            )
            return

        self._check_requirement(state, switch_token, switch)
        state.options[switch.human_name] = self._consume(state, switch_token, switch)

    def _handle_unknown_switch(self, state: ParserState) -> None:
        match self.config.unknown_switches:
            case UnknownSwitchPolicy.PASSTHROUGH:
                self._handle_value(state)
            case UnknownSwitchPolicy.TRAILING:
                state.trailing.append(state.shift())
            case UnknownSwitchPolicy.DROP:
                token = state.shift()
                logger.debug("[OptionParser] Dropping unknown switch '%s'", token)
            case _:
                raise ValueError(
                    f"Unknown switch policy: {self.config.unknown_switches}"
                )

    def _handle_value(self, state: ParserState) -> None:
        if not state.unconsumed_positionals:
            state.trailing.append(state.shift())
            return
        argument = state.unconsumed_positionals.popleft()
        value = self._consume(state, argument.human_name, argument)
        state.options[argument.human_name] = value
        state.arguments.append(value)

    def _check_requirement(
        self, state: ParserState, switch_token: str, switch: Switch
    ) -> None:
        if not switch.input_required:
            return
        if not state.pending:
            raise RequiredArgumentMissing(
                f"no value provided for required argument '{switch_token}'"
            )
        if not is_value(state.peek()):
            raise MalformedArgument(
                f"cannot pass switch '{state.peek()}' as an argument"
            )

    def _consume(self, state: ParserState, switch_token: str, switch: Switch) -> Any:
        state.satisfy(switch)

        switch_type = switch.type
        if switch_type is SwitchType.DEFAULT:
            switch_type = (
                SwitchType.STRING if self._current_is_value(state) else SwitchType.BOOLEAN
            )

        match switch_type:
            case SwitchType.BOOLEAN:
                return self._consume_boolean(state, switch_token)
            case SwitchType.STRING:
                return state.shift() if state.pending else None
            case SwitchType.NUMERIC:
                return self._consume_numeric(state, switch_token)
            case SwitchType.HASH:
                return self._consume_hash(state)
            case SwitchType.ARRAY:
                return self._consume_array(state)
            case _:
                raise SwitchDefinitionError(
                    f"Unhandled switch type '{switch_type}' for '{switch_token}'"
                )

    def _current_is_value(self, state: ParserState) -> bool:
        return bool(state.pending) and is_value(state.peek())

    def _consume_boolean(self, state: ParserState, switch_token: str) -> bool:
        token = state.peek()
        if isinstance(token, bool):
            return state.shift()
        if token in ("true", "false"):
            return state.shift() == "true"
        return not self.switches.is_negated(switch_token)

    def _consume_numeric(self, state: ParserState, switch_token: str) -> int | float:
        token = state.peek()
        if isinstance(token, (int, float)) and not isinstance(token, bool):
            return state.shift()
        if not isinstance(token, str) or not is_numeric(token):
            raise MalformedArgument(
                f"expected numeric value for '{switch_token}'; got {token!r}"
            )
        token = state.shift()
        return float(token) if "." in token else int(token)

    def _consume_hash(self, state: ParserState) -> dict[str, Any]:
        if isinstance(state.peek(), dict):
            return dict(state.shift())
        result: dict[str, Any] = {}
        while self._current_is_value(state):
            token = state.peek()
            if not isinstance(token, str) or ":" not in token:
                break
            key, _, value = state.shift().partition(":")
            result[key] = value
        return result

    def _consume_array(self, state: ParserState) -> list[Any]:
        if isinstance(state.peek(), (list, tuple)):
            return list(state.shift())
        values = []
        while self._current_is_value(state):
            values.append(state.shift())
        return values

    def _check_validity(self, state: ParserState) -> None:
        if not state.unsatisfied_required:
            return
        names = "', '".join(
            switch.display_name for switch in state.unsatisfied_required.values()
        )
        raise RequiredArgumentMissing(
            f"no value provided for required arguments '{names}'"
        )

    def _assign_defaults(self, state: ParserState) -> None:
        for argument in state.unconsumed_positionals:
            value = deepcopy(argument.default)
            state.options[argument.human_name] = value
            state.arguments.append(value)
        state.unconsumed_positionals.clear()

        if not self.config.fill_defaults:
            return
        for switch in self.switches:
            if switch.positional or switch.human_name in state.options:
                continue
            if switch.default is not None:
                state.options[switch.human_name] = deepcopy(switch.default)
            elif switch.type is SwitchType.BOOLEAN:
                state.options[switch.human_name] = False

    def __str__(self) -> str:
        return (
            f"OptionParser(switches={len(self.switches)}, "
            f"aliases={len(self.switches.aliases)}, "
            f"positional={len(self.switches.positional)}, "
            f"required={len(self.switches.required)})"
        )

    def __repr__(self) -> str:
        return str(self)
