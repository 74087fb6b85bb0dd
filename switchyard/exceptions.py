# Switchyard CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by Switchyard.

Declaration problems are raised while a switch set is being built, parse
problems while a token stream is being interpreted. A parse is all-or-nothing:
any `ParseError` aborts it and no partial result is returned.

All exceptions inherit from `SwitchyardError`, the base exception for the package.

Exception Hierarchy:
- SwitchyardError
    ├── SwitchDefinitionError
    ├── ConfigError
    └── ParseError
        ├── RequiredArgumentMissing
        └── MalformedArgument
"""


class SwitchyardError(Exception):
    """Base exception for Switchyard."""


class SwitchDefinitionError(SwitchyardError):
    """Exception raised when a switch or switch set is declared incorrectly."""


class ConfigError(SwitchyardError):
    """Exception raised when a parser configuration cannot be loaded."""


class ParseError(SwitchyardError):
    """Exception raised when a token stream cannot be parsed."""


class RequiredArgumentMissing(ParseError):
    """Exception raised when a required switch or argument never received a value."""


class MalformedArgument(ParseError):
    """Exception raised when a value does not fit the grammar of its switch type."""
