"""
Error types for plurality rule registration and configuration.
"""

from typing import Any


class PluralityError(Exception):
    """Base exception for all plurality errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRuleArgument(PluralityError, TypeError):
    """
    Raised when a rule cannot be registered.

    Examples:
    - Pattern given as something other than a string, Literal, Pattern
      or compiled regular expression
    - Pattern source that is not a valid regular expression
    - Replacement template that is not a string

    Registration fails before any state is mutated.
    """

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class RulesFileError(PluralityError):
    """
    Raised when a rules file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid TOML
    - Entries failing schema validation
    """

    pass
