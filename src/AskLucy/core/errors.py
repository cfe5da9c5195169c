"""Exception hierarchy for AskLucy."""

from __future__ import annotations


class AskLucyError(Exception):
    """Base exception for all AskLucy errors."""


class InvalidArgumentError(AskLucyError, ValueError):
    """A modifier received a value outside its allowed domain."""

    def __init__(self, argument: str, value: object, reason: str) -> None:
        self.argument = argument
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {argument} {value!r}: {reason}")


class InvalidFormatError(AskLucyError, ValueError):
    """Clause text does not fit the shape its clause kind requires."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid format {text!r}: {reason}")
