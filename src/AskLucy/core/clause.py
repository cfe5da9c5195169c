"""Common contract of all query clauses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from AskLucy.core.modifiers import Boost, Field, Operator

ClauseT = TypeVar("ClauseT", bound="Clause")


class Clause(ABC):
    """A renderable fragment of a query.

    Every clause owns its field scope, boolean operator and boost. The
    mutators return the clause itself so calls can be chained:

        Term("quick").set_field("title").required().boost(2.5)

    Rendering never changes state. The slots are always emitted in the same
    order: operator, field, body, suffix, boost.
    """

    def __init__(self, field: str = Field.DEFAULT) -> None:
        self._field = Field(field)
        self._operator = Operator.OPTIONAL
        self._boost = Boost()

    @property
    def field(self) -> str:
        return self._field.name

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def weight(self) -> float:
        return self._boost.weight

    def set_field(self: ClauseT, name: str = Field.DEFAULT) -> ClauseT:
        """Scope the clause to a field; no argument removes the scope."""
        self._field = Field(name)
        return self

    def required(self: ClauseT) -> ClauseT:
        """Mark the clause as required (``+``)."""
        self._operator = Operator.REQUIRED
        return self

    def prohibited(self: ClauseT) -> ClauseT:
        """Mark the clause as prohibited (``-``)."""
        self._operator = Operator.PROHIBITED
        return self

    def optional(self: ClauseT) -> ClauseT:
        """Remove any required/prohibited marker."""
        self._operator = Operator.OPTIONAL
        return self

    def boost(self: ClauseT, weight: float) -> ClauseT:
        """Set the relevance weight.

        Raises:
            InvalidArgumentError: If the weight is negative or not a finite number.
        """
        self._boost.set(weight)
        return self

    def render(self) -> str:
        """Render the clause to query text."""
        return (
            self._operator.render()
            + self._field.render()
            + self._body()
            + self._suffix()
            + self._boost.render()
        )

    @abstractmethod
    def _body(self) -> str:
        """Return the clause-specific text between the prefixes and the suffixes."""

    def _suffix(self) -> str:
        """Return clause-specific modifiers rendered before the boost."""
        return ""

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"
