"""Modifier value objects attached to clauses.

Each modifier renders one fixed slot of a clause:

- `Operator`  -> prefix ``+`` / ``-``
- `Field`     -> prefix ``name:``
- `RangeType` -> brackets ``[ ]`` / ``{ }``
- `Fuzziness` -> suffix ``~N`` on terms
- `Proximity` -> suffix ``~N`` on phrases
- `Boost`     -> suffix ``^N``

A modifier at its default value renders as an empty string.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Final

from AskLucy.core.errors import InvalidArgumentError


class Field:
    """Field scope of a clause."""

    DEFAULT: Final[str] = ""
    SEPARATOR: Final[str] = ":"

    def __init__(self, name: str = DEFAULT) -> None:
        self.name = name

    def render(self) -> str:
        """Return ``name:``, or an empty string for the default field."""
        if not self.name:
            return self.DEFAULT
        return self.name + self.SEPARATOR

    def __str__(self) -> str:
        return self.render()


class Operator(Enum):
    """Boolean requirement of a clause."""

    OPTIONAL = ""
    REQUIRED = "+"
    PROHIBITED = "-"

    @classmethod
    def from_name(cls, name: str) -> Operator:
        """Look up an operator by its lowercase name (``required`` etc.).

        Raises:
            InvalidArgumentError: If the name is unknown.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            allowed = sorted(op.name.lower() for op in cls)
            raise InvalidArgumentError("operator", name, f"must be one of {allowed}") from None

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


class Boost:
    """Relevance weight of a clause.

    The weight is rendered as the shortest decimal literal: ``2.0`` becomes
    ``^2`` and ``2.10`` becomes ``^2.1``. The default weight renders nothing.
    """

    DEFAULT: Final[float] = 1.0
    SYMBOL: Final[str] = "^"

    def __init__(self, weight: float = DEFAULT) -> None:
        self.weight: float = self.DEFAULT
        self.set(weight)

    def set(self, weight: float) -> None:
        """Set the weight.

        Raises:
            InvalidArgumentError: If the weight is negative, not finite or not a number.
        """
        if isinstance(weight, bool) or not isinstance(weight, (int, float, Decimal)):
            raise InvalidArgumentError("boost", weight, "must be a number")
        if not math.isfinite(weight):
            raise InvalidArgumentError("boost", weight, "must be finite")
        if weight < 0:
            raise InvalidArgumentError("boost", weight, "must not be negative")
        self.weight = weight

    def render(self) -> str:
        if self.weight == self.DEFAULT:
            return ""
        return self.SYMBOL + _canonical_decimal(self.weight)

    def __str__(self) -> str:
        return self.render()


class Fuzziness:
    """Damerau-Levenshtein distance allowed when matching a term."""

    SYMBOL: Final[str] = "~"
    MIN_DISTANCE: Final[int] = 0
    MAX_DISTANCE: Final[int] = 2

    def __init__(self, distance: int = MIN_DISTANCE) -> None:
        self.distance = self.MIN_DISTANCE
        self.set_distance(distance)

    def set_distance(self, distance: int) -> None:
        """Set the edit distance.

        Raises:
            InvalidArgumentError: If distance is not an integer in 0..2.
        """
        if isinstance(distance, bool) or not isinstance(distance, int):
            raise InvalidArgumentError("fuzziness", distance, "must be an integer")
        if not self.MIN_DISTANCE <= distance <= self.MAX_DISTANCE:
            raise InvalidArgumentError(
                "fuzziness",
                distance,
                f"out of range {self.MIN_DISTANCE}..{self.MAX_DISTANCE}",
            )
        self.distance = distance

    def render(self) -> str:
        if self.distance == 0:
            return ""
        return f"{self.SYMBOL}{self.distance}"

    def __str__(self) -> str:
        return self.render()


class Proximity:
    """Maximum word distance (slop) between the words of a phrase."""

    SYMBOL: Final[str] = "~"

    def __init__(self, distance: int = 0) -> None:
        self.distance = 0
        self.set_distance(distance)

    def set_distance(self, distance: int) -> None:
        """Set the slop.

        Raises:
            InvalidArgumentError: If distance is not a non-negative integer.
        """
        if isinstance(distance, bool) or not isinstance(distance, int):
            raise InvalidArgumentError("proximity", distance, "must be an integer")
        if distance < 0:
            raise InvalidArgumentError("proximity", distance, "must not be negative")
        self.distance = distance

    def render(self) -> str:
        if self.distance == 0:
            return ""
        return f"{self.SYMBOL}{self.distance}"

    def __str__(self) -> str:
        return self.render()


class RangeType:
    """Bracket style of a range: inclusive ``[a TO b]`` or exclusive ``{a TO b}``."""

    INCLUSIVE: Final[str] = "inclusive"
    EXCLUSIVE: Final[str] = "exclusive"

    _BRACKETS: Final[dict[str, tuple[str, str]]] = {
        INCLUSIVE: ("[", "]"),
        EXCLUSIVE: ("{", "}"),
    }

    def __init__(self, kind: str = INCLUSIVE) -> None:
        if kind not in self._BRACKETS:
            raise InvalidArgumentError(
                "range type",
                kind,
                f"must be one of {sorted(self._BRACKETS)}",
            )
        self.kind = kind

    def opening_bracket(self) -> str:
        return self._BRACKETS[self.kind][0]

    def closing_bracket(self) -> str:
        return self._BRACKETS[self.kind][1]


def _canonical_decimal(value: float | Decimal) -> str:
    """Format a number without trailing zeros or a trailing decimal point.

    ``str()`` goes first so that floats keep their shortest repr (``2.1``
    instead of ``2.100000000000000088817841970012523233890533447265625``).
    """
    number = Decimal(str(value)).normalize()
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
