"""Bounded clause."""

from __future__ import annotations

from AskLucy.core.clause import Clause
from AskLucy.core.escape import escape as escape_text
from AskLucy.core.modifiers import Field, RangeType
from AskLucy.core.term import check_token

Bound = str | int | float | None

UNBOUNDED = "*"
SEPARATOR = " TO "


def _check_bound(value: Bound) -> Bound:
    """Reject bounds that would render as more than one token."""
    if value is not None and str(value).strip():
        check_token(str(value), "range bound")
    return value


class Range(Clause):
    """A range of values, e.g. ``price:[10 TO 20]`` or ``date:{* TO 2020}``.

    A bound of ``None`` (or an empty string) is open and renders as ``*``. The order of the bounds
    is passed through to the search engine unchecked.
    """

    def __init__(
        self,
        lower: Bound = None,
        upper: Bound = None,
        field: str = Field.DEFAULT,
        range_type: str = RangeType.INCLUSIVE,
        *,
        escape: bool = False,
    ) -> None:
        """Create a range.

        Args:
            lower: Lower bound, or None for unbounded.
            upper: Upper bound, or None for unbounded.
            field: Optional name of the field to search in.
            range_type: ``inclusive`` or ``exclusive``.
            escape: Whether to backslash-escape Lucene special characters in the bounds.

        Raises:
            InvalidArgumentError: If the range type is unknown.
            InvalidFormatError: If a bound contains whitespace.
        """
        super().__init__(field)
        self.lower = _check_bound(lower)
        self.upper = _check_bound(upper)
        self.escape = escape
        self._range_type = RangeType(range_type)

    @property
    def range_type(self) -> str:
        return self._range_type.kind

    def inclusive(self) -> Range:
        """Include both bounds in the range."""
        self._range_type = RangeType(RangeType.INCLUSIVE)
        return self

    def exclusive(self) -> Range:
        """Exclude both bounds from the range."""
        self._range_type = RangeType(RangeType.EXCLUSIVE)
        return self

    def _bound(self, value: Bound) -> str:
        if value is None:
            return UNBOUNDED
        text = str(value).strip()
        if not text or text == UNBOUNDED:
            return UNBOUNDED
        if self.escape:
            return escape_text(text)
        return text

    def _body(self) -> str:
        return (
            self._range_type.opening_bracket()
            + self._bound(self.lower)
            + SEPARATOR
            + self._bound(self.upper)
            + self._range_type.closing_bracket()
        )
