"""Grouping of clauses into a (sub-)query."""

from __future__ import annotations

from AskLucy.core.clause import Clause
from AskLucy.core.modifiers import Field, Operator
from AskLucy.utils.log import log


class Query(Clause):
    """An ordered group of clauses, itself usable as a clause.

    Clauses are joined with a single space, so each one's own operator
    decides whether it must, must not or may match:

        Query().add(Term("quick").required(), Phrase("brown fox"))
        -> +quick "brown fox"

    The group is wrapped in parentheses when it carries an operator, field or
    boost of its own, and whenever it is nested inside another query.
    """

    def __init__(self, field: str = Field.DEFAULT) -> None:
        super().__init__(field)
        self._clauses: list[Clause] = []

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return tuple(self._clauses)

    def add(self, *clauses: Clause) -> Query:
        """Append clauses in order.

        Raises:
            TypeError: If an argument is not a clause.
            ValueError: If a query would end up containing itself.
        """
        for clause in clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"Query accepts clauses only, got {type(clause).__name__}")
            if clause is self or (isinstance(clause, Query) and clause._contains(self)):
                raise ValueError("A query cannot contain itself")
            self._clauses.append(clause)
            log.debug("Query: added %s (%d clauses)", type(clause).__name__, len(self._clauses))
        return self

    def _contains(self, other: Query) -> bool:
        """Return whether ``other`` is nested anywhere below this query."""
        for clause in self._clauses:
            if isinstance(clause, Query) and (clause is other or clause._contains(other)):
                return True
        return False

    def render(self) -> str:
        return self._render(grouped=False)

    def _render(self, *, grouped: bool) -> str:
        body = self._body()
        if not body:
            return ""
        modified = self._operator is not Operator.OPTIONAL or bool(self._field.render()) or bool(self._boost.render())
        if grouped or modified:
            body = f"({body})"
        return self._operator.render() + self._field.render() + body + self._boost.render()

    def _body(self) -> str:
        parts: list[str] = []
        for clause in self._clauses:
            text = clause._render(grouped=True) if isinstance(clause, Query) else clause.render()
            if text:
                parts.append(text)
        return " ".join(parts)

    def __len__(self) -> int:
        return len(self._clauses)
