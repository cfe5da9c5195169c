"""AskLucy: build Lucene query strings from typed clauses.

    >>> from AskLucy import Range, Term
    >>> str(Term("quick", "title").required().boost(2.5))
    '+title:quick^2.5'
    >>> str(Range(10, 20, "price"))
    'price:[10 TO 20]'
"""

from __future__ import annotations

from AskLucy.core.clause import Clause
from AskLucy.core.errors import AskLucyError, InvalidArgumentError, InvalidFormatError
from AskLucy.core.escape import escape, escape_phrase
from AskLucy.core.modifiers import Boost, Field, Fuzziness, Operator, Proximity, RangeType
from AskLucy.core.phrase import Phrase
from AskLucy.core.query import Query
from AskLucy.core.range import Range
from AskLucy.core.term import Term

__all__ = [
    "AskLucyError",
    "Boost",
    "Clause",
    "Field",
    "Fuzziness",
    "InvalidArgumentError",
    "InvalidFormatError",
    "Operator",
    "Phrase",
    "Proximity",
    "Query",
    "Range",
    "RangeType",
    "Term",
    "escape",
    "escape_phrase",
]
