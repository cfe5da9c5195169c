"""Single-token clause."""

from __future__ import annotations

import re

from AskLucy.core.clause import Clause
from AskLucy.core.errors import InvalidFormatError
from AskLucy.core.escape import escape as escape_text
from AskLucy.core.modifiers import Field, Fuzziness

_RE_WHITESPACE = re.compile(r"\s")


def check_token(text: object, kind: str) -> str:
    """Return ``text`` trimmed, if it is a single non-empty token.

    Raises:
        InvalidFormatError: If text is not a string, is empty or contains whitespace.
    """
    if not isinstance(text, str):
        raise InvalidFormatError(str(text), f"a {kind} must be a string, got {type(text).__name__}")
    token = text.strip()
    if not token:
        raise InvalidFormatError(text, f"a {kind} must not be empty")
    if _RE_WHITESPACE.search(token):
        raise InvalidFormatError(token, f"a {kind} must not contain whitespace, use a phrase instead")
    return token


class Term(Clause):
    """A single search token, e.g. ``+title:quick~1^2``.

    Multi-word text belongs in a `Phrase`; a term with inner whitespace is
    rejected.
    """

    def __init__(self, text: str, field: str = Field.DEFAULT, *, escape: bool = False) -> None:
        """Create a term.

        Args:
            text: The token to search for. Surrounding whitespace is trimmed.
            field: Optional name of the field to search in.
            escape: Whether to backslash-escape Lucene special characters.

        Raises:
            InvalidFormatError: If the text is not a string, is empty after
                trimming, or contains whitespace.
        """
        super().__init__(field)
        self.text = check_token(text, "term")
        self.escape = escape
        self._fuzziness = Fuzziness()

    @property
    def fuzziness(self) -> int:
        return self._fuzziness.distance

    def fuzzify(self, distance: int = Fuzziness.MAX_DISTANCE) -> Term:
        """Match terms within the given Damerau-Levenshtein distance.

        Args:
            distance: Edit distance, one of 0, 1, 2. 0 means exact match.

        Raises:
            InvalidArgumentError: If the distance is out of range.
        """
        self._fuzziness.set_distance(distance)
        return self

    def _body(self) -> str:
        return escape_text(self.text) if self.escape else self.text

    def _suffix(self) -> str:
        return self._fuzziness.render()
