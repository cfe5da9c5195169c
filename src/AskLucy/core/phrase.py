"""Multi-token clause."""

from __future__ import annotations

from AskLucy.core.clause import Clause
from AskLucy.core.escape import escape_phrase
from AskLucy.core.modifiers import Field, Proximity


class Phrase(Clause):
    """A quoted sequence of words, e.g. ``title:"quick brown fox"~2``."""

    QUOTE = '"'

    def __init__(self, text: str, field: str = Field.DEFAULT, *, escape: bool = False) -> None:
        super().__init__(field)
        self.text = text
        self.escape = escape
        self._proximity = Proximity()

    @property
    def slop(self) -> int:
        return self._proximity.distance

    def proximity(self, distance: int) -> Phrase:
        """Allow up to ``distance`` word moves between the phrase words.

        Raises:
            InvalidArgumentError: If the distance is negative.
        """
        self._proximity.set_distance(distance)
        return self

    def _body(self) -> str:
        text = escape_phrase(self.text) if self.escape else self.text
        return self.QUOTE + text + self.QUOTE

    def _suffix(self) -> str:
        return self._proximity.render()
