"""Escaping of Lucene query syntax characters.

Clauses render their text verbatim unless asked to escape it, so callers that
already pass pre-escaped input are not double-escaped.
"""

from __future__ import annotations

import re

_RE_SPECIAL = re.compile(r'(&&|\|\||[+\-!(){}\[\]^"~*?:\\/])')
_RE_PHRASE_SPECIAL = re.compile(r'(["\\])')


def escape(text: str) -> str:
    """Backslash-escape every Lucene special character in ``text``.

    Args:
        text: Raw token text.

    Returns:
        Text safe to embed as a single term or range bound.
    """
    return _RE_SPECIAL.sub(lambda m: "".join("\\" + ch for ch in m.group(1)), text)


def escape_phrase(text: str) -> str:
    """Escape the characters that would terminate a quoted phrase early."""
    return _RE_PHRASE_SPECIAL.sub(r"\\\1", text)
