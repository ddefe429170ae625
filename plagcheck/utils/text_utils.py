"""
Sentence segmentation and word tokenization for lexical comparison.

Segmentation is purely punctuation-driven: any run of ".", "!" or "?"
followed by whitespace ends a sentence. Abbreviations such as
"Dr. Smith" or "e.g. this" are therefore split points too; this matches
the results of the browser checker and is kept as-is.

"Whitespace" is the browser's set (ECMAScript WhiteSpace and
LineTerminator), not Python's: U+FEFF separates words, while the
U+001C-U+001F separators and U+0085 do not.
"""

import re
from typing import FrozenSet, List

WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_WS_CLASS = "[" + re.escape(WHITESPACE) + "]"
SENTENCE_BOUNDARY = re.compile(r"[.!?]+" + _WS_CLASS + "+")
WHITESPACE_RUN = re.compile(_WS_CLASS + "+")


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text


def _words(text: str) -> List[str]:
    return [tok for tok in WHITESPACE_RUN.split(text) if tok]


def segment(text: str) -> List[str]:
    """Split text into trimmed, non-empty sentences in original order."""
    text = _require_text(text)
    fragments = (s.strip(WHITESPACE) for s in SENTENCE_BOUNDARY.split(text))
    return [s for s in fragments if s]


def tokenize(sentence: str) -> FrozenSet[str]:
    """Lowercased whitespace tokens of a sentence, duplicates collapsed."""
    return frozenset(_words(_require_text(sentence).lower()))


def word_count(text: str) -> int:
    # punctuation-only tokens ("-", "...") are not words
    return sum(1 for tok in _words(_require_text(text)) if any(ch.isalnum() for ch in tok))


def char_count(text: str) -> int:
    return len(_require_text(text))
