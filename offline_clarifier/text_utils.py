from __future__ import annotations

import re
from typing import List, Set


_TERMINAL_SPLIT = re.compile(r"(?<=[.!?])\s+")
_FRAGMENT_SPLIT = re.compile(r"[.!?]+")


def split_terminated_sentences(text: str) -> List[str]:
    """Split after `.`, `!` or `?` followed by whitespace, keeping the punctuation."""

    return _TERMINAL_SPLIT.split(text)


def split_fragments(text: str) -> List[str]:
    """Split on runs of `.`/`!`/`?`, dropping the punctuation itself.

    Fragments are returned untrimmed and may be empty.
    """

    return _FRAGMENT_SPLIT.split(text)


def split_sentences(text: str, min_chars: int = 1) -> List[str]:
    out: List[str] = []
    for frag in split_fragments(text):
        frag = frag.strip()
        if len(frag) < max(1, min_chars):
            continue
        out.append(frag)
    return out


def split_words(text: str) -> List[str]:
    return text.split()


def word_set(text: str) -> Set[str]:
    return {w.lower() for w in text.split()}


def jaccard_similarity(a: str, b: str) -> float:
    """|A & B| / |A | B| over lower-cased whitespace tokens."""

    wa, wb = word_set(a), word_set(b)
    union = wa | wb
    if not union:
        return 0.0
    return len(wa & wb) / len(union)


_MULTI_SPACE = re.compile(r"\s+")
_REPEATED_PERIOD = re.compile(r"\.(?:\s*\.)+")
_REPEATED_COMMA = re.compile(r",(?:\s*,)+")
_SPACE_AFTER_PUNCT = re.compile(r"([.!?])\s*([a-z])")


def clean_formatting(text: str) -> str:
    """Final cosmetic pass: single spaces, no doubled `.`/`,`, trimmed ends."""

    text = _MULTI_SPACE.sub(" ", text)
    text = _REPEATED_PERIOD.sub(".", text)
    text = _REPEATED_COMMA.sub(",", text)
    text = text.strip()
    return _SPACE_AFTER_PUNCT.sub(r"\1 \2", text)
