from __future__ import annotations

import re
from typing import Dict, List, Tuple

from .text_utils import split_terminated_sentences
from .tiers import ComplexityTier, TierLike, resolve_tier


MAX_SENTENCE_WORDS: Dict[ComplexityTier, int] = {
    ComplexityTier.SIMPLE: 12,
    ComplexityTier.STANDARD: 18,
    ComplexityTier.EDUCATED: 25,
}

# Scanned in order; the first connector present in the sentence wins.
BREAK_CONNECTORS: Dict[ComplexityTier, Tuple[str, ...]] = {
    ComplexityTier.SIMPLE: (", and", ", but", ", so", ", then"),
    ComplexityTier.STANDARD: (", and", ", but", ", or", "; ", " because", " when", " where"),
    ComplexityTier.EDUCATED: (
        ", and", ", but", ", or", "; ", " because", " when", " where",
        " which", " that", " while", " although",
    ),
}

# SIMPLE tier only: connector -> replacement carrying a transition word.
TRANSITIONS: Dict[str, str] = {
    ", and": ". Also,",
    ", but": ". However,",
    ", so": ". Therefore,",
}

_PASSIVE_PAST = re.compile(r"(\w+) was (\w+ed) by (\w+)", flags=re.IGNORECASE)
_PASSIVE_PRESENT = re.compile(r"(\w+) is (\w+ed) by (\w+)", flags=re.IGNORECASE)

_SIMPLE_CONDITIONALS: List[Tuple[re.Pattern[str], str]] = [
    (re.compile(r"if and only if", flags=re.IGNORECASE), "only if"),
    (re.compile(r"provided that", flags=re.IGNORECASE), "if"),
    (re.compile(r"unless and until", flags=re.IGNORECASE), "until"),
]


def _break_sentence(sentence: str, tier: ComplexityTier) -> str:
    if len(sentence.split(" ")) <= MAX_SENTENCE_WORDS[tier]:
        return sentence

    for connector in BREAK_CONNECTORS[tier]:
        if connector in sentence:
            if tier is ComplexityTier.SIMPLE:
                return sentence.replace(connector, TRANSITIONS.get(connector, ". "), 1)
            return sentence.replace(connector, ". ", 1)

    # no connector: split at the first comma from the middle onwards
    comma = sentence.find(",", len(sentence) // 2)
    if comma > 0:
        head = sentence[:comma]
        tail = sentence[comma + 1:].strip()
        if tier is ComplexityTier.SIMPLE and tail:
            tail = tail[0].upper() + tail[1:]
        return f"{head}. {tail}"

    return sentence


def break_long_sentences(text: str, tier: TierLike) -> str:
    """Split sentences longer than the tier's word limit at a connector or mid comma."""

    t = resolve_tier(tier)
    return " ".join(_break_sentence(s, t) for s in split_terminated_sentences(text))


def simplify_structure(text: str, tier: TierLike) -> str:
    """Rewrite "X was/is <verb>ed by Y" as active voice; SIMPLE also flattens conditionals."""

    out = _PASSIVE_PAST.sub(r"\3 \2 \1", text)
    out = _PASSIVE_PRESENT.sub(r"\3 \2s \1", out)

    if resolve_tier(tier) is ComplexityTier.SIMPLE:
        for pattern, replacement in _SIMPLE_CONDITIONALS:
            out = pattern.sub(replacement, out)

    return out
