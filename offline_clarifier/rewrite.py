from __future__ import annotations

import re
from functools import lru_cache
from typing import AbstractSet, Optional

from .lexicon import PREFIX_PATTERNS, PROTECTED_WORDS, SUFFIX_PATTERNS, is_protected, jargon_for
from .tiers import TierLike


# Shortest root an affix may leave behind ("bit" is not "two t").
_MIN_ROOT = 3


@lru_cache(maxsize=None)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    # Multi-word phrases match across any run of whitespace.
    body = r"\s+".join(re.escape(part) for part in phrase.split())
    return re.compile(rf"\b{body}\b", flags=re.IGNORECASE)


@lru_cache(maxsize=None)
def _suffix_pattern(suffix: str) -> re.Pattern[str]:
    return re.compile(rf"\b([A-Za-z]+){re.escape(suffix)}\b", flags=re.IGNORECASE)


@lru_cache(maxsize=None)
def _prefix_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(prefix)}([A-Za-z]+)\b", flags=re.IGNORECASE)


def replace_jargon(text: str, tier: TierLike) -> str:
    """Replace every whole-word occurrence of each dictionary phrase.

    Entries run in table order over the running output, so a replacement can
    itself be rewritten by a later entry.
    """

    out = text
    for phrase, replacement in jargon_for(tier).items():
        out = _phrase_pattern(phrase).sub(lambda _m, r=replacement: r, out)
    return out


def apply_affix_patterns(text: str, protected: Optional[AbstractSet[str]] = None) -> str:
    """Expand known suffixes ("<root> <expansion>") then prefixes ("<expansion> <root>")."""

    keep = protected or frozenset()

    out = text
    for suffix, expansion in SUFFIX_PATTERNS.items():
        def suffix_repl(m: re.Match[str], expansion: str = expansion) -> str:
            word, root = m.group(0), m.group(1)
            if len(root) < _MIN_ROOT or is_protected(word, keep):
                return word
            return f"{root} {expansion}"

        out = _suffix_pattern(suffix).sub(suffix_repl, out)

    for prefix, expansion in PREFIX_PATTERNS.items():
        def prefix_repl(m: re.Match[str], expansion: str = expansion) -> str:
            word, root = m.group(0), m.group(1)
            if len(root) < _MIN_ROOT or is_protected(word, keep):
                return word
            return f"{expansion} {root}"

        out = _prefix_pattern(prefix).sub(prefix_repl, out)

    return out


def rewrite(text: str, tier: TierLike) -> str:
    """Jargon substitution followed by the tier-invariant affix pass."""

    if not text:
        return text
    out = replace_jargon(text, tier)
    return apply_affix_patterns(out, PROTECTED_WORDS)
