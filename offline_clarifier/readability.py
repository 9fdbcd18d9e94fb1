from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .text_utils import split_sentences, split_words


_VOWEL_GROUP = re.compile(r"[aeiouy]{1,2}")
_SILENT_E = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y = re.compile(r"^y")


def count_syllables(word: str) -> int:
    """Approximate syllable count.

    Short words (<= 3 letters) are one syllable. Otherwise a trailing silent
    "e"/"es"/"ed" and a leading "y" are dropped and vowel groups counted.
    """

    w = word.lower()
    if len(w) <= 3:
        return 1
    w = _SILENT_E.sub("", w)
    w = _LEADING_Y.sub("", w)
    return len(_VOWEL_GROUP.findall(w)) or 1


_LABELS = (
    (3, "Very Easy"),
    (6, "Easy"),
    (9, "Standard"),
    (12, "High School"),
    (16, "College"),
)


def complexity_label(grade: int) -> str:
    for upper, label in _LABELS:
        if grade <= upper:
            return label
    return "Very Complex"


@dataclass(frozen=True)
class ReadabilityMetrics:
    grade_level: int
    reading_age: int
    sentence_count: int
    word_count: int
    syllable_count: int
    avg_sentence_length: float
    avg_syllables_per_word: float
    complexity_label: str


EMPTY_METRICS = ReadabilityMetrics(
    grade_level=0,
    reading_age=5,
    sentence_count=0,
    word_count=0,
    syllable_count=0,
    avg_sentence_length=0.0,
    avg_syllables_per_word=0.0,
    complexity_label="Unknown",
)


def _js_round(x: float) -> int:
    # half rounds up, not to even
    return int(math.floor(x + 0.5))


def compute_readability(text: str) -> ReadabilityMetrics:
    sents = split_sentences(text)
    words = split_words(text)
    if not sents or not words:
        return EMPTY_METRICS

    syllables = sum(count_syllables(w) for w in words)
    wc = len(words)
    sc = len(sents)
    avg_len = wc / sc
    avg_syl = syllables / wc

    # Flesch-Kincaid grade, clamped to [1, 18]
    grade = _js_round(0.39 * avg_len + 11.8 * avg_syl - 15.59)
    grade = max(1, min(18, grade))

    return ReadabilityMetrics(
        grade_level=grade,
        reading_age=grade + 5,
        sentence_count=sc,
        word_count=wc,
        syllable_count=syllables,
        avg_sentence_length=float(avg_len),
        avg_syllables_per_word=float(avg_syl),
        complexity_label=complexity_label(grade),
    )


readability = compute_readability


def estimate_reading_time(text: str, words_per_minute: int = 200) -> int:
    """Whole minutes needed to read `text`, rounded up."""

    words = split_words(text)
    if not words:
        return 0
    return math.ceil(len(words) / max(1, words_per_minute))


def text_complexity_score(text: str) -> int:
    """Rough 0-100 complexity from sentence length and word length."""

    sents = split_sentences(text)
    words = split_words(text)
    if not sents or not words:
        return 0
    avg_words = len(words) / len(sents)
    avg_word_len = sum(len(w) for w in words) / len(words)
    return min(100, _js_round(avg_words * 2 + avg_word_len * 3))
