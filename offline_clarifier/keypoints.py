from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .text_utils import jaccard_similarity, split_sentences


# Domain is deliberately not consulted: every category scores every sentence.
IMPORTANCE_MARKERS: Dict[str, Tuple[str, ...]] = {
    "general": ("important", "must", "required", "critical", "essential", "necessary", "key", "main",
                "primary", "significant", "major", "crucial"),
    "legal": ("shall", "will", "should", "obligation", "responsibility", "liable", "breach", "violation",
              "penalty", "damages", "rights", "duties"),
    "medical": ("diagnosis", "treatment", "symptoms", "condition", "risk", "side effects", "contraindicated",
                "recommended", "dosage", "prognosis"),
    "technical": ("requirements", "specifications", "limitations", "performance", "security", "compatibility",
                  "version", "deprecated", "support"),
    "financial": ("cost", "price", "fee", "payment", "interest", "return", "risk", "investment", "liability",
                  "asset", "revenue", "profit"),
    "academic": ("hypothesis", "conclusion", "findings", "results", "methodology", "analysis", "evidence",
                 "theory", "research", "study"),
}

STRUCTURAL_MARKERS: Tuple[str, ...] = (
    "first", "second", "third", "finally", "in conclusion", "summary", "overview", "definition", "example",
    "note that", "please note", "warning", "caution", "attention", "remember", "keep in mind",
)

QUESTION_MARKERS: Tuple[str, ...] = ("what", "when", "where", "who", "why", "how", "which")

MIN_SENTENCE_CHARS = 20
MAX_KEY_POINTS = 5
CANDIDATE_POOL = 8
SIMILARITY_THRESHOLD = 0.70

_ALL_IMPORTANCE = tuple(m for markers in IMPORTANCE_MARKERS.values() for m in markers)
_DIGIT = re.compile(r"\d")
_DATE = re.compile(r"\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}")
_CAPITALIZED = re.compile(r"\b[A-Z][a-z]+\b")


@dataclass(frozen=True)
class SentenceScore:
    sentence: str
    score: int
    position: int


def score_sentence(sentence: str, position: int, total: int) -> int:
    low = sentence.lower()
    n = len(sentence)
    score = 0

    # markers count once each when present (substring match)
    score += 3 * sum(1 for m in _ALL_IMPORTANCE if m in low)
    score += 2 * sum(1 for m in STRUCTURAL_MARKERS if m in low)
    score += sum(1 for m in QUESTION_MARKERS if m in low)

    if position == 0:
        score += 3
    if position == total - 1:
        score += 2
    if position < 3:
        score += 1

    if n > 100:
        score += 1
    if n > 200:
        score += 1

    if _DIGIT.search(sentence):
        score += 1
        if _DATE.search(sentence):
            score += 1

    if len(_CAPITALIZED.findall(sentence)) > 3:
        score += 1

    if "!" in sentence:
        score += 1
    if ":" in sentence:
        score += 1

    if n < 50:
        score -= 1
    if n > 300:
        score -= 1

    return score


def score_sentences(text: str) -> List[SentenceScore]:
    sents = split_sentences(text, min_chars=MIN_SENTENCE_CHARS)
    return [SentenceScore(sentence=s, score=score_sentence(s, i, len(sents)), position=i) for i, s in enumerate(sents)]


def extract_key_points(text: str, max_points: int = MAX_KEY_POINTS) -> List[str]:
    """Pick up to `max_points` representative sentences from the original text.

    Candidates are the eight best-scoring sentences (ties keep text order);
    a candidate too similar to one already chosen is skipped.
    """

    scored = sorted(score_sentences(text), key=lambda s: s.score, reverse=True)

    picked: List[str] = []
    for cand in scored[:CANDIDATE_POOL]:
        if len(picked) >= max_points:
            break
        if any(jaccard_similarity(p, cand.sentence) > SIMILARITY_THRESHOLD for p in picked):
            continue
        picked.append(cand.sentence)
    return picked
