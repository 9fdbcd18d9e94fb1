from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .readability import compute_readability, estimate_reading_time, text_complexity_score


@dataclass(frozen=True)
class EvaluationMetrics:
    length_ratio: float
    grade_before: int
    grade_after: int
    grade_shift: int
    complexity_before: int
    complexity_after: int


def compute_evaluation(original: str, clarified: str) -> EvaluationMetrics:
    before = compute_readability(original)
    after = compute_readability(clarified)

    ratio = (len(clarified) / len(original)) if original else 0.0

    return EvaluationMetrics(
        length_ratio=float(ratio),
        grade_before=before.grade_level,
        grade_after=after.grade_level,
        grade_shift=after.grade_level - before.grade_level,
        complexity_before=text_complexity_score(original),
        complexity_after=text_complexity_score(clarified),
    )


def readability_analysis(text: str, words_per_minute: int = 200) -> Dict[str, Any]:
    """JSON-ready readability block for one text."""

    return {
        "readability": asdict(compute_readability(text)),
        "reading_time_minutes": estimate_reading_time(text, words_per_minute),
        "complexity_score": text_complexity_score(text),
        "characters": len(text),
    }
