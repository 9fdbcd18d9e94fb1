from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass, field
from datetime import date
from pathlib import Path
from typing import List, Optional

from .analysis import compute_evaluation, readability_analysis
from .keypoints import extract_key_points
from .pdf_utils import load_document
from .readability import ReadabilityMetrics, compute_readability, estimate_reading_time
from .simplify import simplify_text
from .tiers import ComplexityTier, Domain, resolve_domain, resolve_tier


logger = logging.getLogger(__name__)


EXAMPLES = {
    "legal": (
        "WHEREAS, the Party of the First Part hereby grants to the Party of the Second Part, "
        "pursuant to the aforementioned agreement, the right to utilize the premises. "
        "Notwithstanding any provision herein, the tenant shall be liable for any breach of this "
        "agreement, and the landlord may terminate the lease forthwith."
    ),
    "medical": (
        "Patient presents with acute myocardial infarction and severe dyspnea. "
        "History of hypertension and gastritis is noted. "
        "Anticoagulant therapy is contraindicated due to the fact that the patient has a bleeding risk, "
        "and the prognosis depends on prompt treatment."
    ),
    "technical": (
        "The REST API utilizes OAuth 2.0 authentication to authorize requests. "
        "In order to optimize latency, the infrastructure was redesigned by the platform team, "
        "which facilitates scalability across regions. "
        "Clients must authenticate prior to calling deprecated endpoints."
    ),
}


class ClarifyError(ValueError):
    pass


class TextTooShortError(ClarifyError):
    pass


class TextTooLongError(ClarifyError):
    pass


@dataclass
class ClarifyOptions:
    domain: Domain = Domain.AUTO
    tier: ComplexityTier = ComplexityTier.STANDARD
    min_chars: int = 10
    max_chars: int = 10_000
    words_per_minute: int = 200
    include_key_points: bool = True

    def __post_init__(self) -> None:
        self.domain = resolve_domain(self.domain)
        self.tier = resolve_tier(self.tier)


@dataclass
class ClarifyResult:
    original: str
    clarified: str
    key_points: List[str]
    domain: str
    tier: str
    engine: str
    processing_ms: float
    readability_before: ReadabilityMetrics
    readability_after: ReadabilityMetrics
    reading_time_minutes: int
    original_length: int = field(init=False)
    clarified_length: int = field(init=False)

    def __post_init__(self) -> None:
        self.original_length = len(self.original)
        self.clarified_length = len(self.clarified)


@dataclass
class PipelineOutputs:
    clarified_path: str
    key_points_path: str
    analysis_json_path: str


def check_input(text: str, opts: ClarifyOptions) -> str:
    """Apply the caller-side length policy and return the stripped text."""

    stripped = (text or "").strip()
    if not stripped:
        raise TextTooShortError("Please enter some text to clarify.")
    if len(stripped) < opts.min_chars:
        raise TextTooShortError(f"Text too short. Please enter at least {opts.min_chars} characters.")
    if len(stripped) > opts.max_chars:
        raise TextTooLongError(f"Text too long. Please keep it under {opts.max_chars:,} characters.")
    return stripped


def clarify(text: str, opts: ClarifyOptions | None = None) -> ClarifyResult:
    if opts is None:
        opts = ClarifyOptions()

    source = check_input(text, opts)

    start = time.perf_counter()
    clarified = simplify_text(source, opts.domain, opts.tier)
    key_points = extract_key_points(source) if opts.include_key_points else []
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    logger.info(
        "clarified %d -> %d chars (%s/%s) in %.1fms, %d key point(s)",
        len(source), len(clarified), opts.domain.value, opts.tier.value, elapsed_ms, len(key_points),
    )

    return ClarifyResult(
        original=source,
        clarified=clarified,
        key_points=key_points,
        domain=opts.domain.value,
        tier=opts.tier.value,
        engine="fallback",
        processing_ms=elapsed_ms,
        readability_before=compute_readability(source),
        readability_after=compute_readability(clarified),
        reading_time_minutes=estimate_reading_time(clarified, opts.words_per_minute),
    )


def download_filename(today: date | None = None) -> str:
    return f"claria-clarified-{(today or date.today()).isoformat()}.txt"


def result_to_dict(result: ClarifyResult) -> dict:
    data = asdict(result)
    data["evaluation"] = asdict(compute_evaluation(result.original, result.clarified))
    return data


def run_pipeline(
    input_path: str | Path,
    out_dir: str | Path,
    opts: ClarifyOptions | None = None,
    max_pages: Optional[int] = None,
) -> PipelineOutputs:
    if opts is None:
        opts = ClarifyOptions()

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1) Load
    text = load_document(input_path, max_pages=max_pages)
    logger.info("loaded %d chars from %s", len(text), input_path)

    # 2) Clarify (+ key points from the original text)
    result = clarify(text, opts)

    clarified_path = out_dir / "clarified.txt"
    clarified_path.write_text(result.clarified, encoding="utf-8")

    key_points_path = out_dir / "key_points.txt"
    key_points_path.write_text("\n".join(f"- {p}" for p in result.key_points), encoding="utf-8")

    # 3) Analysis
    analysis = {
        "options": {
            "domain": opts.domain.value,
            "tier": opts.tier.value,
            "words_per_minute": opts.words_per_minute,
        },
        "engine": result.engine,
        "processing_ms": result.processing_ms,
        "key_points": result.key_points,
        "metrics": {
            "original": readability_analysis(result.original, opts.words_per_minute),
            "clarified": readability_analysis(result.clarified, opts.words_per_minute),
        },
        "evaluation": asdict(compute_evaluation(result.original, result.clarified)),
    }

    analysis_json_path = out_dir / "analysis.json"
    analysis_json_path.write_text(json.dumps(analysis, ensure_ascii=False, indent=2), encoding="utf-8")

    return PipelineOutputs(
        clarified_path=str(clarified_path),
        key_points_path=str(key_points_path),
        analysis_json_path=str(analysis_json_path),
    )
