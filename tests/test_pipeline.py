import json
from datetime import date

import pytest

from offline_clarifier.pdf_utils import DocumentLoadError, load_document
from offline_clarifier.pipeline import (
    EXAMPLES,
    ClarifyOptions,
    TextTooLongError,
    TextTooShortError,
    clarify,
    download_filename,
    result_to_dict,
    run_pipeline,
)
from offline_clarifier.tiers import ComplexityTier, Domain


def test_options_coerce_strings():
    opts = ClarifyOptions(domain="LEGAL", tier="Simple")
    assert opts.domain is Domain.LEGAL
    assert opts.tier is ComplexityTier.SIMPLE

    fallback = ClarifyOptions(domain="poetry", tier="expert")
    assert fallback.domain is Domain.AUTO
    assert fallback.tier is ComplexityTier.STANDARD


@pytest.mark.parametrize("text", ["", "   ", "Too short"])
def test_short_input_rejected(text):
    with pytest.raises(TextTooShortError):
        clarify(text)


def test_long_input_rejected():
    with pytest.raises(TextTooLongError):
        clarify("a" * 10_001)


def test_clarify_result():
    result = clarify(EXAMPLES["medical"], ClarifyOptions(domain=Domain.MEDICAL, tier=ComplexityTier.SIMPLE))
    assert "heart attack" in result.clarified
    assert result.original_length == len(EXAMPLES["medical"])
    assert result.clarified_length == len(result.clarified)
    assert 0 < len(result.key_points) <= 5
    assert result.engine == "fallback"
    assert result.tier == "simple"
    assert result.readability_before.word_count > 0
    assert result.processing_ms >= 0.0


def test_key_points_can_be_skipped():
    result = clarify(EXAMPLES["legal"], ClarifyOptions(include_key_points=False))
    assert result.key_points == []


def test_result_to_dict_is_json_ready():
    data = result_to_dict(clarify(EXAMPLES["technical"]))
    encoded = json.dumps(data)
    assert "evaluation" in data
    assert "grade_before" in encoded


def test_download_filename():
    assert download_filename(date(2024, 1, 2)) == "claria-clarified-2024-01-02.txt"


def test_run_pipeline_writes_outputs(tmp_path):
    src = tmp_path / "notice.txt"
    src.write_text(EXAMPLES["legal"], encoding="utf-8")

    outputs = run_pipeline(src, tmp_path / "out", ClarifyOptions(domain="legal", tier="simple"))

    clarified = (tmp_path / "out" / "clarified.txt").read_text(encoding="utf-8")
    assert "based on" in clarified.lower()
    assert outputs.key_points_path.endswith("key_points.txt")

    analysis = json.loads((tmp_path / "out" / "analysis.json").read_text(encoding="utf-8"))
    assert analysis["options"] == {"domain": "legal", "tier": "simple", "words_per_minute": 200}
    assert set(analysis["metrics"]) == {"original", "clarified"}
    assert analysis["metrics"]["original"]["readability"]["word_count"] > 0


def test_load_document_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.txt")

    odd = tmp_path / "data.xlsx"
    odd.write_bytes(b"\x00")
    with pytest.raises(DocumentLoadError):
        load_document(odd)


def test_load_document_strips_text(tmp_path):
    src = tmp_path / "a.md"
    src.write_text("\n  Some text here.  \n", encoding="utf-8")
    assert load_document(src) == "Some text here."
