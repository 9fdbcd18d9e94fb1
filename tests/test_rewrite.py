import pytest

from offline_clarifier.lexicon import AFFIX_EXCEPTIONS, JARGON, PROTECTED_WORDS, is_protected, source_phrases
from offline_clarifier.rewrite import apply_affix_patterns, replace_jargon, rewrite
from offline_clarifier.tiers import ComplexityTier


def test_every_tier_maps_the_same_source_phrases():
    simple = set(JARGON[ComplexityTier.SIMPLE])
    assert simple == set(JARGON[ComplexityTier.STANDARD])
    assert simple == set(JARGON[ComplexityTier.EDUCATED])


def test_simple_jargon_replacement():
    out = replace_jargon("utilize this methodology to facilitate the process", ComplexityTier.SIMPLE)
    assert out == "use this way of doing to help the process"


def test_replacement_is_case_insensitive():
    assert replace_jargon("Hypertension noted", ComplexityTier.SIMPLE) == "high blood pressure noted"


def test_replacement_respects_word_boundaries():
    assert replace_jargon("equityholders", ComplexityTier.SIMPLE) == "equityholders"


def test_multi_word_phrase_spans_line_breaks():
    assert replace_jargon("myocardial\ninfarction", ComplexityTier.STANDARD) == "heart attack"


def test_later_entries_rewrite_earlier_replacements():
    # infrastructure -> foundational architecture -> foundational system architecture
    assert replace_jargon("infrastructure", ComplexityTier.EDUCATED) == "foundational system architecture"


def test_unknown_tier_uses_standard_dictionary():
    assert replace_jargon("prognosis", "nonsense") == "expected outcome"
    assert source_phrases("nonsense") == source_phrases(ComplexityTier.STANDARD)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("gastroenteritis", "gastroenter inflammation"),
        ("hyperactive", "above normal active"),
        ("tonsillectomy", "tonsill surgical removal"),
        ("multicolored", "many colored"),
    ],
)
def test_affix_expansion(word, expected):
    assert apply_affix_patterns(word) == expected


def test_affix_needs_a_real_root():
    assert apply_affix_patterns("bit big post") == "bit big post"


def test_affix_skips_protected_words():
    assert "presents" in AFFIX_EXCEPTIONS
    assert apply_affix_patterns("Patient presents", AFFIX_EXCEPTIONS) == "Patient presents"
    assert "pressure" in PROTECTED_WORDS


def test_affix_pass_is_tier_invariant():
    outs = {rewrite("Signs of tonsillitis", t) for t in ComplexityTier}
    assert outs == {"Signs of tonsill inflammation"}


@pytest.mark.parametrize("tier", list(ComplexityTier))
def test_replacement_words_are_protected_for_every_tier(tier):
    # "preventing" only appears in an educated replacement ("clot-preventing agent")
    assert rewrite("Stop preventing it", tier) == "Stop preventing it"


@pytest.mark.parametrize(
    "word",
    [
        "preventing", "prevented", "presenting", "pressed", "prepares", "submits",
        "submitting", "interested", "interviews", "unions", "preferred",
    ],
)
def test_inflected_exceptions_are_left_alone(word):
    assert is_protected(word, AFFIX_EXCEPTIONS)
    assert apply_affix_patterns(word, AFFIX_EXCEPTIONS) == word


def test_inflection_matching_does_not_protect_real_affixes():
    assert not is_protected("preheated")
    assert rewrite("The oven was preheated", ComplexityTier.STANDARD) == "The oven was before heated"


def test_dictionary_terms_beat_affix_pass():
    assert rewrite("gastritis", ComplexityTier.SIMPLE) == "stomach swelling"
    assert rewrite("gastritis", ComplexityTier.STANDARD) == "stomach inflammation"
    assert rewrite("gastritis", ComplexityTier.EDUCATED) == "gastric inflammation"


def test_rewrite_empty():
    assert rewrite("", ComplexityTier.SIMPLE) == ""
