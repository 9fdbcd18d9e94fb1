from itertools import combinations

from offline_clarifier.keypoints import extract_key_points, score_sentence, score_sentences
from offline_clarifier.text_utils import jaccard_similarity, split_sentences


CONTRACT = (
    "This agreement sets out the obligations of both parties in detail. "
    "The tenant must pay the rent on the first day of each month. "
    "The tenant must pay the rent on the first day of every month. "
    "Late payments incur a penalty fee of fifty dollars per week. "
    "Warning: the deposit is forfeited if the property is damaged! "
    "The landlord shall repair the heating system within 14 days of notice. "
    "Either party may end the lease with sixty days written notice. "
    "Pets are allowed only with prior written approval from the owner. "
    "The key handover happens on 01/09/2025 at the main office."
)


def test_empty_text_has_no_key_points():
    assert extract_key_points("") == []


def test_short_fragments_are_ignored():
    assert extract_key_points("Hi. Ok. This sentence is definitely long enough.") == [
        "This sentence is definitely long enough"
    ]


def test_priority_sentence_comes_first():
    points = extract_key_points("This is very important information. You need to know this.")
    assert points[0] == "This is very important information"


def test_at_most_five_points_drawn_from_text():
    points = extract_key_points(CONTRACT)
    assert 0 < len(points) <= 5
    sentences = set(split_sentences(CONTRACT))
    assert all(p in sentences for p in points)


def test_near_duplicates_are_not_both_selected():
    points = extract_key_points(CONTRACT)
    each = "The tenant must pay the rent on the first day of each month"
    every = "The tenant must pay the rent on the first day of every month"
    assert not (each in points and every in points)
    for a, b in combinations(points, 2):
        assert jaccard_similarity(a, b) <= 0.70


def test_date_scores_above_plain_number():
    with_date = score_sentence("The meeting happens on 12/05/2024 at noon today", 5, 10)
    without = score_sentence("The meeting happens on the fifth at noon today", 5, 10)
    assert with_date - without == 2


def test_position_bonuses():
    first = score_sentence("plain words here, nothing else at all", 0, 5)
    middle = score_sentence("plain words here, nothing else at all", 3, 5)
    last = score_sentence("plain words here, nothing else at all", 4, 5)
    assert first - middle == 4
    assert last - middle == 2


def test_scores_keep_original_positions():
    scored = score_sentences(CONTRACT)
    assert [s.position for s in scored] == list(range(len(scored)))


PLAIN = "the garden looks green and calm after a long spell of rain"


def test_marker_weights():
    base = score_sentence(PLAIN, 5, 10)
    assert base == 0
    assert score_sentence(PLAIN + " essential", 5, 10) - base == 3
    assert score_sentence(PLAIN + " essential essential", 5, 10) - base == 3
    assert score_sentence(PLAIN + " warning", 5, 10) - base == 2
    assert score_sentence(PLAIN + " somehow", 5, 10) - base == 1


def test_exclamation_and_colon_bonuses():
    base = score_sentence(PLAIN, 5, 10)
    assert score_sentence(PLAIN + "!", 5, 10) - base == 1
    assert score_sentence(PLAIN.replace(" and", ":"), 5, 10) - base == 1


def test_many_capitalized_words_bonus():
    four = score_sentence("Anna Bob Carl Dave walked through the garden after a long spell of rain", 5, 10)
    three = score_sentence("Anna Bob Carl walked through the garden after a long spell of rain", 5, 10)
    assert three == 0
    assert four == 1


def test_length_adjustments():
    def filler(n):
        return " ".join(["garden"] * n)

    # 69, 104, 209 and 307 characters
    scores = [score_sentence(filler(n), 5, 10) for n in (10, 15, 30, 44)]
    assert scores == [0, 1, 2, 1]


QUIET = "a quiet river runs past the old mill beside the village green"
BOATS = "small boats drift slowly across the lake during the autumn months"


def test_candidates_limited_to_top_eight():
    repeats = [
        f"the essential garden looks green and calm after the long rain {w}"
        for w in ("today", "again", "still", "often", "truly", "fully", "early")
    ]
    text = ". ".join(repeats + [QUIET, BOATS]) + "."
    # the repeats fill seven pool slots and BOATS takes the eighth; QUIET ranks ninth
    assert extract_key_points(text) == [repeats[0], BOATS]


def test_equal_scores_keep_text_order():
    sentences = [
        QUIET,
        BOATS,
        "the baker opens his shop early to sell fresh bread and rolls",
        "children play football in the park near the old stone bridge",
        "my aunt grows tomatoes and beans in a sunny corner of her yard",
        "the night train leaves the northern station at a slow pace",
        "an old dog sleeps beside the warm fire through the cold winter",
    ]
    points = extract_key_points(". ".join(sentences) + ".")
    assert points == [sentences[0], sentences[6], sentences[1], sentences[2], sentences[3]]
