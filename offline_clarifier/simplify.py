from __future__ import annotations

import logging
import re
from functools import lru_cache

from .lexicon import CONNECTIVE_PHRASES
from .rewrite import rewrite
from .structure import break_long_sentences, simplify_structure
from .text_utils import clean_formatting
from .tiers import ComplexityTier, DomainLike, TierLike, resolve_domain, resolve_tier


logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _connective_pattern(phrase: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(phrase)}\b", flags=re.IGNORECASE)


def simplify_phrases(text: str) -> str:
    """Replace verbose connectives ("in order to" -> "to"); same for every tier."""

    out = text
    for phrase, replacement in CONNECTIVE_PHRASES.items():
        out = _connective_pattern(phrase).sub(lambda _m, r=replacement: r, out)
    return out


def simplify_text(text: str, domain: DomainLike = None, tier: TierLike = ComplexityTier.STANDARD) -> str:
    """Offline simplifier: jargon + affixes, connectives, sentence breaking, active voice.

    Deterministic; no model involved. `domain` is accepted for symmetry with
    the model-backed paths and does not change which dictionary applies.
    """

    if not text:
        return ""

    t = resolve_tier(tier)
    logger.debug("simplify: domain=%s tier=%s chars=%d", resolve_domain(domain).value, t.value, len(text))

    out = rewrite(text, t)
    out = simplify_phrases(out)
    out = break_long_sentences(out, t)
    out = simplify_structure(out, t)
    return clean_formatting(out)


simplify = simplify_text
