"""Lexicon tables for the rule-based simplifier.

Three jargon dictionaries, one per ComplexityTier. Every tier maps the same
set of source phrases; the replacement becomes plainer from EDUCATED down to
SIMPLE. Dictionaries are applied in insertion order and a replacement may be
matched again by a later entry, so ordering matters.

The affix and connective tables are shared by all tiers.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import AbstractSet, FrozenSet, Mapping, Tuple

from .tiers import ComplexityTier, TierLike, resolve_tier


_SIMPLE_JARGON = {
    # Legal
    "pursuant to": "based on",
    "heretofore": "until now",
    "hereinafter": "from now on",
    "aforementioned": "this",
    "notwithstanding": "even though",
    "whereas": "because",
    "thereby": "so",
    "herein": "here",
    "forthwith": "right away",
    "ipso facto": "automatically",
    "inter alia": "among other things",
    "prima facie": "at first look",
    "breach": "breaking the deal",
    "liability": "being responsible",
    "plaintiff": "person suing",
    "defendant": "person being sued",
    "jurisdiction": "power of the court",

    # Medical
    "myocardial infarction": "heart attack",
    "cerebrovascular accident": "stroke",
    "hypertension": "high blood pressure",
    "hypotension": "low blood pressure",
    "tachycardia": "fast heartbeat",
    "bradycardia": "slow heartbeat",
    "dyspnea": "trouble breathing",
    "syncope": "fainting",
    "gastritis": "stomach swelling",
    "arthritis": "joint swelling",
    "dermatitis": "skin swelling",
    "bronchitis": "swollen airways",
    "analgesic": "pain medicine",
    "anticoagulant": "blood thinner",
    "contraindicated": "not safe to use",
    "prophylactic": "to prevent",
    "etiology": "cause",
    "prognosis": "what will happen",

    # Technical
    "utilize": "use",
    "implement": "do",
    "optimize": "make better",
    "facilitate": "help",
    "methodology": "way of doing",
    "infrastructure": "basic systems",
    "architecture": "structure",
    "authenticate": "prove who you are",
    "authorization": "permission",
    "deprecated": "old and not used",
    "latency": "delay",
    "scalability": "room to grow",

    # Academic
    "elucidate": "explain",
    "substantiate": "prove",
    "corroborate": "back up",
    "hypothesis": "guess",
    "empirical": "tested",
    "paradigm": "way of thinking",
    "ubiquitous": "everywhere",

    # Financial
    "amortization": "paying slowly",
    "liquidity": "cash available",
    "volatility": "price changes",
    "equity": "ownership",
    "collateral": "something promised for a loan",
    "diversification": "spreading out money",
}

_STANDARD_JARGON = {
    # Legal
    "pursuant to": "according to",
    "heretofore": "until now",
    "hereinafter": "from now on",
    "aforementioned": "mentioned earlier",
    "notwithstanding": "despite",
    "whereas": "while",
    "thereby": "by doing this",
    "herein": "in this document",
    "forthwith": "immediately",
    "ipso facto": "by that fact",
    "inter alia": "among other things",
    "prima facie": "at first glance",
    "breach": "breaking the agreement",
    "liability": "legal responsibility",
    "plaintiff": "person suing",
    "defendant": "person being sued",
    "jurisdiction": "court authority",

    # Medical
    "myocardial infarction": "heart attack",
    "cerebrovascular accident": "stroke",
    "hypertension": "high blood pressure",
    "hypotension": "low blood pressure",
    "tachycardia": "fast heart rate",
    "bradycardia": "slow heart rate",
    "dyspnea": "difficulty breathing",
    "syncope": "fainting",
    "gastritis": "stomach inflammation",
    "arthritis": "joint inflammation",
    "dermatitis": "skin inflammation",
    "bronchitis": "airway inflammation",
    "analgesic": "pain reliever",
    "anticoagulant": "blood thinner",
    "contraindicated": "not recommended",
    "prophylactic": "preventive",
    "etiology": "cause",
    "prognosis": "expected outcome",

    # Technical
    "utilize": "use",
    "implement": "put in place",
    "optimize": "improve",
    "facilitate": "make easier",
    "methodology": "research method",
    "infrastructure": "basic systems",
    "architecture": "system design",
    "authenticate": "verify identity",
    "authorization": "access permission",
    "deprecated": "no longer supported",
    "latency": "response delay",
    "scalability": "ability to handle growth",

    # Academic
    "elucidate": "explain clearly",
    "substantiate": "support with evidence",
    "corroborate": "confirm",
    "hypothesis": "theory to test",
    "empirical": "based on observation",
    "paradigm": "framework",
    "ubiquitous": "found everywhere",

    # Financial
    "amortization": "gradual payment",
    "liquidity": "available cash",
    "volatility": "price instability",
    "equity": "ownership value",
    "collateral": "loan security",
    "diversification": "spreading risk",
}

_EDUCATED_JARGON = {
    # Legal
    "pursuant to": "in accordance with",
    "heretofore": "up to this point",
    "hereinafter": "from this point forward",
    "aforementioned": "previously mentioned",
    "notwithstanding": "regardless of",
    "whereas": "given that",
    "thereby": "by means of which",
    "herein": "within this document",
    "forthwith": "without delay",
    "ipso facto": "by the very fact",
    "inter alia": "among other matters",
    "prima facie": "on first examination",
    "breach": "contract violation",
    "liability": "legal obligation",
    "plaintiff": "claimant",
    "defendant": "respondent",
    "jurisdiction": "legal authority",

    # Medical
    "myocardial infarction": "heart muscle damage",
    "cerebrovascular accident": "brain blood flow disruption",
    "hypertension": "elevated blood pressure",
    "hypotension": "reduced blood pressure",
    "tachycardia": "elevated heart rate",
    "bradycardia": "reduced heart rate",
    "dyspnea": "respiratory difficulty",
    "syncope": "transient loss of consciousness",
    "gastritis": "gastric inflammation",
    "arthritis": "articular inflammation",
    "dermatitis": "cutaneous inflammation",
    "bronchitis": "bronchial inflammation",
    "analgesic": "pain-relieving agent",
    "anticoagulant": "clot-preventing agent",
    "contraindicated": "medically inadvisable",
    "prophylactic": "preventive treatment",
    "etiology": "underlying cause",
    "prognosis": "clinical outlook",

    # Technical: professionals keep most of these terms
    "utilize": "utilize",
    "implement": "implement",
    "optimize": "optimize",
    "facilitate": "enable",
    "methodology": "research methodology",
    "infrastructure": "foundational architecture",
    "architecture": "system architecture",
    "authenticate": "verify credentials",
    "authorization": "access control",
    "deprecated": "officially discouraged",
    "latency": "response latency",
    "scalability": "capacity for growth",

    # Academic
    "elucidate": "clarify",
    "substantiate": "provide evidence for",
    "corroborate": "independently confirm",
    "hypothesis": "testable proposition",
    "empirical": "observation-based",
    "paradigm": "conceptual framework",
    "ubiquitous": "pervasive",

    # Financial
    "amortization": "systematic repayment",
    "liquidity": "asset convertibility",
    "volatility": "price variability",
    "equity": "ownership interest",
    "collateral": "pledged security",
    "diversification": "risk distribution",
}


JARGON: Mapping[ComplexityTier, Mapping[str, str]] = MappingProxyType({
    ComplexityTier.SIMPLE: MappingProxyType(_SIMPLE_JARGON),
    ComplexityTier.STANDARD: MappingProxyType(_STANDARD_JARGON),
    ComplexityTier.EDUCATED: MappingProxyType(_EDUCATED_JARGON),
})


# fragment -> plain-language expansion
SUFFIX_PATTERNS: Mapping[str, str] = MappingProxyType({
    "itis": "inflammation",
    "osis": "condition",
    "emia": "blood condition",
    "algia": "pain",
    "ology": "study of",
    "ization": "process of",
    "ification": "making into",
    "ectomy": "surgical removal",
    "otomy": "cutting into",
    "scopy": "examination with instrument",
})

PREFIX_PATTERNS: Mapping[str, str] = MappingProxyType({
    "hyper": "above normal",
    "hypo": "below normal",
    "anti": "against",
    "pre": "before",
    "post": "after",
    "inter": "between",
    "intra": "within",
    "extra": "outside",
    "sub": "under",
    "super": "above",
    "multi": "many",
    "uni": "one",
    "bi": "two",
    "tri": "three",
})

# Everyday words that merely look like they carry one of the affixes above.
# Regular inflections (-s, -es, -ed, -ing) of these are matched by is_protected;
# irregular spellings are listed.
AFFIX_EXCEPTIONS: FrozenSet[str] = frozenset({
    # pre-
    "present", "presents", "presented", "presence", "presentation", "preserve",
    "president", "press", "pressure", "pretty", "prevent", "prevents",
    "prevention", "preventive", "previous", "previously", "premium", "prefer",
    "preferred", "preferring", "preference", "prepare", "prepared", "precise",
    "precisely", "predict", "pregnant", "pregnancy", "prescribe", "prescribed",
    "prescription", "premise", "premises",
    # post-
    "poster", "postal", "posture",
    # inter-
    "interest", "interests", "interesting", "internal", "internet", "interview",
    "interpret", "interpretation", "interval",
    # sub-, super-
    "subject", "submit", "submitted", "submitting", "substance", "subtle", "subway",
    "superb", "superior", "supervisor",
    # uni-, bi-, tri-
    "unit", "units", "united", "union", "unique", "universal", "universe",
    "university", "uniform", "bill", "bills", "binding", "birth", "biased",
    "biggest", "trial", "trials", "tribe", "trick", "triple", "trigger",
    # anti-, hypo-
    "antique", "anticipate", "anticipated",
    # suffixes
    "diagnosis", "technology", "apology", "academia", "nostalgia",
    "organization", "organizations", "specification", "specifications",
})

CONNECTIVE_PHRASES: Mapping[str, str] = MappingProxyType({
    "in order to": "to",
    "due to the fact that": "because",
    "at this point in time": "now",
    "in the event that": "if",
    "with regard to": "about",
    "with respect to": "about",
    "in connection with": "about",
    "for the purpose of": "to",
    "in accordance with": "following",
    "with the exception of": "except for",
    "subsequent to": "after",
    "prior to": "before",
    "in lieu of": "instead of",
    "by virtue of": "because of",
    "in consideration of": "because of",
})


def jargon_for(tier: TierLike) -> Mapping[str, str]:
    """Return the jargon dictionary for `tier`, falling back to STANDARD."""

    return JARGON.get(resolve_tier(tier), JARGON[ComplexityTier.STANDARD])


_WORD = re.compile(r"[A-Za-z]+")


def _build_vocabulary() -> FrozenSet[str]:
    words = set()
    for table in JARGON.values():
        for replacement in table.values():
            words.update(w.lower() for w in _WORD.findall(replacement))
    return frozenset(words)


# Words from every tier's replacement phrases, so the affix pass is the same
# whichever dictionary ran before it.
REPLACEMENT_VOCABULARY: FrozenSet[str] = _build_vocabulary()

PROTECTED_WORDS: FrozenSet[str] = REPLACEMENT_VOCABULARY | AFFIX_EXCEPTIONS

_INFLECTIONS = ("ing", "ed", "es", "s")


def is_protected(word: str, protected: AbstractSet[str] = PROTECTED_WORDS) -> bool:
    """True if `word`, or its stem with a common inflection removed, is protected."""

    w = word.lower()
    if w in protected:
        return True
    for ending in _INFLECTIONS:
        if w.endswith(ending) and len(w) > len(ending) + 2:
            stem = w[: -len(ending)]
            if stem in protected or stem + "e" in protected:
                return True
    return False


def source_phrases(tier: TierLike) -> Tuple[str, ...]:
    return tuple(jargon_for(tier).keys())
