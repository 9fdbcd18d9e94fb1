from __future__ import annotations

from enum import Enum
from typing import Union


class ComplexityTier(str, Enum):
    SIMPLE = "simple"
    STANDARD = "standard"
    EDUCATED = "educated"


class Domain(str, Enum):
    LEGAL = "legal"
    MEDICAL = "medical"
    TECHNICAL = "technical"
    ACADEMIC = "academic"
    FINANCIAL = "financial"
    AUTO = "auto"


TierLike = Union[ComplexityTier, str, None]
DomainLike = Union[Domain, str, None]


def resolve_tier(value: TierLike) -> ComplexityTier:
    """Coerce a tier name (any case) to a ComplexityTier; unknown -> STANDARD."""

    if isinstance(value, ComplexityTier):
        return value
    try:
        return ComplexityTier(str(value or "").strip().lower())
    except ValueError:
        return ComplexityTier.STANDARD


def resolve_domain(value: DomainLike) -> Domain:
    if isinstance(value, Domain):
        return value
    try:
        return Domain(str(value or "").strip().lower())
    except ValueError:
        return Domain.AUTO
