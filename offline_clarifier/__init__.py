"""Offline Clarifier.

Rule-based fallback for plain-language rewriting when no model is available:
- Three-tier jargon substitution + affix expansion
- Connective phrase shortening, sentence breaking, passive-to-active rewrites
- Key-point extraction from the original text
- Flesch-Kincaid style readability metrics
"""
from __future__ import annotations

from .keypoints import extract_key_points
from .readability import ReadabilityMetrics, compute_readability
from .simplify import simplify_text
from .tiers import ComplexityTier, Domain

__all__ = [
    "ComplexityTier",
    "Domain",
    "ReadabilityMetrics",
    "compute_readability",
    "extract_key_points",
    "simplify_text",
]
