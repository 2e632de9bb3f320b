# File: primertune/app/core/primer/scoring.py
# Version: v0.2.0
"""
Per-category primer scores and the composite quality score.

All scores are in [0, 1], higher is better. Components:
- Tm: linear falloff with distance from the ideal Tm
- GC: 1 inside the ideal band, linear falloff outside it
- 3' GC: 2-3 ideal, 1 or 4 marginal, otherwise poor
- Self-end dimer and repeats: 1 up to a small allowance, then linear penalty
- Complexity: used as-is

Quality is the weighted mean of the components (weights in ScoringParameters).
A weighted mean never decreases when one component increases, so improving any
single metric can't lower the quality score.
"""

from __future__ import annotations

from enum import Enum

from .constants import DEFAULT_DIMER_OK, DEFAULT_REPEATS_OK, SCORE_COLOR_THRESH
from .parameters import ScoringParameters


class ScoreBand(str, Enum):
    GOOD = "good"
    MARGINAL = "marginal"
    BAD = "bad"


def _clamp(a: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, a))


def score_band(score: float) -> ScoreBand:
    """Bucket a score for display: good > 0.8, marginal > 0.5, bad otherwise."""
    if score > SCORE_COLOR_THRESH[1]:
        return ScoreBand.GOOD
    if score > SCORE_COLOR_THRESH[0]:
        return ScoreBand.MARGINAL
    return ScoreBand.BAD


def tm_score(tm: float, ctx: ScoringParameters) -> float:
    return _clamp(1.0 - abs(tm - ctx.tmIdeal) / ctx.tmTolerance)


def gc_score(gc: float, ctx: ScoringParameters) -> float:
    if ctx.gcMin <= gc <= ctx.gcMax:
        return 1.0
    dist = min(abs(gc - ctx.gcMin), abs(gc - ctx.gcMax))
    return _clamp(1.0 - dist / ctx.gcTolerance)


def gc_3p_score(count: int) -> float:
    # Sources differ on whether 4 is acceptable
    if count in (2, 3):
        return 1.0
    if count in (1, 4):
        return 0.6
    return 0.2


def dimer_score(run: int) -> float:
    return _clamp(1.0 - 0.25 * max(0, run - DEFAULT_DIMER_OK))


def repeats_score(count: int) -> float:
    return _clamp(1.0 - 0.15 * max(0, count - DEFAULT_REPEATS_OK))


def quality_score(
    ctx: ScoringParameters,
    tm_s: float,
    gc_s: float,
    gc_3p_s: float,
    dimer_s: float,
    repeats_s: float,
    complexity_s: float,
) -> float:
    w = ctx.weights
    total = (
        w.wTm * tm_s
        + w.wGC * gc_s
        + w.w3p * gc_3p_s
        + w.wDimer * dimer_s
        + w.wRepeats * repeats_s
        + w.wComplexity * complexity_s
    )
    return _clamp(total / w.total())
