# File: primertune/app/core/primer/metrics.py
# Version: v0.1.0
"""
PrimerMetrics: every raw metric and score for one effective primer sequence.

`compute_metrics` is a pure function of (sequence, ions, scoring parameters);
metrics are always recomputed as a whole, never patched field by field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constraints import count_repeats, gc_3p_count, self_end_dimer, sequence_complexity
from .parameters import IonConcentrations, ScoringParameters
from .scoring import (
    ScoreBand,
    dimer_score,
    gc_3p_score,
    gc_score,
    quality_score,
    repeats_score,
    score_band,
    tm_score,
)
from .sequence import Seq
from .thermodynamics import gc_portion, tm_nearest_neighbor


@dataclass(frozen=True)
class PrimerMetrics:
    melting_temp: float
    gc_portion: float
    gc_3p_count: int
    self_end_dimer: int
    repeats: int
    complexity: float
    tm_score: float
    gc_score: float
    gc_3p_score: float
    dimer_score: float
    repeats_score: float
    complexity_score: float
    quality_score: float

    @property
    def quality_band(self) -> ScoreBand:
        return score_band(self.quality_score)

    def bands(self) -> dict:
        """Display band per scored column."""
        return {
            "quality": score_band(self.quality_score),
            "tm": score_band(self.tm_score),
            "gc": score_band(self.gc_score),
            "gc3p": score_band(self.gc_3p_score),
            "dimer": score_band(self.dimer_score),
            "repeats": score_band(self.repeats_score),
            "complexity": score_band(self.complexity_score),
        }


def compute_metrics(
    seq: Seq,
    ions: IonConcentrations,
    scoring: Optional[ScoringParameters] = None,
) -> PrimerMetrics:
    """Compute metrics for a non-empty primer sequence."""
    if not seq:
        raise ValueError("Cannot compute metrics for an empty sequence.")
    ctx = scoring or ScoringParameters()

    tm = tm_nearest_neighbor(seq, ions)
    gc = gc_portion(seq)
    gc_3p = gc_3p_count(seq)
    dimer = self_end_dimer(seq)
    repeats = count_repeats(seq)
    complexity = sequence_complexity(seq)

    tm_s = tm_score(tm, ctx)
    gc_s = gc_score(gc, ctx)
    gc_3p_s = gc_3p_score(gc_3p)
    dimer_s = dimer_score(dimer)
    repeats_s = repeats_score(repeats)
    complexity_s = complexity

    return PrimerMetrics(
        melting_temp=tm,
        gc_portion=gc,
        gc_3p_count=gc_3p,
        self_end_dimer=dimer,
        repeats=repeats,
        complexity=complexity,
        tm_score=tm_s,
        gc_score=gc_s,
        gc_3p_score=gc_3p_s,
        dimer_score=dimer_s,
        repeats_score=repeats_s,
        complexity_score=complexity_s,
        quality_score=quality_score(ctx, tm_s, gc_s, gc_3p_s, dimer_s, repeats_s, complexity_s),
    )
