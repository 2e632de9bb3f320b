# File: primertune/app/core/primer/record.py
# Version: v0.1.0
"""
PrimerRecord: one row of the primer table.

Holds the full untrimmed input, the tuning state of both ends, and everything
derived from them (effective primer, removed flanks, metrics, binding sites).

Mutations follow a two-phase pattern:
  1. mutate + `run_calcs` (effective sequence and metrics, in one step)
  2. `sync_matches` against the caller's targets, once the sequence is final
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .binding import PrimerDirection, PrimerMatch, match_to_seq
from .metrics import PrimerMetrics, compute_metrics
from .parameters import IonConcentrations, ScoringParameters
from .sequence import Seq, seq_from_str
from .tuning import PrimerEnd, TuneSetting, decrement_offset, increment_offset, split_trimmed


@dataclass
class Primer:
    sequence: Seq = ()
    direction: PrimerDirection = PrimerDirection.FORWARD

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass
class PrimerRecord:
    sequence_input: Seq = ()
    description: str = "New primer"
    tunable_5p: TuneSetting = field(default_factory=TuneSetting.disabled)
    tunable_3p: TuneSetting = field(default_factory=TuneSetting.disabled)
    primer: Primer = field(default_factory=Primer)
    metrics: Optional[PrimerMetrics] = None
    seq_removed_5p: Seq = ()
    seq_removed_3p: Seq = ()
    matches: Dict[str, List[PrimerMatch]] = field(default_factory=dict)

    @property
    def is_tuned(self) -> bool:
        return self.tunable_5p.is_enabled or self.tunable_3p.is_enabled

    @property
    def match_count(self) -> int:
        return sum(len(m) for m in self.matches.values())

    def tune_setting(self, end: PrimerEnd) -> TuneSetting:
        return self.tunable_5p if end == PrimerEnd.FIVE_PRIME else self.tunable_3p

    def _set_tune(self, end: PrimerEnd, setting: TuneSetting) -> None:
        if end == PrimerEnd.FIVE_PRIME:
            self.tunable_5p = setting
        else:
            self.tunable_3p = setting

    def run_calcs(self, ions: IonConcentrations, scoring: Optional[ScoringParameters] = None) -> None:
        """Re-derive the effective primer, removed flanks and metrics."""
        removed_5p, effective, removed_3p = split_trimmed(self.sequence_input, self.tunable_5p, self.tunable_3p)
        self.seq_removed_5p = removed_5p
        self.seq_removed_3p = removed_3p
        self.primer = Primer(effective, self.primer.direction)
        self.metrics = compute_metrics(effective, ions, scoring) if effective else None

    def set_sequence_text(
        self, text: str, ions: IonConcentrations, scoring: Optional[ScoringParameters] = None
    ) -> None:
        self.sequence_input = seq_from_str(text)
        self.run_calcs(ions, scoring)

    def toggle_tune(
        self, end: PrimerEnd, ions: IonConcentrations, scoring: Optional[ScoringParameters] = None
    ) -> None:
        self._set_tune(end, self.tune_setting(end).toggle())
        self.run_calcs(ions, scoring)

    def tune(
        self,
        end: PrimerEnd,
        step: int,
        ions: IonConcentrations,
        scoring: Optional[ScoringParameters] = None,
    ) -> bool:
        """
        Move the trim offset of `end` by one base: step > 0 trims more, step < 0
        restores. Returns False (and leaves the record untouched) if the request
        was clamped away.
        """
        current = self.tune_setting(end)
        if step > 0:
            other = self.tunable_3p if end == PrimerEnd.FIVE_PRIME else self.tunable_5p
            updated = increment_offset(current, other, len(self.sequence_input))
        elif step < 0:
            updated = decrement_offset(current)
        else:
            updated = current
        if updated == current:
            return False
        self._set_tune(end, updated)
        self.run_calcs(ions, scoring)
        return True

    def sync_matches(self, targets: Mapping[str, Seq]) -> None:
        """Replace binding sites against every target (empty targets are skipped)."""
        self.matches = {
            name: match_to_seq(self.primer.sequence, target) for name, target in targets.items() if target
        }
