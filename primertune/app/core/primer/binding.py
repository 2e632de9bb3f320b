# File: primertune/app/core/primer/binding.py
# Version: v0.2.0
"""
Binding-site matcher.

Approach:
- Exact (ungapped, zero-mismatch) comparison of the primer against the target,
  and of the primer's reverse complement against the target.
- Forward hits: the primer sequence itself appears in the target.
- Reverse hits: the primer anneals to the given strand, i.e. its complement appears.
- Coordinates are 0-based half-open, in the frame of the target passed in.

Targets are treated as linear: a site spanning the origin of a circular plasmid
is not reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .sequence import Seq, seq_complement, seq_to_str


class PrimerDirection(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass(frozen=True)
class PrimerMatch:
    direction: PrimerDirection
    start: int
    end: int

    @property
    def range(self) -> range:
        return range(self.start, self.end)


def _find_all(needle: str, haystack: str) -> List[int]:
    """All start offsets of `needle` in `haystack`, overlapping occurrences included."""
    out: List[int] = []
    i = haystack.find(needle)
    while i != -1:
        out.append(i)
        i = haystack.find(needle, i + 1)
    return out


def match_to_seq(primer: Seq, target: Seq) -> List[PrimerMatch]:
    """Every exact site of the primer on the target, forward hits first, each by start."""
    n = len(primer)
    if n == 0 or n > len(target):
        return []
    t = seq_to_str(target)
    fwd = [PrimerMatch(PrimerDirection.FORWARD, i, i + n) for i in _find_all(seq_to_str(primer), t)]
    rev = [PrimerMatch(PrimerDirection.REVERSE, i, i + n) for i in _find_all(seq_to_str(seq_complement(primer)), t)]
    return fwd + rev
