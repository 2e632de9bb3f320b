# File: primertune/app/core/primer/constraints.py
# Version: v0.2.0
"""
Sequence-level primer checks (raw counts, not scores).

Includes:
- 3' end stability (G/C count in the terminal window)
- Self-end dimer potential (3' run that can anneal to a copy of the primer)
- Repeats (homopolymer / dinucleotide runs, repeated triplets)
- Trinucleotide complexity
"""

from __future__ import annotations

from typing import Set

from .constants import (
    DEFAULT_3P_END_LEN,
    DEFAULT_DIMER_3P_WINDOW,
    DEFAULT_DINUC_REPEAT_MAX,
    DEFAULT_HOMOPOLYMER_MAX,
)
from .sequence import Seq, seq_complement, seq_to_str
from .thermodynamics import gc_count


def gc_3p_count(seq: Seq, window_len: int = DEFAULT_3P_END_LEN) -> int:
    """G/C count among the last `window_len` nucleotides (whole sequence if shorter)."""
    return gc_count(seq[-window_len:])


def self_end_dimer(seq: Seq, window_len: int = DEFAULT_DIMER_3P_WINDOW) -> int:
    """
    Longest 3'-terminal run (up to `window_len` nt) whose reverse complement
    occurs anywhere in the primer.

    A run of k means the last k bases of one primer copy can pair, without gaps,
    with k consecutive bases of another copy, leaving an extendable 3' end.
    """
    text = seq_to_str(seq)
    for k in range(min(window_len, len(seq)), 0, -1):
        if seq_to_str(seq_complement(seq[-k:])) in text:
            return k
    return 0


def _homopolymer_runs(seq: Seq, max_run: int) -> int:
    """Number of single-nucleotide runs longer than `max_run`."""
    count = 0
    run = 0
    prev = None
    for nt in seq:
        if nt == prev:
            run += 1
        else:
            if run > max_run:
                count += 1
            run = 1
            prev = nt
    if run > max_run:
        count += 1
    return count


def _dinucleotide_runs(seq: Seq, max_repeats: int) -> int:
    """Number of 2-nt motif runs (e.g. ATATAT...) repeated more than `max_repeats` times."""
    count = 0
    i = 0
    n = len(seq)
    while i + 1 < n:
        motif = seq[i : i + 2]
        if motif[0] == motif[1]:
            i += 1
            continue
        reps = 1
        j = i + 2
        while j + 1 < n and seq[j : j + 2] == motif:
            reps += 1
            j += 2
        if reps > max_repeats:
            count += 1
            i = j
        else:
            i += 1
    return count


def _triplet_repeats(seq: Seq) -> int:
    """Trinucleotide occurrences that repeat a trinucleotide seen earlier."""
    seen: Set[Seq] = set()
    count = 0
    for i in range(len(seq) - 2):
        triplet = seq[i : i + 3]
        if triplet in seen:
            count += 1
        else:
            seen.add(triplet)
    return count


def count_repeats(
    seq: Seq,
    homopolymer_max: int = DEFAULT_HOMOPOLYMER_MAX,
    dinuc_max: int = DEFAULT_DINUC_REPEAT_MAX,
) -> int:
    """
    Count of single or double nt runs repeated more than 4 times in a row, plus
    triplet repeats anywhere in the sequence.
    """
    return _homopolymer_runs(seq, homopolymer_max) + _dinucleotide_runs(seq, dinuc_max) + _triplet_repeats(seq)


def sequence_complexity(seq: Seq) -> float:
    """Distinct trinucleotides over the number that could fit (capped at 64)."""
    positions = len(seq) - 2
    if positions <= 0:
        return 1.0
    distinct: Set[Seq] = {seq[i : i + 3] for i in range(positions)}
    return len(distinct) / min(positions, 64)
