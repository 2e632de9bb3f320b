# File: primertune/app/core/primer/thermodynamics.py
# Version: v0.2.0
"""
Thermodynamics utilities for primer properties.

Implements:
- Nearest-neighbor Tm (BioPython, SantaLucia & Hicks 2004 table)
- GC portion

Notes:
- Biopython's `Tm_NN` expects salts/dNTP in mM and strand concentrations in nM,
  which is exactly how `IonConcentrations` stores them; no unit conversion here.
- The template strand is taken as negligible next to the primer (dnac2=0), so the
  effective strand concentration is the primer concentration.
"""

from __future__ import annotations

from Bio.SeqUtils import MeltingTemp as mt

from .parameters import IonConcentrations
from .sequence import Nucleotide, Seq, seq_to_str


def gc_count(seq: Seq) -> int:
    return sum(1 for nt in seq if nt in (Nucleotide.G, Nucleotide.C))


def gc_portion(seq: Seq) -> float:
    """Fraction (0-1) of G/C nucleotides."""
    if not seq:
        return 0.0
    return gc_count(seq) / len(seq)


def tm_nearest_neighbor(seq: Seq, ions: IonConcentrations) -> float:
    """
    Melting temperature using NN base stacking (°C).

    Enthalpy/entropy of each adjacent base pair are summed, then the two-state
    formula is applied with the strand concentration and a salt correction that
    folds Mg2+ (minus dNTP-bound Mg2+) into Na+ equivalents.

    Returns 0.0 for sequences with no nearest-neighbor stack (< 2 nt).
    """
    if len(seq) < 2:
        return 0.0
    return float(
        mt.Tm_NN(
            seq_to_str(seq),
            nn_table=mt.DNA_NN4,
            Na=ions.monovalent,
            Mg=ions.divalent,
            dNTPs=ions.dntp,
            dnac1=ions.primer,
            dnac2=0.0,
            saltcorr=5,
        )
    )
