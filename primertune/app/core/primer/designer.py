# File: primertune/app/core/primer/designer.py
# Version: v2.0.0
"""
Initial primer candidates for amplification and SLIC/FastCloning.

What this file does
-------------------
- Cuts candidates longer than needed (`primerLengthUntrimmed`, default 32 nt) and
  marks which end(s) may be tuned down (`defaultTrim`, default 12 nt).
- The end that defines the amplicon edge or the cloning junction stays fixed;
  only the other end is tunable.
- Every returned record already has its metrics computed.

Amplification
-------------
- Forward: 5' end of the target; 5' fixed, 3' Enabled(defaultTrim).
- Reverse: complement of the target's 3' end; 5' fixed, 3' Enabled(defaultTrim).
- Infeasible if the target is shorter than `defaultTrim + primerLengthMin`.

SLIC / FastCloning
------------------
With vector V, insert I, locus k (insert goes between V[k-1] and V[k]) and N the
untrimmed length:
- Insert Fwd  = V[k-N:k] + I[:N]              (both ends tunable)
- Insert Rev  = complement(I[-N:] + V[k:k+N]) (both ends tunable)
- Vector Fwd  = V[k:k+N]                      (5' fixed at the locus, 3' tunable)
- Vector Rev  = complement(V[k-N:k])          (5' tunable, 3' fixed)
- Infeasible if V or I is empty, or k is outside 1 <= k < len(V).

Coordinates
-----------
- `insert_loc` is a 0-based index into the vector.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .binding import PrimerDirection
from .parameters import IonConcentrations, PrimerDesignParameters
from .record import Primer, PrimerRecord
from .sequence import Seq, seq_complement
from .tuning import TuneSetting

log = logging.getLogger(__name__)


class DesignInfeasibleError(ValueError):
    """No candidates can be produced for the given inputs."""


# --- Helpers -------------------------------------------------------------------------------------

def _make_record(
    seq: Seq,
    direction: PrimerDirection,
    description: str,
    tunable_5p: TuneSetting,
    tunable_3p: TuneSetting,
    ions: IonConcentrations,
    params: PrimerDesignParameters,
) -> PrimerRecord:
    record = PrimerRecord(
        sequence_input=seq,
        description=description,
        tunable_5p=tunable_5p,
        tunable_3p=tunable_3p,
        primer=Primer(seq, direction),
    )
    record.run_calcs(ions, params.scoring)
    return record


# --- Public API ----------------------------------------------------------------------------------

def design_amplification_primers(
    seq: Seq,
    ions: Optional[IonConcentrations] = None,
    params: Optional[PrimerDesignParameters] = None,
) -> List[PrimerRecord]:
    """Return [forward, reverse] candidates anchored at the two ends of `seq`."""
    p = params or PrimerDesignParameters()
    ions = ions or p.ions
    if len(seq) < p.min_template_len:
        raise DesignInfeasibleError(
            f"Target is {len(seq)} nt; amplification needs at least {p.min_template_len} nt "
            f"({p.primerLengthMin} nt primers plus {p.defaultTrim} nt of tuning room)."
        )

    n = min(p.primerLengthUntrimmed, len(seq))
    fixed = TuneSetting.disabled()
    tunable = TuneSetting.enabled_at(p.defaultTrim)

    fwd = _make_record(seq[:n], PrimerDirection.FORWARD, "Amplification Fwd", fixed, tunable, ions, p)
    rev = _make_record(
        seq_complement(seq[len(seq) - n :]), PrimerDirection.REVERSE, "Amplification Rev", fixed, tunable, ions, p
    )
    log.debug("Amplification candidates: %d nt each from a %d nt target", n, len(seq))
    return [fwd, rev]


def design_slic_fc_primers(
    seq_vector: Seq,
    seq_insert: Seq,
    insert_loc: int,
    ions: Optional[IonConcentrations] = None,
    params: Optional[PrimerDesignParameters] = None,
) -> List[PrimerRecord]:
    """Return [insert_fwd, insert_rev, vector_fwd, vector_rev] candidates."""
    p = params or PrimerDesignParameters()
    ions = ions or p.ions
    if not seq_vector or not seq_insert:
        raise DesignInfeasibleError("Vector and insert sequences must both be non-empty.")
    if not (1 <= insert_loc < len(seq_vector)):
        raise DesignInfeasibleError(
            f"Insertion location {insert_loc} is out of range for a {len(seq_vector)} nt vector "
            f"(valid: 1..{len(seq_vector) - 1})."
        )

    n = p.primerLengthUntrimmed
    k = insert_loc
    trim = TuneSetting.enabled_at(p.defaultTrim)
    fixed = TuneSetting.disabled()

    vector_left = seq_vector[max(0, k - n) : k]
    vector_right = seq_vector[k : k + n]
    insert_left = seq_insert[:n]
    insert_right = seq_insert[max(0, len(seq_insert) - n) :]

    insert_fwd = _make_record(
        vector_left + insert_left, PrimerDirection.FORWARD, "SLIC Insert Fwd", trim, trim, ions, p
    )
    insert_rev = _make_record(
        seq_complement(insert_right + vector_right), PrimerDirection.REVERSE, "SLIC Insert Rev", trim, trim, ions, p
    )
    vector_fwd = _make_record(vector_right, PrimerDirection.FORWARD, "SLIC Vector Fwd", fixed, trim, ions, p)
    vector_rev = _make_record(
        seq_complement(vector_left), PrimerDirection.REVERSE, "SLIC Vector Rev", trim, fixed, ions, p
    )
    log.debug("SLIC candidates at locus %d (vector %d nt, insert %d nt)", k, len(seq_vector), len(seq_insert))
    return [insert_fwd, insert_rev, vector_fwd, vector_rev]


def cloning_product(seq_vector: Seq, seq_insert: Seq, insert_loc: int) -> Seq:
    """Vector with the insert placed at `insert_loc` (clamped into the vector)."""
    k = max(0, min(insert_loc, len(seq_vector)))
    return seq_vector[:k] + seq_insert + seq_vector[k:]
