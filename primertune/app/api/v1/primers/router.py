# File: primertune/app/api/v1/primers/router.py
# Version: v0.3.0
"""
Primer endpoints (stateless; every call carries what it needs):
- POST /parse                  ← lenient A/C/G/T parse
- POST /metrics                ← metrics + scores for one primer sequence
- POST /matches                ← exact binding sites on a target
- POST /design/amplification   ← forward/reverse candidates
- POST /design/slic            ← insert/vector SLIC/FastCloning candidates
- POST /tune                   ← toggle/increment/decrement one end of a record
- GET /parameters              ← returns current primer design parameters
- PUT /parameters              ← validates & persists new parameters

Infeasible designs answer 422 with the reason in `detail`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from primertune.app.core.primer.binding import match_to_seq
from primertune.app.core.primer.designer import (
    DesignInfeasibleError,
    design_amplification_primers,
    design_slic_fc_primers,
)
from primertune.app.core.primer.metrics import compute_metrics
from primertune.app.core.primer.parameters import IonConcentrations, PrimerDesignParameters
from primertune.app.core.primer.record import PrimerRecord
from primertune.app.core.primer.schemas import (
    AmplificationDesignRequest,
    DesignResponse,
    MatchesRequest,
    MatchesResponse,
    MetricsRequest,
    ParseRequest,
    ParseResponse,
    PrimerMetricsInfo,
    SlicDesignRequest,
    TuneAction,
    TuneRequest,
    TuneResponse,
)
from primertune.app.core.primer.scoring import ScoreBand
from primertune.app.core.primer.sequence import seq_from_str, seq_to_str
from primertune.app.core.primer.state_codec import match_to_info, metrics_to_info, record_from_info, record_to_info
from primertune.app.config.config_primers import ensure_current_exists, save_current_params

from .deps import current_params

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/primers", tags=["primers"])


def _ions(requested: Optional[IonConcentrations], params: PrimerDesignParameters) -> IonConcentrations:
    return requested or params.ions


def _design_response(records: List[PrimerRecord]) -> DesignResponse:
    warnings = [
        f"{r.description}: quality {r.metrics.quality_score:.2f} is in the bad range"
        for r in records
        if r.metrics is not None and r.metrics.quality_band == ScoreBand.BAD
    ]
    return DesignResponse(records=[record_to_info(r) for r in records], warnings=warnings)


@router.get("/parameters", response_model=PrimerDesignParameters)
def get_parameters():
    """
    Return the current editable primer design parameters.
    If not initialized, create primers_param.json from defaults and return it.
    """
    _, params = ensure_current_exists()
    return params


@router.put("/parameters", response_model=PrimerDesignParameters)
def update_parameters(payload: PrimerDesignParameters):
    """
    Validate and persist new primer design parameters into primers_param.json.
    """
    save_current_params(payload)
    return payload


@router.post("/parse", response_model=ParseResponse)
def parse_sequence(payload: ParseRequest):
    seq = seq_from_str(payload.text)
    return ParseResponse(sequence=seq_to_str(seq), length=len(seq))


@router.post("/metrics", response_model=PrimerMetricsInfo)
def primer_metrics(payload: MetricsRequest, params: PrimerDesignParameters = Depends(current_params)):
    seq = seq_from_str(payload.sequence)
    if not seq:
        raise HTTPException(status_code=422, detail="Primer sequence contains no A/C/G/T bases.")
    return metrics_to_info(compute_metrics(seq, _ions(payload.ions, params), params.scoring))


@router.post("/matches", response_model=MatchesResponse)
def primer_matches(payload: MatchesRequest):
    hits = match_to_seq(seq_from_str(payload.primer), seq_from_str(payload.target))
    return MatchesResponse(matches=[match_to_info(m) for m in hits])


@router.post("/design/amplification", response_model=DesignResponse)
def design_amplification(
    payload: AmplificationDesignRequest, params: PrimerDesignParameters = Depends(current_params)
):
    """Forward/reverse candidates anchored at the two ends of the target."""
    try:
        records = design_amplification_primers(seq_from_str(payload.sequence), _ions(payload.ions, params), params)
    except DesignInfeasibleError as ex:
        log.warning("Amplification design rejected: %s", ex)
        raise HTTPException(status_code=422, detail=str(ex))
    return _design_response(records)


@router.post("/design/slic", response_model=DesignResponse)
def design_slic(payload: SlicDesignRequest, params: PrimerDesignParameters = Depends(current_params)):
    """Insert Fwd/Rev and Vector Fwd/Rev candidates for inserting at `insertLoc`."""
    try:
        records = design_slic_fc_primers(
            seq_from_str(payload.vector),
            seq_from_str(payload.insert),
            payload.insertLoc,
            _ions(payload.ions, params),
            params,
        )
    except DesignInfeasibleError as ex:
        log.warning("SLIC design rejected: %s", ex)
        raise HTTPException(status_code=422, detail=str(ex))
    return _design_response(records)


@router.post("/tune", response_model=TuneResponse)
def tune_record(payload: TuneRequest, params: PrimerDesignParameters = Depends(current_params)):
    """
    Apply one tuning action to a record and return it recomputed. Derived fields
    in the payload are ignored: the record is rebuilt from its input first.
    `changed` is False when an increment/decrement was clamped away.
    """
    ions = _ions(payload.ions, params)
    record = record_from_info(payload.record, ions, params.scoring)
    if payload.action == TuneAction.TOGGLE:
        record.toggle_tune(payload.end, ions, params.scoring)
        changed = True
    else:
        step = 1 if payload.action == TuneAction.INCREMENT else -1
        changed = record.tune(payload.end, step, ions, params.scoring)
    record.sync_matches({name: seq_from_str(text) for name, text in payload.targets.items()})
    return TuneResponse(record=record_to_info(record), changed=changed)
