# File: primertune/app/core/primer/schemas.py
# Version: v0.3.0
"""
DTOs for requests and responses used by Primer endpoints, and the persisted
workspace shape.

Every core entity has a field-for-field model here:
- TuneSettingInfo   <-> tuning.TuneSetting
- PrimerMetricsInfo <-> metrics.PrimerMetrics
- PrimerMatchInfo   <-> binding.PrimerMatch
- PrimerRecordInfo  <-> record.PrimerRecord
- Reference         (plasmid metadata, held as-is by the workspace)
- WorkspaceState    <-> workspace.PrimerWorkspace

Sequences travel as upper-case A/C/G/T text.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, conint

from .binding import PrimerDirection
from .parameters import IonConcentrations, ScoringParameters
from .scoring import ScoreBand
from .tuning import PrimerEnd

STATE_VERSION = 1


class TuneSettingInfo(BaseModel):
    """`offset` is None when the end is not tunable."""
    offset: Optional[conint(ge=0)] = None


class PrimerMetricsInfo(BaseModel):
    meltingTemp: float
    gcPortion: float
    gc3pCount: int
    selfEndDimer: int
    repeats: int
    complexity: float
    tmScore: float
    gcScore: float
    gc3pScore: float
    dimerScore: float
    repeatsScore: float
    complexityScore: float
    qualityScore: float
    # Display bands (derived on output, ignored on input)
    bands: Dict[str, ScoreBand] = Field(default_factory=dict)


class PrimerMatchInfo(BaseModel):
    direction: PrimerDirection
    start: conint(ge=0)
    end: conint(ge=0)


class PrimerRecordInfo(BaseModel):
    sequenceInput: str = ""
    description: str = "New primer"
    direction: PrimerDirection = PrimerDirection.FORWARD
    tunable5p: TuneSettingInfo = Field(default_factory=TuneSettingInfo)
    tunable3p: TuneSettingInfo = Field(default_factory=TuneSettingInfo)
    # Derived from the input and tune settings (written on output, recomputed on input)
    primerSequence: str = ""
    seqRemoved5p: str = ""
    seqRemoved3p: str = ""
    metrics: Optional[PrimerMetricsInfo] = None
    matches: Dict[str, List[PrimerMatchInfo]] = Field(default_factory=dict)


class Reference(BaseModel):
    """A literature reference attached to the plasmid (GenBank REFERENCE block)."""
    model_config = ConfigDict(extra="forbid")

    title: str = ""
    description: str = ""
    authors: Optional[str] = None
    consortium: Optional[str] = None
    journal: Optional[str] = None
    pubmed: Optional[str] = None
    remark: Optional[str] = None


class WorkspaceState(BaseModel):
    """Whole application state as persisted."""
    version: conint(ge=1) = STATE_VERSION
    seq: str = ""
    seqInsert: str = ""
    seqVector: str = ""
    insertLoc: conint(ge=0) = 0
    ionConcentrations: IonConcentrations = Field(default_factory=IonConcentrations)
    scoring: ScoringParameters = Field(default_factory=ScoringParameters)
    records: List[PrimerRecordInfo] = Field(default_factory=list)
    selected: Optional[conint(ge=0)] = None
    references: List[Reference] = Field(default_factory=list)
    comments: List[str] = Field(default_factory=list)


# --- Endpoint DTOs -------------------------------------------------------------------------------

class ParseRequest(BaseModel):
    text: str = Field(..., description="Raw text; anything other than A/C/G/T is dropped.")


class ParseResponse(BaseModel):
    sequence: str
    length: int


class MetricsRequest(BaseModel):
    sequence: str
    ions: Optional[IonConcentrations] = None


class MatchesRequest(BaseModel):
    primer: str
    target: str


class MatchesResponse(BaseModel):
    matches: List[PrimerMatchInfo]


class AmplificationDesignRequest(BaseModel):
    sequence: str = Field(..., description="Amplification target (raw text).")
    ions: Optional[IonConcentrations] = None


class SlicDesignRequest(BaseModel):
    vector: str
    insert: str
    insertLoc: conint(ge=0) = Field(..., description="0-based index into the vector.")
    ions: Optional[IonConcentrations] = None


class DesignResponse(BaseModel):
    records: List[PrimerRecordInfo]
    warnings: List[str] = Field(default_factory=list)


class TuneAction(str, Enum):
    TOGGLE = "toggle"
    INCREMENT = "increment"
    DECREMENT = "decrement"


class TuneRequest(BaseModel):
    record: PrimerRecordInfo
    end: PrimerEnd
    action: TuneAction
    ions: Optional[IonConcentrations] = None
    targets: Dict[str, str] = Field(default_factory=dict, description="Named target sequences to re-match against.")


class TuneResponse(BaseModel):
    record: PrimerRecordInfo
    changed: bool
