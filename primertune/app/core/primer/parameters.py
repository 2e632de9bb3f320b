# File: primertune/app/core/primer/parameters.py
# Version: v2.0.0
"""
Pydantic models for primer design parameters.

- `IonConcentrations`: reaction conditions consumed by the Tm calculation.
- `ScoringParameters`: ideal ranges and weights used to turn raw metrics into scores.
- `PrimerDesignParameters`: the whole editable parameter set (persisted as JSON by
  config/config_primers.py).

Usage:
    from primertune.app.core.primer.parameters import PrimerDesignParameters
"""

from __future__ import annotations

from pydantic import BaseModel, Field, confloat, conint, model_validator

from . import constants as C


class IonConcentrations(BaseModel):
    """Reaction conditions. Salts and dNTP in mM, primer strand in nM."""
    monovalent: confloat(gt=0) = Field(C.DEFAULT_MONOVALENT_MM, description="Na+ and K+ (mM)")
    divalent: confloat(ge=0) = Field(C.DEFAULT_DIVALENT_MM, description="Mg2+ (mM)")
    dntp: confloat(ge=0) = Field(C.DEFAULT_DNTP_MM, description="dNTP (mM)")
    primer: confloat(gt=0) = Field(C.DEFAULT_PRIMER_NM, description="Primer strand (nM)")

    model_config = {"frozen": True}


class Weights(BaseModel):
    """Quality score weights (weighted mean of category scores)."""
    wTm: confloat(ge=0) = C.DEFAULT_WEIGHTS["wTm"]
    wGC: confloat(ge=0) = C.DEFAULT_WEIGHTS["wGC"]
    w3p: confloat(ge=0) = C.DEFAULT_WEIGHTS["w3p"]
    wDimer: confloat(ge=0) = C.DEFAULT_WEIGHTS["wDimer"]
    wRepeats: confloat(ge=0) = C.DEFAULT_WEIGHTS["wRepeats"]
    wComplexity: confloat(ge=0) = C.DEFAULT_WEIGHTS["wComplexity"]

    model_config = {"frozen": True}

    def total(self) -> float:
        return self.wTm + self.wGC + self.w3p + self.wDimer + self.wRepeats + self.wComplexity


class ScoringParameters(BaseModel):
    tmIdeal: float = Field(C.DEFAULT_TM_IDEAL, description="Ideal primer Tm (°C)")
    tmTolerance: confloat(gt=0) = Field(C.DEFAULT_TM_TOLERANCE, description="Tm distance (°C) that scores 0")
    gcMin: confloat(ge=0, le=1) = Field(C.DEFAULT_GC_MIN, description="Lower edge of the ideal GC band")
    gcMax: confloat(ge=0, le=1) = Field(C.DEFAULT_GC_MAX, description="Upper edge of the ideal GC band")
    gcTolerance: confloat(gt=0) = Field(C.DEFAULT_GC_TOLERANCE, description="GC distance outside the band that scores 0")
    weights: Weights = Field(default_factory=Weights)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> "ScoringParameters":
        if self.gcMax < self.gcMin:
            raise ValueError("gcMax must be >= gcMin")
        if self.weights.total() <= 0:
            raise ValueError("at least one scoring weight must be positive")
        return self


class PrimerDesignParameters(BaseModel):
    # Lengths
    primerLengthUntrimmed: conint(ge=2) = Field(C.UNTRIMMED_LEN_PRIMER, description="Length candidates are cut at")
    defaultTrim: conint(ge=0) = Field(C.DEFAULT_TRIM_AMT, description="Initial offset on tunable ends")
    primerLengthMin: conint(ge=1) = Field(C.DEFAULT_MIN_LEN, description="Minimum effective primer length")

    ions: IonConcentrations = Field(default_factory=IonConcentrations)
    scoring: ScoringParameters = Field(default_factory=ScoringParameters)

    @model_validator(mode="after")
    def _check_lengths(self) -> "PrimerDesignParameters":
        if self.defaultTrim + self.primerLengthMin > self.primerLengthUntrimmed:
            raise ValueError("defaultTrim + primerLengthMin must be <= primerLengthUntrimmed")
        return self

    @property
    def min_template_len(self) -> int:
        """Shortest template a tunable candidate can be cut from."""
        return self.defaultTrim + self.primerLengthMin
