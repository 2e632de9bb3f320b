# File: primertune/app/core/primer/constants.py
# Version: v0.2.0
"""
Constants and defaults for the Primer subsystem.

Design lengths, scoring policy and display thresholds. Everything that is a
tunable policy (not a hard contract) can be overridden through
`PrimerDesignParameters` (see parameters.py); the band thresholds are fixed.
"""

from __future__ import annotations

# Candidate primers are cut this long, then tuned down from their tunable end(s).
UNTRIMMED_LEN_PRIMER = 32
DEFAULT_TRIM_AMT = UNTRIMMED_LEN_PRIMER - 20
DEFAULT_MIN_LEN = 18

# Ion concentrations (mM, except primer in nM)
DEFAULT_MONOVALENT_MM = 50.0
DEFAULT_DIVALENT_MM = 1.5
DEFAULT_DNTP_MM = 0.2
DEFAULT_PRIMER_NM = 25.0

# Metric windows
DEFAULT_3P_END_LEN = 5
DEFAULT_DIMER_3P_WINDOW = 8
DEFAULT_HOMOPOLYMER_MAX = 4
DEFAULT_DINUC_REPEAT_MAX = 4

# Scoring policy
DEFAULT_TM_IDEAL = 59.0
DEFAULT_TM_TOLERANCE = 10.0

DEFAULT_GC_MIN = 0.40
DEFAULT_GC_MAX = 0.60
DEFAULT_GC_TOLERANCE = 0.20

DEFAULT_DIMER_OK = 3
DEFAULT_REPEATS_OK = 2

# Default scoring weights (composite quality components).
# No component penalises length directly: a very short sequence (e.g. "GC") scores 0
# on Tm only, and the weighted mean can still land in the marginal band. Read its
# quality together with the Tm.
DEFAULT_WEIGHTS = {
    "wTm": 1.0,
    "wGC": 0.5,
    "w3p": 1.25,
    "wDimer": 1.0,
    "wRepeats": 1.0,
    "wComplexity": 0.5,
}

# Display bands: good > 0.8, marginal > 0.5, bad otherwise
SCORE_COLOR_THRESH = (0.5, 0.8)
