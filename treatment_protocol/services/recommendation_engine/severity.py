"""Severity bands for the standardized instruments.

Reporting only: these labels go into the clinical notes and never feed
back into the composite score.

Each table lists (lower bound inclusive, label) from the highest band down.
"""
from typing import Sequence, Tuple

SeverityTable = Sequence[Tuple[float, str]]

# DASS-21 total score, max 63
DASS21_SEVERITY: SeverityTable = (
    (39, "Extremely Severe"),
    (30, "Severe"),
    (21, "Moderate"),
    (15, "Mild"),
)
DASS21_BASELINE = "Normal"

# CATS total score, max 60
CATS_SEVERITY: SeverityTable = (
    (21, "Severe"),
    (16, "Moderate"),
)
CATS_BASELINE = "Normal"

# WHODAS 2.0 (12-item) total score, max 60
WHODAS_SEVERITY: SeverityTable = (
    (51, "Extreme disability"),
    (41, "Severe disability"),
    (31, "Moderate disability"),
    (21, "Mild disability"),
    (12, "Little to no disability"),
)
WHODAS_BASELINE = "Not indicated (score below 12)"


def classify(score: float, table: SeverityTable, baseline: str) -> str:
    """Return the label of the first band whose lower bound the score reaches."""
    for lower_bound, label in table:
        if score >= lower_bound:
            return label
    return baseline


def dass21_severity(score: float) -> str:
    return classify(score, DASS21_SEVERITY, DASS21_BASELINE)


def cats_severity(score: float) -> str:
    return classify(score, CATS_SEVERITY, CATS_BASELINE)


def whodas_severity(score: float) -> str:
    return classify(score, WHODAS_SEVERITY, WHODAS_BASELINE)
