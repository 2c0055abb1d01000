"""Recommendation Engine configuration: weights, maxima and band thresholds.

The composite score is rescaled against a FIXED total weight of 80
(25 DASS-21 + 20 CATS + 20 WHODAS + 15 clinical interview). CATS keeps its
share of the denominator even for patients outside the 13-17 age window.
"""
from dataclasses import dataclass, field
from typing import Dict

from treatment_protocol.shared.models import ClinicalInterviewRisk


@dataclass(frozen=True)
class ScoringWeights:
    """Instrument maxima and the weight each normalized score carries."""
    DASS21_MAX: float = 63.0
    DASS21_WEIGHT: float = 25.0
    CATS_MAX: float = 60.0
    CATS_WEIGHT: float = 20.0
    WHODAS_MAX: float = 60.0
    WHODAS_WEIGHT: float = 20.0
    TOTAL_WEIGHT: float = 80.0
    CLINICAL_INTERVIEW: Dict[ClinicalInterviewRisk, float] = field(
        default_factory=lambda: {
            ClinicalInterviewRisk.MILD: 0.0,
            ClinicalInterviewRisk.MODERATE: 10.0,
            ClinicalInterviewRisk.SEVERE: 15.0,
        }
    )


@dataclass(frozen=True)
class AgeWindow:
    """Inclusive age range for CATS scoring and IOP/PHP eligibility."""
    MIN_AGE: int = 13
    MAX_AGE: int = 17

    def contains(self, age) -> bool:
        return age is not None and self.MIN_AGE <= age <= self.MAX_AGE


@dataclass(frozen=True)
class RecommendationBands:
    """Composite score thresholds (lower bounds, inclusive)."""
    INPATIENT_MIN: float = 85.0
    PHP_MIN: float = 70.0
    IOP_MIN: float = 50.0
    COUNSELING_PLUS_MIN: float = 30.0


# Treatment level labels
OVERRIDE_LABEL = "Immediate Inpatient/Residential"
INPATIENT_RESIDENTIAL = "Inpatient/Residential"
PHP_OR_INPATIENT = "PHP or Inpatient"
INPATIENT = "Inpatient"
IOP_OR_PHP = "IOP or PHP (if higher trauma/impairment)"
COUNSELING_OR_INPATIENT_AGE_EXCLUDED = (
    "Individual Counseling or Inpatient (PHP/IOP excluded by age)"
)
COUNSELING_OR_IOP = "Individual Counseling or IOP"
INDIVIDUAL_COUNSELING = "Individual Counseling"

AGE_EXCLUSION_NOTE = " (Note: IOP/PHP excluded for age {age})"


@dataclass(frozen=True)
class EngineConfig:
    """Configuration bundle for the Recommendation Engine."""
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    bands: RecommendationBands = field(default_factory=RecommendationBands)
    age_window: AgeWindow = field(default_factory=AgeWindow)

    # Version tracking for exported summaries
    protocol_version: str = "2025.07.01"
