"""Shared domain models for the treatment recommendation protocol."""
from .assessment import (
    ClinicalInterviewRisk,
    PanelOutcome,
    AssessmentInstrument,
    AssessmentInput,
    RecommendationResult,
)

__all__ = [
    "ClinicalInterviewRisk",
    "PanelOutcome",
    "AssessmentInstrument",
    "AssessmentInput",
    "RecommendationResult",
]
