"""Recommendation Engine: composite scoring and treatment-level banding.

A pure function of the assessment snapshot. C-SSRS suicidal ideation or
QEEG dissociation/psychosis indicators override every score band.

Components:
- engine.py: RecommendationEngine and the module-level evaluate()
- severity.py: Reporting-only severity bands per instrument
- config.py: Weights, maxima, band thresholds and label text

Usage:
    from treatment_protocol.services.recommendation_engine import evaluate
    result = evaluate(AssessmentInput(age=15, dass21_score=40))
"""

from .config import EngineConfig, RecommendationBands, ScoringWeights, AgeWindow
from .engine import RecommendationEngine, evaluate, score_breakdown
from .severity import cats_severity, dass21_severity, whodas_severity

__all__ = [
    "EngineConfig",
    "RecommendationBands",
    "ScoringWeights",
    "AgeWindow",
    "RecommendationEngine",
    "evaluate",
    "score_breakdown",
    "cats_severity",
    "dass21_severity",
    "whodas_severity",
]
