"""Recommendation Engine - composite scoring and treatment banding.

Pure, synchronous and stateless: every call derives a RecommendationResult
from one full AssessmentInput snapshot, with no history between calls.

Pipeline:
- Step 1: Normalize each instrument against its maximum and apply its weight
- Step 2: Rescale the weighted sum against the fixed total weight (0-100)
- Step 3: Hard overrides (C-SSRS / QEEG) short-circuit all banding
- Step 4: Band the composite score, choosing age-restricted label text
- Step 5: Annotate age exclusion and assemble the clinical notes
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from treatment_protocol.shared.models import (
    AssessmentInput,
    AssessmentInstrument,
    ClinicalInterviewRisk,
    PanelOutcome,
    RecommendationResult,
)
from treatment_protocol.shared.utils import format_number, parse_flag, parse_score
from . import config as labels
from .config import EngineConfig
from .severity import cats_severity, dass21_severity, whodas_severity

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Derives a composite score and treatment recommendation.

    Never raises for malformed input: scores coerce to numbers (0 when
    unreadable), unknown enum values count as absent.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize engine with configuration.

        Args:
            config: Weights, band thresholds and age window
        """
        self.config = config or EngineConfig()
        self.weights = self.config.weights
        self.bands = self.config.bands
        self.age_window = self.config.age_window

    def evaluate(self, assessment: AssessmentInput) -> RecommendationResult:
        """Evaluate one assessment snapshot.

        Args:
            assessment: Full snapshot of the intake form

        Returns:
            RecommendationResult with composite score, label and notes

        Logs:
            - OVERRIDE_TRIGGERED: If a C-SSRS or QEEG override fired
            - RECOMMENDATION_EVALUATED: After every evaluation
        """
        age = _coerce_age(assessment.age)
        dass21 = parse_score(assessment.dass21_score)
        cats = parse_score(assessment.cats_score)
        whodas = parse_score(assessment.whodas_score)
        interview_risk = _coerce_enum(assessment.clinical_interview_risk, ClinicalInterviewRisk)
        suicidal_ideation = parse_flag(assessment.suicidal_ideation)
        psychosis = parse_flag(assessment.severe_dissociation_or_psychosis)

        age_eligible = self.age_window.contains(age)
        contributions = self._weighted_contributions(
            dass21=dass21 or 0.0,
            cats=cats or 0.0,
            whodas=whodas or 0.0,
            interview_risk=interview_risk,
            age_eligible=age_eligible,
        )
        composite_score = (sum(contributions.values()) / self.weights.TOTAL_WEIGHT) * 100

        notes = self._build_notes(assessment, age, dass21, cats, whodas, interview_risk)

        if suicidal_ideation or psychosis:
            logger.warning(
                "OVERRIDE_TRIGGERED",
                extra={
                    "cssrs_suicidal_ideation": suicidal_ideation,
                    "qeeg_dissociation_psychosis": psychosis,
                    "composite_score": round(composite_score, 2),
                }
            )
            return RecommendationResult(
                composite_score=composite_score,
                recommendation_label=labels.OVERRIDE_LABEL,
                clinical_notes=notes,
                band_label=None,
                override_triggered=True,
                age_eligible=age_eligible,
                weighted_contributions=contributions,
            )

        band_label = self._match_band(composite_score, age_eligible)
        recommendation = band_label
        if (
            age is not None
            and not age_eligible
            and composite_score >= self.bands.COUNSELING_PLUS_MIN
        ):
            recommendation += labels.AGE_EXCLUSION_NOTE.format(age=age)

        logger.info(
            "RECOMMENDATION_EVALUATED",
            extra={
                "composite_score": round(composite_score, 2),
                "band": band_label,
                "age_eligible": age_eligible,
                "cats_age_gated": cats is not None and not age_eligible,
            }
        )

        return RecommendationResult(
            composite_score=composite_score,
            recommendation_label=recommendation,
            clinical_notes=notes,
            band_label=band_label,
            override_triggered=False,
            age_eligible=age_eligible,
            weighted_contributions=contributions,
        )

    def _weighted_contributions(
        self,
        dass21: float,
        cats: float,
        whodas: float,
        interview_risk: Optional[ClinicalInterviewRisk],
        age_eligible: bool,
    ) -> Dict[str, float]:
        """Normalize each instrument to a fraction of its maximum and weight it.

        CATS only counts inside the age window. Scores outside an
        instrument's range are weighted as entered.
        """
        w = self.weights
        effective_cats = cats if age_eligible else 0.0
        return {
            AssessmentInstrument.DASS21.value:
                (dass21 / w.DASS21_MAX) * w.DASS21_WEIGHT,
            AssessmentInstrument.CATS.value:
                (effective_cats / w.CATS_MAX) * w.CATS_WEIGHT,
            AssessmentInstrument.WHODAS.value:
                (whodas / w.WHODAS_MAX) * w.WHODAS_WEIGHT,
            AssessmentInstrument.CLINICAL_INTERVIEW.value:
                w.CLINICAL_INTERVIEW.get(interview_risk, 0.0),
        }

    def _match_band(self, composite_score: float, age_eligible: bool) -> str:
        """Map the composite score to a treatment level label."""
        b = self.bands
        if composite_score >= b.INPATIENT_MIN:
            return labels.INPATIENT_RESIDENTIAL
        if composite_score >= b.PHP_MIN:
            return labels.PHP_OR_INPATIENT if age_eligible else labels.INPATIENT
        if composite_score >= b.IOP_MIN:
            if age_eligible:
                return labels.IOP_OR_PHP
            return labels.COUNSELING_OR_INPATIENT_AGE_EXCLUDED
        if composite_score >= b.COUNSELING_PLUS_MIN:
            return labels.COUNSELING_OR_IOP if age_eligible else labels.INDIVIDUAL_COUNSELING
        return labels.INDIVIDUAL_COUNSELING

    def _build_notes(
        self,
        assessment: AssessmentInput,
        age: Optional[int],
        dass21: Optional[float],
        cats: Optional[float],
        whodas: Optional[float],
        interview_risk: Optional[ClinicalInterviewRisk],
    ) -> List[str]:
        """Assemble the clinical notes in their fixed order."""
        notes: List[str] = []

        if assessment.patient_name:
            notes.append(f"Patient Name: {assessment.patient_name}")
        if assessment.date_of_birth:
            age_text = "" if age is None else str(age)
            notes.append(f"Date of Birth: {assessment.date_of_birth} (Age: {age_text} years)")

        if dass21 is not None:
            notes.append(
                f"DASS-21 Total Score: {format_number(dass21)} (Max 63). "
                f"Severity: {dass21_severity(dass21)}"
            )
        if cats is not None:
            notes.append(
                f"CATS Score: {format_number(cats)} (Max 60, applicable for age 13-17). "
                f"Severity: {cats_severity(cats)}"
            )
        if whodas is not None:
            notes.append(
                f"WHODAS 2.0 Score: {format_number(whodas)} (Max 60). "
                f"Severity: {whodas_severity(whodas)}"
            )

        if interview_risk is not None:
            notes.append(f"Clinical Interview Risk: {interview_risk.value}")

        notes.append(_panel_note(
            "BrainSpan Nutritional + Inflammation",
            assessment.brainspan_run,
            assessment.brainspan_outcome,
        ))
        notes.append(_panel_note(
            "Neurotransmitter Panel",
            assessment.neurotransmitter_run,
            assessment.neurotransmitter_outcome,
        ))

        if parse_flag(assessment.severe_dissociation_or_psychosis):
            notes.append("QEEG: Severe dissociation/psychosis indicators present.")
        if parse_flag(assessment.suicidal_ideation):
            notes.append("C-SSRS: Recent suicidal plan/intent indicated.")

        return notes


def _panel_note(panel_name: str, run: Any, outcome: Any) -> str:
    """Informational lab panel line: always present, run or not."""
    if not parse_flag(run):
        return f"{panel_name}: Test Not Run"
    panel_outcome = _coerce_enum(outcome, PanelOutcome)
    outcome_text = panel_outcome.value if panel_outcome else "Not selected"
    return f"{panel_name}: Test Run (Outcome: {outcome_text})"


def _coerce_age(value: Any) -> Optional[int]:
    age = parse_score(value)
    return None if age is None else int(age)


def _coerce_enum(value: Any, enum_cls):
    """Accept an enum member or its value (case-insensitive); else None."""
    if value is None or isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text or member.name.lower() == text:
            return member
    return None


_DEFAULT_ENGINE = RecommendationEngine()


def evaluate(assessment: AssessmentInput) -> RecommendationResult:
    """Evaluate with the default engine configuration."""
    return _DEFAULT_ENGINE.evaluate(assessment)


def score_breakdown(result: RecommendationResult) -> List[Tuple[str, float]]:
    """Weighted contributions ordered from largest to smallest, for reports."""
    return sorted(
        result.weighted_contributions.items(),
        key=lambda item: item[1],
        reverse=True,
    )
