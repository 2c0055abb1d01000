"""Intake form - the input surface in front of the Recommendation Engine.

Holds field values exactly as entered, derives the age whenever the date
of birth changes, and re-evaluates the full snapshot on every update.
"""
import logging
from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Any, Callable, Dict, Optional

from treatment_protocol.shared.models import (
    AssessmentInput,
    ClinicalInterviewRisk,
    PanelOutcome,
    RecommendationResult,
)
from treatment_protocol.shared.utils import calculate_age, is_blank, parse_flag, parse_score
from treatment_protocol.services.recommendation_engine import RecommendationEngine

logger = logging.getLogger(__name__)

PENDING_STATUS = "Please enter all assessment data to get a recommendation."


@dataclass(frozen=True)
class FormFields:
    """Raw form state. Text fields hold the text typed, toggles hold booleans."""
    patient_name: str = ""
    dob: str = ""
    dass21_score: str = ""
    cats_score: str = ""
    whodas_score: str = ""
    clinical_interview_risk: str = ""
    brainspan_run: bool = False
    brainspan_outcome: str = ""
    neurotransmitter_run: bool = False
    neurotransmitter_outcome: str = ""
    cssrs_suicidal_ideation: bool = False
    qeeg_indicators: bool = False


FIELD_NAMES = frozenset(f.name for f in fields(FormFields))
TOGGLE_FIELDS = frozenset({
    "brainspan_run",
    "neurotransmitter_run",
    "cssrs_suicidal_ideation",
    "qeeg_indicators",
})


def parse_choice(value: Any, enum_cls):
    """Map radio-button text to an enum member, or None if unselected/unknown."""
    if is_blank(value):
        return None
    text = str(value).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text:
            return member
    return None


class AssessmentForm:
    """Single-patient intake form.

    Every update replaces the field snapshot and re-runs the engine, so
    `result` always reflects the current fields.
    """

    def __init__(
        self,
        engine: Optional[RecommendationEngine] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """Initialize an empty form.

        Args:
            engine: Recommendation engine to evaluate with
            today: Clock for age calculation (defaults to date.today)
        """
        self.engine = engine or RecommendationEngine()
        self._today = today or date.today
        self.fields = FormFields()
        self.age: Optional[int] = None
        self.result: Optional[RecommendationResult] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **kwargs) -> "AssessmentForm":
        """Build a form from a mapping of field values, ignoring unknown keys."""
        form = cls(**kwargs)
        known = {key: value for key, value in data.items() if key in FIELD_NAMES}
        unknown = sorted(set(data) - FIELD_NAMES)
        if unknown:
            logger.warning("FORM_FIELDS_IGNORED", extra={"fields": unknown})
        form.update(**known)
        return form

    @property
    def status_text(self) -> str:
        if self.result is None:
            return PENDING_STATUS
        return self.result.recommendation_label

    def update(self, **changes: Any) -> RecommendationResult:
        """Change one or more fields and re-evaluate.

        Raises:
            ValueError: If a field name is not on the form
        """
        unknown = set(changes) - FIELD_NAMES
        if unknown:
            raise ValueError(f"Unknown form fields: {sorted(unknown)}")

        normalized = {
            name: parse_flag(value) if name in TOGGLE_FIELDS else _as_text(value)
            for name, value in changes.items()
        }
        self.fields = replace(self.fields, **normalized)

        if "dob" in changes:
            self.age = calculate_age(self.fields.dob, self._today())

        return self.evaluate()

    def evaluate(self) -> RecommendationResult:
        """Re-run the engine on the current snapshot."""
        self.result = self.engine.evaluate(self.to_assessment_input())
        return self.result

    def to_assessment_input(self) -> AssessmentInput:
        """Convert the raw field text into an engine input snapshot."""
        f = self.fields
        return AssessmentInput(
            age=self.age,
            dass21_score=parse_score(f.dass21_score),
            cats_score=parse_score(f.cats_score),
            whodas_score=parse_score(f.whodas_score),
            clinical_interview_risk=parse_choice(f.clinical_interview_risk, ClinicalInterviewRisk),
            suicidal_ideation=f.cssrs_suicidal_ideation,
            severe_dissociation_or_psychosis=f.qeeg_indicators,
            brainspan_run=f.brainspan_run,
            brainspan_outcome=parse_choice(f.brainspan_outcome, PanelOutcome),
            neurotransmitter_run=f.neurotransmitter_run,
            neurotransmitter_outcome=parse_choice(f.neurotransmitter_outcome, PanelOutcome),
            patient_name=f.patient_name.strip() or None,
            date_of_birth=f.dob.strip() or None,
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
