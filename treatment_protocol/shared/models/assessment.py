"""Assessment input and recommendation result domain models.

This file defines the enums and immutable data structures exchanged between
the intake form, the recommendation engine and the export service.
A result is always a pure function of its input: no identity, no history.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from treatment_protocol.shared.utils.coercion import parse_flag


class ClinicalInterviewRisk(Enum):
    """Risk level recorded by the clinician after the intake interview."""
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


class PanelOutcome(Enum):
    """Outcome of an informational lab panel (BrainSpan, Neurotransmitter).

    Never affects scoring.
    """
    YES = "Yes"     # High inflammation / imbalance
    NO = "No"       # Normal


class AssessmentInstrument(Enum):
    """Standardized instruments that feed the composite score."""
    DASS21 = "dass21"                   # Depression Anxiety Stress Scales, max 63
    CATS = "cats"                       # Child and Adolescent Trauma Screen, max 60
    WHODAS = "whodas"                   # WHO Disability Assessment Schedule 2.0, max 60
    CLINICAL_INTERVIEW = "clinical_interview"


@dataclass(frozen=True)
class AssessmentInput:
    """Snapshot of every value on the intake form for one evaluation.

    Numeric scores are None when the field was left empty. A score entered
    as 0 is kept as 0.0 so the notes can still report it.
    """
    age: Optional[int] = None
    dass21_score: Optional[float] = None
    cats_score: Optional[float] = None
    whodas_score: Optional[float] = None
    clinical_interview_risk: Optional[ClinicalInterviewRisk] = None
    suicidal_ideation: bool = False                 # C-SSRS override
    severe_dissociation_or_psychosis: bool = False  # QEEG override
    brainspan_run: bool = False
    brainspan_outcome: Optional[PanelOutcome] = None
    neurotransmitter_run: bool = False
    neurotransmitter_outcome: Optional[PanelOutcome] = None
    patient_name: Optional[str] = None
    date_of_birth: Optional[str] = None

    @property
    def has_override(self) -> bool:
        """Check if either hard-override flag is set."""
        return (
            parse_flag(self.suicidal_ideation)
            or parse_flag(self.severe_dissociation_or_psychosis)
        )


@dataclass(frozen=True)
class RecommendationResult:
    """Composite score, treatment recommendation and clinical notes.

    Immutable - passed by value to the export service. Notes are stored as a
    tuple and contributions behind a read-only mapping. The composite is
    not range-checked: scores entered above an instrument maximum are
    weighted as entered.
    """
    composite_score: float
    recommendation_label: str
    clinical_notes: Tuple[str, ...] = ()
    band_label: Optional[str] = None
    override_triggered: bool = False
    age_eligible: bool = False
    weighted_contributions: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "clinical_notes", tuple(self.clinical_notes))
        object.__setattr__(
            self, "weighted_contributions", MappingProxyType(dict(self.weighted_contributions))
        )

    @property
    def notes_text(self) -> str:
        """Clinical notes joined with newlines, as shown on the form."""
        return "\n".join(self.clinical_notes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "composite_score": round(self.composite_score, 2),
            "recommendation": self.recommendation_label,
            "band": self.band_label,
            "override_triggered": self.override_triggered,
            "age_eligible_for_iop_php": self.age_eligible,
            "weighted_contributions": {
                name: round(value, 2)
                for name, value in self.weighted_contributions.items()
            },
            "clinical_notes": list(self.clinical_notes),
        }
