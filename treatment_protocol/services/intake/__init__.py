"""Intake: the form that collects raw assessment values for one patient."""

from .form import AssessmentForm, FormFields, PENDING_STATUS, parse_choice

__all__ = [
    "AssessmentForm",
    "FormFields",
    "PENDING_STATUS",
    "parse_choice",
]
