"""Shared utilities for the treatment recommendation protocol."""
from .coercion import (
    calculate_age,
    format_number,
    is_blank,
    parse_date_of_birth,
    parse_flag,
    parse_score,
    to_number,
)
from .pii import hash_text_for_audit

__all__ = [
    "calculate_age",
    "format_number",
    "is_blank",
    "parse_date_of_birth",
    "parse_flag",
    "parse_score",
    "to_number",
    "hash_text_for_audit",
]
