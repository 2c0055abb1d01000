"""Coercion of raw form text into engine inputs.

Form fields arrive as free text. Nothing here raises on malformed input:
non-numeric text becomes 0 and an unparseable date of birth becomes an
absent age.
"""
import math
from datetime import date, datetime
from typing import Any, Optional

DOB_FORMAT = "%Y-%m-%d"

_TRUE_STRINGS = frozenset({"true", "yes", "y", "1", "on"})


def is_blank(value: Any) -> bool:
    """Check if a raw field value counts as 'not entered'."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def to_number(value: Any) -> float:
    """Convert a raw field value to a finite float, defaulting to 0.

    Examples:
        >>> to_number("40")
        40.0
        >>> to_number("forty")
        0.0
        >>> to_number(None)
        0.0
    """
    if isinstance(value, str):
        value = value.strip()

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_flag(value: Any) -> bool:
    """Interpret a toggle value; strings like "true"/"yes"/"1" count as on."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def parse_score(value: Any) -> Optional[float]:
    """Parse an optional score field: None when blank, else coerced to a number."""
    if is_blank(value):
        return None
    return to_number(value)


def parse_date_of_birth(dob: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD date of birth, returning None if it is not a valid date."""
    if is_blank(dob):
        return None
    try:
        return datetime.strptime(str(dob).strip(), DOB_FORMAT).date()
    except ValueError:
        return None


def calculate_age(dob: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Calculate age in whole years from a date of birth string.

    Year difference, minus one if the birthday has not happened yet this
    calendar year.

    Args:
        dob: Date of birth as YYYY-MM-DD
        today: Reference date (defaults to date.today())

    Returns:
        Age in years, or None if dob is empty or unparseable
    """
    birth_date = parse_date_of_birth(dob)
    if birth_date is None:
        return None

    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def format_number(value: float) -> str:
    """Format a score for display: integral values print without decimals."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
