"""Tests for raw form value coercion and age calculation."""
from datetime import date
from decimal import Decimal
from fractions import Fraction

from treatment_protocol.shared.utils import (
    calculate_age,
    format_number,
    is_blank,
    parse_date_of_birth,
    parse_flag,
    parse_score,
    to_number,
)


class TestToNumber:
    """Non-numeric input coerces to 0, never raises."""

    def test_numeric_text(self):
        """Digits, whitespace and decimals parse."""
        assert to_number("40") == 40.0
        assert to_number(" 12.5 ") == 12.5

    def test_non_numeric_text_is_zero(self):
        """Words and symbols become 0."""
        assert to_number("forty") == 0.0
        assert to_number("--") == 0.0
        assert to_number("") == 0.0

    def test_non_finite_is_zero(self):
        """NaN and infinity are not usable scores."""
        assert to_number("nan") == 0.0
        assert to_number(float("inf")) == 0.0

    def test_numbers_pass_through(self):
        """ints and floats are returned as floats."""
        assert to_number(7) == 7.0
        assert to_number(3.5) == 3.5

    def test_other_real_numbers_keep_their_value(self):
        """Decimal and Fraction scores are read, not zeroed."""
        assert to_number(Decimal("63")) == 63.0
        assert to_number(Fraction(121, 2)) == 60.5

    def test_oversized_int_is_zero(self):
        """An int too large for a float coerces to 0 instead of raising."""
        assert to_number(10**400) == 0.0

    def test_other_types_are_zero(self):
        """Containers and None are 0."""
        assert to_number(None) == 0.0
        assert to_number([1, 2]) == 0.0


class TestParseFlag:
    """Toggle values given as text or booleans."""

    def test_true_strings(self):
        """Common affirmative spellings count as on."""
        assert parse_flag(True) is True
        assert parse_flag("yes") is True
        assert parse_flag(" TRUE ") is True
        assert parse_flag("1") is True

    def test_false_strings(self):
        """Negative, empty and unknown text counts as off."""
        assert parse_flag("false") is False
        assert parse_flag("no") is False
        assert parse_flag("") is False
        assert parse_flag(None) is False


class TestParseScore:
    """Blank means absent; anything else is coerced."""

    def test_blank_is_absent(self):
        """None, empty and whitespace-only text are absent."""
        assert parse_score(None) is None
        assert parse_score("") is None
        assert parse_score("   ") is None
        assert is_blank("  ") is True

    def test_zero_is_present(self):
        """0 is a score, not an absence."""
        assert parse_score("0") == 0.0
        assert parse_score(0) == 0.0

    def test_garbage_is_zero(self):
        """Unreadable text is present but zero."""
        assert parse_score("abc") == 0.0


class TestCalculateAge:
    """Calendar-year difference adjusted for the birthday."""

    def test_birthday_passed(self):
        """Birthday earlier in the year."""
        assert calculate_age("2010-05-01", today=date(2025, 7, 1)) == 15

    def test_birthday_upcoming_same_month(self):
        """Same month, later day subtracts one."""
        assert calculate_age("2010-07-15", today=date(2025, 7, 1)) == 14

    def test_birthday_upcoming_later_month(self):
        """Later month subtracts one."""
        assert calculate_age("2010-12-01", today=date(2025, 7, 1)) == 14

    def test_birthday_today(self):
        """Birthday on the reference date counts as reached."""
        assert calculate_age("2010-07-01", today=date(2025, 7, 1)) == 15

    def test_leap_day_birthday(self):
        """Feb 29 birthday has not been reached on Feb 28."""
        assert calculate_age("2008-02-29", today=date(2025, 2, 28)) == 16
        assert calculate_age("2008-02-29", today=date(2025, 3, 1)) == 17

    def test_invalid_dob_is_absent(self):
        """Unparseable or empty DOB gives no age."""
        assert calculate_age("", today=date(2025, 7, 1)) is None
        assert calculate_age(None) is None
        assert calculate_age("2010-13-40") is None
        assert parse_date_of_birth("01/05/2010") is None


class TestFormatNumber:
    """Integral values print without decimals."""

    def test_integral(self):
        assert format_number(40.0) == "40"
        assert format_number(0.0) == "0"

    def test_fractional(self):
        assert format_number(12.5) == "12.5"
