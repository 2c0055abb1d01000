"""Tests for the reporting-only severity bands."""
from treatment_protocol.services.recommendation_engine.severity import (
    cats_severity,
    classify,
    dass21_severity,
    whodas_severity,
)


class TestDass21Severity:
    """DASS-21: Normal <15, Mild 15-20, Moderate 21-29, Severe 30-38, Extremely Severe >=39."""

    def test_boundary_39_is_extremely_severe(self):
        """39 is the first Extremely Severe score."""
        assert dass21_severity(39) == "Extremely Severe"

    def test_boundary_38_is_severe(self):
        """38 is still Severe."""
        assert dass21_severity(38) == "Severe"

    def test_band_edges(self):
        """Each lower bound starts its band."""
        assert dass21_severity(0) == "Normal"
        assert dass21_severity(14) == "Normal"
        assert dass21_severity(15) == "Mild"
        assert dass21_severity(20) == "Mild"
        assert dass21_severity(21) == "Moderate"
        assert dass21_severity(29) == "Moderate"
        assert dass21_severity(30) == "Severe"
        assert dass21_severity(63) == "Extremely Severe"

    def test_fractional_score_below_bound(self):
        """14.5 has not reached Mild."""
        assert dass21_severity(14.5) == "Normal"


class TestCatsSeverity:
    """CATS: Normal <16, Moderate 16-20, Severe >=21."""

    def test_band_edges(self):
        """Each lower bound starts its band."""
        assert cats_severity(15) == "Normal"
        assert cats_severity(16) == "Moderate"
        assert cats_severity(20) == "Moderate"
        assert cats_severity(21) == "Severe"
        assert cats_severity(60) == "Severe"


class TestWhodasSeverity:
    """WHODAS 2.0: six bands from Not indicated to Extreme disability."""

    def test_below_12_not_indicated(self):
        """Scores under 12 are not indicated."""
        assert whodas_severity(11) == "Not indicated (score below 12)"

    def test_band_edges(self):
        """Each lower bound starts its band."""
        assert whodas_severity(12) == "Little to no disability"
        assert whodas_severity(20) == "Little to no disability"
        assert whodas_severity(21) == "Mild disability"
        assert whodas_severity(30) == "Mild disability"
        assert whodas_severity(31) == "Moderate disability"
        assert whodas_severity(40) == "Moderate disability"
        assert whodas_severity(41) == "Severe disability"
        assert whodas_severity(50) == "Severe disability"
        assert whodas_severity(51) == "Extreme disability"


class TestClassify:
    """Generic table lookup."""

    def test_empty_table_returns_baseline(self):
        """With no bands every score is the baseline."""
        assert classify(99, (), "Baseline") == "Baseline"
