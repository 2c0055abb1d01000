"""Tests for the PDF summary renderer.

Rendered documents are read back with pypdf to check the template text.
"""
import pytest
from pypdf import PdfReader

from treatment_protocol.shared.models import RecommendationResult
from treatment_protocol.services.export_service import ExportConfig, render_summary_pdf
from treatment_protocol.services.export_service.renderer import summary_lines


def extract_pdf_text(pdf_path) -> str:
    """Extract all text from a PDF file, whitespace collapsed."""
    reader = PdfReader(str(pdf_path))
    text = ""
    for page in reader.pages:
        text += page.extract_text() + "\n"
    return " ".join(text.split())


@pytest.fixture
def result():
    """A short recommendation result."""
    return RecommendationResult(
        composite_score=61.5079365,
        recommendation_label="IOP or PHP (if higher trauma/impairment)",
        clinical_notes=[
            "Patient Name: Jane Doe",
            "DASS-21 Total Score: 40 (Max 63). Severity: Extremely Severe",
            "Neurotransmitter Panel: Test Not Run",
        ],
        band_label="IOP or PHP (if higher trauma/impairment)",
        age_eligible=True,
    )


class TestSummaryLines:
    """Tests for the summary block text."""

    def test_score_has_two_decimals(self, result):
        """Composite score is formatted to two decimal places."""
        lines = summary_lines(result)
        assert lines[0] == "<b>Composite Score:</b> 61.51"

    def test_label_is_escaped(self):
        """Markup characters in the label are escaped."""
        lines = summary_lines(RecommendationResult(
            composite_score=0.0,
            recommendation_label="A & B <C>",
        ))
        assert lines[1].endswith("A &amp; B &lt;C&gt;")


class TestRenderSummaryPdf:
    """Tests for the rendered document."""

    def test_writes_pdf(self, result, tmp_path):
        """A PDF file is written at the requested path."""
        output = tmp_path / "summary.pdf"
        returned = render_summary_pdf(result, str(output))

        assert returned == str(output)
        assert output.read_bytes().startswith(b"%PDF")

    def test_document_contains_template_sections(self, result, tmp_path):
        """Title, summary block and notes block are all present."""
        output = tmp_path / "summary.pdf"
        render_summary_pdf(result, str(output))
        text = extract_pdf_text(output)

        assert "Treatment Recommendation Summary" in text
        assert "Composite Score:" in text
        assert "61.51" in text
        assert "Recommended Treatment:" in text
        assert "IOP or PHP (if higher trauma/impairment)" in text
        assert "Clinical Notes" in text
        for note in result.clinical_notes:
            assert note in text

    def test_custom_title(self, result, tmp_path):
        """Template title comes from ExportConfig."""
        output = tmp_path / "summary.pdf"
        render_summary_pdf(result, str(output), ExportConfig(title="Intake Summary"))

        assert "Intake Summary" in extract_pdf_text(output)

    def test_markup_in_notes_does_not_break_render(self, tmp_path):
        """Names with markup characters render as text."""
        output = tmp_path / "summary.pdf"
        render_summary_pdf(
            RecommendationResult(
                composite_score=0.0,
                recommendation_label="Individual Counseling",
                clinical_notes=["Patient Name: Jane <Doe> & Co"],
            ),
            str(output),
        )

        assert "Jane <Doe> & Co" in extract_pdf_text(output)

    def test_empty_notes(self, tmp_path):
        """A result without notes still renders."""
        output = tmp_path / "summary.pdf"
        render_summary_pdf(
            RecommendationResult(composite_score=0.0, recommendation_label="Individual Counseling"),
            str(output),
        )

        assert "Clinical Notes" in extract_pdf_text(output)
