"""PDF rendering of a recommendation summary.

Fixed template: a title, a shaded summary block (composite score and
recommended treatment) and a clinical notes block, one line per note.
"""
import logging
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from treatment_protocol.shared.models import RecommendationResult
from .config import ExportConfig

logger = logging.getLogger(__name__)


def get_styles(config: ExportConfig):
    """Get the stylesheet with the summary styles added."""
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name='SummaryTitle', parent=styles['Heading1'], fontName='Helvetica-Bold',
        fontSize=18, leading=22, textColor=colors.HexColor(config.title_color),
    ))
    styles.add(ParagraphStyle(
        name='SectionHeading', parent=styles['Heading2'], fontSize=14, leading=18,
        spaceBefore=12,
    ))
    styles.add(ParagraphStyle(
        name='SummaryBody', parent=styles['Normal'], fontName='Helvetica', fontSize=10.5,
        leading=16,
    ))
    return styles


def summary_lines(result: RecommendationResult) -> List[str]:
    """Summary block text, score formatted to two decimals."""
    return [
        f"<b>Composite Score:</b> {result.composite_score:.2f}",
        f"<b>Recommended Treatment:</b> {escape(result.recommendation_label)}",
    ]


def build_elements(result: RecommendationResult, config: ExportConfig) -> list:
    """Build the flowables for one summary document."""
    styles = get_styles(config)
    elements = [Paragraph(escape(config.title), styles['SummaryTitle']), Spacer(1, 6)]

    summary = Table(
        [[Paragraph(line, styles['SummaryBody'])] for line in summary_lines(result)],
        colWidths=[170 * mm],
    )
    summary.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, -1), colors.HexColor(config.summary_background)),
        ('LEFTPADDING', (0, 0), (-1, -1), 12),
        ('RIGHTPADDING', (0, 0), (-1, -1), 12),
        ('TOPPADDING', (0, 0), (0, 0), 10),
        ('BOTTOMPADDING', (0, -1), (-1, -1), 10),
    ]))
    elements.append(summary)

    elements.append(Paragraph(escape(config.notes_heading), styles['SectionHeading']))
    if result.clinical_notes:
        notes_markup = "<br/>".join(escape(note) for note in result.clinical_notes)
        elements.append(Paragraph(notes_markup, styles['SummaryBody']))
    return elements


def render_summary_pdf(
    result: RecommendationResult,
    output_path: str,
    config: Optional[ExportConfig] = None,
) -> str:
    """Render the summary document to a PDF file.

    Args:
        result: Evaluated recommendation snapshot
        output_path: Destination file path
        config: Template settings

    Returns:
        The path written
    """
    config = config or ExportConfig()
    doc = SimpleDocTemplate(
        output_path,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=config.title,
    )
    doc.build(build_elements(result, config))
    logger.info(
        "SUMMARY_PDF_RENDERED",
        extra={"output_path": output_path, "note_count": len(result.clinical_notes)}
    )
    return output_path
