"""Export Service: PDF summary of a recommendation.

Components:
- renderer.py: reportlab document template
- share.py: ShareTarget interface and the outbox directory target
- exporter.py: SummaryExporter, ExportOutcome and export errors

Usage:
    from treatment_protocol.services.export_service import SummaryExporter
    outcome = SummaryExporter().export(result)
    if outcome.notice:
        print(outcome.notice)
"""

from .config import ExportConfig, SHARE_UNAVAILABLE_NOTICE
from .exporter import ExportError, ExportOutcome, RenderError, SummaryExporter
from .renderer import render_summary_pdf
from .share import DirectoryShareTarget, ShareTarget

__all__ = [
    "ExportConfig",
    "SHARE_UNAVAILABLE_NOTICE",
    "ExportError",
    "ExportOutcome",
    "RenderError",
    "SummaryExporter",
    "render_summary_pdf",
    "DirectoryShareTarget",
    "ShareTarget",
]
