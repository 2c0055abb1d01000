"""Export Service configuration: document template and output locations."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExportConfig:
    """Configuration for summary export behavior."""

    # Directory the rendered PDF is written to
    output_dir: str = "exports"

    # Outbox the share target copies artifacts into (None disables sharing)
    share_outbox_dir: Optional[str] = None

    # Document template
    title: str = "Treatment Recommendation Summary"
    notes_heading: str = "Clinical Notes"
    filename_prefix: str = "treatment_summary"

    # Colours from the original form styling
    title_color: str = "#4f46e5"
    summary_background: str = "#eef2ff"


SHARE_UNAVAILABLE_NOTICE = "Sharing is not available on this device"
