"""Summary exporter: renders a recommendation and offers it for sharing.

Failure Handling:
    - Rendering or writing failures raise ExportError
    - An unavailable or failing share target does NOT fail the export;
      the outcome carries a user-facing notice instead
"""
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
import uuid

from treatment_protocol.shared.models import RecommendationResult
from treatment_protocol.shared.utils import hash_text_for_audit
from .config import SHARE_UNAVAILABLE_NOTICE, ExportConfig
from .renderer import render_summary_pdf
from .share import DirectoryShareTarget, ShareTarget

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Base exception for export errors."""
    pass


class RenderError(ExportError):
    """Summary document could not be rendered or written."""
    pass


@dataclass(frozen=True)
class ExportOutcome:
    """Result of one export.

    Immutable - describes the artifact and what happened when sharing it.
    """
    export_id: str
    artifact_path: str
    shared: bool = False
    shared_to: Optional[str] = None
    notice: Optional[str] = None
    exported_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "export_id": self.export_id,
            "artifact_path": self.artifact_path,
            "shared": self.shared,
            "shared_to": self.shared_to,
            "notice": self.notice,
            "exported_at": self.exported_at.isoformat(),
        }


class SummaryExporter:
    """Exports recommendation summaries as PDF documents."""

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        share_target: Optional[ShareTarget] = None,
    ):
        """Initialize exporter.

        Args:
            config: Output locations and template settings
            share_target: Where finished documents are offered (defaults to
                a DirectoryShareTarget on config.share_outbox_dir)
        """
        self.config = config or ExportConfig()
        self.share_target = share_target or DirectoryShareTarget(self.config.share_outbox_dir)

        logger.info(
            "SUMMARY_EXPORTER_INITIALIZED",
            extra={
                "output_dir": self.config.output_dir,
                "share_target": type(self.share_target).__name__,
            }
        )

    def export(self, result: RecommendationResult) -> ExportOutcome:
        """Render the summary and hand it to the share target.

        Args:
            result: Read-only recommendation snapshot

        Returns:
            ExportOutcome, with a notice if sharing was not possible

        Raises:
            RenderError: If the document cannot be rendered or written

        Logs:
            - SUMMARY_EXPORTED: After the PDF is written
            - SHARE_UNAVAILABLE: If the share target cannot be used
            - SHARE_FAILED: If the share target raised
        """
        export_id = f"exp_{uuid.uuid4().hex[:12]}"
        artifact_path = self._render(export_id, result)

        if not self.share_target.is_available():
            logger.warning(
                "SHARE_UNAVAILABLE",
                extra={"export_id": export_id, "artifact_path": artifact_path}
            )
            return ExportOutcome(
                export_id=export_id,
                artifact_path=artifact_path,
                notice=SHARE_UNAVAILABLE_NOTICE,
            )

        try:
            shared_to = self.share_target.share(artifact_path)
        except OSError as e:
            # Artifact is already written - report, don't raise
            logger.error(
                "SHARE_FAILED",
                extra={
                    "export_id": export_id,
                    "error": str(e),
                    "error_type": type(e).__name__,
                }
            )
            return ExportOutcome(
                export_id=export_id,
                artifact_path=artifact_path,
                notice=SHARE_UNAVAILABLE_NOTICE,
            )

        return ExportOutcome(
            export_id=export_id,
            artifact_path=artifact_path,
            shared=True,
            shared_to=shared_to,
        )

    def _render(self, export_id: str, result: RecommendationResult) -> str:
        timestamp = datetime.utcnow().strftime("%Y%m%dT%H%M%S")
        filename = f"{self.config.filename_prefix}_{timestamp}_{export_id}.pdf"
        artifact_path = os.path.join(self.config.output_dir, filename)

        try:
            os.makedirs(self.config.output_dir, exist_ok=True)
            render_summary_pdf(result, artifact_path, self.config)
        except Exception as e:
            logger.error(
                "SUMMARY_RENDER_FAILED",
                extra={
                    "export_id": export_id,
                    "error": str(e),
                    "error_type": type(e).__name__,
                }
            )
            raise RenderError(f"Could not render summary {export_id}: {e}") from e

        logger.info(
            "SUMMARY_EXPORTED",
            extra={
                "export_id": export_id,
                "artifact_path": artifact_path,
                "composite_score": round(result.composite_score, 2),
                "override_triggered": result.override_triggered,
                "notes_hash": hash_text_for_audit(result.notes_text),
            }
        )
        return artifact_path
