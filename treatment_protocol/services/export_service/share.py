"""Share targets for exported summaries.

A share target receives a finished artifact. Sharing is best effort:
an unavailable target never fails the export itself.
"""
import logging
import os
import shutil
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class ShareTarget(ABC):
    """Destination an exported document can be handed to."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the share mechanism can be used right now."""

    @abstractmethod
    def share(self, artifact_path: str) -> str:
        """Share the artifact and return where it went."""


class DirectoryShareTarget(ShareTarget):
    """Shares artifacts by copying them into an outbox directory.

    Unavailable when no outbox is configured or it is not writable.
    """

    def __init__(self, outbox_dir: Optional[str] = None):
        """Initialize share target.

        Args:
            outbox_dir: Directory to copy artifacts into (None disables sharing)
        """
        self.outbox_dir = outbox_dir

    def is_available(self) -> bool:
        if not self.outbox_dir:
            return False
        try:
            os.makedirs(self.outbox_dir, exist_ok=True)
        except OSError as e:
            logger.warning(
                "SHARE_OUTBOX_UNUSABLE",
                extra={"outbox_dir": self.outbox_dir, "error": str(e)}
            )
            return False
        return os.access(self.outbox_dir, os.W_OK)

    def share(self, artifact_path: str) -> str:
        destination = os.path.join(self.outbox_dir, os.path.basename(artifact_path))
        shutil.copyfile(artifact_path, destination)
        logger.info(
            "ARTIFACT_SHARED",
            extra={"destination": destination}
        )
        return destination
