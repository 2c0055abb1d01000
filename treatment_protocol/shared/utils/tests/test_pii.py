"""Tests for notes fingerprinting - patient identity must never reach the logs."""
import hashlib

from treatment_protocol.shared.utils import hash_text_for_audit


class TestHashTextForAudit:
    """Notes fingerprints."""

    def test_fingerprint_is_stable(self):
        """Same text gives the same 64-char hex digest."""
        first = hash_text_for_audit("Patient Name: Jane Doe")

        assert first == hash_text_for_audit("Patient Name: Jane Doe")
        assert len(first) == 64
        assert "Jane" not in first

    def test_fingerprint_is_plain_sha256(self):
        """Fingerprints are unsalted SHA-256 of the UTF-8 text."""
        assert hash_text_for_audit("notes") == hashlib.sha256(b"notes").hexdigest()

    def test_any_change_changes_fingerprint(self):
        """A trailing newline is enough to change the fingerprint."""
        assert hash_text_for_audit("notes") != hash_text_for_audit("notes\n")
