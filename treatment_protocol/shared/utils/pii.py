"""PII handling: clinical notes never appear in application logs.

The notes carry the patient name and date of birth in clear text. They are
printed into the exported summary, which is a clinician-facing document,
but logs only ever see a fingerprint of them.
"""
import hashlib


def hash_text_for_audit(text: str) -> str:
    """Fingerprint document text for the export audit trail.

    Lets an exported summary be matched against the notes it was built
    from without logging the notes themselves.

    Args:
        text: Raw notes text

    Returns:
        SHA-256 hash of the text
    """
    return hashlib.sha256(text.encode()).hexdigest()
