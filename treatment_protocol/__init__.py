"""Treatment recommendation protocol.

Collects clinical assessment inputs for a single patient, derives a weighted
composite score and maps it to a treatment level, with a PDF summary export.
"""

__version__ = "1.0.0"
