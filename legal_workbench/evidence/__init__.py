"""Evidence - validation, metadata, redaction, indexing and timelines."""

from .validator import EXTENSION_TYPES, MAGIC_BYTES, detect_type, validate_file
from .metadata import extract_metadata, normalize_email_date
from .redaction import PII_PATTERNS, REDACTED, redact_pii
from .indexer import EvidenceIndexer, compute_credibility, hash_content
from .timeline import TimelineGenerator, alerts_to_markdown, gap_risk

__all__ = [
    # Validation
    "EXTENSION_TYPES",
    "MAGIC_BYTES",
    "detect_type",
    "validate_file",
    # Metadata
    "extract_metadata",
    "normalize_email_date",
    # Redaction
    "PII_PATTERNS",
    "REDACTED",
    "redact_pii",
    # Indexing
    "EvidenceIndexer",
    "compute_credibility",
    "hash_content",
    # Timeline
    "TimelineGenerator",
    "alerts_to_markdown",
    "gap_risk",
]
