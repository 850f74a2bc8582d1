"""Type-specific metadata extraction."""

from __future__ import annotations

import re
from datetime import timezone
from email.utils import parsedate_to_datetime

from legal_workbench.core.ontology import EvidenceType, ExtractedMetadata, try_parse_iso

SUMMARY_LENGTH = 200

EML_HEADERS = {
    "date": re.compile(r"^Date:\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    "sender": re.compile(r"^From:\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    "recipient": re.compile(r"^To:\s*(.+)$", re.IGNORECASE | re.MULTILINE),
    "subject": re.compile(r"^Subject:\s*(.+)$", re.IGNORECASE | re.MULTILINE),
}

ISO_DATE = re.compile(r"\b(\d{4}-\d{2}-\d{2})(?:[ T](\d{2}:\d{2}:\d{2})Z?)?")


def normalize_email_date(value: str) -> str | None:
    """Convert an RFC 2822 date header to ISO 8601 UTC, or None if unparseable."""
    try:
        parsed = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def extract_metadata(evidence_type: EvidenceType, content: bytes) -> ExtractedMetadata:
    """Extract date, parties, subject and summary where the type allows it."""
    if evidence_type == EvidenceType.EML:
        text = content.decode("utf-8", errors="replace")
        found = {}
        for field, pattern in EML_HEADERS.items():
            match = pattern.search(text)
            if match:
                found[field] = match.group(1).strip()
        date = normalize_email_date(found["date"]) if "date" in found else None
        return ExtractedMetadata(
            date=date,
            sender=found.get("sender"),
            recipient=found.get("recipient"),
            subject=found.get("subject"),
        )

    if evidence_type == EvidenceType.TXT:
        text = content.decode("utf-8", errors="replace")
        match = ISO_DATE.search(text)
        date = None
        if match:
            date = match.group(1) + (f"T{match.group(2)}" if match.group(2) else "")
            # ISO-shaped tokens such as 2024-13-45 are not dates
            if try_parse_iso(date) is None:
                date = None
        return ExtractedMetadata(date=date, summary=text[:SUMMARY_LENGTH])

    # Binary formats carry no extractable metadata here
    return ExtractedMetadata()
