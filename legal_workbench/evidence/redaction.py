"""PII redaction for evidence previews."""

from __future__ import annotations

import re

from legal_workbench.core.ontology import RedactionFinding, RedactionResult

REDACTED = "[REDACTED]"

# Applied in order; earlier patterns consume text before later ones run
PII_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("email", re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)),
    ("phone", re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")),
    ("sin", re.compile(r"\b\d{3}-\d{3}-\d{3}\b|\b\d{9}\b")),
    ("dob", re.compile(r"\b\d{4}-\d{2}-\d{2}\b|\b\d{2}/\d{2}/\d{4}\b")),
    ("account", re.compile(r"\b\d{8,}\b")),
]


def redact_pii(text: str) -> RedactionResult:
    """Replace personal identifiers with a marker and record each one."""
    findings: list[RedactionFinding] = []
    redacted = text
    for pii_type, pattern in PII_PATTERNS:

        def _collect(match: re.Match[str], pii_type: str = pii_type) -> str:
            findings.append(RedactionFinding(type=pii_type, value=match.group(0)))
            return REDACTED

        redacted = pattern.sub(_collect, redacted)
    return RedactionResult(redacted=redacted, findings=findings)
