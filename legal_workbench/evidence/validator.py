"""File validation by extension and magic bytes."""

from __future__ import annotations

import re
from pathlib import PurePath

from legal_workbench.core.ontology import EvidenceType, ValidationResult

MAGIC_BYTES: dict[EvidenceType, bytes] = {
    EvidenceType.PDF: b"%PDF",
    EvidenceType.PNG: b"\x89PNG",
    EvidenceType.JPG: b"\xff\xd8\xff",
    EvidenceType.MSG: b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1",  # OLE compound file
}

HEADER_ERRORS: dict[EvidenceType, str] = {
    EvidenceType.PDF: "Invalid PDF header",
    EvidenceType.PNG: "Invalid PNG header",
    EvidenceType.JPG: "Invalid JPEG header",
    EvidenceType.MSG: "MSG missing OLE header",
}

EXTENSION_TYPES: dict[str, EvidenceType] = {
    "pdf": EvidenceType.PDF,
    "png": EvidenceType.PNG,
    "jpg": EvidenceType.JPG,
    "jpeg": EvidenceType.JPG,
    "eml": EvidenceType.EML,
    "msg": EvidenceType.MSG,
    "txt": EvidenceType.TXT,
}

EML_HEADER = re.compile(r"^(From:|Date:|Subject:|To:)", re.MULTILINE)


def detect_type(filename: str) -> EvidenceType | None:
    """Map a filename's extension to an evidence type."""
    suffix = PurePath(filename).suffix.lower().lstrip(".")
    return EXTENSION_TYPES.get(suffix)


def validate_file(filename: str, content: bytes) -> ValidationResult:
    """Validate a file's declared type against its content.

    Rejections are returned with ``ok=False``; nothing is raised.
    """
    evidence_type = detect_type(filename)
    if evidence_type is None:
        return ValidationResult(ok=False, errors=["Unsupported extension"])

    if evidence_type == EvidenceType.TXT:
        return ValidationResult(ok=True, type=evidence_type)

    if evidence_type == EvidenceType.EML:
        text = content.decode("utf-8", errors="replace")
        if EML_HEADER.search(text):
            return ValidationResult(ok=True, type=evidence_type)
        return ValidationResult(ok=False, type=evidence_type, errors=["EML missing standard headers"])

    if content.startswith(MAGIC_BYTES[evidence_type]):
        return ValidationResult(ok=True, type=evidence_type)
    return ValidationResult(ok=False, type=evidence_type, errors=[HEADER_ERRORS[evidence_type]])
