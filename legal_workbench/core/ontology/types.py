"""Shared enumerations and identifier types for the triage ontology.

The string values are the wire values used in JSON exports and in the
YAML seed data, so they keep the casing the rest of the system expects
(``landlordTenant``, ``civil-negligence``, ``official-api``, ...).
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import NewType


# =============================================================================
# Identifier handles
# =============================================================================

EvidenceId = NewType("EvidenceId", str)
AuthorityId = NewType("AuthorityId", str)


def generate_id(prefix: str) -> str:
    """Generate a short prefixed identifier (e.g. ``ev-1a2b3c4d``)."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def now_iso() -> str:
    """Get current UTC time as an ISO 8601 string with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime string into an aware datetime.

    Date-only values are taken as midnight UTC; naive datetimes are taken
    as UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def try_parse_iso(value: str | None) -> datetime | None:
    """Like :func:`parse_iso`, but None for missing or unreadable values."""
    if not value:
        return None
    try:
        return parse_iso(value)
    except (TypeError, ValueError):
        return None


# =============================================================================
# Matter enums
# =============================================================================


class Domain(str, Enum):
    """Legal problem domains handled by triage and drafting."""

    INSURANCE = "insurance"
    LANDLORD_TENANT = "landlordTenant"
    EMPLOYMENT = "employment"
    HUMAN_RIGHTS = "humanRights"
    CIVIL_NEGLIGENCE = "civil-negligence"
    CRIMINAL = "criminal"
    LEGAL_MALPRACTICE = "legalMalpractice"
    ESTATE_SUCCESSION = "estateSuccession"
    MUNICIPAL_PROPERTY_DAMAGE = "municipalPropertyDamage"
    CONSUMER_PROTECTION = "consumerProtection"
    OTHER = "other"


class Jurisdiction(str, Enum):
    """Jurisdictions the router distinguishes."""

    ONTARIO = "Ontario"
    FEDERAL = "Federal"


class PartyType(str, Enum):
    """Type of claimant or respondent."""

    INDIVIDUAL = "individual"
    BUSINESS = "business"
    GOVERNMENT = "government"


class PartyRole(str, Enum):
    """Role of the user in a criminal matter."""

    ACCUSED = "accused"
    VICTIM = "victim"
    COMPLAINANT = "complainant"
    WITNESS = "witness"


class Urgency(str, Enum):
    """Urgency levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(str, Enum):
    """Risk levels for timelines and gaps."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Pillar(str, Enum):
    """Top-level legal character of a matter."""

    CRIMINAL = "Criminal"
    CIVIL = "Civil"
    ADMINISTRATIVE = "Administrative"
    QUASI_CRIMINAL = "Quasi-Criminal"
    UNKNOWN = "Unknown"


class AuthorityType(str, Enum):
    """Kind of forum."""

    COURT = "court"
    TRIBUNAL = "tribunal"
    AGENCY = "agency"


# =============================================================================
# Evidence enums
# =============================================================================


class EvidenceType(str, Enum):
    """Supported evidence file types."""

    PDF = "PDF"
    PNG = "PNG"
    JPG = "JPG"
    EML = "EML"
    MSG = "MSG"
    TXT = "TXT"


class Provenance(str, Enum):
    """How a piece of evidence was obtained."""

    USER_PROVIDED = "user-provided"
    OFFICIAL_API = "official-api"
    OFFICIAL_LINK = "official-link"


class SourceService(str, Enum):
    """Official legal information services usable as citation sources."""

    CANLII = "CanLII"
    E_LAWS = "e-Laws"
    JUSTICE_LAWS = "Justice Laws"


# Deterministic order used when picking a citation source
SOURCE_PRIORITY: tuple[SourceService, ...] = (
    SourceService.CANLII,
    SourceService.E_LAWS,
    SourceService.JUSTICE_LAWS,
)


# =============================================================================
# Audit enums
# =============================================================================


class AuditEventType(str, Enum):
    """Audit event categories."""

    SOURCE_ACCESS = "source-access"
    EXPORT = "export"
    DELETION = "deletion"
    RETENTION_UPDATE = "retention-update"
    LEGAL_HOLD = "legal-hold"
    OTHER = "other"


class DeletionStatus(str, Enum):
    """Outcome of a deletion request."""

    PENDING = "pending"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class SandboxTier(str, Enum):
    """UPL boundary tiers."""

    PUBLIC_INFO = "public-info"
    PARALEGAL_SUPERVISED = "paralegal-supervised"
    A2I_SANDBOX = "a2i-sandbox"
