"""Matter classification models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .types import Domain, Jurisdiction, PartyRole, PartyType, Pillar, SandboxTier, Urgency


class ClassificationInput(BaseModel):
    """Free-text hints supplied at intake."""

    domain_hint: str | None = Field(None, description="Free-text description of the problem area")
    jurisdiction_hint: str | None = Field(None, description="Free-text jurisdiction hint")
    claimant_type: PartyType | None = None
    respondent_type: PartyType | None = None
    dispute_amount: float | None = Field(None, ge=0)
    urgency_hint: Urgency | None = None
    key_dates: list[str] = Field(default_factory=list, description="ISO dates in chronological order")

    # Free text forwarded to domain modules
    description: str | None = None
    notes: list[str] = Field(default_factory=list)
    sub_category: str | None = None
    party_name: str | None = None
    party_role: PartyRole | None = None


class Parties(BaseModel):
    """Claimant and respondent types."""

    claimant_type: PartyType = PartyType.INDIVIDUAL
    respondent_type: PartyType = PartyType.BUSINESS
    names: list[str] = Field(default_factory=list)


class MatterTimeline(BaseModel):
    """Key dates supplied at intake."""

    key_dates: list[str] = Field(default_factory=list)
    start: str | None = None
    end: str | None = None


class MatterClassification(BaseModel):
    """Structured classification of a described legal problem."""

    id: str
    domain: Domain
    jurisdiction: Jurisdiction
    parties: Parties = Field(default_factory=Parties)
    timeline: MatterTimeline = Field(default_factory=MatterTimeline)
    urgency: Urgency = Urgency.MEDIUM
    dispute_amount: float | None = None
    status: str = "classified"

    description: str | None = None
    notes: list[str] = Field(default_factory=list)
    sub_category: str | None = None
    party_name: str | None = None
    party_role: PartyRole | None = None

    # Attached by the orchestrator after intake
    pillar: Pillar | None = None
    pillar_matches: list[Pillar] = Field(default_factory=list)
    pillar_explanation: dict[str, Any] | None = None
    upl_tier: SandboxTier | None = None
    journey: dict[str, Any] | None = None


# =============================================================================
# Confidence Scoring
# =============================================================================


class ConfidenceFactors(BaseModel):
    """Signals that fed the confidence score."""

    keyword_matches: int = 0
    explicit_hints: bool = False
    multiple_indicators: bool = False
    conflicting_signals: bool = False


class ConfidenceScore(BaseModel):
    """Confidence breakdown, each component 0-100."""

    overall: int
    domain_confidence: int
    jurisdiction_confidence: int
    urgency_confidence: int
    factors: ConfidenceFactors = Field(default_factory=ConfidenceFactors)


class UncertaintyFactor(BaseModel):
    """Something that may make the classification unreliable."""

    type: str  # ambiguous-domain, insufficient-information, overlapping-domains, jurisdiction-unclear
    description: str
    severity: str
    recommendation: str


class AlternativeDomain(BaseModel):
    """A lower-ranked domain candidate."""

    domain: Domain
    confidence: int
    reasoning: str


class ClassificationResult(BaseModel):
    """Classification plus confidence and uncertainty information."""

    classification: MatterClassification
    confidence: ConfidenceScore
    uncertainties: list[UncertaintyFactor] = Field(default_factory=list)
    alternative_domains: list[AlternativeDomain] = Field(default_factory=list)
