"""Matter classifier - keyword rules mapping intake hints to a classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import (
    AlternativeDomain,
    ClassificationInput,
    ClassificationResult,
    ConfidenceFactors,
    ConfidenceScore,
    Domain,
    Jurisdiction,
    MatterClassification,
    MatterTimeline,
    Parties,
    PartyType,
    UncertaintyFactor,
    Urgency,
    generate_id,
)


# =============================================================================
# Domain Rules
# =============================================================================


@dataclass(frozen=True)
class DomainRule:
    """A keyword predicate and the domain it selects."""

    domain: Domain
    predicate: Callable[[str], bool]
    description: str = ""


def _any_of(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


MALPRACTICE_KEYWORDS = (
    "malpractice",
    "solicitor negligence",
    "lawyer negligence",
    "professional negligence",
    "missed limitation",
    "missed deadline",
    "missed filing",
    "missed court filing",
    "missed court date",
    "failed to file",
    "failed to serve",
    "lawyer missed",
    "lawyer error",
    "attorney error",
    "lawyer mistake",
    "legal error",
    "professional misconduct",
    "lawpro",
    "case within a case",
)


def _is_malpractice(text: str) -> bool:
    if any(keyword in text for keyword in MALPRACTICE_KEYWORDS):
        return True
    return "retainer" in text and "breach" in text


# Evaluated first-match-wins. Malpractice must precede civil-negligence so a
# lawyer's missed deadline is not read as ordinary negligence; municipal
# must precede civil-negligence because both match "damage"-style wording.
DOMAIN_RULES: list[DomainRule] = [
    DomainRule(Domain.LEGAL_MALPRACTICE, _is_malpractice, "lawyer error or missed deadline"),
    DomainRule(
        Domain.ESTATE_SUCCESSION,
        _any_of(
            "estate",
            "probate",
            "succession",
            "will challenge",
            "will_challenge",
            "inheritance",
            "dependant support",
            "dependant_support",
            "estate trustee",
        ),
        "wills, probate and dependant support",
    ),
    DomainRule(
        Domain.CRIMINAL,
        _any_of(
            "criminal",
            "assault",
            "threat",
            "uttering",
            "violence",
            "arrested",
            "charged",
            "police",
            "crown",
        ),
        "police involvement or charges",
    ),
    DomainRule(
        Domain.MUNICIPAL_PROPERTY_DAMAGE,
        _any_of("municipal", "city", "road", "sidewalk", "notice"),
        "municipal infrastructure",
    ),
    DomainRule(
        Domain.CIVIL_NEGLIGENCE,
        _any_of("civil-negligence", "negligence", "tort", "tree", "damage", "injury", "slip", "fall"),
        "negligence and property damage",
    ),
    DomainRule(
        Domain.LANDLORD_TENANT,
        _any_of("tenant", "ltb", "landlord", "eviction", "rent"),
        "residential tenancy",
    ),
    DomainRule(Domain.INSURANCE, _any_of("insurance", "claim", "policy"), "insurance claims"),
    DomainRule(
        Domain.EMPLOYMENT,
        _any_of("employment", "work", "termination", "severance", "dismissal"),
        "employment",
    ),
    DomainRule(
        Domain.HUMAN_RIGHTS,
        _any_of("human rights", "hrto", "discrimination", "harassment"),
        "human rights",
    ),
    DomainRule(
        Domain.CONSUMER_PROTECTION,
        _any_of("consumer", "refund", "warranty", "service", "unfair", "chargeback"),
        "consumer transactions",
    ),
]


def resolve_domain(hint: str | None, rules: list[DomainRule] | None = None) -> Domain:
    """Resolve a domain from a free-text hint; ``other`` when nothing matches."""
    if not hint:
        return Domain.OTHER
    text = hint.lower()
    for rule in rules if rules is not None else DOMAIN_RULES:
        if rule.predicate(text):
            return rule.domain
    return Domain.OTHER


def resolve_jurisdiction(hint: str | None, default: Jurisdiction | str | None = None) -> Jurisdiction:
    """Federal or Ontario when the hint names one, otherwise ``default``.

    ``default`` falls back to the ``default_jurisdiction`` setting.
    """
    if default is None:
        default = get_settings().default_jurisdiction
    default = Jurisdiction(default)
    if not hint:
        return default
    text = hint.lower()
    if "federal" in text or "canada" in text:
        return Jurisdiction.FEDERAL
    if "ontario" in text:
        return Jurisdiction.ONTARIO
    return default


# =============================================================================
# Confidence Weights
# =============================================================================


@dataclass(frozen=True)
class WeightedKeywords:
    """Keyword set with a base confidence weight."""

    domain: Domain
    keywords: tuple[str, ...]
    weight: int


CONFIDENCE_WEIGHTS: list[WeightedKeywords] = [
    WeightedKeywords(
        Domain.LEGAL_MALPRACTICE,
        ("malpractice", "solicitor negligence", "lawyer negligence", "missed limitation", "lawpro"),
        95,
    ),
    WeightedKeywords(
        Domain.CRIMINAL,
        ("criminal", "assault", "threat", "arrested", "charged", "police"),
        90,
    ),
    WeightedKeywords(Domain.MUNICIPAL_PROPERTY_DAMAGE, ("municipal", "city", "road", "sidewalk"), 85),
    WeightedKeywords(
        Domain.CIVIL_NEGLIGENCE,
        ("negligence", "tort", "damage", "injury", "slip", "fall"),
        75,
    ),
]

NO_HINT_CONFIDENCE = 30
KEYWORD_BONUS = 5


# =============================================================================
# Classifier
# =============================================================================


class MatterClassifier:
    """Turns intake hints into a :class:`MatterClassification`.

    ``classify`` is total: any input, including an empty one, produces a
    classification.
    """

    def __init__(self, rules: list[DomainRule] | None = None):
        self.rules = rules if rules is not None else DOMAIN_RULES

    def classify(self, data: ClassificationInput | dict | None = None) -> MatterClassification:
        """Classify a matter from intake hints."""
        data = self._coerce(data)
        key_dates = list(data.key_dates)
        return MatterClassification(
            id=generate_id("mc"),
            domain=resolve_domain(data.domain_hint, self.rules),
            jurisdiction=resolve_jurisdiction(data.jurisdiction_hint),
            parties=Parties(
                claimant_type=data.claimant_type or PartyType.INDIVIDUAL,
                respondent_type=data.respondent_type or PartyType.BUSINESS,
                names=[data.party_name] if data.party_name else [],
            ),
            timeline=MatterTimeline(
                key_dates=key_dates,
                start=key_dates[0] if key_dates else None,
                end=key_dates[-1] if key_dates else None,
            ),
            urgency=data.urgency_hint or Urgency.MEDIUM,
            dispute_amount=data.dispute_amount,
            status="classified",
            description=data.description or data.domain_hint,
            notes=list(data.notes),
            sub_category=data.sub_category,
            party_name=data.party_name,
            party_role=data.party_role,
        )

    def classify_with_confidence(
        self, data: ClassificationInput | dict | None = None
    ) -> ClassificationResult:
        """Classify and attach confidence scores and uncertainty factors."""
        data = self._coerce(data)
        classification = self.classify(data)

        domain_confidence, keyword_matches, alternatives = self._analyze_domain(data.domain_hint)
        jurisdiction_confidence = self._analyze_jurisdiction(data.jurisdiction_hint)
        urgency_confidence = 100 if data.urgency_hint else 40

        overall = round(
            domain_confidence * 0.5 + jurisdiction_confidence * 0.3 + urgency_confidence * 0.2
        )
        confidence = ConfidenceScore(
            overall=overall,
            domain_confidence=domain_confidence,
            jurisdiction_confidence=jurisdiction_confidence,
            urgency_confidence=urgency_confidence,
            factors=ConfidenceFactors(
                keyword_matches=keyword_matches,
                explicit_hints=bool(data.domain_hint or data.jurisdiction_hint or data.urgency_hint),
                multiple_indicators=keyword_matches >= 2,
                conflicting_signals=len(alternatives) > 1,
            ),
        )

        uncertainties = self._identify_uncertainties(
            data, domain_confidence, jurisdiction_confidence, alternatives
        )
        return ClassificationResult(
            classification=classification,
            confidence=confidence,
            uncertainties=uncertainties,
            alternative_domains=alternatives,
        )

    def _coerce(self, data: ClassificationInput | dict | None) -> ClassificationInput:
        if data is None:
            return ClassificationInput()
        if isinstance(data, dict):
            return ClassificationInput(**data)
        return data

    def _analyze_domain(self, hint: str | None) -> tuple[int, int, list[AlternativeDomain]]:
        if not hint:
            return NO_HINT_CONFIDENCE, 0, []

        text = hint.lower()
        scored: list[tuple[int, WeightedKeywords, list[str]]] = []
        for entry in CONFIDENCE_WEIGHTS:
            matched = [keyword for keyword in entry.keywords if keyword in text]
            if matched:
                score = min(100, entry.weight + len(matched) * KEYWORD_BONUS)
                scored.append((score, entry, matched))

        if not scored:
            return NO_HINT_CONFIDENCE, 0, []

        scored.sort(key=lambda s: s[0], reverse=True)
        primary_score, _, primary_matches = scored[0]
        alternatives = [
            AlternativeDomain(
                domain=entry.domain,
                confidence=score,
                reasoning=f"Matched {len(matched)} keyword(s): {', '.join(matched)}",
            )
            for score, entry, matched in scored[1:3]
        ]
        return primary_score, len(primary_matches), alternatives

    def _analyze_jurisdiction(self, hint: str | None) -> int:
        if not hint:
            return 50
        text = hint.lower()
        if "ontario" in text:
            return 95
        if "federal" in text or "canada" in text:
            return 90
        return 70

    def _identify_uncertainties(
        self,
        data: ClassificationInput,
        domain_confidence: int,
        jurisdiction_confidence: int,
        alternatives: list[AlternativeDomain],
    ) -> list[UncertaintyFactor]:
        uncertainties: list[UncertaintyFactor] = []

        if alternatives:
            uncertainties.append(
                UncertaintyFactor(
                    type="overlapping-domains",
                    description="Multiple domains detected: "
                    + ", ".join(alt.domain.value for alt in alternatives),
                    severity="high" if len(alternatives) >= 2 else "medium",
                    recommendation="Review alternative domain classifications and ask clarifying questions",
                )
            )
        if not data.domain_hint:
            uncertainties.append(
                UncertaintyFactor(
                    type="insufficient-information",
                    description="No domain hint provided; classification based on defaults",
                    severity="high",
                    recommendation="Collect more details about the legal issue",
                )
            )
        if domain_confidence < 50:
            uncertainties.append(
                UncertaintyFactor(
                    type="ambiguous-domain",
                    description=f"Low confidence ({domain_confidence}%) in domain classification",
                    severity="high",
                    recommendation="Request additional details to clarify the legal domain",
                )
            )
        if jurisdiction_confidence < 70:
            uncertainties.append(
                UncertaintyFactor(
                    type="jurisdiction-unclear",
                    description="Jurisdiction not clearly specified",
                    severity="medium",
                    recommendation="Confirm the jurisdiction (Ontario or Federal) with the user",
                )
            )
        return uncertainties
