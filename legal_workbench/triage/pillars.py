"""Legal pillar classification and plain-language explanations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import Pillar


# =============================================================================
# Pillar Keywords
# =============================================================================


PILLAR_KEYWORDS: dict[Pillar, tuple[str, ...]] = {
    Pillar.CRIMINAL: (
        "assault",
        "theft",
        "robbery",
        "murder",
        "homicide",
        "sexual assault",
        "uttering threats",
        "possession",
        "arrested",
        "police",
        "911",
        "charges laid",
    ),
    Pillar.QUASI_CRIMINAL: (
        "by-law",
        "bylaw",
        "penalty",
        "ticket",
        "parking ticket",
        "municipal fine",
        "provincial offence",
        "offence",
        "speeding",
        "traffic violation",
    ),
    Pillar.ADMINISTRATIVE: (
        "landlord",
        "ltb",
        "hrto",
        "fsra",
        "ombudsman",
        "licensing",
        "regulator",
        "tribunal",
        "hearing",
        "permit",
        "appeal",
        "eviction",
        "rent deposit",
    ),
    Pillar.CIVIL: (
        "negligence",
        "tort",
        "property damage",
        "small claims",
        "breach of contract",
        "damages",
        "personal injury",
        "slip and fall",
        "defamation",
        "defamatory",
        "hired",
        "contractor",
        "mechanic",
        "repair",
        "refund",
        "not responding",
        "consumer",
        "paid advance",
        "took money",
        "tree fell",
        "tree damage",
        "gazebo",
        "fence",
        "neighbour",
        "neighbor",
    ),
}


class PillarClassifier:
    """Keyword-based pillar detection."""

    def __init__(self, keywords: dict[Pillar, tuple[str, ...]] | None = None):
        self.keywords = keywords or PILLAR_KEYWORDS

    def detect_all_pillars(self, text: str | None) -> list[Pillar]:
        """Return every pillar whose keyword set matches, in table order."""
        if not text or not text.strip():
            return []
        lowered = text.lower()
        return [
            pillar
            for pillar, keywords in self.keywords.items()
            if any(keyword in lowered for keyword in keywords)
        ]

    def classify(self, text: str | None) -> Pillar:
        """Classify text into exactly one pillar.

        Multiple matches resolve to Criminal when it is among them, otherwise
        Unknown so a human reviews the matter.
        """
        matches = self.detect_all_pillars(text)
        if not matches:
            return Pillar.UNKNOWN
        if len(matches) == 1:
            return matches[0]
        if Pillar.CRIMINAL in matches:
            return Pillar.CRIMINAL
        return Pillar.UNKNOWN


# =============================================================================
# Explanations
# =============================================================================


class PillarExplanation(BaseModel):
    """Plain-language explanation of a pillar."""

    pillar: Pillar
    burden_of_proof: str
    overview: str
    next_steps: list[str] = Field(default_factory=list)


BURDEN_OF_PROOF: dict[Pillar, str] = {
    Pillar.CRIMINAL: "Beyond a reasonable doubt",
    Pillar.CIVIL: "Balance of probabilities",
    Pillar.ADMINISTRATIVE: "Balance of probabilities (varies by tribunal)",
    Pillar.QUASI_CRIMINAL: "Often lower than criminal; varies by statute",
    Pillar.UNKNOWN: "Varies",
}

PILLAR_OVERVIEWS: dict[Pillar, str] = {
    Pillar.CRIMINAL: (
        "Criminal matters are prosecuted by the Crown. The complainant is a witness, "
        "not a party, and the accused has the right to remain silent."
    ),
    Pillar.CIVIL: (
        "Civil matters are disputes between private parties, usually about money or "
        "property. The person bringing the claim has to prove it."
    ),
    Pillar.ADMINISTRATIVE: (
        "Administrative matters are decided by tribunals or regulators under a "
        "specific statute, with their own forms, deadlines and procedures."
    ),
    Pillar.QUASI_CRIMINAL: (
        "Quasi-criminal matters involve provincial offences or by-law charges. "
        "Penalties are usually fines, and deadlines to respond are short."
    ),
    Pillar.UNKNOWN: (
        "The legal character of this matter is not yet clear. More detail is needed "
        "before a pathway can be described."
    ),
}

PILLAR_STEPS: dict[Pillar, list[str]] = {
    Pillar.CRIMINAL: [
        "Contact victim services or duty counsel for information about the process",
        "Keep a record of every contact with police and the Crown",
    ],
    Pillar.CIVIL: [
        "Collect documents, photos and receipts that show what happened and what it cost",
        "Note the two-year general limitation period from the date of discovery",
    ],
    Pillar.ADMINISTRATIVE: [
        "Identify the tribunal or regulator and download its current forms",
        "Check the filing deadline set by the governing statute",
    ],
    Pillar.QUASI_CRIMINAL: [
        "Read the ticket or notice for the response deadline and options",
        "Decide whether to pay, request a meeting or request a trial before the deadline",
    ],
    Pillar.UNKNOWN: [
        "Describe what happened, who was involved and when",
        "Speak with a community legal clinic to identify the right pathway",
    ],
}

# Keyed by substrings matched against the domain name
DOMAIN_STEPS: list[tuple[tuple[str, ...], list[str]]] = [
    (
        ("insurance",),
        [
            "Request the insurer's written decision and the policy wording it relies on",
            "Use the insurer's internal complaint process before external escalation",
            "Note the deadline to escalate to the ombudservice or FSRA",
        ],
    ),
    (
        ("landlord", "ltb", "tenant"),
        [
            "Keep rent receipts, the lease and written notices together",
            "Check the LTB form that matches the issue (T1, T2, T6 or L-series)",
            "Serve documents as the LTB rules require and keep proof of service",
        ],
    ),
    (
        ("civil", "small", "negligence"),
        [
            "Send a demand letter that sets out the loss and a response date",
            "Confirm the claim is within the Small Claims Court monetary limit",
            "Prepare Form 7A with numbered attachments matching the evidence list",
        ],
    ),
]


class PillarExplainer:
    """Static explanations per pillar, with domain-specific next steps."""

    def explain(self, pillar: Pillar | str, domain: str | None = None) -> PillarExplanation:
        """Explain a pillar. A domain only ever adds steps."""
        pillar = Pillar(pillar)
        steps = list(PILLAR_STEPS[pillar])
        if domain:
            lowered = domain.lower()
            for keys, extra in DOMAIN_STEPS:
                if any(key in lowered for key in keys):
                    steps.extend(extra)
                    break
        return PillarExplanation(
            pillar=pillar,
            burden_of_proof=BURDEN_OF_PROOF[pillar],
            overview=PILLAR_OVERVIEWS[pillar],
            next_steps=steps,
        )
