"""Municipal property damage and the 10-day notice rule."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft, Urgency

from .base import BaseDomainModule, DomainModuleInput

EXPIRED_NOTICE_PHRASES = ("more than 10 days", "over 10 days", "expired")

URGENT_NOTE = (
    "**URGENT:** The notice period may have expired. The Municipal Act requires written notice "
    "within 10 days of the damage. Contact the municipality immediately and speak with a lawyer "
    "or legal clinic about late notice."
)
ON_TIME_NOTE = "**Notice deadline:** within 10 days of discovering the damage."


def notice_may_have_expired(data: DomainModuleInput) -> bool:
    texts = [*data.classification.notes, data.timeline]
    lowered = " ".join(texts).lower()
    return any(phrase in lowered for phrase in EXPIRED_NOTICE_PHRASES)


class MunicipalPropertyDamageModule(BaseDomainModule):
    domain = Domain.MUNICIPAL_PROPERTY_DAMAGE

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        urgent = data.classification.urgency == Urgency.HIGH or notice_may_have_expired(data)
        notice = self.template_draft(
            "Municipal Property Damage: 10-Day Notice Requirement (CRITICAL)",
            "Notice Requirement",
            "municipal/notice_guide",
            {"urgencyNote": URGENT_NOTE if urgent else ON_TIME_NOTE},
        )
        return [
            notice,
            self.template_draft(
                "Municipal Liability and Legal Authority (Municipal Act, 2001)",
                "Liability",
                "municipal/liability_overview",
            ),
            self.template_draft(
                "Evidence Checklist for Municipal Claims", "Checklist", "municipal/evidence_checklist"
            ),
            self.template_draft(
                "Municipal Claim Preparation: Notice of Claim and Demand Letter",
                "Preparation",
                "municipal/claim_preparation",
            ),
            self.template_draft(
                "Escalation and Appeals for Municipal Claims", "Escalation", "municipal/escalation_guide"
            ),
        ]
