"""Legal malpractice (solicitor's negligence) drafts.

Values the extractor cannot find fall back to ``{{placeholder}}`` tokens.
Each draft has its own confirmation list: an entry is added for the client
name, lawyer name, claim type, missed deadline or damages only where that
draft needs the value and it is still a token. The discovery date never
adds an entry. The case analysis and expert letter always carry their
fixed reminders.
"""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft
from legal_workbench.documents import VariableExtractor, format_amount

from .base import BaseDomainModule, DomainModuleInput

CLIENT_TOKEN = "{{clientName}}"
LAWYER_TOKEN = "{{defendantLawyerName}}"
CLAIM_TYPE_TOKEN = "{{originalClaimType}}"
DEADLINE_TOKEN = "{{missedDeadlineDate}}"
DAMAGES_TOKEN = "{{potentialDamagesAmount}}"
DISCOVERY_TOKEN = "{{discoveryDate}}"


def is_placeholder(value: str) -> bool:
    return value.startswith("{{")


class LegalMalpracticeDomainModule(BaseDomainModule):
    domain = Domain.LEGAL_MALPRACTICE

    def __init__(self, *args, extractor: VariableExtractor | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.extractor = extractor or VariableExtractor()

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        values = self.resolve_values(data)
        client = values["clientName"]
        lawyer = values["lawyerName"]
        claim_type = values["originalClaimType"]
        deadline = values["missedDeadline"]
        damages = values["potentialDamages"]

        lawpro_missing = []
        if is_placeholder(client):
            lawpro_missing.append("Confirm client name for LawPRO notification")
        if is_placeholder(lawyer):
            lawpro_missing.append("Confirm defendant lawyer name and contact information")
        if is_placeholder(deadline):
            lawpro_missing.append("Confirm the specific deadline that was missed")

        case_missing = []
        if is_placeholder(claim_type):
            case_missing.append(
                "Confirm the type of underlying claim (slip-and-fall, contract, employment, etc.)"
            )
        if is_placeholder(damages):
            case_missing.append("Estimate the potential damages value of the original claim")
        case_missing.append("Gather evidence from the original claim to assess likelihood of success")

        expert_missing = []
        if is_placeholder(lawyer):
            expert_missing.append("Confirm defendant lawyer name and practice area")
        expert_missing.append("Identify qualified legal malpractice expert (ideally in same practice area)")

        demand_missing = []
        if is_placeholder(client):
            demand_missing.append("Confirm client full legal name and contact information")
        if is_placeholder(lawyer):
            demand_missing.append("Confirm defendant lawyer full name, firm, and mailing address")
        if is_placeholder(damages):
            demand_missing.append("Calculate estimated damages (original claim value + legal costs incurred)")

        return [
            self.template_draft(
                "LawPRO Immediate Notification Guide",
                "Notification",
                "malpractice/lawpro_notice",
                values,
                missing_confirmations=lawpro_missing,
            ),
            self.template_draft(
                "Case-Within-a-Case Analysis Framework",
                "Analysis",
                "malpractice/case_within_case",
                values,
                missing_confirmations=case_missing,
            ),
            self.template_draft(
                "Expert Witness Instruction Letter Template",
                "Instructions",
                "malpractice/expert_instruction",
                values,
                missing_confirmations=expert_missing,
            ),
            self.template_draft(
                "Formal Demand Letter to Defendant Lawyer",
                "Demand",
                "malpractice/demand_letter",
                values,
                missing_confirmations=demand_missing,
            ),
            self.template_draft(
                "Evidence Preservation Checklist for Malpractice Claims",
                "Checklist",
                "malpractice/evidence_checklist",
                values,
            ),
        ]

    def resolve_values(self, data: DomainModuleInput) -> dict[str, str]:
        """Template values, with placeholder tokens for anything not found."""
        classification = data.classification
        description = classification.description or "\n".join(classification.notes)
        extracted = self.extractor.extract_from_description(description, classification)

        damages = extracted.get("amountClaimed")
        if not damages and classification.dispute_amount:
            damages = format_amount(classification.dispute_amount)

        return {
            "clientName": extracted.get("claimantName") or CLIENT_TOKEN,
            "lawyerName": extracted.get("lawyerName") or extracted.get("respondentName") or LAWYER_TOKEN,
            "originalClaimType": extracted.get("underlyingClaimType") or CLAIM_TYPE_TOKEN,
            "missedDeadline": extracted.get("deadlineDate") or DEADLINE_TOKEN,
            "potentialDamages": damages or DAMAGES_TOKEN,
            "discoveryDate": extracted.get("discoveryDate") or DISCOVERY_TOKEN,
        }
