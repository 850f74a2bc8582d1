"""Estates, probate and dependant support."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft

from .base import BaseDomainModule, DomainModuleInput


class EstateSuccessionDomainModule(BaseDomainModule):
    domain = Domain.ESTATE_SUCCESSION

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        classification = data.classification
        names = classification.parties.names
        notes = classification.notes

        claimant = names[0] if names else "Applicant/Claimant"
        respondent = names[1] if len(names) > 1 else "Estate Trustee / Respondent"
        issue_summary = classification.description or (notes[0] if notes else "Describe the estate issue")
        probate_file = next(
            (note for note in notes if "court file" in note.lower()), "Court file number (if any)"
        )
        probate_date = classification.timeline.start or "YYYY-MM-DD"

        return [
            self.template_draft(
                "Will Challenge Grounds (Information)",
                "Grounds",
                "estate/will_challenge_grounds",
                missing_confirmations=["Confirm factual basis and evidence for each ground before filing."],
            ),
            self.template_draft(
                "Probate / Certificate of Appointment Guide",
                "Steps",
                "estate/probate_application_guide",
                missing_confirmations=["Use latest official probate forms and confirm local filing steps."],
            ),
            self.template_draft(
                "Estate Dispute Notice (Informational)",
                "Concerns and Requests",
                "estate/estate_dispute_notice",
                {
                    "claimantName": claimant,
                    "respondentName": respondent,
                    "probateFile": probate_file,
                    "issueSummary": issue_summary,
                },
                missing_confirmations=[
                    "Confirm standing (beneficiary/dependant) and reference correct court file."
                ],
            ),
            self.template_draft(
                "Dependant Support Claim Procedure (SLRA Part V)",
                "Steps and Evidence",
                "estate/dependant_support_procedure",
                {"claimantName": claimant, "probateDate": probate_date},
                missing_confirmations=[
                    "File within 6 months of probate issuance where possible; seek legal advice if late."
                ],
            ),
        ]
