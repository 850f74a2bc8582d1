"""Insurance claims and complaint paths."""

from __future__ import annotations

import re

from legal_workbench.core.ontology import Domain, DocumentDraft, Jurisdiction

from .base import BaseDomainModule, DomainModuleInput

MOTOR_VEHICLE_TERMS = re.compile(
    r"\b(accident|collision|vehicle|car|truck|motor|crashed|rear-end)\b", re.IGNORECASE
)

COMPLAINT_PATH = [
    ("Internal Complaint Letter", "Summarizes the claim events and requests internal review."),
    ("Ombudsman Escalation", "Escalates unresolved issues to the insurer's ombuds service."),
    (
        "General Insurance OmbudService Submission",
        "Prepares a GIO submission after internal remedies are exhausted.",
    ),
    ("FSRA Conduct Complaint", "Raises a conduct concern with FSRA about claim handling or delays."),
]


def is_motor_vehicle_matter(data: DomainModuleInput) -> bool:
    classification = data.classification
    text = " ".join([classification.description or "", *classification.notes])
    return bool(MOTOR_VEHICLE_TERMS.search(text))


class InsuranceDomainModule(BaseDomainModule):
    domain = Domain.INSURANCE

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        if is_motor_vehicle_matter(data):
            return self._motor_vehicle_drafts(data)
        return [
            self.blueprint_draft(title, "insurance/complaint", data, {"summary": summary})
            for title, summary in COMPLAINT_PATH
        ]

    def _motor_vehicle_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        ontario = data.classification.jurisdiction == Jurisdiction.ONTARIO
        if ontario:
            fault_note = (
                "In Ontario, fault is determined under the Fault Determination Rules "
                "(R.R.O. 1990, Reg. 668)."
            )
            court_note = "Small Claims Court at the local courthouse. Claim limit: $50,000 in Ontario."
        else:
            fault_note = "Fault determination depends on jurisdiction and circumstances."
            court_note = "Small Claims Court at the local courthouse. Check the provincial claim limit."

        drafts = [
            self.blueprint_draft(
                "Accident Report / Statement of Facts",
                "insurance/accident_report",
                data,
                {"faultNote": fault_note},
            )
        ]
        if ontario:
            drafts.append(
                self.blueprint_draft(
                    "Direct Compensation Property Damage (DC-PD) Claim Letter",
                    "insurance/dcpd_claim_letter",
                    data,
                )
            )
        else:
            drafts.append(self.blueprint_draft("Insurance Claim Letter", "insurance/claim_letter", data))
        drafts.append(
            self.blueprint_draft(
                "Demand Letter for Out-of-Pocket Expenses", "insurance/out_of_pocket_demand", data
            )
        )
        drafts.append(
            self.blueprint_draft(
                "Small Claims Court Statement of Claim",
                "insurance/small_claims_statement",
                data,
                {"courtNote": court_note},
            )
        )
        drafts.append(
            self.blueprint_draft("Incident Timeline for Insurance Adjuster", "insurance/incident_timeline", data)
        )
        return drafts
