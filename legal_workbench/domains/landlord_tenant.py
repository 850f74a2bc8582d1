"""Landlord and Tenant Board drafts."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft

from .base import BaseDomainModule, DomainModuleInput

# (title, summary, facts confirmed)
INTAKE_DRAFTS = [
    ("LTB Intake Checklist", "Captures tenancy details, rent amounts and issues for LTB intake.", True),
    ("Notice to Resolve Issue", "Outlines the issue and requests resolution before a formal LTB filing.", False),
    ("Evidence Pack Cover", "Summarizes attachments for an LTB hearing or mediation.", True),
]

APPLICATION_GUIDES = [
    ("LTB Form T1: Tenant Rights Application", "landlord/t1_application"),
    ("LTB Form T2: Tenant Rights Application (Harassment and Interference)", "landlord/t2_application"),
    ("LTB Form T6: Tenant Application (Maintenance and Repairs)", "landlord/t6_application"),
]


class LandlordTenantDomainModule(BaseDomainModule):
    domain = Domain.LANDLORD_TENANT

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        drafts = [
            self.blueprint_draft(
                title,
                "landlord/intake",
                data,
                {"summary": summary},
                confirm={"Facts": facts_confirmed},
            )
            for title, summary, facts_confirmed in INTAKE_DRAFTS
        ]
        drafts.extend(self.blueprint_draft(title, blueprint, data) for title, blueprint in APPLICATION_GUIDES)
        return drafts
