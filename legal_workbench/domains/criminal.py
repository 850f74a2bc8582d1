"""Criminal matters (information only).

Drafts are gated on the user's role. An accused person never receives
victim-impact material and a victim or complainant never receives
release-conditions material.
"""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft, PartyRole, now_iso

from .base import BaseDomainModule, DomainModuleInput

VICTIM_ROLES = frozenset({PartyRole.VICTIM, PartyRole.COMPLAINANT})


def offense_label(sub_category: str | None) -> str:
    if sub_category and "threat" in sub_category.lower():
        return "uttering threats"
    return "assault"


class CriminalDomainModule(BaseDomainModule):
    domain = Domain.CRIMINAL

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        classification = data.classification
        role = classification.party_role
        today = now_iso()[:10]
        drafts: list[DocumentDraft] = []

        if role == PartyRole.ACCUSED:
            drafts.append(
                self.template_draft(
                    "Release Conditions Checklist",
                    "Conditions",
                    "criminal/release_conditions_checklist",
                    {"fullName": classification.party_name or "Accused", "date": today},
                )
            )
        elif role in VICTIM_ROLES:
            drafts.append(
                self.template_draft(
                    "Victim Impact Statement (Scaffold)",
                    "Impact Areas",
                    "criminal/victim_impact_scaffold",
                    {"victimRole": role.value.capitalize(), "date": today},
                )
            )
            drafts.append(
                self.template_draft(
                    "Victim Services Guide", "Support Services", "criminal/victim_services_guide"
                )
            )
            drafts.append(
                self.template_draft(
                    "Your Role as a Complainant", "Role", "criminal/complainant_role_explained"
                )
            )

        drafts.append(
            self.template_draft(
                "Police and Crown Process Guide (Information)",
                "Process",
                "criminal/police_crown_process_guide",
                {"offense": offense_label(classification.sub_category), "province": "Ontario"},
            )
        )
        drafts.append(
            self.template_draft("Evidence Checklist (Criminal)", "Checklist", "criminal/evidence_checklist")
        )
        return drafts
