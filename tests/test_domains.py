"""Tests for domain modules and the module registry."""

import pytest

from legal_workbench.core.ontology import Domain, DraftSection, PartyRole, Urgency
from legal_workbench.documents import DraftingInput
from legal_workbench.domains import (
    BaseDomainModule,
    DomainModuleRegistry,
    LegalMalpracticeDomainModule,
    is_motor_vehicle_matter,
)


def generate(module_registry, make_domain_input, domain, classification, **kwargs):
    module = module_registry.get(domain)
    return module.generate(make_domain_input(classification, **kwargs))


def titles(output) -> list[str]:
    return [d.title for d in output.drafts]


# =============================================================================
# Registry
# =============================================================================


class TestDomainModuleRegistry:
    def test_default_modules(self, module_registry: DomainModuleRegistry):
        assert len(module_registry) == 8
        assert Domain.CRIMINAL in module_registry
        assert "landlordTenant" in module_registry
        assert module_registry.get(Domain.EMPLOYMENT) is None

    def test_get_by_string(self, module_registry: DomainModuleRegistry):
        assert module_registry.get("insurance") is module_registry.get(Domain.INSURANCE)

    def test_register_requires_domain(self):
        class Nameless:
            domain = ""

            def generate(self, data):
                raise AssertionError("not called")

        with pytest.raises(ValueError, match="must declare a domain"):
            DomainModuleRegistry().register(Nameless())

    def test_register_replaces(self, module_registry: DomainModuleRegistry):
        replacement = LegalMalpracticeDomainModule()
        module_registry.register(replacement)
        assert len(module_registry) == 8
        assert module_registry.get(Domain.LEGAL_MALPRACTICE) is replacement

    def test_base_module_requires_build_drafts(self):
        class Incomplete(BaseDomainModule):
            domain = Domain.EMPLOYMENT

        with pytest.raises(TypeError):
            Incomplete()

    def test_custom_module_is_packaged(self, templates, make_domain_input, make_classification):
        class EmploymentModule(BaseDomainModule):
            domain = Domain.EMPLOYMENT

            def build_drafts(self, data):
                section = DraftSection(heading="Summary", content="Dismissed without notice.")
                return [
                    self.drafting.create_draft(
                        DraftingInput(title="Demand Letter", sections=[section], evidence_index=data.evidence_index)
                    )
                ]

        registry = DomainModuleRegistry()
        registry.register(EmploymentModule(templates=templates))
        classification = make_classification(domain_hint="wrongful dismissal at work")
        output = generate(registry, make_domain_input, Domain.EMPLOYMENT, classification)
        assert titles(output) == ["Demand Letter"]
        assert output.package.name == "employment-package"


# =============================================================================
# Landlord and Tenant
# =============================================================================


class TestLandlordTenantModule:
    @pytest.fixture
    def output(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="landlord rent increase")
        return generate(module_registry, make_domain_input, Domain.LANDLORD_TENANT, classification)

    def test_draft_titles(self, output):
        assert titles(output) == [
            "LTB Intake Checklist",
            "Notice to Resolve Issue",
            "Evidence Pack Cover",
            "LTB Form T1: Tenant Rights Application",
            "LTB Form T2: Tenant Rights Application (Harassment and Interference)",
            "LTB Form T6: Tenant Application (Maintenance and Repairs)",
        ]

    def test_notice_facts_need_confirmation(self, output):
        facts_warning = 'Section "Facts" lacks user confirmation for factual assertions.'
        checklist, notice = output.drafts[0], output.drafts[1]
        assert facts_warning in notice.missing_confirmations
        assert facts_warning not in checklist.missing_confirmations
        assert facts_warning in output.warnings

    def test_facts_reference_primary_evidence(self, output):
        facts = output.drafts[0].sections[0]
        assert facts.heading == "Facts"
        assert [r.attachment_index for r in facts.evidence_refs] == [1]

    def test_package(self, output):
        paths = [f.path for f in output.package.files]
        assert "drafts/ltb-intake-checklist.md" in paths
        assert "guides/pdfa_conversion.md" not in paths
        placeholders = [w for w in output.warnings if w.startswith("Added placeholder")]
        assert len(placeholders) == 4


# =============================================================================
# Insurance
# =============================================================================


class TestInsuranceModule:
    def test_complaint_path(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="insurance claim denied")
        output = generate(module_registry, make_domain_input, Domain.INSURANCE, classification)
        assert titles(output) == [
            "Internal Complaint Letter",
            "Ombudsman Escalation",
            "General Insurance OmbudService Submission",
            "FSRA Conduct Complaint",
        ]

    def test_motor_vehicle_ontario(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(
            domain_hint="insurance claim", description="My car was rear-ended at a light."
        )
        data = make_domain_input(classification)
        assert is_motor_vehicle_matter(data)
        output = module_registry.get(Domain.INSURANCE).generate(data)
        assert titles(output) == [
            "Accident Report / Statement of Facts",
            "Direct Compensation Property Damage (DC-PD) Claim Letter",
            "Demand Letter for Out-of-Pocket Expenses",
            "Small Claims Court Statement of Claim",
            "Incident Timeline for Insurance Adjuster",
        ]

    def test_motor_vehicle_federal(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(
            domain_hint="insurance claim",
            jurisdiction_hint="federal",
            notes=["Collision on the highway"],
        )
        output = generate(module_registry, make_domain_input, Domain.INSURANCE, classification)
        assert "Insurance Claim Letter" in titles(output)
        assert "Direct Compensation Property Damage (DC-PD) Claim Letter" not in titles(output)

    def test_keywords_match_whole_words(self, make_domain_input, make_classification):
        classification = make_classification(domain_hint="insurance claim", description="Scarf damaged in care")
        assert not is_motor_vehicle_matter(make_domain_input(classification))


# =============================================================================
# Civil Negligence
# =============================================================================


class TestCivilNegligenceModule:
    def test_drafts(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(
            domain_hint="tree damage",
            party_name="Ana Lopez",
            dispute_amount=1500,
            notes=["Neighbour's tree fell on the fence"],
        )
        output = generate(module_registry, make_domain_input, Domain.CIVIL_NEGLIGENCE, classification)
        assert titles(output) == [
            "Demand for Repair / Compensation",
            "Small Claims Court Form 7A (Statement of Claim)",
            "Evidence Checklist: Property Damage",
        ]
        demand = output.drafts[0].sections[0].content
        assert "$1,500" in demand
        assert "$$" not in demand
        assert "Ana Lopez" in output.drafts[1].sections[0].content

    def test_ontario_package_has_pdfa_guide(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="slip and fall injury")
        output = generate(module_registry, make_domain_input, Domain.CIVIL_NEGLIGENCE, classification)
        assert "guides/pdfa_conversion.md" in [f.path for f in output.package.files]


# =============================================================================
# Criminal
# =============================================================================


NEUTRAL_CRIMINAL_DRAFTS = [
    "Police and Crown Process Guide (Information)",
    "Evidence Checklist (Criminal)",
]


class TestCriminalModule:
    def run(self, module_registry, make_domain_input, make_classification, role=None):
        classification = make_classification(domain_hint="assault", party_role=role, party_name="Jo Park")
        return generate(module_registry, make_domain_input, Domain.CRIMINAL, classification)

    def test_accused(self, module_registry, make_domain_input, make_classification):
        output = self.run(module_registry, make_domain_input, make_classification, PartyRole.ACCUSED)
        assert titles(output) == ["Release Conditions Checklist"] + NEUTRAL_CRIMINAL_DRAFTS
        assert not any("Victim" in t for t in titles(output))

    @pytest.mark.parametrize("role", [PartyRole.VICTIM, PartyRole.COMPLAINANT])
    def test_victim_roles(self, module_registry, make_domain_input, make_classification, role):
        output = self.run(module_registry, make_domain_input, make_classification, role)
        assert titles(output) == [
            "Victim Impact Statement (Scaffold)",
            "Victim Services Guide",
            "Your Role as a Complainant",
        ] + NEUTRAL_CRIMINAL_DRAFTS
        assert "Release Conditions Checklist" not in titles(output)

    @pytest.mark.parametrize("role", [None, PartyRole.WITNESS])
    def test_neutral_roles(self, module_registry, make_domain_input, make_classification, role):
        output = self.run(module_registry, make_domain_input, make_classification, role)
        assert titles(output) == NEUTRAL_CRIMINAL_DRAFTS


# =============================================================================
# Consumer and Estate
# =============================================================================


class TestConsumerModule:
    def test_drafts(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="consumer refund", party_name="Lee Chan")
        output = generate(module_registry, make_domain_input, Domain.CONSUMER_PROTECTION, classification)
        assert len(output.drafts) == 4
        letter = next(d for d in output.drafts if d.title == "Service Dispute Letter")
        assert len(letter.missing_confirmations) == 2
        assert "Business Name" in letter.sections[0].content


class TestEstateModule:
    def test_each_draft_needs_one_confirmation(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="probate dispute")
        output = generate(module_registry, make_domain_input, Domain.ESTATE_SUCCESSION, classification)
        assert titles(output) == [
            "Will Challenge Grounds (Information)",
            "Probate / Certificate of Appointment Guide",
            "Estate Dispute Notice (Informational)",
            "Dependant Support Claim Procedure (SLRA Part V)",
        ]
        assert all(len(d.missing_confirmations) == 1 for d in output.drafts)
        for draft in output.drafts:
            assert draft.missing_confirmations[0] in output.warnings


# =============================================================================
# Municipal
# =============================================================================


class TestMunicipalModule:
    def notice_content(self, output) -> str:
        return output.drafts[0].sections[0].content

    def test_on_time(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="city sidewalk", notes=["Damage found yesterday"])
        output = generate(module_registry, make_domain_input, Domain.MUNICIPAL_PROPERTY_DAMAGE, classification)
        assert len(output.drafts) == 5
        assert output.drafts[0].title == "Municipal Property Damage: 10-Day Notice Requirement (CRITICAL)"
        assert "**Notice deadline:**" in self.notice_content(output)
        assert "**URGENT:**" not in self.notice_content(output)

    def test_high_urgency(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="city road", urgency_hint=Urgency.HIGH)
        output = generate(module_registry, make_domain_input, Domain.MUNICIPAL_PROPERTY_DAMAGE, classification)
        assert "**URGENT:**" in self.notice_content(output)

    def test_expired_notice_in_notes(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(
            domain_hint="city road", notes=["The pothole damage happened more than 10 days ago"]
        )
        output = generate(module_registry, make_domain_input, Domain.MUNICIPAL_PROPERTY_DAMAGE, classification)
        assert "**URGENT:**" in self.notice_content(output)


# =============================================================================
# Legal Malpractice
# =============================================================================


MALPRACTICE_TITLES = [
    "LawPRO Immediate Notification Guide",
    "Case-Within-a-Case Analysis Framework",
    "Expert Witness Instruction Letter Template",
    "Formal Demand Letter to Defendant Lawyer",
    "Evidence Preservation Checklist for Malpractice Claims",
]


class TestLegalMalpracticeModule:
    def test_unknown_values_stay_as_placeholders(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="lawyer missed deadline")
        output = generate(module_registry, make_domain_input, Domain.LEGAL_MALPRACTICE, classification)
        assert titles(output) == MALPRACTICE_TITLES

        lawpro = output.drafts[0]
        assert "{{clientName}}" in lawpro.sections[0].content
        assert lawpro.missing_confirmations == [
            "Confirm client name for LawPRO notification",
            "Confirm defendant lawyer name and contact information",
            "Confirm the specific deadline that was missed",
        ]
        assert output.drafts[4].missing_confirmations == []

    def test_confirmation_lists_are_per_draft(self, module_registry, make_domain_input, make_classification):
        classification = make_classification(domain_hint="lawyer missed deadline")
        output = generate(module_registry, make_domain_input, Domain.LEGAL_MALPRACTICE, classification)
        confirmations = [c for draft in output.drafts for c in draft.missing_confirmations]
        assert not any("discover" in c.lower() for c in confirmations)
        assert output.drafts[1].missing_confirmations[-1].startswith("Gather evidence")
        assert output.drafts[2].missing_confirmations == [
            "Confirm defendant lawyer name and practice area",
            "Identify qualified legal malpractice expert (ideally in same practice area)",
        ]

    def test_extracted_values(self, make_domain_input, make_classification):
        classification = make_classification(
            domain_hint="malpractice",
            party_name="Jane Doe",
            description=(
                "My lawyer John Smith missed the deadline on 2023-06-15 for my slip and fall claim. "
                "I discovered this on 2023-09-01. The claim was worth $50,000."
            ),
        )
        module = LegalMalpracticeDomainModule()
        values = module.resolve_values(make_domain_input(classification))
        assert values == {
            "clientName": "Jane Doe",
            "lawyerName": "John Smith",
            "originalClaimType": "slip-and-fall personal injury",
            "missedDeadline": "2023-06-15",
            "potentialDamages": "$50,000",
            "discoveryDate": "2023-09-01",
        }

        drafts = module.build_drafts(make_domain_input(classification))
        assert drafts[0].missing_confirmations == []
        assert drafts[1].missing_confirmations == [
            "Gather evidence from the original claim to assess likelihood of success"
        ]
        assert "Jane Doe" in drafts[0].sections[0].content

    def test_damages_from_dispute_amount(self, make_domain_input, make_classification):
        classification = make_classification(domain_hint="lawyer error", dispute_amount=25000)
        values = LegalMalpracticeDomainModule().resolve_values(make_domain_input(classification))
        assert values["potentialDamages"] == "$25,000"
        assert values["clientName"] == "{{clientName}}"
