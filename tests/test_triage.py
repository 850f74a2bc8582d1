"""Tests for classification, pillars, routing and journey tracking."""

from datetime import datetime, timezone

import pytest

from legal_workbench.authority import AuthorityNotFoundError, AuthorityRegistry
from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import (
    ClassificationInput,
    Domain,
    Jurisdiction,
    PartyType,
    Pillar,
    RiskLevel,
    Urgency,
)
from legal_workbench.triage import (
    ForumRouter,
    JourneyTracker,
    MatterClassifier,
    PillarClassifier,
    PillarExplainer,
    RoutingInput,
    TimelineAssessor,
    resolve_domain,
    resolve_jurisdiction,
)


# =============================================================================
# Classifier
# =============================================================================


class TestDomainResolution:
    @pytest.mark.parametrize(
        "hint,expected",
        [
            ("landlord tenant", Domain.LANDLORD_TENANT),
            ("my lawyer missed deadline, is this negligence?", Domain.LEGAL_MALPRACTICE),
            ("tree fell on my fence", Domain.CIVIL_NEGLIGENCE),
            ("pothole on a city road", Domain.MUNICIPAL_PROPERTY_DAMAGE),
            ("probate of my mother's will", Domain.ESTATE_SUCCESSION),
            ("I was assaulted", Domain.CRIMINAL),
            ("insurance claim denied", Domain.INSURANCE),
            ("chargeback for a bad purchase", Domain.CONSUMER_PROTECTION),
        ],
    )
    def test_keyword_rules(self, hint, expected):
        assert resolve_domain(hint) == expected

    def test_malpractice_precedes_negligence(self):
        """A lawyer's missed limitation is malpractice, not ordinary negligence."""
        assert resolve_domain("solicitor negligence after a missed limitation") == Domain.LEGAL_MALPRACTICE

    def test_no_match_is_other(self):
        assert resolve_domain("something unusual") == Domain.OTHER
        assert resolve_domain(None) == Domain.OTHER

    def test_jurisdiction(self):
        assert resolve_jurisdiction(None) == Jurisdiction.ONTARIO
        assert resolve_jurisdiction("Toronto, Ontario") == Jurisdiction.ONTARIO
        assert resolve_jurisdiction("Federal") == Jurisdiction.FEDERAL
        assert resolve_jurisdiction("Government of Canada") == Jurisdiction.FEDERAL

    def test_jurisdiction_explicit_default(self):
        assert resolve_jurisdiction("Ottawa", default=Jurisdiction.FEDERAL) == Jurisdiction.FEDERAL
        assert resolve_jurisdiction(None, default="Federal") == Jurisdiction.FEDERAL
        assert resolve_jurisdiction("Ontario", default=Jurisdiction.FEDERAL) == Jurisdiction.ONTARIO

    def test_jurisdiction_default_from_settings(self, monkeypatch):
        monkeypatch.setenv("WORKBENCH_DEFAULT_JURISDICTION", "Federal")
        get_settings.cache_clear()
        try:
            assert resolve_jurisdiction(None) == Jurisdiction.FEDERAL
            assert resolve_jurisdiction("somewhere") == Jurisdiction.FEDERAL
            assert resolve_jurisdiction("Toronto, Ontario") == Jurisdiction.ONTARIO
        finally:
            get_settings.cache_clear()


class TestMatterClassifier:
    def test_empty_input_is_classified(self, classifier: MatterClassifier):
        """Classification is total over empty input."""
        classification = classifier.classify()
        assert classification.id.startswith("mc-")
        assert classification.domain == Domain.OTHER
        assert classification.jurisdiction == Jurisdiction.ONTARIO
        assert classification.parties.claimant_type == PartyType.INDIVIDUAL
        assert classification.parties.respondent_type == PartyType.BUSINESS
        assert classification.urgency == Urgency.MEDIUM
        assert classification.status == "classified"

    def test_accepts_dict(self, classifier: MatterClassifier):
        classification = classifier.classify({"domain_hint": "landlord tenant", "jurisdiction_hint": "Ontario"})
        assert classification.domain == Domain.LANDLORD_TENANT

    def test_timeline_from_key_dates(self, classifier: MatterClassifier):
        classification = classifier.classify(ClassificationInput(key_dates=["2024-01-01", "2024-03-01"]))
        assert classification.timeline.start == "2024-01-01"
        assert classification.timeline.end == "2024-03-01"

    def test_ids_are_unique(self, classifier: MatterClassifier):
        assert classifier.classify().id != classifier.classify().id

    def test_confidence_without_hints(self, classifier: MatterClassifier):
        result = classifier.classify_with_confidence(ClassificationInput())
        assert result.confidence.domain_confidence == 30
        assert result.confidence.jurisdiction_confidence == 50
        assert result.confidence.overall == 38
        types = {u.type for u in result.uncertainties}
        assert {"insufficient-information", "ambiguous-domain", "jurisdiction-unclear"} <= types

    def test_confidence_with_strong_hint(self, classifier: MatterClassifier):
        result = classifier.classify_with_confidence(
            ClassificationInput(domain_hint="lawyer malpractice", jurisdiction_hint="Ontario")
        )
        assert result.classification.domain == Domain.LEGAL_MALPRACTICE
        assert result.confidence.domain_confidence == 100
        assert result.confidence.jurisdiction_confidence == 95

    def test_overlapping_domains_flagged(self, classifier: MatterClassifier):
        result = classifier.classify_with_confidence(
            ClassificationInput(domain_hint="police were called after the slip and fall damage")
        )
        assert result.alternative_domains
        assert any(u.type == "overlapping-domains" for u in result.uncertainties)


# =============================================================================
# Pillars
# =============================================================================


class TestPillarClassifier:
    def test_single_pillar(self):
        classifier = PillarClassifier()
        assert classifier.classify("my landlord kept the rent deposit") == Pillar.ADMINISTRATIVE

    def test_criminal_wins_ties(self):
        classifier = PillarClassifier()
        text = "I was assaulted and want damages"
        assert set(classifier.detect_all_pillars(text)) == {Pillar.CRIMINAL, Pillar.CIVIL}
        assert classifier.classify(text) == Pillar.CRIMINAL

    def test_other_ties_are_unknown(self):
        classifier = PillarClassifier()
        assert classifier.classify("a parking ticket and a contractor who took money") == Pillar.UNKNOWN

    def test_empty_text(self):
        classifier = PillarClassifier()
        assert classifier.detect_all_pillars("   ") == []
        assert classifier.classify(None) == Pillar.UNKNOWN


class TestPillarExplainer:
    def test_explanation(self):
        explanation = PillarExplainer().explain(Pillar.CRIMINAL)
        assert explanation.burden_of_proof == "Beyond a reasonable doubt"
        assert explanation.next_steps

    def test_domain_only_adds_steps(self):
        explainer = PillarExplainer()
        base = explainer.explain(Pillar.CIVIL)
        with_domain = explainer.explain(Pillar.CIVIL, "civil-negligence")
        assert len(with_domain.next_steps) > len(base.next_steps)
        assert with_domain.next_steps[: len(base.next_steps)] == base.next_steps

    def test_unmatched_domain_keeps_steps(self):
        explainer = PillarExplainer()
        assert explainer.explain("Civil", "other").next_steps == explainer.explain("Civil").next_steps


# =============================================================================
# Routing
# =============================================================================


class TestForumRouter:
    def test_landlord_tenant_ontario(self, classifier: MatterClassifier, router: ForumRouter):
        """Landlord-tenant matters go to the LTB with Divisional Court review."""
        classification = classifier.classify(
            ClassificationInput(domain_hint="landlord tenant", jurisdiction_hint="Ontario")
        )
        assert classification.domain == Domain.LANDLORD_TENANT
        assert classification.jurisdiction == Jurisdiction.ONTARIO

        forum_map = router.route(classification)
        assert forum_map.primary_forum.id == "ON-LTB"
        assert "ON-DivCt" in [a.id for a in forum_map.alternatives]
        assert [a.id for a in forum_map.escalation] == ["ON-DivCt"]

    @pytest.mark.parametrize(
        "domain,jurisdiction,expected",
        [
            (Domain.CRIMINAL, Jurisdiction.ONTARIO, "ON-OCJ"),
            (Domain.ESTATE_SUCCESSION, Jurisdiction.FEDERAL, "ON-SC-Probate"),
            (Domain.HUMAN_RIGHTS, Jurisdiction.ONTARIO, "ON-HRTO"),
            (Domain.INSURANCE, Jurisdiction.ONTARIO, "ON-SC"),
            (Domain.INSURANCE, Jurisdiction.FEDERAL, "CA-FC"),
        ],
    )
    def test_primary_forum(self, router: ForumRouter, domain, jurisdiction, expected):
        forum_map = router.route(RoutingInput(domain=domain, jurisdiction=jurisdiction))
        assert forum_map.primary_forum.id == expected

    def test_appeal_and_review(self, router: ForumRouter):
        ontario = RoutingInput(domain=Domain.INSURANCE, jurisdiction=Jurisdiction.ONTARIO, is_appeal=True)
        federal = RoutingInput(domain=Domain.INSURANCE, jurisdiction=Jurisdiction.FEDERAL, is_appeal=True)
        review = RoutingInput(
            domain=Domain.INSURANCE, jurisdiction=Jurisdiction.ONTARIO, is_judicial_review=True
        )
        assert router.route(ontario).primary_forum.id == "ON-CA"
        assert router.route(federal).primary_forum.id == "CA-FCA"
        assert router.route(review).primary_forum.id == "ON-DivCt"

    def test_no_alternatives_for_courts(self, router: ForumRouter):
        forum_map = router.route(RoutingInput(domain=Domain.CRIMINAL, jurisdiction=Jurisdiction.ONTARIO))
        assert forum_map.alternatives == []
        assert [a.id for a in forum_map.escalation] == ["ON-SC"]

    def test_routing_is_pure(self, router: ForumRouter):
        data = RoutingInput(domain=Domain.EMPLOYMENT, jurisdiction=Jurisdiction.ONTARIO)
        assert router.route(data).primary_forum.id == router.route(data).primary_forum.id

    def test_unseeded_authority_raises(self):
        router = ForumRouter(AuthorityRegistry())
        with pytest.raises(AuthorityNotFoundError):
            router.route(RoutingInput(domain=Domain.CRIMINAL, jurisdiction=Jurisdiction.ONTARIO))


# =============================================================================
# Timeline assessment and journey
# =============================================================================


class TestTimelineAssessor:
    NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_no_dates_is_high_risk(self):
        assert TimelineAssessor().assess([], now=self.NOW).risk == RiskLevel.HIGH

    def test_recent_dates_low_risk(self):
        assessment = TimelineAssessor().assess(["2024-05-01"], now=self.NOW)
        assert assessment.risk == RiskLevel.LOW
        assert assessment.latest_date == "2024-05-01"
        assert assessment.days_since_latest == 31

    def test_old_dates(self):
        assessor = TimelineAssessor()
        assert assessor.assess(["2023-10-01"], now=self.NOW).risk == RiskLevel.MEDIUM
        assert assessor.assess(["2021-01-01"], now=self.NOW).risk == RiskLevel.HIGH

    def test_unreadable_dates_need_confirmation(self):
        assessment = TimelineAssessor().assess(["March 2024"], now=self.NOW)
        assert assessment.risk == RiskLevel.HIGH
        assert assessment.latest_date is None
        assert "'March 2024'" in assessment.notes[0]
        assert "confirm dates" in assessment.notes[0]

    def test_readable_dates_used_alongside_unreadable(self):
        assessment = TimelineAssessor().assess(["last spring", "2024-05-01"], now=self.NOW)
        assert assessment.risk == RiskLevel.LOW
        assert assessment.latest_date == "2024-05-01"
        assert "'last spring'" in assessment.notes[0]


class TestJourneyTracker:
    def test_initial_progress(self):
        progress = JourneyTracker().build_progress()
        assert progress.current_stage == "Options"
        assert progress.percent_complete == 20

    def test_progress_advances(self, classifier: MatterClassifier, router: ForumRouter):
        classification = classifier.classify(ClassificationInput(domain_hint="landlord tenant"))
        forum_map = router.route(classification)
        progress = JourneyTracker().build_progress(
            classification, forum_map, evidence_count=2, documents_generated=True
        )
        assert progress.current_stage == "Resolve"
        assert progress.percent_complete == 80
