"""Pytest fixtures for test suite."""

import pytest

from legal_workbench.api import IntegrationAPI
from legal_workbench.audit import AuditLogger
from legal_workbench.authority import AuthorityRegistry, seed_registry
from legal_workbench.core.ontology import (
    ClassificationInput,
    EvidenceType,
    MatterClassification,
    Provenance,
    SourceEntry,
    SourceService,
)
from legal_workbench.documents import DocumentDraftingEngine, DocumentPackager
from legal_workbench.domains import DomainModuleInput, DomainModuleRegistry, default_registry
from legal_workbench.evidence import EvidenceIndexer
from legal_workbench.templates import TemplateLibrary
from legal_workbench.triage import ForumRouter, MatterClassifier

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PDF_BYTES = b"%PDF-1.7\n%sample"

SAMPLE_EML = (
    b"From: landlord@example.com\n"
    b"To: tenant@example.com\n"
    b"Date: Mon, 01 Jan 2024 10:00:00 +0000\n"
    b"Subject: Rent increase notice\n"
    b"\n"
    b"Your rent will increase next month.\n"
)


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def authority_registry() -> AuthorityRegistry:
    """Registry seeded from the shipped authority data."""
    return seed_registry()


@pytest.fixture
def router(authority_registry: AuthorityRegistry) -> ForumRouter:
    return ForumRouter(authority_registry)


@pytest.fixture
def classifier() -> MatterClassifier:
    return MatterClassifier()


@pytest.fixture
def templates() -> TemplateLibrary:
    """Template library loaded from the shipped YAML files."""
    return TemplateLibrary()


@pytest.fixture
def drafting_engine() -> DocumentDraftingEngine:
    return DocumentDraftingEngine()


@pytest.fixture
def packager(templates: TemplateLibrary) -> DocumentPackager:
    return DocumentPackager(templates)


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger()


@pytest.fixture
def module_registry(templates: TemplateLibrary) -> DomainModuleRegistry:
    return default_registry(templates)


@pytest.fixture
def api(module_registry: DomainModuleRegistry, authority_registry: AuthorityRegistry) -> IntegrationAPI:
    """Orchestrator for a fresh session."""
    return IntegrationAPI(registry=module_registry, authorities=authority_registry)


# =============================================================================
# Evidence Fixtures
# =============================================================================


@pytest.fixture
def indexer() -> EvidenceIndexer:
    """Indexer holding an email and a dated photo."""
    indexer = EvidenceIndexer()
    indexer.add_item("notice.eml", SAMPLE_EML, EvidenceType.EML, Provenance.USER_PROVIDED)
    indexer.add_item(
        "damage.png",
        PNG_BYTES,
        EvidenceType.PNG,
        Provenance.USER_PROVIDED,
        {"date": "2024-01-20T09:00:00Z", "summary": "Photo of water damage"},
    )
    return indexer


@pytest.fixture
def canlii_source() -> SourceEntry:
    return SourceEntry(
        service=SourceService.CANLII,
        url="https://www.canlii.org/en/on/laws/stat/so-2006-c-17/latest/",
        retrieval_date="2024-03-01",
    )


# =============================================================================
# Matter Fixtures
# =============================================================================


@pytest.fixture
def make_classification(classifier: MatterClassifier):
    """Factory building a classification from keyword arguments."""

    def _make(**kwargs) -> MatterClassification:
        return classifier.classify(ClassificationInput(**kwargs))

    return _make


@pytest.fixture
def make_domain_input(indexer: EvidenceIndexer):
    """Factory wrapping a classification in a domain module input."""

    def _make(classification: MatterClassification, **kwargs) -> DomainModuleInput:
        values = {
            "classification": classification,
            "forum_map": "# Forum Map",
            "timeline": "# Timeline",
            "missing_evidence": "# Missing Evidence",
            "evidence_index": indexer.generate_index(),
        }
        values.update(kwargs)
        return DomainModuleInput(**values)

    return _make
