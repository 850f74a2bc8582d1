"""Registry of domain modules keyed by domain."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain
from legal_workbench.documents import DocumentDraftingEngine, DocumentPackager
from legal_workbench.templates import TemplateLibrary

from .base import DomainModule
from .civil_negligence import CivilNegligenceDomainModule
from .consumer import ConsumerDomainModule
from .criminal import CriminalDomainModule
from .estate import EstateSuccessionDomainModule
from .insurance import InsuranceDomainModule
from .landlord_tenant import LandlordTenantDomainModule
from .malpractice import LegalMalpracticeDomainModule
from .municipal import MunicipalPropertyDamageModule

DEFAULT_MODULES = (
    InsuranceDomainModule,
    LandlordTenantDomainModule,
    CivilNegligenceDomainModule,
    CriminalDomainModule,
    ConsumerDomainModule,
    EstateSuccessionDomainModule,
    MunicipalPropertyDamageModule,
    LegalMalpracticeDomainModule,
)


class DomainModuleRegistry:
    """Maps a domain to the module that drafts for it.

    Registering a second module for a domain replaces the first.
    """

    def __init__(self):
        self._modules: dict[str, DomainModule] = {}

    def register(self, module: DomainModule) -> None:
        """Register a module under its domain."""
        key = module.domain.value if isinstance(module.domain, Domain) else module.domain
        if not key:
            raise ValueError("Domain module must declare a domain")
        self._modules[key] = module

    def get(self, domain: Domain | str) -> DomainModule | None:
        """Get the module for a domain, if one is registered."""
        key = domain.value if isinstance(domain, Domain) else domain
        return self._modules.get(key)

    def list(self) -> list[str]:
        """Registered domain keys in registration order."""
        return list(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, domain: object) -> bool:
        key = domain.value if isinstance(domain, Domain) else domain
        return key in self._modules


def default_registry(templates: TemplateLibrary | None = None) -> DomainModuleRegistry:
    """A registry with every built-in module sharing one template library."""
    templates = templates or TemplateLibrary()
    drafting = DocumentDraftingEngine()
    packager = DocumentPackager(templates)
    registry = DomainModuleRegistry()
    for module_cls in DEFAULT_MODULES:
        registry.register(module_cls(drafting=drafting, packager=packager, templates=templates))
    return registry
