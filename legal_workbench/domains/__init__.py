"""Domain modules - per-domain drafting on top of shared packaging."""

from .base import (
    BaseDomainModule,
    DomainModule,
    DomainModuleInput,
    DomainModuleOutput,
    build_evidence_manifest,
    build_package_from_drafts,
    ensure_source_manifest,
    primary_refs,
)
from .civil_negligence import CivilNegligenceDomainModule
from .consumer import ConsumerDomainModule
from .criminal import CriminalDomainModule
from .estate import EstateSuccessionDomainModule
from .insurance import InsuranceDomainModule, is_motor_vehicle_matter
from .landlord_tenant import LandlordTenantDomainModule
from .malpractice import LegalMalpracticeDomainModule
from .municipal import MunicipalPropertyDamageModule
from .registry import DomainModuleRegistry, default_registry

__all__ = [
    # Contract
    "BaseDomainModule",
    "DomainModule",
    "DomainModuleInput",
    "DomainModuleOutput",
    "build_evidence_manifest",
    "build_package_from_drafts",
    "ensure_source_manifest",
    "primary_refs",
    # Modules
    "CivilNegligenceDomainModule",
    "ConsumerDomainModule",
    "CriminalDomainModule",
    "EstateSuccessionDomainModule",
    "InsuranceDomainModule",
    "LandlordTenantDomainModule",
    "LegalMalpracticeDomainModule",
    "MunicipalPropertyDamageModule",
    "is_motor_vehicle_matter",
    # Registry
    "DomainModuleRegistry",
    "default_registry",
]
