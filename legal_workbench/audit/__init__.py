"""Audit - append-only event log, manifest builders and source access control."""

from .access import SourceAccessController, default_policies
from .service import AuditLogger, ManifestBuilder

__all__ = [
    # Audit log
    "AuditLogger",
    "ManifestBuilder",
    # Source access
    "SourceAccessController",
    "default_policies",
]
