"""Authority registry - courts, tribunals and escalation routes."""

from .service import (
    AuthorityNotFoundError,
    AuthorityRegistry,
    load_authorities,
    seed_registry,
)

__all__ = [
    "AuthorityNotFoundError",
    "AuthorityRegistry",
    "load_authorities",
    "seed_registry",
]
