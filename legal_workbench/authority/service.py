"""Authority registry - forum metadata, escalation graph and seed loading."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import yaml

from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import Authority, AuthorityRef, parse_iso

logger = logging.getLogger(__name__)


class AuthorityNotFoundError(LookupError):
    """Raised when an authority id is referenced but was never seeded.

    This signals a seeding or deployment defect rather than a user error.
    """

    def __init__(self, authority_id: str):
        super().__init__(f"Authority not found: {authority_id}")
        self.authority_id = authority_id


# =============================================================================
# Registry
# =============================================================================


class AuthorityRegistry:
    """In-memory store of authorities keyed by id.

    Escalation routes form a directed graph over ids. The graph is treated
    as a lookup table; cycles are not rejected.
    """

    def __init__(self, authorities: list[Authority] | None = None):
        self._authorities: dict[str, Authority] = {}
        for authority in authorities or []:
            self.add(authority)

    def add(self, authority: Authority) -> None:
        """Add or replace an authority."""
        self._authorities[authority.id] = authority

    def update(self, authority: Authority) -> None:
        """Replace an existing authority."""
        if authority.id not in self._authorities:
            raise AuthorityNotFoundError(authority.id)
        self._authorities[authority.id] = authority
        logger.info("Authority %s updated to version %s", authority.id, authority.version)

    def get_by_id(self, authority_id: str) -> Authority | None:
        """Get an authority by id."""
        return self._authorities.get(authority_id)

    def require(self, authority_id: str) -> Authority:
        """Get an authority by id, raising if it was never seeded."""
        authority = self._authorities.get(authority_id)
        if authority is None:
            raise AuthorityNotFoundError(authority_id)
        return authority

    def require_ref(self, authority_id: str) -> AuthorityRef:
        """Get a reference projection, raising if the id was never seeded."""
        return self.require(authority_id).to_ref()

    def list(self) -> list[Authority]:
        """List all authorities in insertion order."""
        return list(self._authorities.values())

    def needs_update(self, authority_id: str, now: datetime | None = None) -> bool:
        """Check whether an authority's content review is due.

        Due when ``now >= updated_at + update_cadence_days``. Unknown ids
        are never due.
        """
        authority = self._authorities.get(authority_id)
        if authority is None:
            return False
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        next_due = parse_iso(authority.updated_at) + timedelta(days=authority.update_cadence_days)
        return now >= next_due

    def get_escalation_route(self, authority_id: str) -> list[Authority]:
        """Resolve the escalation targets of an authority."""
        authority = self.require(authority_id)
        return [self.require(target) for target in authority.escalation_routes]

    def __len__(self) -> int:
        return len(self._authorities)

    def __contains__(self, authority_id: object) -> bool:
        return authority_id in self._authorities


# =============================================================================
# Seed Loading
# =============================================================================


def load_authorities(path: str | Path | None = None) -> list[Authority]:
    """Load authority seed data from a YAML file."""
    path = Path(path) if path else Path(get_settings().authorities_file)
    if not path.exists():
        raise FileNotFoundError(f"Authority seed file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f) or []

    if isinstance(content, dict):
        content = [content]

    authorities = [Authority(**item) for item in content]
    logger.debug("Loaded %d authorities from %s", len(authorities), path)
    return authorities


def seed_registry(path: str | Path | None = None) -> AuthorityRegistry:
    """Build a registry from the seed file."""
    return AuthorityRegistry(load_authorities(path))
