"""Access policy for official legal information services.

Every access decision, allowed or denied, is kept in the controller's log
and written to the audit log as a ``source-access`` event.
"""

from __future__ import annotations

import logging

from legal_workbench.core.ontology import (
    AuditEventType,
    Provenance,
    SourceAccessLog,
    SourceAccessPolicy,
    SourceEntry,
    SourceService,
    now_iso,
)
from legal_workbench.upl import CitationCheck, CitationEnforcer

from .service import AuditLogger

logger = logging.getLogger(__name__)

NO_POLICY = "No policy"
METHOD_NOT_ALLOWED = "Method not allowed"
URL_BLOCKED = "URL blocked by policy"
MISSING_VERSION = "Missing version for bilingual text enforcement"


def default_policies() -> list[SourceAccessPolicy]:
    """Policies for the three supported services. Scraping is never an allowed method."""
    return [
        SourceAccessPolicy(
            service=SourceService.CANLII,
            allowed_methods=[Provenance.OFFICIAL_API, Provenance.OFFICIAL_LINK, Provenance.USER_PROVIDED],
        ),
        SourceAccessPolicy(
            service=SourceService.E_LAWS,
            allowed_methods=[Provenance.OFFICIAL_LINK, Provenance.USER_PROVIDED],
        ),
        SourceAccessPolicy(
            service=SourceService.JUSTICE_LAWS,
            allowed_methods=[Provenance.OFFICIAL_LINK, Provenance.USER_PROVIDED],
            enforce_bilingual_text=True,
        ),
    ]


class SourceAccessController:
    """Checks source accesses and source entries against per-service policies.

    Not synchronized; give each session its own controller.
    """

    def __init__(
        self,
        audit: AuditLogger | None = None,
        policies: list[SourceAccessPolicy] | None = None,
    ) -> None:
        self.audit = audit if audit is not None else AuditLogger()
        self.citations = CitationEnforcer()
        self._policies: dict[SourceService, SourceAccessPolicy] = {}
        self._logs: list[SourceAccessLog] = []
        for policy in default_policies() if policies is None else policies:
            self.set_policy(policy)

    def set_policy(self, policy: SourceAccessPolicy) -> None:
        """Replace the policy for ``policy.service``."""
        self._policies[policy.service] = policy

    def get_policy(self, service: SourceService | str) -> SourceAccessPolicy | None:
        return self._policies.get(SourceService(service))

    def validate_access(
        self,
        service: SourceService | str,
        url: str,
        method: Provenance | str,
        actor: str = "system",
    ) -> SourceAccessLog:
        """Decide whether ``url`` may be accessed with ``method`` and record the decision."""
        service = SourceService(service)
        method = Provenance(method)
        policy = self._policies.get(service)

        reason = None
        if policy is None:
            reason = NO_POLICY
        elif method not in policy.allowed_methods:
            reason = METHOD_NOT_ALLOWED
        elif any(url.startswith(prefix) for prefix in policy.blocked):
            reason = URL_BLOCKED

        entry = SourceAccessLog(
            service=service,
            url=url,
            accessed_at=now_iso(),
            actor=actor,
            method=method,
            allowed=reason is None,
            reason=reason,
        )
        self._logs.append(entry)
        self.audit.log(
            AuditEventType.SOURCE_ACCESS,
            actor,
            "Source access allowed." if entry.allowed else "Source access denied.",
            {"service": service.value, "url": url, "method": method.value, "reason": reason},
        )
        if not entry.allowed:
            logger.warning("Denied %s access to %s (%s): %s", method.value, service.value, url, reason)
        return entry

    def validate_source_entry(self, entry: SourceEntry) -> CitationCheck:
        """Check that a source entry carries what its service's policy requires."""
        policy = self._policies.get(entry.service)
        if policy is None:
            return CitationCheck(ok=False, errors=[NO_POLICY])

        errors: list[str] = []
        if policy.enforce_currency_dates:
            errors.extend(self.citations.verify_retrieval(entry.retrieval_date).errors)
        if policy.enforce_bilingual_text and not entry.version:
            errors.append(MISSING_VERSION)
        return CitationCheck(ok=not errors, errors=errors)

    def get_logs(self) -> list[SourceAccessLog]:
        """Snapshot of access decisions in the order they were made."""
        return list(self._logs)
