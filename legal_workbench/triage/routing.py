"""Forum router - ordered decision table from classification to forum map."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel

from legal_workbench.authority import AuthorityRegistry
from legal_workbench.core.ontology import (
    AuthorityId,
    AuthorityRef,
    Domain,
    ForumMap,
    Jurisdiction,
    MatterClassification,
)

logger = logging.getLogger(__name__)


class RoutingInput(BaseModel):
    """Facts the router decides on."""

    domain: Domain
    jurisdiction: Jurisdiction
    dispute_amount: float | None = None
    is_appeal: bool = False
    is_judicial_review: bool = False

    @classmethod
    def from_classification(
        cls,
        classification: MatterClassification,
        is_appeal: bool = False,
        is_judicial_review: bool = False,
    ) -> "RoutingInput":
        return cls(
            domain=classification.domain,
            jurisdiction=classification.jurisdiction,
            dispute_amount=classification.dispute_amount,
            is_appeal=is_appeal,
            is_judicial_review=is_judicial_review,
        )


@dataclass(frozen=True)
class RouteRule:
    """One row of the routing table."""

    name: str
    predicate: Callable[[RoutingInput], bool]
    target: Callable[[RoutingInput], AuthorityId]


def _ontario(data: RoutingInput) -> bool:
    return data.jurisdiction == Jurisdiction.ONTARIO


# Evaluated first-match-wins. The last row is unconditional, so the table
# always produces a forum.
ROUTE_TABLE: list[RouteRule] = [
    RouteRule(
        "criminal",
        lambda d: d.domain == Domain.CRIMINAL,
        lambda d: AuthorityId("ON-OCJ"),
    ),
    RouteRule(
        "estate",
        lambda d: d.domain == Domain.ESTATE_SUCCESSION,
        lambda d: AuthorityId("ON-SC-Probate"),
    ),
    RouteRule(
        "landlord-tenant",
        lambda d: d.domain == Domain.LANDLORD_TENANT,
        lambda d: AuthorityId("ON-LTB"),
    ),
    RouteRule(
        "human-rights",
        lambda d: d.domain == Domain.HUMAN_RIGHTS,
        lambda d: AuthorityId("ON-HRTO"),
    ),
    RouteRule(
        "appeal",
        lambda d: d.is_appeal,
        lambda d: AuthorityId("ON-CA" if _ontario(d) else "CA-FCA"),
    ),
    RouteRule(
        "judicial-review",
        lambda d: d.is_judicial_review,
        lambda d: AuthorityId("ON-DivCt" if _ontario(d) else "CA-FC"),
    ),
    # Amount-based Small Claims routing is not applied here
    RouteRule("ontario-default", _ontario, lambda d: AuthorityId("ON-SC")),
    RouteRule("federal-default", lambda d: True, lambda d: AuthorityId("CA-FC")),
]

# Divisional Court is the judicial-review fallback for these primaries
DIVISIONAL_COURT_FALLBACK: frozenset[str] = frozenset({"ON-LTB", "ON-HRTO", "CA-FC"})


class ForumRouter:
    """Maps a classification to a primary forum, alternatives and escalation.

    Routing is a pure function of the input. Unseeded authority ids raise
    :class:`~legal_workbench.authority.AuthorityNotFoundError`.
    """

    def __init__(self, registry: AuthorityRegistry, table: list[RouteRule] | None = None):
        self.registry = registry
        self.table = table if table is not None else ROUTE_TABLE

    def route(
        self,
        data: RoutingInput | MatterClassification,
        is_appeal: bool = False,
        is_judicial_review: bool = False,
    ) -> ForumMap:
        """Route a matter."""
        if isinstance(data, MatterClassification):
            data = RoutingInput.from_classification(data, is_appeal, is_judicial_review)

        rule, primary = self._primary_forum(data)
        escalation = [a.to_ref() for a in self.registry.get_escalation_route(primary.id)]
        alternatives = self.alternatives(primary)
        logger.debug("Routed %s via rule %s to %s", data.domain.value, rule.name, primary.id)

        return ForumMap(
            domain=data.domain,
            primary_forum=primary,
            alternatives=alternatives,
            escalation=escalation,
            rationale=self._build_rationale(data, alternatives, escalation),
        )

    def alternatives(self, primary: AuthorityRef) -> list[AuthorityRef]:
        """Secondary forums for a primary forum."""
        if primary.id in DIVISIONAL_COURT_FALLBACK:
            return [self.registry.require_ref("ON-DivCt")]
        return []

    def _primary_forum(self, data: RoutingInput) -> tuple[RouteRule, AuthorityRef]:
        for rule in self.table:
            if rule.predicate(data):
                return rule, self.registry.require_ref(rule.target(data))
        # Unreachable with the default table
        raise ValueError(f"No route for domain {data.domain.value}")

    def _build_rationale(
        self,
        data: RoutingInput,
        alternatives: list[AuthorityRef],
        escalation: list[AuthorityRef],
    ) -> str:
        notes: list[str] = []
        if data.domain == Domain.CRIMINAL:
            notes.append("Criminal charges in Ontario start in the Ontario Court of Justice.")
        elif data.domain == Domain.ESTATE_SUCCESSION:
            notes.append("Estate and probate matters go to the Superior Court estates list.")
        elif data.domain == Domain.LANDLORD_TENANT:
            notes.append("Housing matters in Ontario route to the Landlord and Tenant Board first.")
        elif data.domain == Domain.HUMAN_RIGHTS:
            notes.append("Human rights applications start at the HRTO before any court review.")
        elif data.is_appeal:
            notes.append("Appeal flagged; routing directly to an appeal court.")
        elif data.is_judicial_review:
            notes.append("Judicial review requested; routing to the reviewing court.")
        elif data.jurisdiction == Jurisdiction.ONTARIO:
            notes.append(
                "Ontario matters default to the Superior Court of Justice; "
                "claims within the Small Claims limit may be filed there instead."
            )
        else:
            notes.append("Federal matters default to the Federal Court.")

        if alternatives:
            notes.append("Alternative forum provided for review or secondary path.")
        if escalation:
            notes.append("Escalation route available for appeals or judicial review.")
        return " ".join(notes)
