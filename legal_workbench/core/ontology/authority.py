"""Authority (forum) models and forum maps."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .types import AuthorityId, AuthorityType, Domain, Jurisdiction


class Authority(BaseModel):
    """A court, tribunal or agency with routing metadata."""

    id: AuthorityId
    name: str
    type: AuthorityType
    jurisdiction: Jurisdiction
    version: str = "1.0.0"
    updated_at: str = Field(..., description="ISO timestamp of the last content review")
    update_cadence_days: int = Field(..., ge=1)
    escalation_routes: list[AuthorityId] = Field(default_factory=list)

    def to_ref(self) -> AuthorityRef:
        """Project to a weak reference."""
        return AuthorityRef(
            id=self.id,
            name=self.name,
            type=self.type,
            jurisdiction=self.jurisdiction,
        )


class AuthorityRef(BaseModel):
    """Projection of an authority. Not the live registry object."""

    id: AuthorityId
    name: str
    type: AuthorityType
    jurisdiction: Jurisdiction


class ForumMap(BaseModel):
    """Routing result for a matter."""

    domain: Domain
    primary_forum: AuthorityRef
    alternatives: list[AuthorityRef] = Field(default_factory=list)
    escalation: list[AuthorityRef] = Field(default_factory=list)
    rationale: str = ""

    def to_markdown(self) -> str:
        """Render as the ``forum_map.md`` package file."""
        lines = [
            "# Forum Map",
            "",
            f"**Domain:** {self.domain.value}",
            f"**Primary forum:** {self.primary_forum.name} ({self.primary_forum.id})",
        ]
        if self.alternatives:
            lines.append("")
            lines.append("## Alternatives")
            lines.extend(f"- {ref.name} ({ref.id})" for ref in self.alternatives)
        if self.escalation:
            lines.append("")
            lines.append("## Escalation")
            lines.extend(f"- {ref.name} ({ref.id})" for ref in self.escalation)
        if self.rationale:
            lines.extend(["", "## Rationale", self.rationale])
        return "\n".join(lines) + "\n"
