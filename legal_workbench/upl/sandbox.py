"""UPL boundary tiering (access-to-innovation sandbox model)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import Domain, SandboxTier, Urgency

TIER_LABELS: dict[SandboxTier, str] = {
    SandboxTier.PUBLIC_INFO: "Tier 1: Public Information",
    SandboxTier.PARALEGAL_SUPERVISED: "Tier 2: Paralegal-Supervised Tools",
    SandboxTier.A2I_SANDBOX: "Tier 3: A2I Sandbox (human-in-the-loop)",
}

TIER_ACTIONS: dict[SandboxTier, list[str]] = {
    SandboxTier.A2I_SANDBOX: [
        "Stop before suggesting filings; route to human review",
        "Provide checklist questions instead of recommendations",
        "Offer links to official resources (CanLII, court/tribunal sites)",
    ],
    SandboxTier.PARALEGAL_SUPERVISED: [
        "Surface multiple pathways with pros and cons",
        "Show deadlines and evidence checklists without choosing a strategy",
        "Prompt the user to confirm facts and consult licensed help",
    ],
    SandboxTier.PUBLIC_INFO: [
        "Share plain-language process overviews",
        "Encourage evidence organization and deadline awareness",
        "Remind the user to verify against current law",
    ],
}

SUPERVISED_DOMAINS = frozenset({Domain.CIVIL_NEGLIGENCE, Domain.MUNICIPAL_PROPERTY_DAMAGE})


class SandboxInput(BaseModel):
    domain: Domain | None = None
    jurisdiction: str | None = None
    urgency: Urgency | None = None
    contains_sensitive_data: bool = False


class HumanReview(BaseModel):
    required: bool
    reason: str | None = None
    steps: list[str] = Field(default_factory=list)


class SandboxPlan(BaseModel):
    tier: SandboxTier
    label: str
    rationale: str
    actions: list[str]
    human_review: HumanReview
    audit_trail: list[str]
    controls: list[str]


class A2ISandboxFramework:
    """Assigns a UPL tier and the guardrails that come with it."""

    def tier_for(self, data: SandboxInput) -> SandboxTier:
        if data.domain == Domain.CRIMINAL:
            return SandboxTier.A2I_SANDBOX
        if data.domain in SUPERVISED_DOMAINS:
            return SandboxTier.PARALEGAL_SUPERVISED
        if data.urgency == Urgency.HIGH:
            return SandboxTier.PARALEGAL_SUPERVISED
        return SandboxTier.PUBLIC_INFO

    def plan(self, data: SandboxInput) -> SandboxPlan:
        tier = self.tier_for(data)
        review_required = tier == SandboxTier.A2I_SANDBOX or data.contains_sensitive_data
        if review_required:
            review_steps = [
                "Pause automated actions",
                "Escalate to licensed reviewer",
                "Record reviewer decision and timestamp",
            ]
        else:
            review_steps = [
                "Proceed with informational guidance only",
                "Offer contact info for licensed help",
            ]

        return SandboxPlan(
            tier=tier,
            label=TIER_LABELS[tier],
            rationale=self._rationale(tier, data.jurisdiction or "Ontario"),
            actions=list(TIER_ACTIONS[tier]),
            human_review=HumanReview(
                required=review_required,
                reason="High-risk content requires human oversight" if review_required else None,
                steps=review_steps,
            ),
            audit_trail=[
                "Record who requested guidance and when",
                "Log which tier was applied and why (jurisdiction/domain/urgency)",
                "Capture redirects to human review for regulator oversight",
            ],
            controls=self._controls(tier, data.contains_sensitive_data),
        )

    def _rationale(self, tier: SandboxTier, jurisdiction: str) -> str:
        if tier == SandboxTier.A2I_SANDBOX:
            return (
                "High-risk or advice-adjacent content is routed to a human reviewer before any "
                f"filing guidance. Applies to sensitive matters in {jurisdiction}."
            )
        if tier == SandboxTier.PARALEGAL_SUPERVISED:
            return (
                "Information is provided with extra guardrails and prompts to consult a licensed "
                f"paralegal or lawyer, for {jurisdiction} matters with urgency or liability exposure."
            )
        return "Low-risk informational guidance with clear UPL boundaries and citations."

    def _controls(self, tier: SandboxTier, sensitive: bool) -> list[str]:
        controls = [
            "Enforce information-only responses",
            "Highlight citation and retrieval date requirements",
            "Include safe harbour reminder",
        ]
        if tier == SandboxTier.PARALEGAL_SUPERVISED:
            controls.append("Insert advisory redirection before giving next steps")
            controls.append("Require confirmation before showing forms or templates")
        if tier == SandboxTier.A2I_SANDBOX:
            controls.append("Block direct form suggestions until human review")
            controls.append("Log all prompts and outputs for oversight")
        if sensitive:
            controls.append("Redact personal identifiers before sharing")
        return controls
