"""Information-only disclaimers and advice redirection."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

ADVICE_REQUEST = re.compile(r"(what should I do|can you advise|tell me what to file|should I sue)", re.IGNORECASE)


class PathwayOption(BaseModel):
    label: str
    steps: list[str] = Field(default_factory=list)
    caveats: list[str] = Field(default_factory=list)


class AdviceRedirect(BaseModel):
    redirected: bool
    message: str


class DisclaimerService:
    """Keeps generated text on the information side of the advice line."""

    def legal_information_disclaimer(
        self,
        jurisdiction: str | None = None,
        audience: str | None = None,
    ) -> str:
        jurisdiction = jurisdiction or "Ontario (verify for your province/territory)"
        parts = [
            "This tool provides legal information, not legal advice.",
            f"Applicability: primarily for {jurisdiction}.",
            "Decisions remain yours; consult a lawyer or licensed paralegal for advice.",
            "Outputs must be verified against current law and your facts.",
            "Sensitive data should be redacted before sharing.",
        ]
        if audience and audience != "self-represented":
            parts.append(f"Prepared for a {audience} audience.")
        return " ".join(parts)

    def multi_pathway_presentation(self, options: list[PathwayOption]) -> str:
        """Present several lawful pathways side by side rather than one recommendation."""
        if not options:
            return "No pathways available; gather more facts or seek legal advice."
        rendered = []
        for number, option in enumerate(options, start=1):
            steps = " ".join(f"{i}. {step}" for i, step in enumerate(option.steps, start=1))
            caveats = f" Caveats: {' '.join(option.caveats)}" if option.caveats else ""
            rendered.append(f"{number}) {option.label}: {steps}.{caveats}")
        return " ".join(rendered)

    def redirect_advice_request(self, user_text: str) -> AdviceRedirect:
        if ADVICE_REQUEST.search(user_text):
            return AdviceRedirect(
                redirected=True,
                message=(
                    "I cannot provide legal advice. Here are informational options you may consider: "
                    "internal complaint, tribunal/court intake, ombuds/appeal/judicial review. "
                    "Confirm which applies and seek legal counsel as needed."
                ),
            )
        return AdviceRedirect(redirected=False, message="Proceed with information-only guidance.")

    def empathy_boundaries(self, jurisdiction: str | None = None, audience: str | None = None) -> str:
        audience = audience or "self-represented"
        jurisdiction = jurisdiction or "Ontario"
        can_do = [
            "Explain general processes (tribunals, courts, complaint steps)",
            "Summarize options with plain language and citations",
            "Help organize evidence and timelines",
            f"Provide information-first guidance tailored to {jurisdiction}",
        ]
        cannot_do = [
            "Tell you what to file or give legal advice",
            "Draft legal arguments or strategy",
            "Act as your representative or contact the other side for you",
            "Override deadlines or rules",
        ]
        lines = [f"For {audience} users:", "What We CAN Do:"]
        lines.extend(f"- {item}" for item in can_do)
        lines.append("What We CANNOT Do:")
        lines.extend(f"- {item}" for item in cannot_do)
        lines.append("If you need advice or representation, contact a lawyer or licensed paralegal.")
        return "\n".join(lines)
