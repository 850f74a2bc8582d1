"""Citation enforcement for drafted text."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

ADVISORY_TERMS = re.compile(r"(recommend|should|advise you to|we suggest|you must|guarantee)", re.IGNORECASE)

UNCITED_STATEMENT = "Uncited legal statement detected: provide authoritative source or omit."
ADVISORY_LANGUAGE = "Language appears advisory; use factual, restrained wording."
UNCITED_QUOTE = "Quoted material without citation; add source and retrieval date."
MISSING_RETRIEVAL = "Missing retrieval/currency date for cited source."


class CitationCheck(BaseModel):
    """Errors block nothing; they are surfaced to a reviewer.

    Advisory-tone findings are kept in ``tone_warnings`` so callers can
    report them with other style issues.
    """

    ok: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    tone_warnings: list[str] = Field(default_factory=list)


class CitationEnforcer:
    """Checks that statements resting on evidence carry citations."""

    def ensure_citations(self, text: str, has_citation: bool, requires_citation: bool = True) -> CitationCheck:
        """Check text against citation rules.

        When ``requires_citation`` is False (nothing in the draft points at
        evidence) only the advisory-tone check runs.
        """
        errors: list[str] = []
        warnings: list[str] = []
        tone_warnings: list[str] = []
        if requires_citation and not has_citation:
            errors.append(UNCITED_STATEMENT)
            if '"' in text:
                warnings.append(UNCITED_QUOTE)
        if ADVISORY_TERMS.search(text):
            tone_warnings.append(ADVISORY_LANGUAGE)
        return CitationCheck(ok=not errors, errors=errors, warnings=warnings, tone_warnings=tone_warnings)

    def verify_retrieval(self, retrieval_date: str | None) -> CitationCheck:
        """A cited source must carry its retrieval date."""
        if not retrieval_date:
            return CitationCheck(ok=False, errors=[MISSING_RETRIEVAL])
        return CitationCheck(ok=True)
