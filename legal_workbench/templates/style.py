"""Drafting style rules."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

ADVISORY_WORDS = re.compile(r"(advise|recommend|should|must|guarantee|promise)", re.IGNORECASE)
EMOTIONAL_TONE = re.compile(r"(outraged|furious|demand|threat)", re.IGNORECASE)
SENTENCE_PUNCTUATION = re.compile(r"[.?!]")


class StyleCheck(BaseModel):
    ok: bool
    warnings: list[str] = Field(default_factory=list)


class StyleGuide:
    """Flags advisory or emotional tone in drafted text."""

    def rules(self) -> list[str]:
        return [
            "Use factual, restrained language; avoid advice or directives.",
            "Present multiple lawful pathways instead of a single recommendation.",
            "Cite sources with URLs and retrieval/currency dates.",
            "Redact PII (addresses, phone numbers, SIN, account numbers, DOB).",
            'Prefer neutral verbs ("indicates", "shows") over prescriptive terms ("must", "should").',
        ]

    def check(self, text: str) -> StyleCheck:
        warnings: list[str] = []
        if ADVISORY_WORDS.search(text):
            warnings.append("Advisory language detected; rephrase to informational tone.")
        if EMOTIONAL_TONE.search(text):
            warnings.append("Emotional tone detected; keep restrained and factual.")
        if text and not SENTENCE_PUNCTUATION.search(text):
            warnings.append("Consider concise sentences with clear punctuation.")
        return StyleCheck(ok=not warnings, warnings=warnings)
