"""Heuristic extraction of drafting variables from free-text descriptions."""

from __future__ import annotations

import re
from typing import Any, Mapping

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import MatterClassification
from legal_workbench.templates import fill_placeholders

NAME = r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"
DATE = r"(\d{4}-\d{2}-\d{2}|\b\d{1,2}/\d{1,2}/\d{2,4}\b)"
MONTHS = "January|February|March|April|May|June|July|August|September|October|November|December"

LAWYER_PATTERN = re.compile(rf"(?i:lawyer|attorney|counsel|solicitor)\s+{NAME}")
RESPONDENT_PATTERN = re.compile(rf"(?i:suing|sues|sued|against|defendant)\s+{NAME}")
DISCOVERY_PATTERN = re.compile(rf"discover\w*.*?{DATE}", re.IGNORECASE)
DEADLINE_PATTERN = re.compile(rf"(?:deadline|limitation|missed).*?{DATE}", re.IGNORECASE)
INCIDENT_PATTERN = re.compile(rf"(?:incident|occurred|happened|date of|when).*?{DATE}", re.IGNORECASE)
ANY_DATE_PATTERN = re.compile(
    rf"\d{{4}}-\d{{2}}-\d{{2}}|\b(?:{MONTHS})\s+\d{{1,2}},?\s+\d{{4}}|\b\d{{1,2}}/\d{{1,2}}/\d{{2,4}}\b",
    re.IGNORECASE,
)
# A $ prefix or a dollars/CAD suffix is required so years are not read as amounts
AMOUNT_PATTERN = re.compile(
    r"\$\s*(\d[\d,]*(?:\.\d+)?)|(\d[\d,]*(?:\.\d+)?)\s*(?:dollars?|CAD)\b",
    re.IGNORECASE,
)
ADDRESS_PATTERN = re.compile(
    r"(\d+\s+[A-Z][a-z]+\s+(?:Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Drive|Dr|Lane|Court|Ct"
    r"|Place|Pl|Way|Crescent|Cres)[.,]?\s*(?:[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)?,?\s*(?:ON|Ontario))"
)
UNDERLYING_CLAIM_PATTERNS = [
    (re.compile(r"original (.+?) claim", re.IGNORECASE), None),
    (re.compile(r"underlying (.+?) matter", re.IGNORECASE), None),
    (re.compile(r"slip.?and.?fall", re.IGNORECASE), "slip-and-fall personal injury"),
    (re.compile(r"personal injury", re.IGNORECASE), "personal injury"),
    (re.compile(r"contract dispute", re.IGNORECASE), "contract dispute"),
]

# Later entries win when several match
MATTER_TYPES = [
    (re.compile(r"slip\s+and?\s+fall|premises liability", re.IGNORECASE), "Slip and Fall"),
    (re.compile(r"negligen|tort", re.IGNORECASE), "Negligence"),
    (re.compile(r"malpractice|missed.*deadline|missed.*limitation", re.IGNORECASE), "Professional Malpractice"),
    (re.compile(r"contract|breach|agreement", re.IGNORECASE), "Contract"),
    (re.compile(r"landlord|tenant|eviction|rent\b", re.IGNORECASE), "Landlord/Tenant"),
    (re.compile(r"employment|dismissal|wrongful|termination", re.IGNORECASE), "Employment"),
    (re.compile(r"product liability|defective", re.IGNORECASE), "Product Liability"),
]


class VariableValidation(BaseModel):
    valid: bool
    missing: list[str] = Field(default_factory=list)


def format_amount(value: float) -> str:
    """Format as ``$1,234`` (cents kept only when present)."""
    if value == int(value):
        return f"${int(value):,}"
    return f"${value:,.2f}"


class VariableExtractor:
    """Pulls names, dates, amounts and addresses out of matter descriptions.

    Values are keyed by the camelCase placeholder names used in templates.
    """

    def extract_from_description(
        self,
        text: str | None,
        classification: MatterClassification | None = None,
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if text:
            self._extract_parties(text, result)
            self._extract_dates(text, result)
            self._extract_amounts(text, result)
            self._extract_details(text, result)
        if classification is not None:
            self._merge_classification(classification, result)
        return result

    def fill_placeholders(
        self,
        template: str,
        variables: Mapping[str, Any],
        keep_placeholders: bool = False,
    ) -> str:
        return fill_placeholders(template, variables, keep_placeholders)

    def validate_variables(self, variables: Mapping[str, Any], required: list[str]) -> VariableValidation:
        missing = [name for name in required if not variables.get(name)]
        return VariableValidation(valid=not missing, missing=missing)

    # =========================================================================
    # Extraction steps
    # =========================================================================

    def _extract_parties(self, text: str, result: dict[str, Any]) -> None:
        match = LAWYER_PATTERN.search(text)
        if match:
            result["lawyerName"] = match.group(1)
        match = RESPONDENT_PATTERN.search(text)
        if match:
            result["respondentName"] = match.group(1)

    def _extract_dates(self, text: str, result: dict[str, Any]) -> None:
        for key, pattern in (
            ("discoveryDate", DISCOVERY_PATTERN),
            ("deadlineDate", DEADLINE_PATTERN),
            ("incidentDate", INCIDENT_PATTERN),
        ):
            match = pattern.search(text)
            if match:
                result[key] = match.group(1)

        dates = ANY_DATE_PATTERN.findall(text)
        for key, position in (("incidentDate", 0), ("deadlineDate", 1), ("discoveryDate", 2)):
            if key not in result and len(dates) > position:
                result[key] = dates[position]

    def _extract_amounts(self, text: str, result: dict[str, Any]) -> None:
        amounts = []
        for match in AMOUNT_PATTERN.finditer(text):
            raw = (match.group(1) or match.group(2)).replace(",", "")
            value = float(raw)
            if value > 0:
                amounts.append(value)
        if amounts:
            result["amountClaimed"] = format_amount(amounts[0])
        if len(amounts) > 1:
            result["damageAmount"] = format_amount(amounts[1])

    def _extract_details(self, text: str, result: dict[str, Any]) -> None:
        match = ADDRESS_PATTERN.search(text)
        if match:
            result["propertyAddress"] = match.group(1)
        for pattern, label in UNDERLYING_CLAIM_PATTERNS:
            match = pattern.search(text)
            if match:
                result["underlyingClaimType"] = label or match.group(1)
                break
        for pattern, label in MATTER_TYPES:
            if pattern.search(text):
                result["matterType"] = label

    def _merge_classification(self, classification: MatterClassification, result: dict[str, Any]) -> None:
        if classification.parties.names:
            result["claimantName"] = classification.parties.names[0]
        result["jurisdiction"] = classification.jurisdiction.value
        if "amountClaimed" not in result and classification.dispute_amount:
            result["amountClaimed"] = format_amount(classification.dispute_amount)
        if classification.notes:
            result["particulars"] = "\n".join(classification.notes)
