"""Official form field mappings.

Maps drafting variables onto the sections of official Ontario court and
tribunal forms so users can copy their information into the official form
themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field

from legal_workbench.core.config import get_settings

logger = logging.getLogger(__name__)

NOT_PROVIDED = "[Not provided]"


# =============================================================================
# Models
# =============================================================================


class FormFieldMapping(BaseModel):
    variable_name: str
    official_section: str
    section_label: str
    instructions: str | None = None
    example: str | None = None


class FormSection(BaseModel):
    id: str
    title: str
    fields: list[FormFieldMapping] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class OfficialFormMapping(BaseModel):
    form_id: str
    form_name: str
    official_url: str
    authority: str
    jurisdiction: str = "Ontario"
    sections: list[FormSection] = Field(default_factory=list)
    filing_instructions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    last_verified: str | None = None


class DataSummaryRow(BaseModel):
    field: str
    value: str
    instructions: str | None = None


class DataSummarySection(BaseModel):
    title: str
    rows: list[DataSummaryRow] = Field(default_factory=list)


class DataSummary(BaseModel):
    form_name: str
    official_url: str
    authority: str
    sections: list[DataSummarySection] = Field(default_factory=list)


def format_value(value: Any) -> str:
    if value is None or value == "":
        return NOT_PROVIDED
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


# =============================================================================
# Registry
# =============================================================================


class FormMappingRegistry:
    """Official form mappings loaded from YAML."""

    def __init__(self, mappings: list[OfficialFormMapping] | None = None):
        self._mappings: dict[str, OfficialFormMapping] = {}
        for mapping in mappings if mappings is not None else load_form_mappings():
            self._mappings[mapping.form_id] = mapping

    def get_mapping(self, form_id: str) -> OfficialFormMapping | None:
        return self._mappings.get(form_id)

    def list_mappings(self) -> list[OfficialFormMapping]:
        return list(self._mappings.values())

    def mappings_by_authority(self, authority: str) -> list[OfficialFormMapping]:
        return [m for m in self._mappings.values() if m.authority == authority]

    def _require(self, form_id: str) -> OfficialFormMapping:
        mapping = self._mappings.get(form_id)
        if mapping is None:
            raise ValueError(f"No form mapping found for: {form_id}")
        return mapping

    def generate_data_summary(self, form_id: str, variables: Mapping[str, Any]) -> DataSummary:
        """Structured rows pairing each official field with the user's value."""
        mapping = self._require(form_id)
        sections = [
            DataSummarySection(
                title=section.title,
                rows=[
                    DataSummaryRow(
                        field=f"{field.official_section}: {field.section_label}",
                        value=format_value(variables.get(field.variable_name)),
                        instructions=field.instructions,
                    )
                    for field in section.fields
                ],
            )
            for section in mapping.sections
        ]
        return DataSummary(
            form_name=mapping.form_name,
            official_url=mapping.official_url,
            authority=mapping.authority,
            sections=sections,
        )

    def generate_filing_guide(self, form_id: str, variables: Mapping[str, Any]) -> str:
        """Step-by-step markdown guide for completing the official form."""
        mapping = self._require(form_id)
        lines = [
            f"# How to Complete {mapping.form_name}",
            "",
            f"**Official Form:** {mapping.form_name}",
            f"**Download Link:** {mapping.official_url}",
            f"**Authority:** {mapping.authority}",
            "",
            "## Before You Begin",
            "",
            "1. Download the official form from the link above",
            "2. Print the form or fill it with a PDF editor",
            "3. Have the information below ready to copy into the form",
            "",
        ]
        if mapping.warnings:
            lines.append("## Important Warnings")
            lines.append("")
            lines.extend(f"- {warning}" for warning in mapping.warnings)
            lines.append("")

        lines.append("## Your Information")
        lines.append("")
        for number, section in enumerate(mapping.sections, start=1):
            lines.append(f"### {number}. {section.title}")
            lines.append("")
            if section.notes:
                lines.extend(f"- {note}" for note in section.notes)
                lines.append("")
            lines.append("| Official Form Field | Your Information |")
            lines.append("|---------------------|------------------|")
            for field in section.fields:
                value = variables.get(field.variable_name) or f"[{field.section_label}]"
                lines.append(
                    f"| **{field.official_section}:** {field.section_label} | {format_value(value)} |"
                )
                if field.instructions:
                    lines.append(f"| *Instructions:* | *{field.instructions}* |")
            lines.append("")

        lines.append("## Filing Instructions")
        lines.append("")
        lines.extend(
            f"{number}. {instruction}"
            for number, instruction in enumerate(mapping.filing_instructions, start=1)
        )
        lines.append("")
        lines.append("## Legal Disclaimer")
        lines.append("")
        lines.append(
            f"This is information only, not legal advice. The official {mapping.form_name} "
            f"downloaded from {mapping.official_url} is the only document accepted by "
            f"{mapping.authority}. Verify all information before submission."
        )
        return "\n".join(lines) + "\n"


def load_form_mappings(path: str | Path | None = None) -> list[OfficialFormMapping]:
    """Load form mappings from a YAML file."""
    path = Path(path) if path else Path(get_settings().forms_file)
    if not path.exists():
        raise FileNotFoundError(f"Form mappings file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = yaml.safe_load(f) or {}

    mappings = [OfficialFormMapping(**item) for item in content.get("forms", [])]
    logger.debug("Loaded %d form mappings from %s", len(mappings), path)
    return mappings
