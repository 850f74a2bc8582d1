"""Form summary generator.

Produces markdown "Summary of Information" documents from official form
mappings. Summaries are clearly labelled as not being official documents.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import BaseModel

from legal_workbench.templates import DataSummary, FormMappingRegistry

MARKDOWN_SPECIAL = re.compile(r"([|\\`*_{}\[\]()#+\-.!])")


class FormSummaryMetadata(BaseModel):
    form_name: str
    authority: str
    generated_date: str
    matter_id: str | None = None


class FormSummary(BaseModel):
    markdown_content: str
    metadata: FormSummaryMetadata
    filename: str


def escape_markdown(text: str) -> str:
    return MARKDOWN_SPECIAL.sub(r"\\\1", text)


class FormSummaryGenerator:
    def __init__(self, registry: FormMappingRegistry | None = None):
        self.registry = registry or FormMappingRegistry()

    def generate_summary(
        self,
        form_id: str,
        variables: Mapping[str, Any],
        matter_id: str | None = None,
        include_filing_guide: bool = True,
    ) -> FormSummary:
        """Build the summary for one form.

        Raises:
            ValueError: If no mapping exists for ``form_id``.
        """
        mapping = self.registry.get_mapping(form_id)
        if mapping is None:
            raise ValueError(f"No form mapping found for: {form_id}")

        summary = self.registry.generate_data_summary(form_id, variables)
        generated_date = datetime.now(timezone.utc).date().isoformat()

        parts = [
            self._header(summary.form_name),
            self._notice(summary.form_name, summary.official_url),
            self._data_table(summary),
        ]
        if include_filing_guide:
            parts.append("---\n\n" + self.registry.generate_filing_guide(form_id, variables))
        parts.append(self._footer(summary.authority, generated_date))

        return FormSummary(
            markdown_content="".join(parts),
            metadata=FormSummaryMetadata(
                form_name=summary.form_name,
                authority=summary.authority,
                generated_date=generated_date,
                matter_id=matter_id,
            ),
            filename=self.filename(form_id, matter_id),
        )

    def filename(self, form_id: str, matter_id: str | None = None) -> str:
        safe_id = re.sub(r"[^a-zA-Z0-9-]", "_", form_id)
        if matter_id:
            return f"{safe_id}_summary_matter-{matter_id}.md"
        return f"{safe_id}_summary.md"

    def _header(self, form_name: str) -> str:
        return (
            f"# Summary of Information for {form_name}\n\n"
            "**Document Type:** Case Information Summary\n"
            f"**Official Form:** {form_name}\n\n"
        )

    def _notice(self, form_name: str, official_url: str) -> str:
        return (
            "---\n\n"
            "## Important Notice\n\n"
            "**This is NOT an official court or tribunal document.**\n\n"
            "This summary helps you organize your information. To file, you need to:\n\n"
            f"1. Download the official {form_name} from: {official_url}\n"
            "2. Complete the official form using the information below\n"
            "3. Sign and file the official form (not this summary)\n\n"
            "This is legal information, not legal advice.\n\n"
            "---\n\n"
        )

    def _data_table(self, summary: DataSummary) -> str:
        lines = [
            "## Your Information Summary",
            "",
            "Copy this information into the matching sections of the official form:",
            "",
        ]
        for section in summary.sections:
            lines.append(f"### {section.title}")
            lines.append("")
            lines.append("| Official Form Section | Your Information |")
            lines.append("|----------------------|------------------|")
            for row in section.rows:
                lines.append(f"| **{row.field}** | {escape_markdown(row.value)} |")
                if row.instructions:
                    lines.append(f"| *Instructions:* | *{escape_markdown(row.instructions)}* |")
            lines.append("")
        return "\n".join(lines) + "\n"

    def _footer(self, authority: str, generated_date: str) -> str:
        return (
            "\n---\n\n"
            f"**Filing Authority:** {authority}\n"
            f"**Document Generated:** {generated_date}\n\n"
            "**Need Help?**\n"
            "- Free legal information: Community Legal Education Ontario (https://www.cleo.on.ca/)\n"
            "- Find a lawyer or paralegal: Law Society Referral Service (https://lso.ca/)\n"
            "- Legal Aid Ontario: https://www.legalaid.on.ca/\n"
        )
