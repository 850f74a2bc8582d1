"""Tests for the template library, style rules and official form mappings."""

import pytest

from legal_workbench.documents import FormSummaryGenerator
from legal_workbench.templates import (
    FormMappingRegistry,
    TemplateLibrary,
    fill_placeholders,
    load_form_mappings,
)


# =============================================================================
# Placeholders
# =============================================================================


class TestFillPlaceholders:
    def test_amount_renders(self):
        """A numeric amount renders literally with no token left behind."""
        rendered = fill_placeholders("Claim: ${{amountClaimed}}", {"amountClaimed": 500})
        assert "500" in rendered
        assert "{{" not in rendered

    def test_whitespace_in_token(self):
        assert fill_placeholders("Hi {{ name }}", {"name": "Ana"}) == "Hi Ana"

    def test_missing_value_removed_or_kept(self):
        assert fill_placeholders("To {{name}}.", {}) == "To ."
        assert fill_placeholders("To {{name}}.", {}, keep_placeholders=True) == "To {{name}}."

    def test_lists_joined(self):
        assert fill_placeholders("{{items}}", {"items": ["a", "b"]}) == "a, b"


# =============================================================================
# Library
# =============================================================================


class TestTemplateLibrary:
    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TemplateLibrary(tmp_path / "nope")

    def test_disclaimers_and_layout(self, templates: TemplateLibrary):
        assert len(templates.disclaimers()) == 2
        layout = templates.package_layout()
        assert "manifests/evidence_index.json" in layout.files
        assert "drafts/" in layout.folders
        assert templates.formatting_guidance()

    def test_layout_is_copied(self, templates: TemplateLibrary):
        templates.package_layout().files.clear()
        assert templates.package_layout().files

    def test_render_demand_notice(self, templates: TemplateLibrary):
        rendered = templates.render_template("civil/demand_notice", {"amountClaimed": 500})
        assert "**$500**" in rendered
        assert "{{" not in rendered

    def test_unknown_template(self, templates: TemplateLibrary):
        assert templates.render_template("civil/unknown") == ""
        with pytest.raises(ValueError):
            templates.render_template("civil/unknown", strict=True)

    def test_every_domain_has_templates(self, templates: TemplateLibrary):
        prefixes = {template_id.split("/")[0] for template_id in templates.domain_templates()}
        assert {"civil", "criminal", "consumer", "estate", "malpractice", "municipal"} <= prefixes

    def test_blueprints(self, templates: TemplateLibrary):
        sections = templates.blueprint("landlord/intake")
        assert [s.heading for s in sections] == ["Facts", "Requests", "Next Steps"]
        assert sections[0].cite is True
        assert templates.blueprint("landlord/unknown") == []

    def test_bad_yaml_is_skipped(self, tmp_path):
        (tmp_path / "good.yaml").write_text("templates:\n  x/one: 'Hello {{name}}'\n", encoding="utf-8")
        (tmp_path / "bad.yaml").write_text("templates: [unclosed\n", encoding="utf-8")
        library = TemplateLibrary(tmp_path)
        assert library.render_template("x/one", {"name": "Bo"}) == "Hello Bo"
        assert library.package_layout().name == "Empty Layout"


# =============================================================================
# Form mappings
# =============================================================================


class TestFormMappingRegistry:
    def test_shipped_mappings(self):
        registry = FormMappingRegistry()
        ids = {m.form_id for m in registry.list_mappings()}
        assert ids == {"form-7a-small-claims", "ltb-form-t1", "ltb-form-l1", "victim-impact-statement"}
        assert len(registry.mappings_by_authority("Landlord and Tenant Board")) == 2

    def test_data_summary(self):
        summary = FormMappingRegistry().generate_data_summary(
            "form-7a-small-claims", {"claimantName": "Jane Doe"}
        )
        rows = [row for section in summary.sections for row in section.rows]
        assert rows[0].field == "Box 1: Claimant Name"
        assert rows[0].value == "Jane Doe"
        assert any(row.value == "[Not provided]" for row in rows)

    def test_filing_guide(self):
        registry = FormMappingRegistry()
        guide = registry.generate_filing_guide("form-7a-small-claims", {})
        assert guide.startswith("# How to Complete Small Claims Court Form 7A - Statement of Claim")
        assert "[Claimant Name]" in guide

    def test_unknown_form(self):
        with pytest.raises(ValueError, match="No form mapping found for: nope"):
            FormMappingRegistry().generate_data_summary("nope", {})

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_form_mappings(tmp_path / "forms.yaml")


class TestFormSummaryGenerator:
    def test_summary_content(self):
        summary = FormSummaryGenerator().generate_summary(
            "ltb-form-t1", {"tenantName": "Sam Lee"}, matter_id="42"
        )
        content = summary.markdown_content
        assert content.startswith("# Summary of Information for Landlord and Tenant Board Form T1")
        assert "**This is NOT an official court or tribunal document.**" in content
        assert "Sam Lee" in content
        assert "# How to Complete" in content
        assert summary.filename == "ltb-form-t1_summary_matter-42.md"
        assert summary.metadata.matter_id == "42"

    def test_without_filing_guide(self):
        summary = FormSummaryGenerator().generate_summary("ltb-form-t1", {}, include_filing_guide=False)
        assert "# How to Complete" not in summary.markdown_content
        assert summary.filename == "ltb-form-t1_summary.md"

    def test_unknown_form(self):
        with pytest.raises(ValueError):
            FormSummaryGenerator().generate_summary("nope", {})
