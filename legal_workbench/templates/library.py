"""Template library backed by YAML files.

Every ``*.yaml`` file in the templates directory may contribute:

- ``templates``: template id -> markdown body with ``{{placeholder}}`` tokens
- ``blueprints``: blueprint id -> list of draft sections
- ``disclaimers``, ``package_layout``, ``formatting_guidance``: library-wide
  settings, normally kept in ``library.yaml``
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel

from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import PackageLayout

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"{{\s*([^}\s]+)\s*}}")


class DisclaimerTemplate(BaseModel):
    title: str
    body: str


class BlueprintSection(BaseModel):
    """A section of a draft blueprint.

    ``cite`` marks sections that point at the matter's primary evidence.
    """

    heading: str
    content: str
    cite: bool = False
    confirmed: bool = False


def fill_placeholders(
    template: str,
    context: Mapping[str, Any],
    keep_placeholders: bool = False,
) -> str:
    """Replace ``{{key}}`` tokens with string values from ``context``.

    Tokens with no value are removed, or left as-is when
    ``keep_placeholders`` is set.
    """

    def substitute(match: re.Match) -> str:
        value = context.get(match.group(1))
        if value is None:
            return match.group(0) if keep_placeholders else ""
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return str(value)

    return PLACEHOLDER.sub(substitute, template)


class TemplateLibrary:
    """Disclaimers, package layout and domain templates."""

    def __init__(self, templates_dir: str | Path | None = None):
        self.templates_dir = Path(templates_dir) if templates_dir else Path(get_settings().templates_dir)
        if not self.templates_dir.is_dir():
            raise FileNotFoundError(f"Templates directory not found: {self.templates_dir}")

        self._templates: dict[str, str] = {}
        self._blueprints: dict[str, list[BlueprintSection]] = {}
        self._disclaimers: list[DisclaimerTemplate] = []
        self._layout: PackageLayout | None = None
        self._guidance: list[str] = []
        self._load()

    # =========================================================================
    # Loading
    # =========================================================================

    def _load(self) -> None:
        for path in sorted(self.templates_dir.glob("*.yaml")):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    content = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning("Skipping template file %s: %s", path.name, e)
                continue
            self._merge(content)
        logger.debug(
            "Loaded %d templates and %d blueprints from %s",
            len(self._templates),
            len(self._blueprints),
            self.templates_dir,
        )

    def _merge(self, content: dict) -> None:
        for template_id, body in (content.get("templates") or {}).items():
            self._templates[template_id] = body
        for blueprint_id, sections in (content.get("blueprints") or {}).items():
            self._blueprints[blueprint_id] = [BlueprintSection(**s) for s in sections]
        if "disclaimers" in content:
            self._disclaimers = [DisclaimerTemplate(**d) for d in content["disclaimers"]]
        if "package_layout" in content:
            self._layout = PackageLayout(**content["package_layout"])
        if "formatting_guidance" in content:
            self._guidance = list(content["formatting_guidance"])

    # =========================================================================
    # Accessors
    # =========================================================================

    def disclaimers(self) -> list[DisclaimerTemplate]:
        return list(self._disclaimers)

    def package_layout(self) -> PackageLayout:
        if self._layout is None:
            return PackageLayout(name="Empty Layout")
        return self._layout.model_copy(deep=True)

    def formatting_guidance(self) -> list[str]:
        return list(self._guidance)

    def domain_templates(self) -> dict[str, str]:
        return dict(self._templates)

    def blueprint(self, blueprint_id: str) -> list[BlueprintSection]:
        """Sections of a draft blueprint; empty for unknown ids."""
        return [s.model_copy() for s in self._blueprints.get(blueprint_id, [])]

    def render_template(
        self,
        template_id: str,
        context: Mapping[str, Any] | None = None,
        keep_placeholders: bool = False,
        strict: bool = False,
    ) -> str:
        """Render a template by id.

        Unknown ids render as an empty string, or raise ``ValueError`` when
        ``strict`` is set.
        """
        body = self._templates.get(template_id)
        if body is None:
            if strict:
                raise ValueError(f"Unknown template: {template_id}")
            return ""
        return fill_placeholders(body, context or {}, keep_placeholders)
