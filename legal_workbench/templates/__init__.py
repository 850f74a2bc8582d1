"""Templates - style rules, YAML template library and official form mappings."""

from .forms import (
    DataSummary,
    DataSummaryRow,
    DataSummarySection,
    FormFieldMapping,
    FormMappingRegistry,
    FormSection,
    OfficialFormMapping,
    load_form_mappings,
)
from .library import (
    BlueprintSection,
    DisclaimerTemplate,
    TemplateLibrary,
    fill_placeholders,
)
from .style import StyleCheck, StyleGuide

__all__ = [
    # Style
    "StyleCheck",
    "StyleGuide",
    # Library
    "BlueprintSection",
    "DisclaimerTemplate",
    "TemplateLibrary",
    "fill_placeholders",
    # Forms
    "DataSummary",
    "DataSummaryRow",
    "DataSummarySection",
    "FormFieldMapping",
    "FormMappingRegistry",
    "FormSection",
    "OfficialFormMapping",
    "load_form_mappings",
]
