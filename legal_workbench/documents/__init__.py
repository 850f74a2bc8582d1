"""Documents - drafting, variable extraction, form summaries and packaging."""

from .drafting import DocumentDraftingEngine, DraftingInput, pick_source
from .packager import DocumentPackager, PackageInput, render_draft, slugify
from .summaries import FormSummary, FormSummaryGenerator, FormSummaryMetadata
from .variables import VariableExtractor, VariableValidation, format_amount

__all__ = [
    # Drafting
    "DocumentDraftingEngine",
    "DraftingInput",
    "pick_source",
    # Variables
    "VariableExtractor",
    "VariableValidation",
    "format_amount",
    # Summaries
    "FormSummary",
    "FormSummaryGenerator",
    "FormSummaryMetadata",
    # Packaging
    "DocumentPackager",
    "PackageInput",
    "render_draft",
    "slugify",
]
