"""Legal Triage Workbench - matter triage, evidence indexing and document packaging."""

__version__ = "0.1.0"
