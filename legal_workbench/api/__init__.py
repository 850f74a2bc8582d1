"""Integration surface used by the HTTP and persistence layers."""

from .integration import IntegrationAPI, forum_map_to_markdown
from .schemas import (
    GenerateDocumentsRequest,
    GenerateDocumentsResponse,
    IntakeResponse,
    SourcesResponse,
    UploadResponse,
)

__all__ = [
    # Orchestrator
    "IntegrationAPI",
    "forum_map_to_markdown",
    # Schemas
    "GenerateDocumentsRequest",
    "GenerateDocumentsResponse",
    "IntakeResponse",
    "SourcesResponse",
    "UploadResponse",
]
