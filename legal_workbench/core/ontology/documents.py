"""Draft and package models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .evidence import EvidenceManifest, SourceManifest
from .types import EvidenceId, SourceService


class EvidenceReference(BaseModel):
    """Reference from a draft section to an evidence item, by id.

    ``attachment_index`` is the 1-based position of the item in the index the
    draft was hydrated against; it is recomputed on every hydration.
    """

    evidence_id: EvidenceId
    attachment_index: int | None = None
    timestamp: str | None = None
    description: str | None = None


class Citation(BaseModel):
    """Citation to an official source supporting an evidence reference."""

    label: str
    url: str
    retrieval_date: str | None = None
    source: SourceService
    evidence_id: EvidenceId | None = None


class DraftSection(BaseModel):
    """A headed section of a draft."""

    heading: str
    content: str
    evidence_refs: list[EvidenceReference] = Field(default_factory=list)
    confirmed: bool = False


class DocumentDraft(BaseModel):
    """A citation-checked draft with advisory metadata."""

    id: str
    title: str
    sections: list[DraftSection] = Field(default_factory=list)
    disclaimer: str | None = None
    citations: list[Citation] = Field(default_factory=list)
    style_warnings: list[str] = Field(default_factory=list)
    citation_warnings: list[str] = Field(default_factory=list)
    citation_errors: list[str] = Field(default_factory=list)
    missing_confirmations: list[str] = Field(default_factory=list)


class PackagedFile(BaseModel):
    """A file in a package. Content is a snapshot, not a reference."""

    path: str
    content: str


class PackageLayout(BaseModel):
    """Folder and file layout every package must contain."""

    name: str
    folders: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class DocumentPackage(BaseModel):
    """Assembled document package."""

    name: str
    folders: list[str] = Field(default_factory=list)
    files: list[PackagedFile] = Field(default_factory=list)
    source_manifest: SourceManifest
    evidence_manifest: EvidenceManifest
    warnings: list[str] = Field(default_factory=list)

    def get_file(self, path: str) -> PackagedFile | None:
        """Find a packaged file by path."""
        for packaged in self.files:
            if packaged.path == path:
                return packaged
        return None

    @property
    def paths(self) -> list[str]:
        return [packaged.path for packaged in self.files]
