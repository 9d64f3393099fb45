"""catalogsmith data models — all Pydantic v2, all frozen (immutable)."""

from catalogsmith.models.artifacts import (
    ArtifactReference,
    AssetManifestEntry,
    AssetPackaging,
    TemplateDocument,
)
from catalogsmith.models.assembly import CloudAssembly, StackArtifact

__all__ = [
    # artifacts
    "AssetPackaging",
    "TemplateDocument",
    "ArtifactReference",
    "AssetManifestEntry",
    # assembly
    "StackArtifact",
    "CloudAssembly",
]
