"""Template document and packaged artifact models (immutable)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AssetPackaging(str, Enum):
    """How an artifact is packaged for upload."""

    FILE = "file"
    PRODUCT_TEMPLATE = "product-template"


class TemplateDocument(BaseModel):
    """One rendered template, as canonical bytes.

    Only ``content`` takes part in the fingerprint. ``origin`` (the
    construct path that produced the document) and ``file_name`` (the name
    its artifact takes if this document is the first one seen) are
    informational.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes
    origin: str = ""
    file_name: str = ""
    extension: str = ".json"
    packaging: AssetPackaging = AssetPackaging.PRODUCT_TEMPLATE


class ArtifactReference(BaseModel):
    """Handle to one packaged artifact, keyed by fingerprint.

    Created the first time a fingerprint is observed during a synthesis
    pass and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    fingerprint: str  # SHA-256 hex
    path: str  # file name inside the assembly directory
    object_key: str  # key in the asset bucket
    packaging: AssetPackaging = AssetPackaging.PRODUCT_TEMPLATE
    size_bytes: int = 0
    origin: str = ""


class AssetManifestEntry(BaseModel):
    """An entry in ``manifest.json`` describing one staged artifact."""

    model_config = ConfigDict(frozen=True)

    id: str
    path: str
    object_key: str
    packaging: AssetPackaging
    size_bytes: int = 0
    consumers: list[str] = Field(default_factory=list)

    @classmethod
    def from_reference(
        cls, ref: ArtifactReference, consumers: list[str] | None = None
    ) -> AssetManifestEntry:
        return cls(
            id=ref.fingerprint,
            path=ref.path,
            object_key=ref.object_key,
            packaging=ref.packaging,
            size_bytes=ref.size_bytes,
            consumers=sorted(consumers or []),
        )
