"""Content-based deduplication of rendered templates.

Each distinct fingerprint maps to exactly one ``ArtifactReference`` for the
lifetime of a synthesis pass. Resolving a byte-identical document again
returns the reference created the first time; references are never
replaced or removed.
"""

from __future__ import annotations

import logging
import threading

from catalogsmith.core.hasher import fingerprint
from catalogsmith.models.artifacts import ArtifactReference, TemplateDocument

logger = logging.getLogger(__name__)


class AssetDeduplicator:
    """Fingerprint -> ArtifactReference registry.

    The registry is single-writer: lookups and first-seen inserts happen
    under one lock, so two threads racing on the same fingerprint still
    create a single reference.
    """

    def __init__(self) -> None:
        self._registry: dict[str, ArtifactReference] = {}
        self._lock = threading.Lock()

    def resolve(self, document: TemplateDocument) -> ArtifactReference:
        """Return the artifact reference for a document, creating it on first sight."""
        digest = fingerprint(document.content)

        with self._lock:
            existing = self._registry.get(digest)
            if existing is not None:
                logger.debug(
                    "Dedup hit: %s reuses %s (first seen at %s).",
                    document.origin or "<anonymous>", existing.path, existing.origin,
                )
                return existing

            ref = self._new_reference(digest, document)
            self._registry[digest] = ref

        logger.debug(
            "Dedup miss: %s registered as %s.",
            document.origin or "<anonymous>", ref.path,
        )
        return ref

    @staticmethod
    def _new_reference(digest: str, document: TemplateDocument) -> ArtifactReference:
        return ArtifactReference(
            fingerprint=digest,
            path=document.file_name or f"asset.{digest}{document.extension}",
            object_key=f"{digest}{document.extension}",
            packaging=document.packaging,
            size_bytes=len(document.content),
            origin=document.origin,
        )

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def lookup(self, digest: str) -> ArtifactReference | None:
        with self._lock:
            return self._registry.get(digest)

    def references(self) -> list[ArtifactReference]:
        """All references, in first-seen order."""
        with self._lock:
            return list(self._registry.values())

    @property
    def created_count(self) -> int:
        return len(self)

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __contains__(self, digest: object) -> bool:
        with self._lock:
            return digest in self._registry
