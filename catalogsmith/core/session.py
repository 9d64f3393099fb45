"""Synthesis session — the explicit build context for one synthesis pass.

A session owns the fingerprint registry and the artifact staging area for
exactly one pass. It is handed to every template binding instead of living
in module-level state, and it refuses work once closed::

    with SynthesisSession(outdir) as session:
        ref = session.package(document, consumer="Stack/MyProduct")
"""

from __future__ import annotations

import logging
import threading
import uuid
from pathlib import Path
from typing import Any

from catalogsmith.config import SynthConfig
from catalogsmith.core.artifact_store import AssemblyArtifactStore
from catalogsmith.core.deduplicator import AssetDeduplicator
from catalogsmith.models.artifacts import (
    ArtifactReference,
    AssetManifestEntry,
    TemplateDocument,
)

logger = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    """Raised when a session is used before start() or after close()."""


class SynthesisSession:
    """Scoped state for one synthesis pass.

    Parameters
    ----------
    outdir:
        Assembly output directory. Artifacts are staged here.
    config:
        Synthesis settings. Uses environment-driven defaults if not provided.
    """

    def __init__(self, outdir: Path, config: SynthConfig | None = None) -> None:
        self.config = config or SynthConfig()
        self.session_id = f"synth-{uuid.uuid4().hex[:12]}"
        self._outdir = Path(outdir)
        self._deduplicator: AssetDeduplicator | None = None
        self._store: AssemblyArtifactStore | None = None
        self._staged: set[str] = set()
        self._consumers: dict[str, set[str]] = {}
        self._closed = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> SynthesisSession:
        if self._closed:
            raise SessionClosedError(
                f"Session {self.session_id} is closed and cannot be restarted"
            )
        if self._deduplicator is None:
            self._deduplicator = AssetDeduplicator()
            self._store = AssemblyArtifactStore(self._outdir)
            logger.info("Synthesis session %s started (outdir=%s).", self.session_id, self._outdir)
        return self

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        count = len(self._deduplicator) if self._deduplicator is not None else 0
        logger.info(
            "Synthesis session %s closed: %d artifact(s) staged.",
            self.session_id, count,
        )

    @property
    def is_open(self) -> bool:
        return self._deduplicator is not None and not self._closed

    def __enter__(self) -> SynthesisSession:
        return self.start()

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _require_open(self) -> tuple[AssetDeduplicator, AssemblyArtifactStore]:
        if not self.is_open:
            state = "closed" if self._closed else "not started"
            raise SessionClosedError(f"Session {self.session_id} is {state}")
        return self._deduplicator, self._store  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Packaging
    # ------------------------------------------------------------------

    @property
    def outdir(self) -> Path:
        return self._outdir

    @property
    def store(self) -> AssemblyArtifactStore:
        return self._require_open()[1]

    @property
    def deduplicator(self) -> AssetDeduplicator:
        return self._require_open()[0]

    def resolve(self, document: TemplateDocument) -> ArtifactReference:
        """Fingerprint and register a document without staging it."""
        dedup, _store = self._require_open()
        return dedup.resolve(document)

    def package(
        self, document: TemplateDocument, *, consumer: str = ""
    ) -> ArtifactReference:
        """Resolve a document to its artifact and stage the bytes once.

        ``consumer`` is the construct path of the stack that references the
        artifact; it is recorded for the assembly manifest.
        """
        dedup, store = self._require_open()
        ref = dedup.resolve(document)
        with self._lock:
            if ref.fingerprint not in self._staged:
                store.stage(ref, document.content)
                self._staged.add(ref.fingerprint)
            if consumer:
                self._consumers.setdefault(ref.fingerprint, set()).add(consumer)
        return ref

    def asset_url(self, ref: ArtifactReference) -> dict[str, str]:
        """The S3 URL an uploaded artifact will be served from, as a ``Fn::Sub``."""
        return {
            "Fn::Sub": (
                "https://s3.${AWS::Region}.${AWS::URLSuffix}/"
                f"{self.config.asset_bucket_name}/{ref.object_key}"
            )
        }

    def references(self) -> list[ArtifactReference]:
        return self.deduplicator.references()

    def references_for(self, consumer: str) -> list[ArtifactReference]:
        """References used by one stack, in first-seen order."""
        refs = self.references()
        with self._lock:
            return [
                ref for ref in refs
                if consumer in self._consumers.get(ref.fingerprint, set())
            ]

    def manifest_entries(self, consumer: str | None = None) -> list[AssetManifestEntry]:
        refs = self.references() if consumer is None else self.references_for(consumer)
        with self._lock:
            consumers = {
                ref.fingerprint: sorted(self._consumers.get(ref.fingerprint, set()))
                for ref in refs
            }
        return [AssetManifestEntry.from_reference(ref, consumers[ref.fingerprint]) for ref in refs]
