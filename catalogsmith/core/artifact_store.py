"""Assembly artifact store — stages packaged artifacts into the output directory.

Storage layout: {outdir}/{artifact.path}
No delete method. A staged artifact is immutable for the rest of the pass.

One store serves one synthesis pass. Files left in ``outdir`` by an earlier
pass are reused when they still hash to the fingerprint and replaced when
they do not; a file this store has staged itself must never change.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from catalogsmith.core.hasher import fingerprint_file, sha256_hex
from catalogsmith.models.artifacts import ArtifactReference

logger = logging.getLogger(__name__)


class ArtifactIntegrityError(RuntimeError):
    """Raised when a staged artifact's bytes do not match its fingerprint."""


class AssemblyArtifactStore:
    """Fingerprint-checked, write-once artifact staging area.

    Staging the same reference twice is a no-op (idempotent) as long as the
    bytes on disk still hash to the reference's fingerprint.

    Parameters
    ----------
    outdir:
        The assembly output directory.
    """

    def __init__(self, outdir: Path) -> None:
        self._base = Path(outdir)
        self._base.mkdir(parents=True, exist_ok=True)
        self._staged: set[Path] = set()
        self._lock = threading.Lock()

    @property
    def outdir(self) -> Path:
        return self._base

    def _artifact_path(self, ref: ArtifactReference) -> Path:
        return self._base / ref.path

    # ------------------------------------------------------------------
    # Stage
    # ------------------------------------------------------------------

    def stage(self, ref: ArtifactReference, data: bytes) -> Path:
        """Write artifact bytes under the reference's path.

        An existing file with matching content is kept as is. A file left
        by an earlier pass with other content is overwritten.

        Raises
        ------
        ArtifactIntegrityError
            If ``data`` does not hash to ``ref.fingerprint``, or a file this
            store already staged no longer matches.
        """
        if sha256_hex(data) != ref.fingerprint:
            raise ArtifactIntegrityError(
                f"Refusing to stage {ref.path}: content does not match "
                f"fingerprint {ref.fingerprint}"
            )

        path = self._artifact_path(ref)
        with self._lock:
            if path in self._staged:
                if not self.verify(ref):
                    raise ArtifactIntegrityError(
                        f"Existing artifact at {path} failed integrity check"
                    )
                return path

            if path.exists() and self.verify(ref):
                logger.debug("Reusing artifact %s from an earlier pass.", path)
            else:
                if path.exists():
                    logger.info("Replacing stale artifact %s.", path)
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_bytes(data)
            self._staged.add(path)
        return path

    # ------------------------------------------------------------------
    # Verify
    # ------------------------------------------------------------------

    def exists(self, ref: ArtifactReference) -> bool:
        return self._artifact_path(ref).exists()

    def verify(self, ref: ArtifactReference) -> bool:
        """Re-hash staged bytes and compare against the reference's fingerprint."""
        path = self._artifact_path(ref)
        if not path.exists():
            return False
        return fingerprint_file(path) == ref.fingerprint

    def write_text(self, name: str, text: str) -> Path:
        """Write a non-artifact file (stack template, manifest) into the assembly."""
        path = self._base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
