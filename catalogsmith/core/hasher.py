"""Canonical serialization and fingerprinting for content addressing.

Every rendered template is serialized to canonical JSON before it is
fingerprinted, so two templates built from the same resources always
produce the same bytes, and therefore the same fingerprint.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes with sorted keys and compact separators.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def fingerprint(data: bytes) -> str:
    """Fingerprint a document's canonical bytes.

    Total over any byte sequence, including the empty one.
    """
    return sha256_hex(data)


def fingerprint_file(path: Any, *, chunk_size: int = 65536) -> str:
    """Fingerprint a file on disk without loading it in one read."""
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()
