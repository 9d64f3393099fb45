"""Path-derived identifiers for resources and packaged templates.

A construct path such as ``Stack/ProductStack`` becomes
``StackProductStack190B56DE``: the alphanumeric human part followed by the
first 8 upper-cased hex characters of the MD5 of the full path.
"""

from __future__ import annotations

import hashlib
import re

PATH_SEP = "/"
HASH_LEN = 8
MAX_HUMAN_LEN = 240
MAX_ID_LEN = 255

# Components omitted from the human part (and, for "Default", from the hash)
HIDDEN_ID = "Default"
HIDDEN_FROM_HUMAN_ID = "Resource"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def remove_non_alphanumeric(s: str) -> str:
    return _NON_ALPHANUMERIC.sub("", s)


def path_hash(components: list[str]) -> str:
    """First 8 hex chars (upper-cased) of the MD5 of the joined path."""
    digest = hashlib.md5(PATH_SEP.join(components).encode("utf-8")).hexdigest()
    return digest[:HASH_LEN].upper()


def _remove_dupes(components: list[str]) -> list[str]:
    result: list[str] = []
    for c in components:
        if not result or result[-1] != c:
            result.append(c)
    return result


def make_unique_id(components: list[str]) -> str:
    """Compute a unique, human-readable identifier for a construct path.

    Raises
    ------
    ValueError
        If no components remain once hidden ones are dropped.
    """
    components = [c for c in components if c != HIDDEN_ID]

    if not components:
        raise ValueError("Unable to calculate a unique id for an empty set of components")

    if len(components) == 1:
        candidate = remove_non_alphanumeric(components[0])
        if len(candidate) <= MAX_ID_LEN:
            return candidate

    hash_part = path_hash(components)
    human = "".join(
        remove_non_alphanumeric(c)
        for c in _remove_dupes(components)
        if c != HIDDEN_FROM_HUMAN_ID
    )
    return human[:MAX_HUMAN_LEN] + hash_part
