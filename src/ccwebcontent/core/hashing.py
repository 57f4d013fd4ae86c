from __future__ import annotations

import hashlib


def compute_bytes_digest(data: bytes, alg: str = "sha256") -> str:
    h = hashlib.new(alg)
    h.update(data)
    return h.hexdigest()


def path_identifier(path_name: str) -> str:
    """Return the stable identifier for a logical file path.

    The identifier is the MD5 hex digest of the UTF-8 encoded path. It is part
    of the public contract: the same path always yields the same identifier,
    across runs and processes, so exported file maps may be persisted and
    compared.
    """
    return compute_bytes_digest(path_name.encode("utf-8"), "md5")
