from __future__ import annotations

import posixpath
from pathlib import Path, PurePosixPath
from urllib.parse import unquote


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def normalize_logical_path(path_name: str) -> str:
    """Canonical form of a cartridge path: forward slashes, no leading ``./`` or ``/``."""
    clean = path_name.strip().replace("\\", "/")
    while clean.startswith("./"):
        clean = clean[2:]
    clean = clean.lstrip("/")
    return str(PurePosixPath(clean)) if clean else ""


def decode_logical_path(path_name: str) -> str:
    return unquote(normalize_logical_path(path_name))


def archive_member_name(path_name: str) -> str:
    """Name a logical path is stored under in a zip archive.

    Collapses ``.`` and ``..`` segments the way ``zipfile`` does, so two
    spellings of the same path map to one member.
    """
    normalized = normalize_logical_path(path_name)
    return posixpath.normpath(normalized) if normalized else ""
