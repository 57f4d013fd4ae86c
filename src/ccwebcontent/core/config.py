from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ccwebcontent.core.errors import ConfigurationError


@dataclass(frozen=True)
class ExportPaths:
    package_root: Path
    export_dir: Path
    archive_path: Path


DEFAULT_EXPORT_DIRNAME = "ccweb_export"
WEB_RESOURCES_FOLDER = "web_resources"
ARCHIVE_FILENAME = "all_files.zip"


def load_paths(package_root: Path, export_dir: Path | None = None) -> ExportPaths:
    root = package_root.expanduser().resolve()
    if not root.is_dir():
        raise ConfigurationError(f"Package root is not a directory: {root}")

    if export_dir is not None:
        out_dir = export_dir.expanduser().resolve()
    else:
        export_home_raw = os.getenv("CCWEB_EXPORT_DIR")
        if export_home_raw:
            out_dir = Path(export_home_raw).expanduser().resolve()
        else:
            out_dir = Path.cwd().resolve() / DEFAULT_EXPORT_DIRNAME

    return ExportPaths(
        package_root=root,
        export_dir=out_dir,
        archive_path=out_dir / ARCHIVE_FILENAME,
    )
