from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ccwebcontent.core.config import ExportPaths


@dataclass(slots=True)
class CLIContext:
    paths: ExportPaths
    manifest_path: Path
    console: Console
