from __future__ import annotations

import logging
import zipfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ccwebcontent.core.files import archive_member_name, ensure_directory
from ccwebcontent.domain.models.file_entry import FileEntry
from ccwebcontent.infrastructure.package.package_root import PackageRoot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PackageStats:
    written: int = 0
    duplicates: int = 0
    errored: int = 0


class ArchivePackager:
    """Write the files named by a file map into a single zip archive.

    Each logical path is looked up under the package root and then under its
    ``web_resources`` folder. Paths found in neither place, or found as a
    directory, are left out and their entries are flagged ``errored``; the
    archive is still produced.
    """

    def __init__(self, package_root: PackageRoot) -> None:
        self.package_root = package_root
        self.last_stats = PackageStats()

    def package(self, file_map: Mapping[str, FileEntry], destination: Path) -> Path | None:
        self.last_stats = PackageStats()
        if not file_map:
            return None

        ensure_directory(destination.parent)
        stats = self.last_stats
        outcomes: dict[str, bool] = {}

        with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry in file_map.values():
                arcname = archive_member_name(entry.path_name)
                if arcname in outcomes:
                    entry.errored = entry.errored or not outcomes[arcname]
                    stats.duplicates += 1
                    continue

                source = self.locate(entry.path_name)
                outcomes[arcname] = source is not None
                if source is None:
                    entry.errored = True
                    stats.errored += 1
                    logger.warning("Unable to locate %s for %s", entry.path_name, entry.migration_id)
                    continue

                archive.write(source, arcname)
                stats.written += 1

        logger.info(
            "Packaged %d file(s) into %s (%d errored)",
            stats.written,
            destination,
            stats.errored,
        )
        return destination.resolve()

    def locate(self, path_name: str) -> Path | None:
        """Return the regular file backing a logical path, or None."""
        for candidate in self.package_root.candidate_paths(path_name):
            if candidate.exists():
                return candidate if candidate.is_file() else None
        return None
