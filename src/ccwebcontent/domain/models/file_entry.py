from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath

logger = logging.getLogger(__name__)

FILE_TYPE = "FILE_TYPE"


@dataclass(slots=True)
class FileEntry:
    migration_id: str
    path_name: str
    locked: bool = False
    primary: bool = False
    errored: bool = False
    file_name: str = field(default="")
    file_type: str = FILE_TYPE

    def __post_init__(self) -> None:
        if not self.file_name:
            self.file_name = PurePosixPath(self.path_name).name


class FileMap(Mapping[str, FileEntry]):
    """File entries keyed by logical path.

    The first registration of a path wins, except that a primary entry may
    replace an auxiliary entry for the same path. Identifiers are unique:
    an entry whose identifier already belongs to another path is refused.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FileEntry] = {}
        self._paths_by_id: dict[str, str] = {}

    def register(self, entry: FileEntry) -> bool:
        existing = self._entries.get(entry.path_name)
        if existing is not None and (existing.primary or not entry.primary):
            return False

        owner = self._paths_by_id.get(entry.migration_id)
        if owner is not None and owner != entry.path_name:
            logger.warning(
                "Identifier %s already maps to %s; not registering %s",
                entry.migration_id,
                owner,
                entry.path_name,
            )
            return False

        if existing is not None:
            del self._paths_by_id[existing.migration_id]
        self._entries[entry.path_name] = entry
        self._paths_by_id[entry.migration_id] = entry.path_name
        return True

    def by_identifier(self) -> dict[str, FileEntry]:
        return {entry.migration_id: entry for entry in self._entries.values()}

    def errored(self) -> list[FileEntry]:
        return [entry for entry in self._entries.values() if entry.errored]

    def __getitem__(self, path_name: str) -> FileEntry:
        return self._entries[path_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
