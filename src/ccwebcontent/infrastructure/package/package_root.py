from __future__ import annotations

from pathlib import Path

from ccwebcontent.core.config import WEB_RESOURCES_FOLDER
from ccwebcontent.core.errors import PackageRootError
from ccwebcontent.core.files import decode_logical_path


class PackageRoot:
    def __init__(self, root: Path) -> None:
        self.root = root.expanduser().resolve()

    def item_path(self, *parts: str) -> Path:
        relative = [decode_logical_path(part) for part in parts]
        candidate = self.root.joinpath(*[p for p in relative if p]).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise PackageRootError(f"Path escapes package root: {'/'.join(parts)}")
        return candidate

    def resolve_href(self, href: str | None) -> Path | None:
        if not href or not href.strip():
            return None
        try:
            return self.item_path(href)
        except PackageRootError:
            return None

    def candidate_paths(self, path_name: str) -> list[Path]:
        """Locations checked for a logical path, in priority order."""
        candidates: list[Path] = []
        for parts in ((path_name,), (WEB_RESOURCES_FOLDER, path_name)):
            try:
                candidates.append(self.item_path(*parts))
            except PackageRootError:
                continue
        return candidates
