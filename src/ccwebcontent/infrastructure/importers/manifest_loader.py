from __future__ import annotations

from pathlib import Path

from ccwebcontent.domain.models.resource import Resource
from ccwebcontent.infrastructure.importers.manifest_json_importer import load_resources_from_json
from ccwebcontent.infrastructure.importers.manifest_xml_importer import load_resources_from_manifest


def load_resources(path: Path) -> list[Resource]:
    if path.suffix.lower() == ".json":
        return load_resources_from_json(path)
    return load_resources_from_manifest(path)
