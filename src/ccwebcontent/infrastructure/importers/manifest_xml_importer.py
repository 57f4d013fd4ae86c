from __future__ import annotations

from pathlib import Path
from typing import Iterable
from xml.etree import ElementTree as ET

from ccwebcontent.core.errors import ManifestError
from ccwebcontent.domain.models.resource import WEBCONTENT, FileRef, Resource, is_webcontent


def load_resources_from_manifest(path: Path) -> list[Resource]:
    try:
        root = ET.fromstring(path.read_bytes())
    except ET.ParseError as exc:
        raise ManifestError(f"Malformed manifest {path}: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"Unable to read manifest {path}: {exc}") from exc
    return parse_manifest_root(root)


def parse_manifest_root(root: ET.Element) -> list[Resource]:
    resources: list[Resource] = []
    for node in root.iter():
        if _local_tag(node.tag) != "resource":
            continue
        identifier = str(node.attrib.get("identifier") or "").strip()
        if not identifier:
            continue
        resources.append(
            Resource(
                identifier=identifier,
                href=_clean(node.attrib.get("href")),
                intended_use=_intended_use(node),
                intended_user_role=_intended_user_role(node),
                files=tuple(
                    FileRef(href=_clean(child.attrib.get("href")))
                    for child in node
                    if _local_tag(child.tag) == "file"
                ),
                resource_type=str(node.attrib.get("type") or WEBCONTENT).strip(),
            )
        )
    return resources


def select_webcontent(resources: Iterable[Resource]) -> list[Resource]:
    return [res for res in resources if is_webcontent(res)]


def _intended_use(node: ET.Element) -> str | None:
    for key, value in node.attrib.items():
        if _local_tag(key).lower() == "intendeduse":
            cleaned = _clean(value)
            return cleaned.lower() if cleaned else None
    return None


def _intended_user_role(node: ET.Element) -> str | None:
    for role_node in node.iter():
        if _local_tag(role_node.tag) != "intendedEndUserRole":
            continue
        for value_node in role_node.iter():
            if _local_tag(value_node.tag) == "value":
                return _clean(value_node.text)
    return None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _local_tag(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if "}" in tag else tag
