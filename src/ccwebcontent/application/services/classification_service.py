from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from ccwebcontent.core.hashing import path_identifier
from ccwebcontent.core.media_types import decode_html
from ccwebcontent.domain.models.content import (
    AssignmentDescription,
    ClassificationResult,
    ClassifiedContent,
    SyllabusBody,
    WikiPage,
)
from ccwebcontent.domain.models.file_entry import FileEntry, FileMap
from ccwebcontent.domain.models.resource import Resource

logger = logging.getLogger(__name__)

ASSIGNMENT_USE = "assignment"
SYLLABUS_USE = "syllabus"

PathResolver = Callable[[str | None], Path | None]
HtmlSniffer = Callable[[Path], bool]
UrlRewrite = Callable[[str, str | None], str]


@dataclass(frozen=True, slots=True)
class FileSelection:
    primary: str | None
    auxiliary: tuple[str, ...]


def select_primary_path(resource: Resource) -> FileSelection:
    """Pick the main file of a resource and the auxiliary files left over.

    Candidates in order: the resource href, then the first file reference
    carrying an href. The chosen reference is not repeated as auxiliary, nor
    is any later reference to the same path.
    """
    hrefs = [ref.href for ref in resource.files if ref.href]
    candidates = ([resource.href] if resource.href else []) + hrefs[:1]
    primary = candidates[0] if candidates else None
    if primary is not None and not resource.href:
        hrefs = hrefs[1:]
    auxiliary = tuple(href for href in hrefs if href != primary)
    return FileSelection(primary=primary, auxiliary=auxiliary)


class ResourceClassifier:
    def __init__(
        self,
        resolve_path: PathResolver,
        is_html: HtmlSniffer,
        rewrite_urls: UrlRewrite,
        convert_html_to_pages: bool = False,
    ) -> None:
        self.resolve_path = resolve_path
        self.is_html = is_html
        self.rewrite_urls = rewrite_urls
        self.convert_html_to_pages = convert_html_to_pages

    def classify(self, resources: Iterable[Resource]) -> ClassificationResult:
        assignments: list[AssignmentDescription] = []
        pages: list[WikiPage] = []
        syllabus: SyllabusBody | None = None
        file_map = FileMap()
        skipped: list[str] = []

        for res in resources:
            content = self._classify_html(res)
            if isinstance(content, AssignmentDescription):
                assignments.append(content)
            elif isinstance(content, WikiPage):
                pages.append(content)
            elif isinstance(content, SyllabusBody):
                if syllabus is not None:
                    logger.debug("Syllabus body from %s replaces an earlier one", res.identifier)
                syllabus = content

            if not self._register_files(res, file_map):
                skipped.append(res.identifier)

        return ClassificationResult(
            assignments=tuple(assignments),
            pages=tuple(pages),
            syllabus=syllabus,
            file_map=file_map,
            skipped=tuple(skipped),
        )

    def _classify_html(self, res: Resource) -> ClassifiedContent | None:
        if res.intended_use not in (ASSIGNMENT_USE, SYLLABUS_USE) and not self.convert_html_to_pages:
            return None

        html = self._read_html(res)
        if html is None:
            return None
        html = self.rewrite_urls(html, res.href)

        if res.intended_use == ASSIGNMENT_USE:
            return AssignmentDescription(migration_id=res.identifier, description=html)
        if res.intended_use == SYLLABUS_USE:
            return SyllabusBody(body=html)
        return WikiPage(migration_id=res.identifier, text=html)

    def _read_html(self, res: Resource) -> str | None:
        path = self.resolve_path(res.href)
        if path is None or not path.exists() or not self.is_html(path):
            return None
        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.warning("Unable to read %s for resource %s: %s", path, res.identifier, exc)
            return None
        html, replaced = decode_html(data)
        if replaced:
            logger.warning("Undecodable bytes in %s replaced for resource %s", path, res.identifier)
        return html

    def _register_files(self, res: Resource, file_map: FileMap) -> bool:
        selection = select_primary_path(res)

        for href in selection.auxiliary:
            file_map.register(FileEntry(migration_id=path_identifier(href), path_name=href))

        if selection.primary is None:
            logger.warning("Resource %s has no href or file references; no file registered", res.identifier)
            return False

        stored = file_map.register(
            FileEntry(
                migration_id=res.identifier,
                path_name=selection.primary,
                locked=res.instructor_only,
                primary=True,
            )
        )
        if not stored:
            logger.debug("Path %s already registered; keeping earlier entry", selection.primary)
        return True
