from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ccwebcontent.application.services.classification_service import ResourceClassifier
from ccwebcontent.application.services.packaging_service import ArchivePackager, PackageStats
from ccwebcontent.application.services.url_rewrite_service import UrlRewriter
from ccwebcontent.core.config import ExportPaths
from ccwebcontent.core.media_types import is_html_file
from ccwebcontent.domain.models.content import ClassificationResult, CourseContent
from ccwebcontent.domain.models.file_entry import FileEntry
from ccwebcontent.domain.models.resource import Resource
from ccwebcontent.infrastructure.importers.manifest_xml_importer import select_webcontent
from ccwebcontent.infrastructure.package.package_root import PackageRoot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExportResult:
    course: CourseContent
    classification: ClassificationResult
    archive_path: Path | None
    stats: PackageStats

    @property
    def errored(self) -> tuple[FileEntry, ...]:
        return tuple(self.course.file_map.errored())


class ExportService:
    def __init__(self, paths: ExportPaths, convert_html_to_pages: bool = False) -> None:
        self.paths = paths
        self.package_root = PackageRoot(paths.package_root)
        self.classifier = ResourceClassifier(
            resolve_path=self.package_root.resolve_href,
            is_html=is_html_file,
            rewrite_urls=UrlRewriter(),
            convert_html_to_pages=convert_html_to_pages,
        )
        self.packager = ArchivePackager(self.package_root)

    def classify(self, resources: Iterable[Resource]) -> ClassificationResult:
        return self.classifier.classify(select_webcontent(resources))

    def run(self, resources: Iterable[Resource], course: CourseContent | None = None) -> ExportResult:
        course = course if course is not None else CourseContent()
        classification = self.classify(resources)
        course.merge(classification)
        logger.info(
            "Classified %d assignment(s), %d page(s), syllabus=%s, %d file(s)",
            len(classification.assignments),
            len(classification.pages),
            "yes" if classification.syllabus is not None else "no",
            len(classification.file_map),
        )

        archive_path = self.packager.package(course.file_map, self.paths.archive_path)
        if archive_path is None:
            logger.info("No files registered; archive not created")

        return ExportResult(
            course=course,
            classification=classification,
            archive_path=archive_path,
            stats=self.packager.last_stats,
        )
