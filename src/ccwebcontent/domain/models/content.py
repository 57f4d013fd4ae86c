from __future__ import annotations

from dataclasses import dataclass, field

from ccwebcontent.domain.models.file_entry import FileMap


@dataclass(frozen=True, slots=True)
class AssignmentDescription:
    migration_id: str
    description: str


@dataclass(frozen=True, slots=True)
class WikiPage:
    migration_id: str
    text: str


@dataclass(frozen=True, slots=True)
class SyllabusBody:
    body: str


ClassifiedContent = AssignmentDescription | WikiPage | SyllabusBody


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    assignments: tuple[AssignmentDescription, ...]
    pages: tuple[WikiPage, ...]
    syllabus: SyllabusBody | None
    file_map: FileMap
    skipped: tuple[str, ...] = ()


@dataclass(slots=True)
class CourseContent:
    """Caller-owned course aggregate that classification results are merged into."""

    assignments: list[AssignmentDescription] = field(default_factory=list)
    wikis: list[WikiPage] = field(default_factory=list)
    syllabus_body: str | None = None
    file_map: FileMap = field(default_factory=FileMap)

    def merge(self, result: ClassificationResult) -> None:
        self.assignments.extend(result.assignments)
        self.wikis.extend(result.pages)
        if result.syllabus is not None:
            self.syllabus_body = result.syllabus.body
        for entry in result.file_map.values():
            self.file_map.register(entry)
