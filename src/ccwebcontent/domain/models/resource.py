from __future__ import annotations

from dataclasses import dataclass

WEBCONTENT = "webcontent"
ASSOCIATED_CONTENT = "associatedcontent"
INSTRUCTOR_ROLE = "instructor"


@dataclass(frozen=True, slots=True)
class FileRef:
    href: str | None


@dataclass(frozen=True, slots=True)
class Resource:
    identifier: str
    href: str | None = None
    intended_use: str | None = None
    intended_user_role: str | None = None
    files: tuple[FileRef, ...] = ()
    resource_type: str = WEBCONTENT

    @property
    def instructor_only(self) -> bool:
        return (self.intended_user_role or "").strip().lower() == INSTRUCTOR_ROLE


def is_webcontent(resource: Resource) -> bool:
    kind = resource.resource_type.strip().lower()
    return kind == WEBCONTENT or kind.startswith(ASSOCIATED_CONTENT)
