from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from ccwebcontent.core.errors import ManifestError
from ccwebcontent.domain.models.resource import WEBCONTENT, FileRef, Resource


class FileRefRecord(BaseModel):
    href: str | None = None


class ResourceRecord(BaseModel):
    identifier: str = Field(min_length=1)
    href: str | None = None
    intended_use: str | None = None
    intended_audience_role: str | None = None
    type: str = WEBCONTENT
    files: list[FileRefRecord] = Field(default_factory=list)

    @field_validator("intended_use")
    @classmethod
    def _lower_intended_use(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip().lower()

    def to_resource(self) -> Resource:
        return Resource(
            identifier=self.identifier,
            href=self.href or None,
            intended_use=self.intended_use,
            intended_user_role=self.intended_audience_role or None,
            files=tuple(FileRef(href=ref.href or None) for ref in self.files),
            resource_type=self.type,
        )


def load_resources_from_json(path: Path) -> list[Resource]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON manifest {path}: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"Unable to read manifest {path}: {exc}") from exc

    if isinstance(payload, dict):
        payload = payload.get("resources")
    if not isinstance(payload, list):
        raise ManifestError("JSON must be a list of resource objects or an object containing 'resources'.")

    try:
        return [ResourceRecord.model_validate(item).to_resource() for item in payload]
    except ValidationError as exc:
        raise ManifestError(f"Invalid resource entry in {path}: {exc}") from exc
