import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.team import AGE_GROUPS, DEFAULT_AGE_GROUP, OfficialRole
from app.services.team_import.errors import CandidateNotFoundError, ImportStateError
from app.services.team_import.mapping import FieldMapping, ImportField
from app.services.team_import.projection import CandidateEntity, CandidatePatch, project_rows
from app.services.team_import.source import SourceTable


class ImportState(str, enum.Enum):
    mapping = "mapping"
    previewing = "previewing"
    committing = "committing"
    done = "done"
    failed = "failed"


# A failed commit leaves the session reviewable exactly like previewing
REVIEW_STATES = (ImportState.previewing, ImportState.failed)


class BulkDefaults(BaseModel):
    """Values applied to every team in the batch at commit time"""
    age_group: str = DEFAULT_AGE_GROUP
    is_opponent: bool = True
    role: OfficialRole = OfficialRole.fixtures_secretary

    @field_validator("age_group")
    @classmethod
    def validate_age_group(cls, v: str) -> str:
        if v not in AGE_GROUPS:
            raise ValueError(f"Age group must be one of {', '.join(AGE_GROUPS)}")
        return v


class ImportSession(BaseModel):
    """
    State of one team import, from mapping to commit.

    Every operation returns a new ImportSession and leaves the receiver
    untouched, so each transition can be persisted and tested on its own.
    """
    source: SourceTable
    mapping: FieldMapping = Field(default_factory=FieldMapping)
    candidates: List[CandidateEntity] = Field(default_factory=list)
    defaults: BulkDefaults = Field(default_factory=BulkDefaults)
    state: ImportState = ImportState.mapping
    last_error: Optional[str] = None

    def _require(self, *states: ImportState) -> None:
        if self.state not in states:
            allowed = ", ".join(state.value for state in states)
            raise ImportStateError(
                f"Import is '{self.state.value}'; this action needs one of: {allowed}"
            )

    # Field mapping

    def set_mapping(self, field: ImportField, header: Optional[str]) -> "ImportSession":
        self._require(ImportState.mapping)
        mapping = self.mapping.with_mapping(field, header, self.source.headers)
        return self.model_copy(update={"mapping": mapping})

    def can_proceed(self) -> bool:
        return self.state is ImportState.mapping and self.mapping.can_proceed()

    def proceed(self) -> "ImportSession":
        """
        Project the uploaded rows and move to preview.

        Does nothing while the team name column is unmapped.
        """
        if not self.can_proceed():
            return self
        return self.model_copy(update={
            "candidates": project_rows(self.source, self.mapping),
            "state": ImportState.previewing,
            "last_error": None,
        })

    # Preview / edit

    def update_entity(self, index: int, patch: CandidatePatch | Dict[str, Any]) -> "ImportSession":
        self._require(*REVIEW_STATES)
        if not 0 <= index < len(self.candidates):
            raise CandidateNotFoundError(f"No team at position {index}")

        if isinstance(patch, dict):
            patch = CandidatePatch(**patch)
        changes = patch.model_dump(exclude_unset=True)
        if changes.get("name") is None:
            changes.pop("name", None)

        candidates = list(self.candidates)
        candidates[index] = candidates[index].model_copy(update=changes)
        return self.model_copy(update={"candidates": candidates})

    def set_bulk_default(self, field: str, value: Any) -> "ImportSession":
        if self.state in (ImportState.committing, ImportState.done):
            raise ImportStateError(f"Import is '{self.state.value}'; defaults can no longer change")
        if field not in BulkDefaults.model_fields:
            raise ValueError(f"Unknown bulk setting '{field}'")
        defaults = BulkDefaults(**{**self.defaults.model_dump(), field: value})
        return self.model_copy(update={"defaults": defaults})

    def back(self) -> "ImportSession":
        """
        Return to field mapping, keeping the mapping but dropping every
        candidate and every edit made during preview.
        """
        self._require(*REVIEW_STATES)
        return self.model_copy(update={
            "candidates": [],
            "state": ImportState.mapping,
            "last_error": None,
        })

    # Commit

    def begin_commit(self) -> "ImportSession":
        self._require(*REVIEW_STATES)
        return self.model_copy(update={"state": ImportState.committing, "last_error": None})

    def commit_succeeded(self) -> "ImportSession":
        self._require(ImportState.committing)
        return self.model_copy(update={"state": ImportState.done})

    def commit_failed(self, error: str) -> "ImportSession":
        self._require(ImportState.committing)
        return self.model_copy(update={"state": ImportState.failed, "last_error": error})
