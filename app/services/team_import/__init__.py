from app.services.team_import.errors import (
    AuditRecordError,
    CandidateNotFoundError,
    ImportStateError,
    MappingIncompleteError,
    ParseError,
    TeamImportError,
    UnknownColumnError,
)
from app.services.team_import.source import SourceTable, parse_source
from app.services.team_import.mapping import (
    FIELD_DESCRIPTIONS,
    REQUIRED_FIELDS,
    FieldMapping,
    ImportField,
    suggest_mapping,
)
from app.services.team_import.projection import CandidateEntity, CandidatePatch, project_rows, title_case
from app.services.team_import.session import AGE_GROUPS, BulkDefaults, ImportSession, ImportState
from app.services.team_import.commit import BatchReport, RowOutcome, WriteResult, commit_batch

__all__ = [
    "AGE_GROUPS",
    "AuditRecordError",
    "BatchReport",
    "BulkDefaults",
    "CandidateEntity",
    "CandidateNotFoundError",
    "CandidatePatch",
    "FIELD_DESCRIPTIONS",
    "FieldMapping",
    "ImportField",
    "ImportSession",
    "ImportState",
    "ImportStateError",
    "MappingIncompleteError",
    "ParseError",
    "REQUIRED_FIELDS",
    "RowOutcome",
    "SourceTable",
    "TeamImportError",
    "UnknownColumnError",
    "WriteResult",
    "commit_batch",
    "parse_source",
    "project_rows",
    "suggest_mapping",
    "title_case",
]
