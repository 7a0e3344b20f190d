from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Dict, Optional
from app.models.team import OfficialRole
from app.models.team_import import ImportRunStatus
from app.services.team_import import (
    BulkDefaults,
    CandidateEntity,
    ImportField,
    ImportState,
    RowOutcome,
)


class ColumnMetadata(BaseModel):
    """One importable field and the uploaded column currently feeding it"""
    description: str  # User-friendly description
    identifier: ImportField  # Internal field name (e.g., "contact_name")
    index: int
    required: bool
    mapping: Optional[str] = None  # Chosen column header
    sample_value: str  # Sample value from the mapped column


class ImportSessionResponse(BaseModel):
    id: int
    file_name: str
    state: ImportState
    headers: List[str]
    columns: List[ColumnMetadata]
    mapping: Dict[str, str]
    can_proceed: bool
    total_rows: int
    sample_data: List[Dict[str, str]]
    candidates: List[CandidateEntity]
    defaults: BulkDefaults
    age_groups: List[str]
    roles: List[OfficialRole]
    last_error: Optional[str] = None


class MappingUpdateRequest(BaseModel):
    field: ImportField
    header: Optional[str] = None  # Empty or null clears the mapping


class BulkDefaultsUpdate(BaseModel):
    age_group: Optional[str] = None
    is_opponent: Optional[bool] = None
    role: Optional[OfficialRole] = None


class ImportCommitRequest(BaseModel):
    save_mapping: bool = False


class ImportCommitResponse(BaseModel):
    import_run_id: int
    imported_count: int
    failed_count: int
    message: str
    outcomes: List[RowOutcome]


class ImportRunResponse(BaseModel):
    id: int
    file_name: str
    field_mappings: Optional[Dict[str, str]] = None
    status: ImportRunStatus
    total_rows: Optional[int] = None
    processed_rows: Optional[int] = None
    failed_rows: Optional[int] = None
    created_by: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
