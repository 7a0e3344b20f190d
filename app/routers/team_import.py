from typing import List
from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.core.club_context import get_club_id
from app.core.logging_config import logger
from app.crud.team_import import team_import as team_import_crud
from app.models.user import User
from app.schemas.team_import import (
    BulkDefaultsUpdate,
    ImportCommitRequest,
    ImportCommitResponse,
    ImportRunResponse,
    ImportSessionResponse,
    MappingUpdateRequest,
)
from app.services.team_import import (
    AuditRecordError,
    CandidateNotFoundError,
    CandidatePatch,
    ImportStateError,
    TeamImportError,
)
from app.services.team_import.service import team_import_service


router = APIRouter()


def _to_http_error(e: Exception) -> HTTPException:
    """Map import pipeline errors to HTTP responses"""
    if isinstance(e, CandidateNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, ImportStateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, AuditRecordError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Import could not be started, no teams were created: {str(e)}"
        )
    if isinstance(e, TeamImportError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.post("/sessions", response_model=ImportSessionResponse, status_code=status.HTTP_201_CREATED)
async def upload_team_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Step 1: Upload and parse a CSV/Excel file of teams.

    Returns the file's headers, a few sample rows and a suggested mapping
    (saved club mapping first, then header auto-detection).
    """
    try:
        logger.info(f"Processing team import upload for club={club_id}, file={file.filename}")
        record, session = await team_import_service.start_session(
            db=db,
            file=file,
            club_id=club_id,
            user_id=current_user.id
        )
        return team_import_service.describe(record, session)
    except TeamImportError as e:
        logger.error(f"File parsing error: {str(e)}")
        raise _to_http_error(e)
    except Exception as e:
        logger.error(f"Unexpected error in team import upload: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to process file: {str(e)}"
        )


@router.get("/sessions/{session_id}", response_model=ImportSessionResponse)
def get_import_session(
    session_id: int,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    record, session = team_import_service.get_session(db, session_id, club_id)
    return team_import_service.describe(record, session)


@router.put("/sessions/{session_id}/mapping", response_model=ImportSessionResponse)
def update_mapping(
    session_id: int,
    request: MappingUpdateRequest,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """Map one field to a column header, replacing any earlier choice."""
    try:
        record, session = team_import_service.set_mapping(
            db, session_id, club_id, request.field, request.header
        )
        return team_import_service.describe(record, session)
    except TeamImportError as e:
        raise _to_http_error(e)


@router.post("/sessions/{session_id}/preview", response_model=ImportSessionResponse)
def preview_import(
    session_id: int,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """
    Step 2: Build the list of teams to import from the current mapping.

    Fails with 400 while no column is mapped to the team name.
    """
    try:
        record, session = team_import_service.start_preview(db, session_id, club_id)
        return team_import_service.describe(record, session)
    except TeamImportError as e:
        raise _to_http_error(e)


@router.patch("/sessions/{session_id}/candidates/{index}", response_model=ImportSessionResponse)
def update_candidate(
    session_id: int,
    index: int,
    patch: CandidatePatch,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """Edit one previewed team. Other rows are left as they are."""
    try:
        record, session = team_import_service.update_candidate(db, session_id, club_id, index, patch)
        return team_import_service.describe(record, session)
    except TeamImportError as e:
        raise _to_http_error(e)


@router.put("/sessions/{session_id}/defaults", response_model=ImportSessionResponse)
def update_bulk_defaults(
    session_id: int,
    request: BulkDefaultsUpdate,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """Set the age group, team type or contact role applied to every team."""
    try:
        record, session = team_import_service.set_defaults(
            db, session_id, club_id, request.model_dump(exclude_none=True)
        )
        return team_import_service.describe(record, session)
    except (TeamImportError, ValueError) as e:
        raise _to_http_error(e)


@router.post("/sessions/{session_id}/back", response_model=ImportSessionResponse)
def back_to_mapping(
    session_id: int,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """
    Return to column mapping. The mapping is kept; every previewed team and
    every edit made to them is discarded.
    """
    try:
        record, session = team_import_service.back(db, session_id, club_id)
        return team_import_service.describe(record, session)
    except TeamImportError as e:
        raise _to_http_error(e)


@router.post("/sessions/{session_id}/commit", response_model=ImportCommitResponse)
def commit_import(
    session_id: int,
    request: ImportCommitRequest = ImportCommitRequest(),
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Step 3: Create the previewed teams and their contacts.

    Rows that fail are skipped and listed in `outcomes`; the rest of the
    batch is still imported. Optionally saves the mapping as the club default.
    """
    try:
        report = team_import_service.commit(
            db=db,
            session_id=session_id,
            club_id=club_id,
            user_id=current_user.id,
            save_mapping=request.save_mapping
        )
        return ImportCommitResponse(
            import_run_id=report.import_run_id,
            imported_count=report.imported_count,
            failed_count=report.failed_count,
            message=report.message,
            outcomes=report.outcomes
        )
    except TeamImportError as e:
        raise _to_http_error(e)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def discard_import_session(
    session_id: int,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """
    Abandon an import. This is also the way out of a session left in
    'committing' by an interrupted commit.
    """
    team_import_service.discard(db, session_id, club_id)
    return None


@router.get("/runs", response_model=List[ImportRunResponse])
def list_import_runs(
    skip: int = 0,
    limit: int = 50,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """Audit log of past import attempts, newest first."""
    return team_import_crud.get_multi(db, club_id=club_id, skip=skip, limit=limit)
