from typing import Any, Dict, Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.team import Team, TeamOfficial
from app.models.team_import import TeamImport, TeamImportSession, ImportRunStatus
from app.services.team_import.commit import WriteResult
from app.core.logging_config import logger


class CRUDTeamImportSession:
    """
    Storage for in-progress import sessions.

    The session state is kept as JSON in `payload`; `state` mirrors the
    session's state for querying.
    """

    def get(self, db: Session, *, id: int, club_id: int) -> Optional[TeamImportSession]:
        stmt = select(TeamImportSession).where(
            TeamImportSession.id == id,
            TeamImportSession.club_id == club_id
        )
        return db.execute(stmt).scalar_one_or_none()

    def create(
        self,
        db: Session,
        *,
        club_id: int,
        created_by: int,
        file_name: str,
        state: str,
        payload: Dict[str, Any]
    ) -> TeamImportSession:
        record = TeamImportSession(
            club_id=club_id,
            created_by=created_by,
            file_name=file_name,
            state=state,
            payload=payload,
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    def save(
        self,
        db: Session,
        *,
        record: TeamImportSession,
        state: str,
        payload: Dict[str, Any]
    ) -> TeamImportSession:
        record.state = state
        record.payload = payload
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    def delete(self, db: Session, *, record: TeamImportSession) -> None:
        db.delete(record)
        db.commit()


class TeamImportWriter:
    """
    SQLAlchemy-backed writes for a team import commit.

    Each create commits on its own so a failure in one row never undoes
    earlier rows or the import run record. Database errors are turned into
    a failed WriteResult after rolling back the failed statement.
    """

    def __init__(self, db: Session):
        self.db = db

    def _insert(self, obj, label: str) -> WriteResult:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return WriteResult.success(obj.id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create {label}: {type(e).__name__}: {str(e)}")
            return WriteResult.failure(f"Failed to create {label}: {type(e).__name__}")

    def create_import_run(self, metadata: Dict[str, Any]) -> WriteResult:
        return self._insert(TeamImport(status=ImportRunStatus.pending, **metadata), "import run")

    def create_team(self, payload: Dict[str, Any]) -> WriteResult:
        return self._insert(Team(**payload), f"team '{payload.get('name')}'")

    def create_team_official(self, payload: Dict[str, Any]) -> WriteResult:
        return self._insert(TeamOfficial(**payload), f"official '{payload.get('full_name')}'")

    def complete_import_run(
        self,
        run_id: int,
        *,
        total_rows: int,
        processed_rows: int,
        failed_rows: int
    ) -> WriteResult:
        try:
            run = self.db.get(TeamImport, run_id)
            if run is None:
                return WriteResult.failure(f"Import run {run_id} not found")
            run.status = ImportRunStatus.completed
            run.total_rows = total_rows
            run.processed_rows = processed_rows
            run.failed_rows = failed_rows
            self.db.commit()
            return WriteResult.success(run.id)
        except SQLAlchemyError as e:
            self.db.rollback()
            return WriteResult.failure(f"{type(e).__name__}: {str(e)}")


class CRUDTeamImport:
    """Read access to import run records"""

    def get_multi(self, db: Session, *, club_id: int, skip: int = 0, limit: int = 50):
        stmt = select(TeamImport).where(
            TeamImport.club_id == club_id
        ).order_by(TeamImport.id.desc()).offset(skip).limit(limit)
        return list(db.execute(stmt).scalars().all())


team_import_session = CRUDTeamImportSession()
team_import = CRUDTeamImport()
