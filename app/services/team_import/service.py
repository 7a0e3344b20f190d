from typing import Any, Dict, Optional, Tuple
from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging_config import logger
from app.crud.team_import import team_import_session as session_crud, TeamImportWriter
from app.models.team import OfficialRole
from app.models.team_import import TeamImportSession
from app.schemas.team_import import ColumnMetadata, ImportSessionResponse
from app.services.team_import import (
    AGE_GROUPS,
    FIELD_DESCRIPTIONS,
    REQUIRED_FIELDS,
    AuditRecordError,
    BatchReport,
    CandidatePatch,
    ImportField,
    ImportSession,
    MappingIncompleteError,
    ParseError,
    commit_batch,
    parse_source,
    suggest_mapping,
)
from app.services.user_mapping import user_mapping_service


class TeamImportService:
    """
    Drives a team import across requests.

    Each call loads the stored ImportSession, applies one transition and
    stores the result, so the HTTP layer never holds import state.
    """

    ENTITY_TYPE = "team"

    async def start_session(
        self,
        db: Session,
        file: UploadFile,
        club_id: int,
        user_id: int
    ) -> Tuple[TeamImportSession, ImportSession]:
        """
        Step 1: parse the upload and suggest a column mapping.

        The club's saved mapping is applied first, then header auto-detection.

        Raises:
            ParseError: If the file cannot be read as a table
        """
        content = await file.read()
        if len(content) > settings.IMPORT_MAX_FILE_BYTES:
            raise ParseError(
                f"File is too large ({len(content)} bytes, limit {settings.IMPORT_MAX_FILE_BYTES})"
            )

        table = parse_source(content, file.filename or "")
        saved_mapping = user_mapping_service.get_default_mapping(
            db=db,
            club_id=club_id,
            entity_type=self.ENTITY_TYPE
        )
        session = ImportSession(source=table, mapping=suggest_mapping(table.headers, saved_mapping))

        record = session_crud.create(
            db,
            club_id=club_id,
            created_by=user_id,
            file_name=table.filename,
            state=session.state.value,
            payload=session.model_dump(mode="json"),
        )
        logger.info(
            f"Started team import session {record.id} for club={club_id}: "
            f"{table.row_count} rows from '{table.filename}'"
        )
        return record, session

    def get_session(
        self,
        db: Session,
        session_id: int,
        club_id: int
    ) -> Tuple[TeamImportSession, ImportSession]:
        """
        Load a stored session.

        Raises:
            HTTPException 404: If the session does not exist for this club
        """
        record = session_crud.get(db, id=session_id, club_id=club_id)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Import session not found"
            )
        return record, ImportSession.model_validate(record.payload)

    def _save(self, db: Session, record: TeamImportSession, session: ImportSession) -> ImportSession:
        session_crud.save(
            db,
            record=record,
            state=session.state.value,
            payload=session.model_dump(mode="json"),
        )
        return session

    def set_mapping(
        self,
        db: Session,
        session_id: int,
        club_id: int,
        field: ImportField,
        header: Optional[str]
    ) -> Tuple[TeamImportSession, ImportSession]:
        record, session = self.get_session(db, session_id, club_id)
        return record, self._save(db, record, session.set_mapping(field, header))

    def start_preview(
        self,
        db: Session,
        session_id: int,
        club_id: int
    ) -> Tuple[TeamImportSession, ImportSession]:
        """
        Step 2: project every row into a candidate team.

        Raises:
            MappingIncompleteError: If the team name column is not mapped
        """
        record, session = self.get_session(db, session_id, club_id)
        if not session.mapping.can_proceed():
            raise MappingIncompleteError("Select the column that holds the team name before previewing")

        previewed = session.proceed()
        if previewed is session:
            # proceed() is a no-op outside the mapping state
            return record, session
        logger.info(f"Import session {session_id}: previewing {len(previewed.candidates)} teams")
        return record, self._save(db, record, previewed)

    def update_candidate(
        self,
        db: Session,
        session_id: int,
        club_id: int,
        index: int,
        patch: CandidatePatch
    ) -> Tuple[TeamImportSession, ImportSession]:
        record, session = self.get_session(db, session_id, club_id)
        return record, self._save(db, record, session.update_entity(index, patch))

    def set_defaults(
        self,
        db: Session,
        session_id: int,
        club_id: int,
        updates: Dict[str, Any]
    ) -> Tuple[TeamImportSession, ImportSession]:
        record, session = self.get_session(db, session_id, club_id)
        for field, value in updates.items():
            session = session.set_bulk_default(field, value)
        return record, self._save(db, record, session)

    def back(
        self,
        db: Session,
        session_id: int,
        club_id: int
    ) -> Tuple[TeamImportSession, ImportSession]:
        record, session = self.get_session(db, session_id, club_id)
        logger.info(f"Import session {session_id}: back to mapping, discarding {len(session.candidates)} candidates")
        return record, self._save(db, record, session.back())

    def commit(
        self,
        db: Session,
        session_id: int,
        club_id: int,
        user_id: int,
        save_mapping: bool = False
    ) -> BatchReport:
        """
        Step 3: write the reviewed teams.

        On success the session is removed. If the import run record cannot be
        written, the session goes to 'failed' with every edit kept and the
        AuditRecordError is re-raised. Any other error while teams are being
        written leaves the session in 'committing', since some rows may
        already exist; discarding the session is the only way out.
        """
        record, session = self.get_session(db, session_id, club_id)
        session = self._save(db, record, session.begin_commit())

        try:
            report = commit_batch(
                TeamImportWriter(db),
                candidates=session.candidates,
                defaults=session.defaults,
                file_name=session.source.filename,
                mapping=session.mapping,
                initiator_id=user_id,
                club_id=club_id,
            )
        except AuditRecordError as e:
            self._save(db, record, session.commit_failed(str(e)))
            raise
        except Exception as e:
            logger.error(
                f"Import session {session_id} stopped mid-commit and is stuck in 'committing': {str(e)}. "
                f"Check the club's teams, then discard the session"
            )
            raise

        if save_mapping:
            try:
                user_mapping_service.save_mapping(
                    db=db,
                    club_id=club_id,
                    entity_type=self.ENTITY_TYPE,
                    mapping_config=session.mapping.as_config()
                )
                logger.info(f"Saved default team mapping for club={club_id}")
            except SQLAlchemyError as e:
                # Teams are already written; the import still completes
                db.rollback()
                logger.error(f"Could not save default team mapping for club={club_id}: {str(e)}")

        done = session.commit_succeeded()
        session_crud.delete(db, record=record)
        logger.info(f"Import session {session_id} is {done.state.value}; session removed")
        return report

    def discard(self, db: Session, session_id: int, club_id: int) -> None:
        record, _ = self.get_session(db, session_id, club_id)
        session_crud.delete(db, record=record)

    def describe(self, record: TeamImportSession, session: ImportSession) -> ImportSessionResponse:
        """Build the API view of a session, including per-field sample values"""
        columns = []
        for idx, field in enumerate(ImportField):
            header = session.mapping.get(field)
            sample_value = ""
            if header:
                for row in session.source.rows:
                    value = row.get(header, "")
                    if value.strip():
                        sample_value = value[:50]
                        break
            columns.append(ColumnMetadata(
                description=FIELD_DESCRIPTIONS[field],
                identifier=field,
                index=idx,
                required=field in REQUIRED_FIELDS,
                mapping=header,
                sample_value=sample_value,
            ))

        return ImportSessionResponse(
            id=record.id,
            file_name=session.source.filename,
            state=session.state,
            headers=session.source.headers,
            columns=columns,
            mapping=session.mapping.as_config(),
            can_proceed=session.can_proceed(),
            total_rows=session.source.row_count,
            sample_data=session.source.rows[:settings.IMPORT_SAMPLE_ROWS],
            candidates=session.candidates,
            defaults=session.defaults,
            age_groups=AGE_GROUPS,
            roles=list(OfficialRole),
            last_error=session.last_error,
        )


team_import_service = TeamImportService()
