from typing import Dict, List, Optional

from pydantic import BaseModel

from app.core.logging_config import logger
from app.models.team import DEFAULT_TEAM_COLOR, TeamGender
from app.services.team_import.errors import AuditRecordError
from app.services.team_import.mapping import FieldMapping
from app.services.team_import.projection import CandidateEntity
from app.services.team_import.session import BulkDefaults


class WriteResult(BaseModel):
    """Outcome of one create request: the new record's id, or an error"""
    id: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.id is not None

    @classmethod
    def success(cls, record_id: int) -> "WriteResult":
        return cls(id=record_id)

    @classmethod
    def failure(cls, error: str) -> "WriteResult":
        return cls(error=error)


class RowOutcome(BaseModel):
    index: int
    team_name: str
    team_id: Optional[int] = None
    official_id: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchReport(BaseModel):
    import_run_id: int
    outcomes: List[RowOutcome]

    @property
    def imported_count(self) -> int:
        # Number of teams submitted in the batch, matching the success message
        return len(self.outcomes)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def message(self) -> str:
        noun = "team" if self.imported_count == 1 else "teams"
        return f"{self.imported_count} {noun} imported successfully"


def has_contact(candidate: CandidateEntity) -> bool:
    return bool(candidate.contact_name and candidate.contact_name.strip())


def build_team_payload(
    candidate: CandidateEntity,
    defaults: BulkDefaults,
    club_id: int,
    initiator_id: int
) -> Dict:
    return {
        "club_id": club_id,
        "created_by": initiator_id,
        "name": candidate.name,
        "age_group": defaults.age_group,
        "is_opponent": defaults.is_opponent,
        "gender": TeamGender.boys,
        "team_color": DEFAULT_TEAM_COLOR,
    }


def build_official_payload(candidate: CandidateEntity, defaults: BulkDefaults, team_id: int) -> Dict:
    return {
        "team_id": team_id,
        "full_name": candidate.contact_name.strip(),
        "role": defaults.role,
        "email": candidate.contact_email or None,
        "phone": candidate.contact_phone or None,
    }


def commit_batch(
    writer,
    *,
    candidates: List[CandidateEntity],
    defaults: BulkDefaults,
    file_name: str,
    mapping: FieldMapping,
    initiator_id: int,
    club_id: int
) -> BatchReport:
    """
    Persist a reviewed batch of teams.

    An import run record is written first; if that fails nothing else is
    attempted. Each candidate is then written in order: the team, then its
    contact as a team official when a contact name is present. A failed
    row is recorded in the report and the batch carries on. Rows are not
    retried and a re-run creates the successful rows again.

    Args:
        writer: Persistence object with create_import_run, create_team,
            create_team_official and complete_import_run, each returning
            a WriteResult
        candidates: Reviewed teams, in the order to write them
        defaults: Age group, team type and contact role for every row
        file_name: Name of the uploaded file, for the audit record
        mapping: Column mapping used, for the audit record
        initiator_id: User running the import
        club_id: Club the teams belong to

    Returns:
        BatchReport with one RowOutcome per candidate

    Raises:
        AuditRecordError: If the import run record could not be created
    """
    run = writer.create_import_run({
        "club_id": club_id,
        "created_by": initiator_id,
        "file_name": file_name,
        "field_mappings": mapping.as_config(),
    })
    if not run.ok:
        logger.error(f"Import run for '{file_name}' could not be recorded: {run.error}")
        raise AuditRecordError(run.error or "Import run could not be recorded")

    logger.info(f"Import run {run.id}: committing {len(candidates)} teams for club={club_id}")

    outcomes: List[RowOutcome] = []
    for index, candidate in enumerate(candidates):
        outcome = RowOutcome(index=index, team_name=candidate.name)

        team = writer.create_team(build_team_payload(candidate, defaults, club_id, initiator_id))
        if not team.ok:
            outcome.error = team.error or "Team could not be created"
            logger.warning(f"Import run {run.id}: row {index} ('{candidate.name}') failed: {outcome.error}")
            outcomes.append(outcome)
            continue

        outcome.team_id = team.id
        if has_contact(candidate):
            official = writer.create_team_official(build_official_payload(candidate, defaults, team.id))
            if official.ok:
                outcome.official_id = official.id
            else:
                outcome.error = f"Team created but contact could not be saved: {official.error}"
                logger.warning(f"Import run {run.id}: row {index} official failed: {official.error}")

        outcomes.append(outcome)

    report = BatchReport(import_run_id=run.id, outcomes=outcomes)

    completed = writer.complete_import_run(
        run.id,
        total_rows=len(candidates),
        processed_rows=len(candidates) - report.failed_count,
        failed_rows=report.failed_count,
    )
    if not completed.ok:
        logger.warning(f"Import run {run.id}: could not record row counts: {completed.error}")

    logger.info(
        f"Import run {run.id} finished: {len(candidates)} rows, {report.failed_count} failed"
    )
    return report
