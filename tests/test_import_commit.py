import pytest

from app.models.team import OfficialRole, TeamGender
from app.services.team_import import (
    AuditRecordError,
    BulkDefaults,
    CandidateEntity,
    FieldMapping,
    WriteResult,
    commit_batch,
)


class FakeWriter:
    """Records every write and fails the ones it is told to"""

    def __init__(self, fail_run=False, fail_teams=(), fail_officials=()):
        self.fail_run = fail_run
        self.fail_teams = set(fail_teams)
        self.fail_officials = set(fail_officials)
        self.runs = []
        self.teams = []
        self.officials = []
        self.completed = []
        self._next_id = 100

    def _id(self):
        self._next_id += 1
        return self._next_id

    def create_import_run(self, metadata):
        self.runs.append(metadata)
        if self.fail_run:
            return WriteResult.failure("connection refused")
        return WriteResult.success(1)

    def create_team(self, payload):
        self.teams.append(payload)
        if payload["name"] in self.fail_teams:
            return WriteResult.failure("duplicate key")
        return WriteResult.success(self._id())

    def create_team_official(self, payload):
        self.officials.append(payload)
        if payload["full_name"] in self.fail_officials:
            return WriteResult.failure("value too long")
        return WriteResult.success(self._id())

    def complete_import_run(self, run_id, **counts):
        self.completed.append((run_id, counts))
        return WriteResult.success(run_id)


def _commit(writer, candidates, defaults=None):
    return commit_batch(
        writer,
        candidates=candidates,
        defaults=defaults or BulkDefaults(),
        file_name="teams.csv",
        mapping=FieldMapping(name="Club", contact_name="Manager"),
        initiator_id=7,
        club_id=3,
    )


@pytest.fixture
def five_teams():
    return [
        CandidateEntity(name="Rovers", contact_name="Jane Smith", contact_email="jane@rovers.co.uk"),
        CandidateEntity(name="Albion", contact_name=""),
        CandidateEntity(name="Whitehawk", contact_name="Sam Lee"),
        CandidateEntity(name="Saltdean", contact_name=None, contact_email="sec@saltdean.co.uk", contact_phone="01273"),
        CandidateEntity(name="Moulsecoomb", contact_name="   ", contact_phone="01273 600000"),
    ]


def test_records_import_run_before_any_team(five_teams):
    writer = FakeWriter()

    report = _commit(writer, five_teams)

    assert writer.runs == [{
        "club_id": 3,
        "created_by": 7,
        "file_name": "teams.csv",
        "field_mappings": {"name": "Club", "contact_name": "Manager"},
    }]
    assert report.import_run_id == 1
    assert writer.completed == [(1, {"total_rows": 5, "processed_rows": 5, "failed_rows": 0})]


def test_failed_row_does_not_stop_the_batch(five_teams):
    writer = FakeWriter(fail_teams={"Whitehawk"})

    report = _commit(writer, five_teams)

    assert [payload["name"] for payload in writer.teams] == [
        "Rovers", "Albion", "Whitehawk", "Saltdean", "Moulsecoomb"
    ]
    assert report.outcomes[2].error == "duplicate key"
    assert report.outcomes[2].team_id is None
    assert all(o.team_id for i, o in enumerate(report.outcomes) if i != 2)
    assert report.failed_count == 1
    # Message counts the whole batch
    assert report.imported_count == 5
    assert report.message == "5 teams imported successfully"
    assert writer.completed[0][1] == {"total_rows": 5, "processed_rows": 4, "failed_rows": 1}


def test_official_only_written_for_rows_with_contact(five_teams):
    writer = FakeWriter()

    _commit(writer, five_teams, BulkDefaults(role=OfficialRole.manager))

    assert [o["full_name"] for o in writer.officials] == ["Jane Smith", "Sam Lee"]
    assert writer.officials[0]["role"] is OfficialRole.manager
    assert writer.officials[0]["email"] == "jane@rovers.co.uk"
    assert writer.officials[0]["phone"] is None


def test_email_or_phone_without_contact_name_writes_no_official(five_teams):
    writer = FakeWriter()

    report = _commit(writer, five_teams)

    officials_by_team = {o["team_id"] for o in writer.officials}
    for index in (3, 4):
        assert report.outcomes[index].team_id not in officials_by_team
        assert report.outcomes[index].official_id is None
        assert report.outcomes[index].error is None
    assert all(o["email"] != "sec@saltdean.co.uk" for o in writer.officials)


def test_no_official_when_team_fails(five_teams):
    writer = FakeWriter(fail_teams={"Rovers"})

    _commit(writer, five_teams)

    assert [o["full_name"] for o in writer.officials] == ["Sam Lee"]


def test_official_failure_keeps_team(five_teams):
    writer = FakeWriter(fail_officials={"Sam Lee"})

    report = _commit(writer, five_teams)

    outcome = report.outcomes[2]
    assert outcome.team_id is not None
    assert outcome.official_id is None
    assert "contact could not be saved" in outcome.error


def test_team_payload_applies_bulk_defaults(five_teams):
    writer = FakeWriter()

    _commit(writer, five_teams[:1], BulkDefaults(age_group="U9", is_opponent=False))

    assert writer.teams[0] == {
        "club_id": 3,
        "created_by": 7,
        "name": "Rovers",
        "age_group": "U9",
        "is_opponent": False,
        "gender": TeamGender.boys,
        "team_color": "blue",
    }


def test_audit_failure_writes_nothing(five_teams):
    writer = FakeWriter(fail_run=True)

    with pytest.raises(AuditRecordError):
        _commit(writer, five_teams)

    assert writer.teams == []
    assert writer.officials == []
    assert writer.completed == []


def test_single_team_message():
    report = _commit(FakeWriter(), [CandidateEntity(name="Rovers")])

    assert report.message == "1 team imported successfully"
