import pytest

from app.models.team import OfficialRole
from app.services.team_import import (
    CandidateNotFoundError,
    FieldMapping,
    ImportField,
    ImportSession,
    ImportState,
    ImportStateError,
    SourceTable,
)


@pytest.fixture
def session() -> ImportSession:
    table = SourceTable(
        filename="teams.csv",
        headers=["Club", "Manager"],
        rows=[
            {"Club": "rovers fc", "Manager": "Jane Smith"},
            {"Club": "albion colts", "Manager": ""},
        ],
    )
    return ImportSession(source=table, mapping=FieldMapping(name="Club"))


def test_new_session_starts_in_mapping_with_defaults(session):
    assert session.state is ImportState.mapping
    assert session.candidates == []
    assert session.defaults.age_group == "U12"
    assert session.defaults.is_opponent is True
    assert session.defaults.role is OfficialRole.fixtures_secretary


def test_proceed_projects_candidates_without_touching_original(session):
    previewing = session.proceed()

    assert previewing.state is ImportState.previewing
    assert [c.name for c in previewing.candidates] == ["Rovers Fc", "Albion Colts"]
    assert session.state is ImportState.mapping
    assert session.candidates == []


def test_proceed_is_a_no_op_without_team_name(session):
    unmapped = session.set_mapping(ImportField.name, None)

    assert unmapped.can_proceed() is False
    assert unmapped.proceed() is unmapped


def test_set_mapping_only_allowed_while_mapping(session):
    with pytest.raises(ImportStateError):
        session.proceed().set_mapping(ImportField.contact_name, "Manager")


def test_update_entity_changes_only_that_row(session):
    previewing = session.proceed()

    edited = previewing.update_entity(1, {"name": "Albion Colts U12", "contact_name": "Sam Lee"})

    assert edited.candidates[1].name == "Albion Colts U12"
    assert edited.candidates[1].contact_name == "Sam Lee"
    assert edited.candidates[0] == previewing.candidates[0]
    assert previewing.candidates[1].name == "Albion Colts"


def test_update_entity_ignores_null_name(session):
    edited = session.proceed().update_entity(0, {"name": None, "contact_email": "jane@rovers.co.uk"})

    assert edited.candidates[0].name == "Rovers Fc"
    assert edited.candidates[0].contact_email == "jane@rovers.co.uk"


@pytest.mark.parametrize("index", [-1, 2, 50])
def test_update_entity_out_of_range(session, index):
    with pytest.raises(CandidateNotFoundError):
        session.proceed().update_entity(index, {"name": "X"})


def test_update_entity_not_allowed_while_mapping(session):
    with pytest.raises(ImportStateError):
        session.update_entity(0, {"name": "X"})


def test_back_keeps_mapping_and_discards_edits(session):
    edited = session.proceed().update_entity(0, {"name": "Edited"})

    mapping_again = edited.back()

    assert mapping_again.state is ImportState.mapping
    assert mapping_again.candidates == []
    assert mapping_again.mapping == session.mapping
    # Going forward again re-projects from the file
    assert mapping_again.proceed().candidates[0].name == "Rovers Fc"


def test_bulk_defaults_survive_back(session):
    previewing = session.proceed().set_bulk_default("age_group", "U15")

    assert previewing.back().defaults.age_group == "U15"


def test_set_bulk_default_validation(session):
    with pytest.raises(ValueError):
        session.set_bulk_default("age_group", "U30")
    with pytest.raises(ValueError):
        session.set_bulk_default("kit_colour", "red")


def test_failed_commit_is_reviewable_and_keeps_edits(session):
    committing = session.proceed().update_entity(0, {"name": "Edited"}).begin_commit()
    assert committing.state is ImportState.committing

    failed = committing.commit_failed("db down")

    assert failed.state is ImportState.failed
    assert failed.last_error == "db down"
    assert failed.candidates[0].name == "Edited"
    assert failed.update_entity(1, {"name": "Also Edited"}).candidates[1].name == "Also Edited"
    assert failed.begin_commit().state is ImportState.committing
    assert failed.back().state is ImportState.mapping


def test_commit_succeeded_is_terminal(session):
    done = session.proceed().begin_commit().commit_succeeded()

    assert done.state is ImportState.done
    with pytest.raises(ImportStateError):
        done.begin_commit()
    with pytest.raises(ImportStateError):
        done.back()
    with pytest.raises(ImportStateError):
        done.set_bulk_default("age_group", "U10")


def test_begin_commit_requires_preview(session):
    with pytest.raises(ImportStateError):
        session.begin_commit()


def test_session_survives_json_round_trip(session):
    edited = session.proceed().update_entity(0, {"contact_phone": "07700900123"})

    restored = ImportSession.model_validate(edited.model_dump(mode="json"))

    assert restored == edited
