import pytest
from sqlalchemy.exc import OperationalError

from app.crud.team_import import TeamImportWriter
from app.services.team_import import WriteResult
from app.services.user_mapping import user_mapping_service


TEAMS_CSV = (
    b"Club,Manager,Email,Tel\n"
    b"rovers fc,Jane Smith,jane@rovers.co.uk,07700900123\n"
    b"ALBION COLTS,,,\n"
    b"whitehawk youth,Sam Lee,sam@whitehawk.co.uk,01273000000\n"
)

BASE = "/api/team-imports"


def _upload(client, headers, content=TEAMS_CSV, filename="teams.csv"):
    return client.post(
        f"{BASE}/sessions",
        files={"file": (filename, content, "text/csv")},
        headers=headers,
    )


def _previewing_session(client, headers):
    session_id = _upload(client, headers).json()["id"]
    response = client.post(f"{BASE}/sessions/{session_id}/preview", headers=headers)
    assert response.status_code == 200
    return session_id


def test_requires_authentication(client):
    assert _upload(client, {}).status_code == 401


def test_upload_suggests_mapping(client, auth_headers):
    response = _upload(client, auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["state"] == "mapping"
    assert body["headers"] == ["Club", "Manager", "Email", "Tel"]
    assert body["total_rows"] == 3
    assert body["can_proceed"] is True
    assert body["mapping"] == {
        "name": "Club",
        "contact_name": "Manager",
        "contact_email": "Email",
        "contact_phone": "Tel",
    }
    name_column = body["columns"][0]
    assert name_column["identifier"] == "name"
    assert name_column["required"] is True
    assert name_column["sample_value"] == "rovers fc"
    assert body["defaults"] == {"age_group": "U12", "is_opponent": True, "role": "fixtures_secretary"}
    assert "U8" in body["age_groups"] and "U18" in body["age_groups"]


def test_upload_rejects_unreadable_file(client, auth_headers):
    response = _upload(client, auth_headers, content=b"Club\nrovers\n", filename="teams.pdf")

    assert response.status_code == 400


def test_full_import_flow(client, auth_headers):
    session_id = _previewing_session(client, auth_headers)

    edit = client.patch(
        f"{BASE}/sessions/{session_id}/candidates/1",
        json={"name": "Albion Colts U13", "contact_name": "Pat Green"},
        headers=auth_headers,
    )
    assert edit.status_code == 200
    assert [c["name"] for c in edit.json()["candidates"]] == [
        "Rovers Fc", "Albion Colts U13", "Whitehawk Youth"
    ]

    defaults = client.put(
        f"{BASE}/sessions/{session_id}/defaults",
        json={"age_group": "U14"},
        headers=auth_headers,
    )
    assert defaults.json()["defaults"]["age_group"] == "U14"

    commit = client.post(
        f"{BASE}/sessions/{session_id}/commit",
        json={"save_mapping": True},
        headers=auth_headers,
    )
    assert commit.status_code == 200
    result = commit.json()
    assert result["imported_count"] == 3
    assert result["failed_count"] == 0
    assert result["message"] == "3 teams imported successfully"

    teams = client.get("/api/teams", headers=auth_headers).json()
    by_name = {team["name"]: team for team in teams}
    assert set(by_name) == {"Rovers Fc", "Albion Colts U13", "Whitehawk Youth"}
    assert all(team["age_group"] == "U14" and team["is_opponent"] for team in teams)
    rovers_official = by_name["Rovers Fc"]["officials"][0]
    assert rovers_official["full_name"] == "Jane Smith"
    assert rovers_official["role"] == "fixtures_secretary"
    assert rovers_official["phone"] == "07700900123"
    assert by_name["Albion Colts U13"]["officials"][0]["full_name"] == "Pat Green"

    runs = client.get(f"{BASE}/runs", headers=auth_headers).json()
    assert len(runs) == 1
    assert runs[0]["status"] == "completed"
    assert runs[0]["total_rows"] == 3
    assert runs[0]["failed_rows"] == 0
    assert runs[0]["file_name"] == "teams.csv"

    saved = client.get("/api/user-mappings/team", headers=auth_headers)
    assert saved.status_code == 200
    assert saved.json()["mapping_config"]["name"] == "Club"

    # The session is removed once committed
    assert client.get(f"{BASE}/sessions/{session_id}", headers=auth_headers).status_code == 404


def test_row_without_contact_creates_no_official(client, auth_headers):
    session_id = _previewing_session(client, auth_headers)
    client.post(f"{BASE}/sessions/{session_id}/commit", headers=auth_headers)

    teams = client.get("/api/teams", headers=auth_headers).json()
    albion = next(team for team in teams if team["name"] == "Albion Colts")
    assert albion["officials"] == []


def test_saved_mapping_applies_to_next_upload(client, auth_headers):
    client.post(
        "/api/user-mappings",
        json={"entity_type": "team", "mapping_config": {"name": "Squad"}},
        headers=auth_headers,
    )

    response = _upload(client, auth_headers, content=b"Team,Squad\nA,B\n")

    assert response.json()["mapping"]["name"] == "Squad"


def test_preview_requires_team_name(client, auth_headers):
    session_id = _upload(client, auth_headers).json()["id"]
    cleared = client.put(
        f"{BASE}/sessions/{session_id}/mapping",
        json={"field": "name", "header": None},
        headers=auth_headers,
    )
    assert cleared.json()["can_proceed"] is False

    response = client.post(f"{BASE}/sessions/{session_id}/preview", headers=auth_headers)

    assert response.status_code == 400


def test_mapping_to_unknown_column(client, auth_headers):
    session_id = _upload(client, auth_headers).json()["id"]

    response = client.put(
        f"{BASE}/sessions/{session_id}/mapping",
        json={"field": "contact_name", "header": "Coach"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_back_discards_edits(client, auth_headers):
    session_id = _previewing_session(client, auth_headers)
    client.patch(
        f"{BASE}/sessions/{session_id}/candidates/0",
        json={"name": "Changed"},
        headers=auth_headers,
    )

    back = client.post(f"{BASE}/sessions/{session_id}/back", headers=auth_headers)
    assert back.json()["state"] == "mapping"
    assert back.json()["candidates"] == []

    again = client.post(f"{BASE}/sessions/{session_id}/preview", headers=auth_headers)
    assert again.json()["candidates"][0]["name"] == "Rovers Fc"


def test_state_errors(client, auth_headers):
    session_id = _upload(client, auth_headers).json()["id"]

    commit = client.post(f"{BASE}/sessions/{session_id}/commit", headers=auth_headers)
    assert commit.status_code == 409

    client.post(f"{BASE}/sessions/{session_id}/preview", headers=auth_headers)
    missing = client.patch(
        f"{BASE}/sessions/{session_id}/candidates/9",
        json={"name": "Nobody"},
        headers=auth_headers,
    )
    assert missing.status_code == 404

    bad_default = client.put(
        f"{BASE}/sessions/{session_id}/defaults",
        json={"age_group": "U40"},
        headers=auth_headers,
    )
    assert bad_default.status_code == 422


def test_audit_failure_leaves_session_reviewable(client, auth_headers, monkeypatch):
    session_id = _previewing_session(client, auth_headers)
    client.patch(
        f"{BASE}/sessions/{session_id}/candidates/0",
        json={"name": "Edited Rovers"},
        headers=auth_headers,
    )
    monkeypatch.setattr(
        TeamImportWriter,
        "create_import_run",
        lambda self, metadata: WriteResult.failure("connection refused"),
    )

    response = client.post(f"{BASE}/sessions/{session_id}/commit", headers=auth_headers)

    assert response.status_code == 502
    session = client.get(f"{BASE}/sessions/{session_id}", headers=auth_headers).json()
    assert session["state"] == "failed"
    assert session["last_error"] == "connection refused"
    assert session["candidates"][0]["name"] == "Edited Rovers"
    assert client.get("/api/teams", headers=auth_headers).json() == []


def test_sessions_are_club_scoped(client, auth_headers, other_auth_headers):
    session_id = _upload(client, auth_headers).json()["id"]

    response = client.get(f"{BASE}/sessions/{session_id}", headers=other_auth_headers)

    assert response.status_code == 404


def test_discard_session(client, auth_headers):
    session_id = _upload(client, auth_headers).json()["id"]

    assert client.delete(f"{BASE}/sessions/{session_id}", headers=auth_headers).status_code == 204
    assert client.get(f"{BASE}/sessions/{session_id}", headers=auth_headers).status_code == 404


def test_upload_rejects_corrupt_workbook(client, auth_headers):
    response = _upload(client, auth_headers, content=b"PK\x03\x04\x14\x00truncated", filename="teams.xlsx")

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Failed to parse file")


def test_unexpected_commit_error_leaves_session_committing(client, auth_headers, monkeypatch, caplog):
    session_id = _previewing_session(client, auth_headers)

    def broken_batch(*args, **kwargs):
        raise RuntimeError("server closed the connection unexpectedly")

    monkeypatch.setattr("app.services.team_import.service.commit_batch", broken_batch)

    with pytest.raises(RuntimeError):
        client.post(f"{BASE}/sessions/{session_id}/commit", headers=auth_headers)

    assert "stuck in 'committing'" in caplog.text
    session = client.get(f"{BASE}/sessions/{session_id}", headers=auth_headers).json()
    assert session["state"] == "committing"
    retry = client.post(f"{BASE}/sessions/{session_id}/commit", headers=auth_headers)
    assert retry.status_code == 409
    assert client.delete(f"{BASE}/sessions/{session_id}", headers=auth_headers).status_code == 204


def test_mapping_save_failure_still_completes_import(client, auth_headers, monkeypatch):
    session_id = _previewing_session(client, auth_headers)

    def broken_save(*args, **kwargs):
        raise OperationalError("INSERT INTO user_column_mappings", {}, Exception("disk I/O error"))

    monkeypatch.setattr(user_mapping_service, "save_mapping", broken_save)

    response = client.post(
        f"{BASE}/sessions/{session_id}/commit",
        json={"save_mapping": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["imported_count"] == 3
    assert len(client.get("/api/teams", headers=auth_headers).json()) == 3
    assert client.get(f"{BASE}/sessions/{session_id}", headers=auth_headers).status_code == 404
