from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def setup(client, auth_headers):
    """Two teams and a pitch for the authenticated club"""
    home = client.post(
        "/api/teams",
        json={"name": "Hove Park Lions", "age_group": "U12", "team_color": "red"},
        headers=auth_headers,
    ).json()
    away = client.post(
        "/api/teams",
        json={"name": "Seahaven Colts", "age_group": "U12", "is_opponent": True},
        headers=auth_headers,
    ).json()
    pitch = client.post(
        "/api/pitches",
        json={
            "name": "Dorothy Stringer 3G",
            "address_line1": "Loder Road",
            "city": "Brighton",
            "postal_code": "BN1 6PL",
            "latitude": 50.8449,
            "longitude": -0.1318,
            "parking_info": "Park at the school",
            "amenities": {"toilets": True},
        },
        headers=auth_headers,
    ).json()
    return {"home": home, "away": away, "pitch": pitch}


def _fixture(setup, when=None, **overrides):
    when = when or datetime(2030, 10, 12, 10, 30, tzinfo=timezone.utc)
    payload = {
        "home_team_id": setup["home"]["id"],
        "away_team_id": setup["away"]["id"],
        "pitch_id": setup["pitch"]["id"],
        "match_date": when.isoformat(),
        "notes": "Arrive 30 minutes early",
    }
    payload.update(overrides)
    return payload


def test_create_fixture(client, auth_headers, setup):
    response = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "scheduled"
    assert body["home_team"]["name"] == "Hove Park Lions"
    assert body["away_team"]["name"] == "Seahaven Colts"
    assert body["pitch"]["map_url"] == "https://www.google.com/maps?q=50.8449,-0.1318"


def test_home_and_away_must_differ(client, auth_headers, setup):
    payload = _fixture(setup, away_team_id=setup["home"]["id"])

    assert client.post("/api/fixtures", json=payload, headers=auth_headers).status_code == 422


def test_update_cannot_make_team_play_itself(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/fixtures/{fixture_id}",
        json={"away_team_id": setup["home"]["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_references_must_belong_to_club(client, auth_headers, other_auth_headers, setup):
    foreign_team = client.post(
        "/api/teams",
        json={"name": "Someone Else FC"},
        headers=other_auth_headers,
    ).json()

    response = client.post(
        "/api/fixtures",
        json=_fixture(setup, away_team_id=foreign_team["id"]),
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert "Away team" in response.json()["detail"]


def test_list_in_kick_off_order_and_upcoming_filter(client, auth_headers, setup):
    now = datetime.now(timezone.utc)
    later = _fixture(setup, when=now + timedelta(days=14), notes="later")
    sooner = _fixture(setup, when=now + timedelta(days=7), notes="sooner")
    past = _fixture(setup, when=now - timedelta(days=7), notes="past")
    for payload in (later, sooner, past):
        client.post("/api/fixtures", json=payload, headers=auth_headers)

    everything = client.get("/api/fixtures", headers=auth_headers).json()
    upcoming = client.get("/api/fixtures", params={"upcoming": True}, headers=auth_headers).json()

    assert [f["notes"] for f in everything] == ["past", "sooner", "later"]
    assert [f["notes"] for f in upcoming] == ["sooner", "later"]


def test_update_status(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]

    updated = client.put(
        f"/api/fixtures/{fixture_id}",
        json={"status": "postponed"},
        headers=auth_headers,
    ).json()

    assert updated["status"] == "postponed"


def test_pitch_in_use_cannot_be_deleted(client, auth_headers, setup):
    client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers)

    response = client.delete(f"/api/pitches/{setup['pitch']['id']}", headers=auth_headers)

    assert response.status_code == 409


def test_delete_fixture(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]

    assert client.delete(f"/api/fixtures/{fixture_id}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/fixtures/{fixture_id}", headers=auth_headers).status_code == 404


def test_builtin_match_email(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]

    response = client.post(f"/api/fixtures/{fixture_id}/email", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["template_id"] is None
    assert body["subject"] == "Match Details: Hove Park Lions vs Seahaven Colts"
    html = body["html"]
    assert "Saturday 12 October 2030" in html
    assert "10:30" in html
    assert "Hove Park Lions play in red" in html
    assert "https://www.google.com/maps?q=50.8449,-0.1318" in html
    assert "Park at the school" in html
    assert "Toilets are available" in html
    assert "Arrive 30 minutes early" in html


def test_email_with_stored_template(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]
    template_id = client.post(
        "/api/email-templates",
        json={
            "name": "Short notice",
            "subject": "{{home_team.name}} v {{away_team.name}}",
            "content": "<p>Kick-off {{kick_off}} on {{match_date}} at {{pitch.name}}</p>",
        },
        headers=auth_headers,
    ).json()["id"]

    body = client.post(
        f"/api/fixtures/{fixture_id}/email",
        json={"template_id": template_id},
        headers=auth_headers,
    ).json()

    assert body["subject"] == "Hove Park Lions v Seahaven Colts"
    assert body["html"] == "<p>Kick-off 10:30 on Saturday 12 October 2030 at Dorothy Stringer 3G</p>"


def test_email_with_unknown_template(client, auth_headers, setup):
    fixture_id = client.post("/api/fixtures", json=_fixture(setup), headers=auth_headers).json()["id"]

    response = client.post(
        f"/api/fixtures/{fixture_id}/email",
        json={"template_id": 999},
        headers=auth_headers,
    )

    assert response.status_code == 404
