import pytest


def _template(**overrides):
    payload = {
        "name": "Home fixture",
        "description": "Sent to visiting fixtures secretaries",
        "subject": "Fixture: {{home_team.name}} v {{away_team.name}}",
        "content": "<p>{{match_date}} at {{pitch.name}}, {{pitch.postal_code}}</p>",
    }
    payload.update(overrides)
    return payload


def test_list_fields(client, auth_headers):
    fields = client.get("/api/email-templates/fields", headers=auth_headers).json()

    names = [f["field"] for f in fields]
    assert "home_team.name" in names
    assert "pitch.parking_info" in names
    assert all(f["description"] for f in fields)


def test_create_template_defaults_type(client, auth_headers, user):
    response = client.post("/api/email-templates", json=_template(), headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["template_type"] == "match_notification"
    assert response.json()["club_id"] == user.club_id


@pytest.mark.parametrize("overrides", [
    {"content": "<p>{{ pitch.name </p>"},
    {"content": "<p>{% if pitch.name %}no end</p>"},
    {"content": "<p>{{referee.name}}</p>"},
    {"subject": "{{home_team.secret}}"},
])
def test_invalid_templates_are_rejected(client, auth_headers, overrides):
    response = client.post("/api/email-templates", json=_template(**overrides), headers=auth_headers)

    assert response.status_code == 422


def test_conditionals_on_known_fields_are_allowed(client, auth_headers):
    content = "{% if pitch.parking_info %}<p>Parking: {{pitch.parking_info}}</p>{% endif %}"

    response = client.post("/api/email-templates", json=_template(content=content), headers=auth_headers)

    assert response.status_code == 201


def test_update_is_validated(client, auth_headers):
    template_id = client.post("/api/email-templates", json=_template(), headers=auth_headers).json()["id"]

    bad = client.put(
        f"/api/email-templates/{template_id}",
        json={"content": "{{ nope }}"},
        headers=auth_headers,
    )
    good = client.put(
        f"/api/email-templates/{template_id}",
        json={"name": "Renamed"},
        headers=auth_headers,
    )

    assert bad.status_code == 422
    assert good.json()["name"] == "Renamed"
    assert good.json()["content"] == _template()["content"]


def test_templates_are_club_scoped(client, auth_headers, other_auth_headers):
    template_id = client.post("/api/email-templates", json=_template(), headers=auth_headers).json()["id"]

    assert client.get(f"/api/email-templates/{template_id}", headers=other_auth_headers).status_code == 404
    assert client.get("/api/email-templates", headers=other_auth_headers).json() == []


def test_delete_template(client, auth_headers):
    template_id = client.post("/api/email-templates", json=_template(), headers=auth_headers).json()["id"]

    assert client.delete(f"/api/email-templates/{template_id}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/email-templates/{template_id}", headers=auth_headers).status_code == 404
