BASE = "/api/users/me"


def test_get_profile(client, auth_headers, user):
    response = client.get(BASE, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user.id
    assert body["email"] == "secretary@hovepark.co.uk"
    assert body["full_name"] == "Fixtures Sec"
    assert body["club_name"] == "Hove Park Juniors"
    assert body["avatar_url"] is None


def test_profile_requires_authentication(client):
    assert client.get(BASE).status_code == 401
    assert client.patch(BASE, json={"full_name": "Jo Bloggs"}).status_code == 401


def test_update_full_name(client, auth_headers):
    response = client.patch(BASE, json={"full_name": "  Jo Bloggs "}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["full_name"] == "Jo Bloggs"
    assert client.get(BASE, headers=auth_headers).json()["full_name"] == "Jo Bloggs"


def test_full_name_needs_two_characters(client, auth_headers):
    for name in ["J", "   ", None]:
        response = client.patch(BASE, json={"full_name": name}, headers=auth_headers)
        assert response.status_code == 422

    assert client.get(BASE, headers=auth_headers).json()["full_name"] == "Fixtures Sec"


def test_set_and_clear_avatar(client, auth_headers):
    avatar = "https://storage.hovepark.co.uk/avatars/7.png"

    response = client.patch(BASE, json={"avatar_url": avatar}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["avatar_url"] == avatar
    # Name is left alone when not sent
    assert response.json()["full_name"] == "Fixtures Sec"

    cleared = client.patch(BASE, json={"avatar_url": None}, headers=auth_headers)
    assert cleared.json()["avatar_url"] is None


def test_avatar_must_be_a_url(client, auth_headers):
    response = client.patch(BASE, json={"avatar_url": "not a url"}, headers=auth_headers)

    assert response.status_code == 422


def test_profile_is_per_user(client, auth_headers, other_auth_headers):
    client.patch(BASE, json={"full_name": "Jo Bloggs"}, headers=auth_headers)

    other = client.get(BASE, headers=other_auth_headers).json()
    assert other["full_name"] == "Fixtures Sec"
    assert other["club_name"] == "Seahaven Youth"
