"""
Tests for the profile endpoints.
"""

import pytest

from modules.users.models import MAX_PROFILES
from tests.conftest import make_profile_doc


def bearer(token_manager, user_id: str, email: str = "someone@example.com") -> dict:
    token = token_manager.issue_access(user_id, email).token
    return {"Authorization": f"Bearer {token}"}


class TestProfileAccess:
    def test_requires_authentication(self, client, registered_user):
        response = client.get(f"/profiles/{registered_user}")

        assert response.status_code == 401

    def test_other_users_profiles_forbidden(self, client, store, logged_in):
        other = store.add_user(email="other@example.com", profiles=[make_profile_doc("P1")])

        response = client.get(f"/profiles/{other}")

        assert response.status_code == 403
        assert response.json()["error"] == "PROFILE_ACCESS_DENIED"

    def test_admin_may_address_any_user(self, client, store, token_manager):
        admin = store.add_user(email="root@example.com", role="admin")
        other = store.add_user(email="other@example.com", profiles=[make_profile_doc("P1")])

        response = client.get(f"/profiles/{other}", headers=bearer(token_manager, admin))

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["P1"]

    def test_admin_addressing_unknown_user(self, client, store, token_manager):
        admin = store.add_user(email="root@example.com", role="admin")

        response = client.get(
            "/profiles/65f0c0ffee0000000000abcd", headers=bearer(token_manager, admin)
        )

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"


class TestProfileCrud:
    def test_list_empty(self, client, logged_in):
        response = client.get(f"/profiles/{logged_in}")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_get(self, client, logged_in):
        created = client.post(f"/profiles/{logged_in}", json={"name": "Ada", "avatar": "a.png"})

        assert created.status_code == 201
        profile = created.json()
        assert profile["name"] == "Ada"
        assert profile["myList"] == {"movies": [], "series": [], "games": []}

        fetched = client.get(f"/profiles/{logged_in}/{profile['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == profile

    def test_get_unknown_profile(self, client, logged_in):
        response = client.get(f"/profiles/{logged_in}/nope")

        assert response.status_code == 404
        assert response.json()["error"] == "PROFILE_NOT_FOUND"

    def test_create_invalid_name(self, client, logged_in):
        response = client.post(f"/profiles/{logged_in}", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_create_beyond_limit(self, client, store, logged_in):
        for n in range(MAX_PROFILES):
            assert client.post(f"/profiles/{logged_in}", json={"name": f"P{n}"}).status_code == 201

        response = client.post(f"/profiles/{logged_in}", json={"name": "extra"})

        assert response.status_code == 409
        assert response.json()["error"] == "PROFILE_LIMIT_REACHED"
        assert len(store.profiles_of(logged_in)) == MAX_PROFILES

    def test_delete_returns_updated_user(self, client, store, logged_in):
        store.profiles_of(logged_in).extend([make_profile_doc("P1"), make_profile_doc("P2")])

        response = client.delete(f"/profiles/{logged_in}/P1")

        assert response.status_code == 200
        user = response.json()
        assert user["id"] == logged_in
        assert [p["id"] for p in user["profiles"]] == ["P2"]
        assert "password" not in user

    def test_delete_unknown_profile(self, client, store, logged_in):
        store.profiles_of(logged_in).append(make_profile_doc("P1"))

        response = client.delete(f"/profiles/{logged_in}/P9")

        assert response.status_code == 404
        assert [p["id"] for p in store.profiles_of(logged_in)] == ["P1"]


class TestToggleEndpoint:
    @pytest.fixture
    def profile_id(self, store, logged_in) -> str:
        store.profiles_of(logged_in).append(make_profile_doc("P1"))
        return "P1"

    def test_toggle_adds_then_removes(self, client, logged_in, profile_id):
        body = {"profileId": profile_id, "category": "movies", "item": {"id": "m1", "title": "Alien"}}

        added = client.patch(f"/profiles/{logged_in}", json=body)
        assert added.status_code == 200
        assert added.json()["message"] == "MyList updated successfully"
        assert added.json()["profile"]["myList"]["movies"] == [{"id": "m1", "title": "Alien"}]

        removed = client.patch(f"/profiles/{logged_in}", json=body)
        assert removed.status_code == 200
        assert removed.json()["profile"]["myList"]["movies"] == []

    def test_toggle_unknown_category(self, client, logged_in, profile_id):
        body = {"profileId": profile_id, "category": "books", "item": {"id": "b1"}}

        response = client.patch(f"/profiles/{logged_in}", json=body)

        assert response.status_code == 400

    def test_toggle_unknown_profile(self, client, logged_in, profile_id):
        body = {"profileId": "P9", "category": "movies", "item": {"id": "m1"}}

        response = client.patch(f"/profiles/{logged_in}", json=body)

        assert response.status_code == 404
        assert response.json()["error"] == "PROFILE_NOT_FOUND"
