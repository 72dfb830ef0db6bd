"""
Route tests for users and the admin-request workflow.
"""

from conftest import ADMIN, ALICE, ARTICLE, BOB, rows


def _echo_user_update(name, username, admin, pending, user_id):
    return rows({"id": user_id, "username": username, "name": name, "admin": admin, "pending": pending})


class TestProfile:
    def test_get_me(self, client, fake_db, auth_headers, users):
        response = client.get("/users/me", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 200
        assert response.json() == ALICE
        # The record came from the token user, not a second lookup.
        assert len(fake_db.args_for("FROM users WHERE id = $1")) == 1

    def test_get_other_user(self, client, auth_headers, users):
        response = client.get("/users/2", headers=auth_headers(ALICE["id"]))
        assert response.json() == BOB

    def test_patch_me(self, client, fake_db, auth_headers, users):
        fake_db.on("UPDATE users", _echo_user_update)
        response = client.patch("/users/me", json={"name": "Alice <B>"}, headers=auth_headers(ALICE["id"]))
        assert response.status_code == 200
        assert response.json()["name"] == "Alice &lt;B&gt;"
        assert response.json()["username"] == "alice"

    def test_patch_me_rejects_short_password(self, client, fake_db, auth_headers, users):
        response = client.patch("/users/me", json={"password": "abc"}, headers=auth_headers(ALICE["id"]))
        assert response.status_code == 400
        assert fake_db.args_for("UPDATE users") == []

    def test_delete_me(self, client, fake_db, auth_headers, users):
        response = client.delete("/users/me", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 200
        assert fake_db.args_for("DELETE FROM users") == [(ALICE["id"],)]

    def test_cannot_delete_other_user(self, client, fake_db, auth_headers, users):
        response = client.delete("/users/1", headers=auth_headers(BOB["id"]))
        assert response.status_code == 403
        assert fake_db.args_for("DELETE FROM users") == []

    def test_user_articles(self, client, fake_db, auth_headers, users):
        fake_db.on("FROM articles WHERE userid = $1", rows(dict(ARTICLE)))
        response = client.get("/users/me/articles", headers=auth_headers(ALICE["id"]))
        assert response.json() == [ARTICLE]
        assert fake_db.args_for("FROM articles WHERE userid = $1") == [(ALICE["id"],)]

    def test_list_users_never_returns_passwords(self, client, fake_db, auth_headers, users):
        fake_db.on("FROM users ORDER BY id", rows(ALICE, BOB))
        response = client.get("/users", headers=auth_headers(ALICE["id"]))
        (sql, _), = [call for call in fake_db.calls if "ORDER BY id" in call[0]]
        assert "password" not in sql
        assert response.json()["items"] == [ALICE, BOB]


class TestAdminRequests:
    def test_owner_requests_admin(self, client, fake_db, auth_headers, users):
        fake_db.on("UPDATE users", _echo_user_update)
        response = client.post("/users/1/requestAdmin", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 200
        assert response.json()["pending"] is True
        assert fake_db.args_for("UPDATE users") == [("Alice A", "alice", False, True, 1)]

    def test_request_for_someone_else(self, client, fake_db, auth_headers, users):
        response = client.post("/users/1/requestAdmin", headers=auth_headers(BOB["id"]))
        assert response.status_code == 403
        assert fake_db.args_for("UPDATE users") == []

    def test_already_pending_is_a_no_op(self, client, fake_db, auth_headers, users):
        users[ALICE["id"]]["pending"] = True
        response = client.post("/users/me/requestAdmin", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 200
        assert response.json()["pending"] is True
        assert fake_db.args_for("UPDATE users") == []

    def test_cancel_request(self, client, fake_db, auth_headers, users):
        users[ALICE["id"]]["pending"] = True
        fake_db.on("UPDATE users", _echo_user_update)
        response = client.post("/users/me/cancelAdminRequest", headers=auth_headers(ALICE["id"]))
        assert response.json()["pending"] is False

    def test_non_admin_cannot_accept(self, client, fake_db, auth_headers, users):
        response = client.post("/users/2/acceptAdmin", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 403
        # Only the token user was loaded; the target never was.
        assert fake_db.args_for("FROM users WHERE id = $1") == [(ALICE["id"],)]

    def test_admin_accepts(self, client, fake_db, auth_headers, users):
        users[BOB["id"]]["pending"] = True
        fake_db.on("UPDATE users", _echo_user_update)
        response = client.post("/users/2/acceptAdmin", headers=auth_headers(ADMIN["id"]))
        assert response.status_code == 200
        assert response.json()["admin"] is True
        assert response.json()["pending"] is False

    def test_decline_non_admin_is_a_no_op(self, client, fake_db, auth_headers, users):
        response = client.post("/users/2/declineAdmin", headers=auth_headers(ADMIN["id"]))
        assert response.status_code == 200
        assert response.json() == BOB
        assert fake_db.args_for("UPDATE users") == []

    def test_accept_missing_user(self, client, auth_headers, users):
        response = client.post("/users/77/acceptAdmin", headers=auth_headers(ADMIN["id"]))
        assert response.status_code == 404

    def test_escaped_username_survives_lifecycle(self, client, fake_db, auth_headers, users):
        users[7] = {"id": 7, "username": "abcdefghi&amp;", "name": "Tom &amp; Co", "admin": False, "pending": False}
        fake_db.on("UPDATE users", _echo_user_update)

        requested = client.post("/users/me/requestAdmin", headers=auth_headers(7))
        assert requested.status_code == 200
        assert requested.json()["username"] == "abcdefghi&amp;"

        users[7]["pending"] = True
        accepted = client.post("/users/7/acceptAdmin", headers=auth_headers(ADMIN["id"]))
        assert accepted.status_code == 200
        assert accepted.json()["admin"] is True


class TestIdRange:
    def test_out_of_range_user_id(self, client, fake_db, auth_headers, users):
        response = client.get("/users/99999999999", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 404
        assert len(fake_db.calls) == 1

    def test_out_of_range_user_content(self, client, fake_db, auth_headers, users):
        response = client.get("/users/99999999999/articles", headers=auth_headers(ALICE["id"]))
        assert response.status_code == 404
        assert fake_db.args_for("FROM articles WHERE userid") == []
