"""
Endpoint tests for /dishes/{dish_id}/comments and /dishes/{dish_id}/comments/{comment_id}.
"""

import pytest
from bson import ObjectId

from test_fixtures import UTHAPIZZA, auth_header


@pytest.fixture
def dish(client, admin):
    r = client.post("/dishes", json=UTHAPIZZA, headers=auth_header(admin))
    assert r.status_code == 200, r.text
    return r.json()


def add_comment(client, dish, user, **body):
    payload = {"rating": 4, "comment": "great", **body}
    r = client.post(f"/dishes/{dish['id']}/comments", json=payload, headers=auth_header(user))
    assert r.status_code == 200, r.text
    return r.json()["comments"][-1]


def test_add_comment_returns_full_dish_authored_by_requester(client, dish, sarah):
    r = client.post(
        f"/dishes/{dish['id']}/comments",
        json={"rating": 4, "comment": "great"},
        headers=auth_header(sarah),
    )

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == dish["id"]
    assert body["name"] == dish["name"]
    assert len(body["comments"]) == 1
    comment = body["comments"][0]
    assert comment["rating"] == 4
    assert comment["comment"] == "great"
    assert comment["author"]["id"] == str(sarah["_id"])
    assert comment["author"]["username"] == "sarah"


def test_add_comment_ignores_client_author(client, dish, sarah, michael):
    comment = add_comment(client, dish, sarah, author=str(michael["_id"]))
    assert comment["author"]["id"] == str(sarah["_id"])


def test_add_comment_requires_authentication(client, dish):
    r = client.post(f"/dishes/{dish['id']}/comments", json={"rating": 4, "comment": "great"})
    assert r.status_code == 401


def test_add_comment_validates_rating(client, dish, sarah):
    r = client.post(
        f"/dishes/{dish['id']}/comments",
        json={"rating": 9, "comment": "too good"},
        headers=auth_header(sarah),
    )
    assert r.status_code == 422


def test_list_comments(client, dish, sarah, michael):
    add_comment(client, dish, sarah, comment="first")
    add_comment(client, dish, michael, comment="second")

    r = client.get(f"/dishes/{dish['id']}/comments")

    assert r.status_code == 200
    comments = r.json()
    assert [c["comment"] for c in comments] == ["first", "second"]
    assert comments[1]["author"]["username"] == "michael"


def test_put_on_comment_collection_not_supported(client, dish, sarah):
    r = client.put(f"/dishes/{dish['id']}/comments", json={}, headers=auth_header(sarah))

    assert r.status_code == 403
    assert r.text == f"PUT operation not supported on /dishes/{dish['id']}/comments"


def test_delete_all_comments_is_idempotent(client, dish, admin, sarah):
    add_comment(client, dish, sarah)
    add_comment(client, dish, sarah)

    first = client.delete(f"/dishes/{dish['id']}/comments", headers=auth_header(admin))
    second = client.delete(f"/dishes/{dish['id']}/comments", headers=auth_header(admin))

    assert first.status_code == 200
    assert first.json()["comments"] == []
    assert second.status_code == 200
    assert second.json()["comments"] == []


def test_delete_all_comments_requires_admin(client, dish, sarah):
    add_comment(client, dish, sarah)

    r = client.delete(f"/dishes/{dish['id']}/comments", headers=auth_header(sarah))

    assert r.status_code == 403
    assert len(client.get(f"/dishes/{dish['id']}/comments").json()) == 1


def test_get_single_comment(client, dish, sarah):
    comment = add_comment(client, dish, sarah)

    r = client.get(f"/dishes/{dish['id']}/comments/{comment['id']}")

    assert r.status_code == 200
    assert r.json()["id"] == comment["id"]
    assert r.json()["author"]["username"] == "sarah"


def test_get_missing_comment(client, dish):
    missing = str(ObjectId())
    r = client.get(f"/dishes/{dish['id']}/comments/{missing}")

    assert r.status_code == 404
    assert r.json()["error"]["message"] == f"Comment {missing} not found"


def test_post_on_single_comment_not_supported(client, dish, sarah):
    comment = add_comment(client, dish, sarah)
    path = f"/dishes/{dish['id']}/comments/{comment['id']}"

    r = client.post(path, json={}, headers=auth_header(sarah))

    assert r.status_code == 403
    assert r.text == f"POST operation not supported on {path}"


def test_author_updates_own_comment(client, dish, sarah):
    comment = add_comment(client, dish, sarah)

    r = client.put(
        f"/dishes/{dish['id']}/comments/{comment['id']}",
        json={"rating": 2, "author": "someone-else"},
        headers=auth_header(sarah),
    )

    assert r.status_code == 200
    updated = r.json()["comments"][0]
    assert updated["rating"] == 2
    assert updated["comment"] == "great"
    assert updated["author"]["id"] == str(sarah["_id"])


def test_non_author_cannot_update_comment(client, dish, sarah, michael):
    comment = add_comment(client, dish, sarah)

    r = client.put(
        f"/dishes/{dish['id']}/comments/{comment['id']}",
        json={"rating": 1, "comment": "hijacked"},
        headers=auth_header(michael),
    )

    assert r.status_code == 403
    assert "not authorised to modify someone else's comment" in r.json()["error"]["message"]
    stored = client.get(f"/dishes/{dish['id']}/comments/{comment['id']}").json()
    assert stored["rating"] == 4
    assert stored["comment"] == "great"


def test_admin_is_not_exempt_from_ownership(client, dish, admin, sarah):
    comment = add_comment(client, dish, sarah)

    r = client.delete(
        f"/dishes/{dish['id']}/comments/{comment['id']}", headers=auth_header(admin)
    )
    assert r.status_code == 403


def test_author_deletes_own_comment(client, dish, sarah, michael):
    keep = add_comment(client, dish, michael, comment="keep me")
    drop = add_comment(client, dish, sarah, comment="drop me")

    r = client.delete(f"/dishes/{dish['id']}/comments/{drop['id']}", headers=auth_header(sarah))

    assert r.status_code == 200
    assert [c["id"] for c in r.json()["comments"]] == [keep["id"]]


def test_non_author_cannot_delete_comment(client, dish, sarah, michael):
    comment = add_comment(client, dish, sarah)

    r = client.delete(
        f"/dishes/{dish['id']}/comments/{comment['id']}", headers=auth_header(michael)
    )

    assert r.status_code == 403
    assert "not authorised to delete someone else's comment" in r.json()["error"]["message"]
    assert len(client.get(f"/dishes/{dish['id']}/comments").json()) == 1


def test_update_missing_comment(client, dish, sarah):
    missing = str(ObjectId())
    r = client.put(
        f"/dishes/{dish['id']}/comments/{missing}",
        json={"rating": 3},
        headers=auth_header(sarah),
    )
    assert r.status_code == 404
    assert r.json()["error"]["message"] == f"Comment {missing} not found"


@pytest.mark.parametrize(
    "method,suffix,needs_admin",
    [
        ("GET", "/comments", False),
        ("POST", "/comments", False),
        ("DELETE", "/comments", True),
        ("GET", "/comments/{cid}", False),
        ("PUT", "/comments/{cid}", False),
        ("DELETE", "/comments/{cid}", False),
    ],
)
def test_missing_dish_is_reported_on_every_comment_route(
    client, admin, sarah, method, suffix, needs_admin
):
    dish_id = str(ObjectId())
    path = f"/dishes/{dish_id}" + suffix.format(cid=ObjectId())
    headers = auth_header(admin if needs_admin else sarah)
    body = {"rating": 4, "comment": "great"} if method in ("POST", "PUT") else None

    r = client.request(method, path, json=body, headers=headers)

    assert r.status_code == 404
    assert r.json()["error"]["message"] == f"Dish {dish_id} not found"
