"""End-to-end tests for comment and vote endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from discuss.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with a thread "art-1" already registered."""
    test_client = TestClient(create_app(build_test_container()))
    response = test_client.post("/threads", json={"id": "art-1"})
    assert response.status_code == 201
    return test_client


def post_comment(client, body, parent_id=None, thread_id="art-1", **extra):
    response = client.post(
        f"/threads/{thread_id}/comments",
        json={"body": body, "parent_id": parent_id, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()["comment"]


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints."""

    def test_comment_tree(self, client):
        """Replies should be nested under their parents."""
        # Arrange
        c1 = post_comment(client, "C1")
        c2 = post_comment(client, "C2", parent_id=c1["comment_id"])
        post_comment(client, "C3", parent_id=c2["comment_id"])

        # Act
        response = client.get(
            "/threads/art-1/comments", params={"sorter": "date_asc"}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["thread"]["num_comments"] == 3
        (root,) = body["comments"]
        assert root["comment"]["body"] == "C1"
        assert root["children"][0]["comment"]["body"] == "C2"
        assert root["children"][0]["children"][0]["comment"]["depth"] == 2

    def test_display_depth(self, client):
        c1 = post_comment(client, "C1")
        c2 = post_comment(client, "C2", parent_id=c1["comment_id"])
        post_comment(client, "C3", parent_id=c2["comment_id"])

        response = client.get(
            "/threads/art-1/comments", params={"display_depth": 1}
        )

        body = response.json()
        assert body["total"] == 2
        assert body["comments"][0]["children"][0]["children"] == []

    def test_flat_view(self, client):
        c1 = post_comment(client, "C1")
        post_comment(client, "C2", parent_id=c1["comment_id"])

        response = client.get(
            "/threads/art-1/comments", params={"view": "flat", "sorter": "date_asc"}
        )

        body = response.json()
        assert [n["comment"]["body"] for n in body["comments"]] == ["C1", "C2"]
        assert all(n["children"] == [] for n in body["comments"])

    def test_negative_display_depth(self, client):
        response = client.get("/threads/art-1/comments", params={"display_depth": -1})

        assert response.status_code == 400

    def test_first_view_creates_thread(self, client):
        response = client.get("/threads/fresh/comments")

        assert response.status_code == 200
        assert response.json()["comments"] == []
        assert client.get("/threads/fresh").status_code == 200

    def test_comment_on_closed_thread(self, client):
        """Should return 403 when the thread is closed."""
        client.patch("/threads/art-1/commentable", json={"is_commentable": False})

        response = client.post("/threads/art-1/comments", json={"body": "Hi"})

        assert response.status_code == 403

    def test_comment_on_unknown_thread(self, client):
        response = client.post("/threads/missing/comments", json={"body": "Hi"})

        assert response.status_code == 404

    def test_reply_to_unknown_parent(self, client):
        response = client.post(
            "/threads/art-1/comments",
            json={"body": "Hi", "parent_id": str(uuid4())},
        )

        assert response.status_code == 404

    def test_reply_to_parent_in_other_thread(self, client):
        client.post("/threads", json={"id": "other"})
        elsewhere = post_comment(client, "Elsewhere", thread_id="other")

        response = client.post(
            "/threads/art-1/comments",
            json={"body": "Hi", "parent_id": elsewhere["comment_id"]},
        )

        assert response.status_code == 400

    def test_empty_body(self, client):
        response = client.post("/threads/art-1/comments", json={"body": ""})

        assert response.status_code == 422

    def test_malformed_comment_id(self, client):
        response = client.get("/threads/art-1/comments/not-a-uuid")

        assert response.status_code == 400

    def test_get_reply_with_parent(self, client):
        root = post_comment(client, "Root")
        reply = post_comment(client, "Reply", parent_id=root["comment_id"])

        response = client.get(f"/threads/art-1/comments/{reply['comment_id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["parent"]["comment_id"] == root["comment_id"]
        assert body["depth"] == 1

    def test_edit_comment(self, client):
        comment = post_comment(client, "Original")

        response = client.put(
            f"/threads/art-1/comments/{comment['comment_id']}",
            json={"body": "Edited"},
        )

        assert response.status_code == 200
        assert response.json()["comment"]["body"] == "Edited"

    def test_delete_and_restore(self, client):
        """Deleted comments stay listed without their body."""
        comment = post_comment(client, "Original")
        url = f"/threads/art-1/comments/{comment['comment_id']}/state"

        deleted = client.patch(url, json={})
        listing = client.get("/threads/art-1/comments").json()
        restored = client.patch(url, json={"restore": True})

        assert deleted.status_code == 200
        assert deleted.json()["comment"]["state"] == "deleted"
        assert listing["comments"][0]["comment"]["body"] is None
        assert restored.json()["comment"]["state"] == "visible"
        assert restored.json()["comment"]["body"] == "Original"

    def test_repeated_restore_keeps_comment(self, client):
        comment = post_comment(client, "Original")
        url = f"/threads/art-1/comments/{comment['comment_id']}/state"
        client.patch(url, json={})
        client.patch(url, json={"restore": True})

        response = client.patch(url, json={"restore": True})

        assert response.status_code == 200
        assert response.json()["comment"]["state"] == "visible"
        assert response.json()["comment"]["body"] == "Original"

    def test_forbidden_state_change(self, client):
        comment = post_comment(client, "Original")
        url = f"/threads/art-1/comments/{comment['comment_id']}/state"
        client.patch(url, json={"state": "deleted"})

        response = client.patch(url, json={"state": "pending"})

        assert response.status_code == 400


class TestVoteEndpoints:
    """End-to-end tests for vote API endpoints."""

    def test_vote_updates_score(self, client):
        comment = post_comment(client, "Vote on me", author_id="author")
        url = f"/threads/art-1/comments/{comment['comment_id']}/votes"

        first = client.post(url, json={"voter_id": "a"})
        second = client.post(url, json={"voter_id": "b", "value": 2})
        score = client.get(url)

        assert first.status_code == 201
        assert first.json()["score"] == 1
        assert second.json()["score"] == 3
        assert score.json()["score"] == 3

    def test_duplicate_vote(self, client):
        comment = post_comment(client, "Vote on me")
        url = f"/threads/art-1/comments/{comment['comment_id']}/votes"
        client.post(url, json={"voter_id": "a"})

        response = client.post(url, json={"voter_id": "a"})

        assert response.status_code == 409

    def test_self_vote(self, client):
        comment = post_comment(client, "Mine", author_id="me")

        response = client.post(
            f"/threads/art-1/comments/{comment['comment_id']}/votes",
            json={"voter_id": "me"},
        )

        assert response.status_code == 400

    def test_vote_on_unknown_comment(self, client):
        response = client.post(
            f"/threads/art-1/comments/{uuid4()}/votes", json={"voter_id": "a"}
        )

        assert response.status_code == 404
