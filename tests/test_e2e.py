import pytest


@pytest.fixture
def post_data():
    return {
        "title": "Release Notes",
        "content": "Everything that changed in this release, written out in full detail.",
        "author": "alice",
        "tags": ["release"]
    }


class TestEndToEnd:
    def test_complete_flow(self, client, post_data):
        """
        Full post lifecycle:
        1. create a post and find it in the listing
        2. comment on it, like it from two users, like again (no-op)
        3. unlike once, edit the content
        4. delete it; every route for it now answers 404
        """
        # 1. create
        response = client.post("/api/posts", json=post_data)
        assert response.status_code == 201
        post = response.json()["post"]
        post_id = post["id"]
        assert post["category"] == "General"

        listing = client.get("/api/posts").json()
        assert [p["id"] for p in listing] == [post_id]

        # 2. comment and likes
        response = client.post(f"/api/posts/{post_id}/comments", json={
            "username": "bob",
            "message": "Thanks for the write-up"
        })
        assert response.status_code == 201

        for username in ("bob", "carol", "bob"):
            response = client.post(f"/api/posts/{post_id}/like", json={"username": username})
            assert response.status_code == 200
        assert response.json()["post"]["likes"] == ["bob", "carol"]

        # 3. unlike and edit
        response = client.post(f"/api/posts/{post_id}/unlike", json={"username": "carol"})
        assert response.json()["post"]["likes"] == ["bob"]

        new_content = post_data["content"] + " Updated with a fix."
        response = client.put(f"/api/posts/{post_id}", json={"content": new_content})
        assert response.status_code == 200

        post = client.get(f"/api/posts/{post_id}").json()
        assert post["content"] == new_content
        assert post["likes"] == ["bob"]
        assert len(post["comments"]) == 1
        assert post["tags"] == ["release"]

        # 4. delete
        assert client.delete(f"/api/posts/{post_id}").status_code == 200
        assert client.get(f"/api/posts/{post_id}").status_code == 404
        assert client.put(f"/api/posts/{post_id}", json={"category": "News"}).status_code == 404
        assert client.post(f"/api/posts/{post_id}/comments", json={
            "username": "bob",
            "message": "Still there?"
        }).status_code == 404
        assert client.post(f"/api/posts/{post_id}/like", json={"username": "bob"}).status_code == 404
        assert client.post(f"/api/posts/{post_id}/unlike", json={"username": "bob"}).status_code == 404
        assert client.get("/api/posts").json() == []
