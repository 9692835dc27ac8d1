"""
Tests for commenting on posts and deleting comments
"""

from bson import ObjectId

async def _comment(client, post_id, text, headers):
    response = await client.post(
        f"/api/posts/comment/{post_id}", json={"text": text}, headers=headers
    )
    assert response.status_code == 200
    return response.json()

class TestAddComment:
    """POST /api/posts/comment/{post_id}"""

    async def test_add_comment(self, async_client, auth_headers_2, test_post, test_user_2):
        response = await async_client.post(
            f"/api/posts/comment/{test_post['id']}",
            json={"text": "Nice post"},
            headers=auth_headers_2
        )

        assert response.status_code == 200
        comments = response.json()
        assert len(comments) == 1
        assert comments[0]["text"] == "Nice post"
        assert comments[0]["user"] == str(test_user_2["_id"])
        assert comments[0]["name"] == "Test User 2"
        assert comments[0]["avatar"] is None
        assert "id" in comments[0]
        assert "date" in comments[0]

    async def test_newest_comment_first(self, async_client, auth_headers, test_post):
        await _comment(async_client, test_post["id"], "first", auth_headers)
        comments = await _comment(async_client, test_post["id"], "second", auth_headers)

        assert [comment["text"] for comment in comments] == ["second", "first"]

    async def test_add_comment_blank_text(self, async_client, auth_headers, test_post):
        response = await async_client.post(
            f"/api/posts/comment/{test_post['id']}", json={"text": ""}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Text is required"

    async def test_add_comment_without_body(self, async_client, auth_headers, test_post):
        response = await async_client.post(
            f"/api/posts/comment/{test_post['id']}", headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Text is required"

    async def test_add_comment_missing_post(self, async_client, auth_headers):
        response = await async_client.post(
            f"/api/posts/comment/{ObjectId()}", json={"text": "Hello?"}, headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"

    async def test_add_comment_requires_authentication(self, async_client, test_post):
        response = await async_client.post(
            f"/api/posts/comment/{test_post['id']}", json={"text": "Anonymous"}
        )

        assert response.status_code == 401

class TestDeleteComment:
    """DELETE /api/posts/comment/{post_id}/{comment_id}"""

    async def test_delete_own_comment(self, async_client, auth_headers, test_post):
        comments = await _comment(async_client, test_post["id"], "Oops", auth_headers)

        response = await async_client.delete(
            f"/api/posts/comment/{test_post['id']}/{comments[0]['id']}", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == []

    async def test_delete_removes_addressed_comment(self, async_client, auth_headers, test_post):
        """Only the addressed comment goes, even when the user wrote several"""
        await _comment(async_client, test_post["id"], "older", auth_headers)
        comments = await _comment(async_client, test_post["id"], "newer", auth_headers)
        newer_id = comments[0]["id"]
        older_id = comments[1]["id"]

        response = await async_client.delete(
            f"/api/posts/comment/{test_post['id']}/{older_id}", headers=auth_headers
        )

        assert response.status_code == 200
        remaining = response.json()
        assert [comment["id"] for comment in remaining] == [newer_id]
        assert remaining[0]["text"] == "newer"

    async def test_delete_comment_of_another_user(self, async_client, auth_headers, auth_headers_2,
                                                  test_post):
        comments = await _comment(async_client, test_post["id"], "Mine", auth_headers)

        response = await async_client.delete(
            f"/api/posts/comment/{test_post['id']}/{comments[0]['id']}", headers=auth_headers_2
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "User not authorized"

        post = await async_client.get(f"/api/posts/{test_post['id']}", headers=auth_headers)
        assert len(post.json()["comments"]) == 1

    async def test_delete_missing_comment(self, async_client, auth_headers, test_post):
        response = await async_client.delete(
            f"/api/posts/comment/{test_post['id']}/{ObjectId()}", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Comment does not exist"

    async def test_delete_comment_missing_post(self, async_client, auth_headers):
        response = await async_client.delete(
            f"/api/posts/comment/{ObjectId()}/{ObjectId()}", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"
