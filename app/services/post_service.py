import logging
from datetime import datetime, timezone
from typing import List, Optional
from bson import ObjectId

from app.models.post import post_model
from app.models import user as user_model
from app.schemas.post import PostCreate, CommentCreate
from app.core.exceptions import (
    PostNotFoundError, CommentNotFoundError, UnauthorizedError,
    ValidationError, DuplicateResourceError, ResourceStateError,
    UserNotFoundError
)
from app.utils.helpers import serialize_post, serialize_like, serialize_comment

logger = logging.getLogger(__name__)

class PostService:
    def __init__(self):
        self.post_model = post_model

    async def create_post(self, db, user_id: str, post_data: PostCreate) -> dict:
        """Create a new post authored by the given user"""
        text = self._require_text(post_data.text)

        user = await self._get_author(db, user_id)

        post_dict = {
            "user": user["_id"],
            "text": text,
            "name": user.get("name"),
            "avatar": user.get("avatar")
        }

        post = await self.post_model.create_post(db, post_dict)
        if not post:
            raise ValidationError("Failed to create post")

        logger.info(f"Post {post['_id']} created by user {user_id}")
        return serialize_post(post)

    async def get_posts(self, db) -> List[dict]:
        """Get all posts, most recent first"""
        posts = await self.post_model.get_all_posts(db)
        return [serialize_post(post) for post in posts]

    async def get_post(self, db, post_id: str) -> dict:
        """Get a single post"""
        post = await self._get_post_or_raise(db, post_id)
        return serialize_post(post)

    async def delete_post(self, db, user_id: str, post_id: str) -> bool:
        """Delete a post owned by the given user"""
        post = await self._get_post_or_raise(db, post_id)

        if str(post["user"]) != str(user_id):
            logger.warning(f"User {user_id} tried to delete post {post_id} owned by {post['user']}")
            raise UnauthorizedError("User not authorized")

        deleted = await self.post_model.delete_post(db, post["_id"])
        if deleted:
            logger.info(f"Post {post_id} removed by user {user_id}")
        return deleted

    async def like_post(self, db, user_id: str, post_id: str) -> List[dict]:
        """Add the user's like to the front of the post's likes"""
        like = {"_id": ObjectId(), "user": ObjectId(user_id)}

        post = await self.post_model.add_like(db, post_id, like)
        if post is None:
            # Either the post is gone or the user's like is already there
            await self._get_post_or_raise(db, post_id)
            raise DuplicateResourceError("Post already liked")

        logger.info(f"Post {post_id} liked by user {user_id}")
        return [serialize_like(item) for item in post.get("likes", [])]

    async def unlike_post(self, db, user_id: str, post_id: str) -> List[dict]:
        """Remove the user's like from the post"""
        post = await self.post_model.remove_like(db, post_id, ObjectId(user_id))
        if post is None:
            await self._get_post_or_raise(db, post_id)
            raise ResourceStateError("Post has not been liked yet")

        logger.info(f"Post {post_id} unliked by user {user_id}")
        return [serialize_like(item) for item in post.get("likes", [])]

    async def add_comment(self, db, user_id: str, post_id: str,
                          comment_data: CommentCreate) -> List[dict]:
        """Add a comment to the front of the post's comments"""
        text = self._require_text(comment_data.text)

        user = await self._get_author(db, user_id)

        new_comment = {
            "_id": ObjectId(),
            "user": user["_id"],
            "text": text,
            "name": user.get("name"),
            "avatar": user.get("avatar"),
            "date": datetime.now(timezone.utc)
        }

        post = await self.post_model.add_comment(db, post_id, new_comment)
        if post is None:
            raise PostNotFoundError("Post not found")

        logger.info(f"Comment {new_comment['_id']} added to post {post_id} by user {user_id}")
        return [serialize_comment(comment) for comment in post.get("comments", [])]

    async def delete_comment(self, db, user_id: str, post_id: str,
                             comment_id: str) -> List[dict]:
        """Remove a comment the user wrote"""
        post = await self._get_post_or_raise(db, post_id)

        comment = self._find_comment(post.get("comments", []), comment_id)
        if comment is None:
            raise CommentNotFoundError("Comment does not exist")

        if str(comment["user"]) != str(user_id):
            logger.warning(f"User {user_id} tried to delete comment {comment_id} on post {post_id}")
            raise UnauthorizedError("User not authorized")

        updated = await self.post_model.remove_comment(
            db, post["_id"], comment["_id"], comment["user"]
        )
        if updated is None:
            # Removed by a concurrent request after the lookup
            raise CommentNotFoundError("Comment does not exist")

        logger.info(f"Comment {comment_id} removed from post {post_id} by user {user_id}")
        return [serialize_comment(item) for item in updated.get("comments", [])]

    # Helper methods
    async def _get_post_or_raise(self, db, post_id: str) -> dict:
        post = await self.post_model.get_post_by_id(db, post_id)
        if not post:
            raise PostNotFoundError("Post not found")
        return post

    async def _get_author(self, db, user_id: str) -> dict:
        user = await user_model.get_user_by_id(db, user_id)
        if not user:
            raise UserNotFoundError("User not found")
        return user

    @staticmethod
    def _find_comment(comments: List[dict], comment_id: str) -> Optional[dict]:
        for comment in comments:
            if str(comment["_id"]) == comment_id:
                return comment
        return None

    @staticmethod
    def _require_text(text: Optional[str]) -> str:
        if text is None or not text.strip():
            raise ValidationError("Text is required")
        return text
