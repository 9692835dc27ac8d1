from datetime import datetime, timezone
from typing import List, Optional
from bson import ObjectId
from pymongo import DESCENDING

class Post:
    """Persistence for the posts collection

    A post embeds its likes and comments, newest first:

        {
            "_id": ObjectId, "user": ObjectId, "text": str,
            "name": str, "avatar": str | None, "date": datetime,
            "likes": [{"_id": ObjectId, "user": ObjectId}],
            "comments": [{"_id": ObjectId, "user": ObjectId, "text": str,
                          "name": str, "avatar": str | None, "date": datetime}]
        }
    """

    collection_name = "posts"

    def _get_collection(self, db):
        """Get the posts collection"""
        return db[self.collection_name]

    @staticmethod
    def _to_object_id(post_id) -> Optional[ObjectId]:
        if isinstance(post_id, ObjectId):
            return post_id
        if not post_id or not ObjectId.is_valid(post_id):
            return None
        return ObjectId(post_id)

    async def create_post(self, db, post_data: dict) -> Optional[dict]:
        """Create a new post"""
        collection = self._get_collection(db)

        post_data["_id"] = ObjectId()
        post_data["date"] = datetime.now(timezone.utc)
        post_data.setdefault("likes", [])
        post_data.setdefault("comments", [])

        result = await collection.insert_one(post_data)
        if result.inserted_id:
            return await self.get_post_by_id(db, result.inserted_id)
        return None

    async def get_all_posts(self, db) -> List[dict]:
        """Get every post, most recent first"""
        collection = self._get_collection(db)

        cursor = collection.find({}, sort=[("date", DESCENDING)])
        posts = []
        async for post in cursor:
            posts.append(post)
        return posts

    async def get_post_by_id(self, db, post_id) -> Optional[dict]:
        """Get post by ID; malformed IDs are treated as missing"""
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return None

        collection = self._get_collection(db)
        return await collection.find_one({"_id": object_id})

    async def delete_post(self, db, post_id) -> bool:
        """Permanently remove a post"""
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return False

        collection = self._get_collection(db)
        result = await collection.delete_one({"_id": object_id})
        return result.deleted_count > 0

    async def add_like(self, db, post_id, like: dict) -> Optional[dict]:
        """Prepend a like unless the user already has one

        Returns the updated post, or None when the post is missing or the
        user's like is already present.
        """
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return None

        collection = self._get_collection(db)
        return await collection.find_one_and_update(
            {"_id": object_id, "likes.user": {"$ne": like["user"]}},
            {"$push": {"likes": {"$each": [like], "$position": 0}}},
            return_document=True
        )

    async def remove_like(self, db, post_id, user_id: ObjectId) -> Optional[dict]:
        """Pull the user's like; None when the post or the like is missing"""
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return None

        collection = self._get_collection(db)
        return await collection.find_one_and_update(
            {"_id": object_id, "likes.user": user_id},
            {"$pull": {"likes": {"user": user_id}}},
            return_document=True
        )

    async def add_comment(self, db, post_id, comment: dict) -> Optional[dict]:
        """Prepend a comment; None when the post is missing"""
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return None

        collection = self._get_collection(db)
        return await collection.find_one_and_update(
            {"_id": object_id},
            {"$push": {"comments": {"$each": [comment], "$position": 0}}},
            return_document=True
        )

    async def remove_comment(self, db, post_id, comment_id: ObjectId,
                             user_id: ObjectId) -> Optional[dict]:
        """Pull a comment written by the given user

        Returns None when the post is missing or has no such comment by
        that user.
        """
        object_id = self._to_object_id(post_id)
        if object_id is None:
            return None

        collection = self._get_collection(db)
        return await collection.find_one_and_update(
            {
                "_id": object_id,
                "comments": {"$elemMatch": {"_id": comment_id, "user": user_id}}
            },
            {"$pull": {"comments": {"_id": comment_id}}},
            return_document=True
        )

post_model = Post()
