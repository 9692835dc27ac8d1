import logging
from typing import List
from fastapi import HTTPException
from app.services.post_service import PostService
from app.schemas.post import PostCreate, CommentCreate
from app.core.exceptions import (
    PostNotFoundError, CommentNotFoundError, UnauthorizedError,
    ValidationError, DuplicateResourceError, ResourceStateError,
    UserNotFoundError
)

logger = logging.getLogger(__name__)

# Initialize service
post_service = PostService()

def _server_error(action: str, error: Exception) -> HTTPException:
    logger.exception(f"Failed to {action}: {type(error).__name__}: {error}")
    return HTTPException(status_code=500, detail="Server error")

async def create_post_logic(db, post_data: PostCreate, current_user: dict) -> dict:
    """Create a new post"""
    try:
        return await post_service.create_post(db, str(current_user["_id"]), post_data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UserNotFoundError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        raise _server_error("create post", e)

async def get_posts_logic(db) -> List[dict]:
    """Get all posts"""
    try:
        return await post_service.get_posts(db)
    except Exception as e:
        raise _server_error("get posts", e)

async def get_post_logic(db, post_id: str) -> dict:
    """Get a single post"""
    try:
        return await post_service.get_post(db, post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise _server_error("get post", e)

async def delete_post_logic(db, post_id: str, current_user: dict) -> dict:
    """Delete a post"""
    try:
        success = await post_service.delete_post(db, str(current_user["_id"]), post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnauthorizedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        raise _server_error("delete post", e)

    if not success:
        # Removed concurrently between the lookup and the delete
        raise HTTPException(status_code=404, detail="Post not found")
    return {"message": "Post removed"}

async def like_post_logic(db, post_id: str, current_user: dict) -> List[dict]:
    """Like a post"""
    try:
        return await post_service.like_post(db, str(current_user["_id"]), post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicateResourceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise _server_error("like post", e)

async def unlike_post_logic(db, post_id: str, current_user: dict) -> List[dict]:
    """Unlike a post"""
    try:
        return await post_service.unlike_post(db, str(current_user["_id"]), post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ResourceStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise _server_error("unlike post", e)

async def add_comment_logic(db, post_id: str, comment_data: CommentCreate,
                            current_user: dict) -> List[dict]:
    """Comment on a post"""
    try:
        return await post_service.add_comment(
            db, str(current_user["_id"]), post_id, comment_data
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PostNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UserNotFoundError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        raise _server_error("add comment", e)

async def delete_comment_logic(db, post_id: str, comment_id: str,
                               current_user: dict) -> List[dict]:
    """Delete a comment"""
    try:
        return await post_service.delete_comment(
            db, str(current_user["_id"]), post_id, comment_id
        )
    except (PostNotFoundError, CommentNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnauthorizedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except Exception as e:
        raise _server_error("delete comment", e)
