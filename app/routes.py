from fastapi import APIRouter, Depends
from typing import List, Optional

# Import authentication functions
from app.core.auth import get_current_user

# Import database dependency
from app.database.mongo_connection import get_database

# Import business logic functions from v1
from app.api.v1.profile import get_profile_logic
from app.api.v1.posts import (
    create_post_logic, get_posts_logic, get_post_logic, delete_post_logic,
    like_post_logic, unlike_post_logic, add_comment_logic, delete_comment_logic
)
from app.schemas.post import (
    PostCreate, CommentCreate, PostResponse, LikeResponse,
    CommentResponse, MessageResponse
)
from app.utils.decorators import require_authentication, log_endpoint_access

# Create main API router
router = APIRouter()

# =============================================================================
# PROFILE ROUTES
# =============================================================================

@router.get("/profile", response_model=str, tags=["Profile"])
@log_endpoint_access
async def get_profile():
    """
    Test profile route

    🌐 Public
    """
    return await get_profile_logic()

# =============================================================================
# POST ROUTES
# =============================================================================

@router.post("/posts", response_model=PostResponse, tags=["Posts"])
@require_authentication
@log_endpoint_access
async def create_post(
    post_data: Optional[PostCreate] = None,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Create a post

    Author name and avatar are copied from the caller's user record.
    A request without a body is answered like one without text.

    🔐 Requires Authentication
    """
    return await create_post_logic(db, post_data or PostCreate(), current_user)

@router.get("/posts", response_model=List[PostResponse], tags=["Posts"])
@require_authentication
@log_endpoint_access
async def get_posts(
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Get all posts, most recent first

    🔐 Requires Authentication
    """
    return await get_posts_logic(db)

@router.get("/posts/{post_id}", response_model=PostResponse, tags=["Posts"])
@require_authentication
@log_endpoint_access
async def get_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Get a post by ID

    🔐 Requires Authentication
    """
    return await get_post_logic(db, post_id)

@router.delete("/posts/{post_id}", response_model=MessageResponse, tags=["Posts"])
@require_authentication
@log_endpoint_access
async def delete_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Delete a post

    Only the author may delete a post.

    🔐 Requires Authentication
    """
    return await delete_post_logic(db, post_id, current_user)

@router.put("/posts/like/{post_id}", response_model=List[LikeResponse], tags=["Posts"])
@require_authentication
@log_endpoint_access
async def like_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Like a post

    Returns the updated likes, newest first.

    🔐 Requires Authentication
    """
    return await like_post_logic(db, post_id, current_user)

@router.put("/posts/unlike/{post_id}", response_model=List[LikeResponse], tags=["Posts"])
@require_authentication
@log_endpoint_access
async def unlike_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Unlike a post

    🔐 Requires Authentication
    """
    return await unlike_post_logic(db, post_id, current_user)

@router.post("/posts/comment/{post_id}", response_model=List[CommentResponse], tags=["Comments"])
@require_authentication
@log_endpoint_access
async def add_comment(
    post_id: str,
    comment_data: Optional[CommentCreate] = None,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Comment on a post

    Returns the updated comments, newest first.

    🔐 Requires Authentication
    """
    return await add_comment_logic(db, post_id, comment_data or CommentCreate(), current_user)

@router.delete("/posts/comment/{post_id}/{comment_id}", response_model=List[CommentResponse], tags=["Comments"])
@require_authentication
@log_endpoint_access
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: dict = Depends(get_current_user),
    db = Depends(get_database)
):
    """
    Delete a comment

    Only the comment's author may delete it.

    🔐 Requires Authentication
    """
    return await delete_comment_logic(db, post_id, comment_id, current_user)
