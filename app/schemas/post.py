from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

# Request schemas
class PostCreate(BaseModel):
    """Schema for creating a new post"""
    text: Optional[str] = Field(None, description="Post text")

class CommentCreate(BaseModel):
    """Schema for commenting on a post"""
    text: Optional[str] = Field(None, description="Comment text")

# Response schemas
class LikeResponse(BaseModel):
    """Schema for a like embedded in a post"""
    id: str = Field(..., description="Like ID")
    user: str = Field(..., description="ID of the user who liked the post")

class CommentResponse(BaseModel):
    """Schema for a comment embedded in a post"""
    id: str = Field(..., description="Comment ID")
    user: str = Field(..., description="Author user ID")
    text: str
    name: Optional[str] = Field(None, description="Author name at the time of commenting")
    avatar: Optional[str] = Field(None, description="Author avatar URL")
    date: datetime

class PostResponse(BaseModel):
    """Schema for post response"""
    id: str = Field(..., description="Post ID")
    user: str = Field(..., description="Author user ID")
    text: str
    name: Optional[str] = Field(None, description="Author name at the time of posting")
    avatar: Optional[str] = Field(None, description="Author avatar URL")
    likes: List[LikeResponse] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    date: datetime

class MessageResponse(BaseModel):
    """Schema for plain message responses"""
    message: str
