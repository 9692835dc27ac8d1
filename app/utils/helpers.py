from bson import ObjectId
from datetime import datetime
from typing import Any, Dict

def serialize_mongo_object(obj: Any) -> Any:
    """Convert MongoDB objects to JSON-serializable format"""
    if isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {key: serialize_mongo_object(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [serialize_mongo_object(item) for item in obj]
    else:
        return obj

def _rename_id(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a document with ``_id`` exposed as ``id``"""
    renamed = document.copy()
    if "_id" in renamed:
        renamed["id"] = renamed.pop("_id")
    return renamed

def serialize_like(like: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize an embedded like for API response"""
    return serialize_mongo_object(_rename_id(like))

def serialize_comment(comment: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize an embedded comment for API response"""
    return serialize_mongo_object(_rename_id(comment))

def serialize_post(post: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize post object for API response"""
    if post is None:
        return None

    serialized_post = _rename_id(post)
    serialized_post["likes"] = [serialize_like(like) for like in post.get("likes", [])]
    serialized_post["comments"] = [
        serialize_comment(comment) for comment in post.get("comments", [])
    ]

    return serialize_mongo_object(serialized_post)
