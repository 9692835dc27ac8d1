from datetime import datetime, timezone
from bson import ObjectId

# Fields never returned from user lookups
PRIVATE_FIELDS = {"password": 0}

async def get_user_by_id(db, user_id):
    """Get user by id, without the password"""
    if not user_id:
        return None

    if isinstance(user_id, str):
        if not ObjectId.is_valid(user_id):
            return None
        user_id = ObjectId(user_id)
    return await db.users.find_one({"_id": user_id}, PRIVATE_FIELDS)

async def create_user(db, user_data):
    """Create a new user

    No route registers users; this is used by test fixtures and by operators
    seeding a database.
    """
    user_doc = {
        "name": user_data["name"],
        "email": user_data["email"].lower(),
        "password": user_data.get("password"),
        "avatar": user_data.get("avatar"),
        "date": datetime.now(timezone.utc)
    }

    result = await db.users.insert_one(user_doc)

    # Return created user without password
    return await get_user_by_id(db, result.inserted_id)
