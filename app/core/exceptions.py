"""
Custom exceptions for the DevConnector API
"""

class APIException(Exception):
    """Base API exception"""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)

class ValidationError(APIException):
    """Raised when validation fails"""
    pass

class UnauthorizedError(APIException):
    """Raised when user is not authorized"""
    pass

class PostNotFoundError(APIException):
    """Raised when post is not found"""
    pass

class CommentNotFoundError(APIException):
    """Raised when a comment is not found on a post"""
    pass

class UserNotFoundError(APIException):
    """Raised when user is not found"""
    pass

class DuplicateResourceError(APIException):
    """Raised when trying to create a duplicate resource"""
    pass

class ResourceStateError(APIException):
    """Raised when a resource is not in the state the operation expects"""
    pass
