"""
Error taxonomy for the sweet shop.

Accessors and flows raise these; the handlers registered in app.main turn
them into the JSON envelope ``{"error": ..., "code": ...}``.
"""
from typing import Optional


class ShopError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


# 401

class Unauthorized(ShopError):
    status_code = 401
    code = "UNAUTHORIZED"


class MissingHeader(Unauthorized):
    code = "MISSING_TOKEN"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class MalformedHeader(Unauthorized):
    code = "INVALID_AUTH_FORMAT"

    def __init__(self, message: str = "Invalid authorization format. Use Bearer token"):
        super().__init__(message)


class InvalidToken(Unauthorized):
    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentials(Unauthorized):
    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


# 403

class Forbidden(ShopError):
    status_code = 403
    code = "INSUFFICIENT_PERMISSIONS"


# 400

class ValidationError(ShopError):
    status_code = 400
    code = "VALIDATION_ERROR"


class InvalidRole(ValidationError):
    code = "INVALID_ROLE"


class EmailAlreadyRegistered(ValidationError):
    code = "EMAIL_EXISTS"

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class InsufficientStock(ShopError):
    status_code = 400
    code = "INSUFFICIENT_STOCK"

    def __init__(self, available: int):
        super().__init__(f"Insufficient quantity. Only {available} available")
        self.available = available


class CannotDeleteSelf(ShopError):
    status_code = 400
    code = "CANNOT_DELETE_SELF"

    def __init__(self, message: str = "Cannot delete your own account"):
        super().__init__(message)


# 404

class NotFound(ShopError):
    status_code = 404
    code = "NOT_FOUND"
