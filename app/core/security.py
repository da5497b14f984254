"""
Password hashing, token issuing, and the request authentication/authorization
dependencies used by the routers.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.core.errors import Forbidden, InvalidRole, InvalidToken, MalformedHeader, MissingHeader

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

BEARER_PREFIX = "Bearer "


class Role(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        return _ROLE_ORDER.index(self)

    def at_least(self, other: "Role") -> bool:
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value) -> "Role":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(role.value for role in _ROLE_ORDER)
            raise InvalidRole(f"Invalid role. Must be one of: {valid}")


_ROLE_ORDER = [Role.USER, Role.ADMIN, Role.SUPER_ADMIN]


@dataclass(frozen=True)
class Identity:
    user_id: int
    role: Role
    email: Optional[str] = None


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, role: str, email: Optional[str] = None,
                        expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": str(user_id),
        "role": Role.parse(role).value,
        "email": email,
        "exp": expire,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise InvalidToken()

    try:
        user_id = int(payload.get("sub"))
        role = Role(payload.get("role"))
    except (TypeError, ValueError):
        raise InvalidToken("Invalid token")

    return Identity(user_id=user_id, role=role, email=payload.get("email"))


def verify_authorization_header(header: Optional[str]) -> Identity:
    """Validate an ``Authorization`` header value and return the caller's identity."""
    if not header:
        raise MissingHeader()
    if not header.startswith(BEARER_PREFIX):
        raise MalformedHeader()

    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise MalformedHeader("Token is required")

    return decode_access_token(token)


def authenticate(request: Request) -> Identity:
    return verify_authorization_header(request.headers.get("Authorization"))


def authorize(identity: Identity, required_role: Role) -> Identity:
    if not identity.role.at_least(required_role):
        if required_role is Role.SUPER_ADMIN:
            raise Forbidden("Access forbidden. Super admin privileges required")
        raise Forbidden("Forbidden: Admin access required")
    return identity


def require_role(required_role: Role):
    """Dependency factory: authenticate the request and require at least ``required_role``."""
    def dependency(identity: Identity = Depends(authenticate)) -> Identity:
        return authorize(identity, required_role)
    return dependency


get_current_user = require_role(Role.USER)
get_current_admin = require_role(Role.ADMIN)
get_current_super_admin = require_role(Role.SUPER_ADMIN)
