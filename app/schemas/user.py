from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel


class UserOut(CamelModel):
    """Public user - the password hash is never part of a response"""
    id: int
    email: str
    name: str
    role: str
    created_at: datetime


class RoleUpdate(CamelModel):
    role: Optional[str] = None


class UserDeleteResponse(CamelModel):
    message: str
    user: UserOut
