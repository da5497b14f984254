"""
User accessors: lookup, listing, role management and deletion.
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.errors import (
    CannotDeleteSelf,
    EmailAlreadyRegistered,
    InvalidCredentials,
    NotFound,
    ValidationError,
)
from app.core.security import Role, hash_password, verify_password
from app.models.user import User

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_or_404(db: Session, user_id: int) -> User:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFound("User not found", code="USER_NOT_FOUND")
    return user


def list_users(
    db: Session,
    search: Optional[str] = None,
    role: Optional[str] = None,
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0
) -> List[User]:
    """
    Page through users. ``search`` matches name or email as a substring,
    ``role`` must match exactly. ``limit`` is capped at 100.
    """
    limit = max(0, min(limit, MAX_PAGE_SIZE))
    offset = max(0, offset)

    query = db.query(User)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(User.name.like(pattern), User.email.like(pattern)))
    if role:
        query = query.filter(User.role == role)

    return query.order_by(User.id).limit(limit).offset(offset).all()


def create_user(db: Session, email: str, password: str, name: str, role: Role = Role.USER) -> User:
    if get_user_by_email(db, email):
        raise EmailAlreadyRegistered()

    user = User(
        email=email,
        password=hash_password(password),
        name=name,
        role=Role.parse(role).value
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password):
        raise InvalidCredentials()
    return user


def update_user_role(db: Session, user_id: int, new_role: Optional[str]) -> User:
    if not new_role:
        raise ValidationError("Role is required", code="MISSING_ROLE")
    role = Role.parse(new_role)

    user = get_user_or_404(db, user_id)
    user.role = role.value
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int, acting_user_id: int) -> User:
    """Delete ``user_id`` on behalf of ``acting_user_id``; nobody may delete themself."""
    if user_id == acting_user_id:
        raise CannotDeleteSelf()

    user = get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    return user
