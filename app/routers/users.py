from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.core.security import Identity, get_current_super_admin
from app.schemas.user import UserOut, RoleUpdate, UserDeleteResponse
from app.utils import user as user_store
from app.utils.logger import get_logger

router = APIRouter(
    prefix="/users",
    tags=["User Management"]
)
logger = get_logger("users")


@router.get("", response_model=List[UserOut])
def list_users(
    limit: int = 10,
    offset: int = 0,
    search: Optional[str] = None,
    role: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_super_admin)
):
    """List users without their password hashes. Super admins only."""
    return user_store.list_users(db, search=search, role=role, limit=limit, offset=offset)


@router.put("/{user_id}", response_model=UserOut)
def update_user_role(
    user_id: int,
    payload: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_super_admin)
):
    """Change a user's role. Super admins only."""
    user = user_store.update_user_role(db, user_id, payload.role)
    logger.info("User %s set role of user %s to %s", current_user.user_id, user.id, user.role)
    return user


@router.delete("/{user_id}", response_model=UserDeleteResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_super_admin)
):
    """Delete a user. Super admins only, and never their own account."""
    user = user_store.delete_user(db, user_id, acting_user_id=current_user.user_id)
    logger.info("User %s deleted user %s (%s)", current_user.user_id, user.id, user.email)
    return {"message": "User deleted successfully", "user": user}
