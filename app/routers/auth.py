from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.core.security import Identity, Role, authenticate, create_access_token
from app.schemas.auth import RegisterRequest, LoginRequest, Token
from app.schemas.user import UserOut
from app.utils.user import authenticate_user, create_user, get_user_or_404
from app.utils.logger import get_logger

router = APIRouter(tags=["Authentication"])
logger = get_logger("auth")


def _issue_token(user) -> dict:
    token = create_access_token(user.id, user.role, email=user.email)
    return {"access_token": token, "token_type": "bearer", "user": user}


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    # Self-registration always yields a plain user; promotion goes through /users
    user = create_user(db, email=data.email, password=data.password, name=data.name, role=Role.USER)
    logger.info("Registered user %s (%s)", user.id, user.email)
    return _issue_token(user)


@router.post("/login", response_model=Token)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, data.email, data.password)
    return _issue_token(user)


@router.get("/me", response_model=UserOut)
def me(identity: Identity = Depends(authenticate), db: Session = Depends(get_db)):
    return get_user_or_404(db, identity.user_id)
