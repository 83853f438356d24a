# auth.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import Token, UserCreate, UserLogin, UserRead
from app.services.errors import EmailAlreadyRegisteredError
from app.services.user_store import authenticate, create_user
from app.utils.jwt_handler import create_user_token


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    try:
        user = create_user(db, user_in.email, user_in.password)
    except EmailAlreadyRegisteredError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered") from exc
    return UserRead.model_validate(user)


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    email = user_in.email
    user = authenticate(db, email, user_in.password)
    if user is None:
        logger.info("auth.login_failed email=%s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return Token(access_token=create_user_token(user.id, user.email), token_type="bearer")
