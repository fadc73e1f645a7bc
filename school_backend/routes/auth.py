import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from ..auth.dependencies import (
    authenticate_user,
    get_current_active_user,
    get_token_data,
    require_admin,
)
from ..auth.security import create_access_token, get_password_hash
from ..database import get_db
from ..models.auth import User
from ..schemas.auth import (
    LoginRequest,
    OAuth2Token,
    ProfileUpdate,
    Token,
    TokenData,
    UserCreate,
    UserOut,
)
from ..services.storage import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    data = payload.model_dump()
    data["password"] = get_password_hash(payload.password)
    user = UserRepository(db).create(data)
    logger.info("Registered user %s with role %s", user.username, user.role.value)
    return user


def _sign_in(db: Session, username: str, password: str) -> tuple[User, str]:
    user = authenticate_user(db, username, password)
    if not user or not user.is_active:
        logger.warning("Failed login for %s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token = create_access_token(data={"sub": user.username, "role": user.role.value})
    return user, access_token


@router.post("/login", response_model=Token)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user, access_token = _sign_in(db, payload.username, payload.password)
    return Token(access_token=access_token, user=UserOut.model_validate(user))


@router.post("/token", response_model=OAuth2Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    _, access_token = _sign_in(db, form_data.username, form_data.password)
    return OAuth2Token(access_token=access_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    token_data: TokenData = Depends(get_token_data),
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    if token_data.jti:
        UserRepository(db).revoke_token(token_data.jti, token_data.expires_at)
    logger.info("User %s logged out", current_user.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user", response_model=UserOut)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return current_user


@router.put("/user", response_model=UserOut)
def update_current_user(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    changes = payload.changes()
    if "password" in changes:
        changes["password"] = get_password_hash(changes["password"])
    return UserRepository(db).update(current_user.id, changes)
