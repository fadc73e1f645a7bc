from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.auth import User
from ..models.enums import UserRole
from ..schemas.auth import TokenData
from ..services.storage import UserRepository
from .security import decode_access_token, verify_password


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/token", auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    user = UserRepository(db).get_by_username(username)
    if not user or not verify_password(password, user.password):
        return None
    return user


def get_token_data(token: Optional[str] = Depends(oauth2_scheme)) -> TokenData:
    if not token:
        raise _unauthorized("Not authenticated")
    token_data = decode_access_token(token)
    if token_data is None or token_data.username is None:
        raise _unauthorized("Could not validate credentials")
    return token_data


def get_current_user(
    token_data: TokenData = Depends(get_token_data), db: Session = Depends(get_db)
) -> User:
    users = UserRepository(db)
    if users.is_token_revoked(token_data.jti):
        raise _unauthorized("Session has been logged out")
    user = users.get_by_username(token_data.username)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_active:
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user


def require_roles(*roles: UserRole):
    allowed = ", ".join(role.value for role in roles)

    def _dependency(current_user: User = Depends(get_current_active_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(status_code=403, detail=f"Requires one of the roles: {allowed}")
        return current_user

    return _dependency


require_admin = require_roles(UserRole.ADMIN)
require_faculty = require_roles(UserRole.ADMIN, UserRole.FACULTY)
require_accountant = require_roles(UserRole.ADMIN, UserRole.ACCOUNTANT)
