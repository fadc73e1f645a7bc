import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from ..config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_SECRET_KEY
from ..schemas.auth import TokenData


ALGORITHM = "HS256"

# Use pure-Python pbkdf2_sha256 to avoid bcrypt backend issues
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    username: str = payload.get("sub")
    if username is None:
        return None
    exp = payload.get("exp")
    return TokenData(
        username=username,
        role=payload.get("role"),
        jti=payload.get("jti"),
        # Naive UTC, matching the timestamps stored by the database layer.
        expires_at=datetime.fromtimestamp(exp, timezone.utc).replace(tzinfo=None) if exp else None,
    )
