from sqlalchemy import Boolean, Column, DateTime, Integer, String

from ..database import Base, utcnow
from .enums import UserRole, enum_column


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    full_name = Column(String(150), nullable=False)
    role = Column(enum_column(UserRole), nullable=False, default=UserRole.ADMIN)
    profile_image = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r}, role={self.role!r})"


class RevokedToken(Base):
    """Access tokens invalidated by logout, keyed by their jti claim."""

    __tablename__ = "revoked_tokens"

    jti = Column(String(64), primary_key=True)
    revoked_at = Column(DateTime, nullable=False, default=utcnow)
    # From the token's exp claim; rows past it are pruned.
    expires_at = Column(DateTime, nullable=True, index=True)
