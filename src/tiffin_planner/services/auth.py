"""Password hashing and access tokens."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
from jose import JWTError, jwt

from tiffin_planner.domain.errors import AuthenticationError
from tiffin_planner.domain.models import UserRecord

_logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def _prepare_password(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


@dataclass(frozen=True)
class PasswordHasher:
    """bcrypt password hashing."""

    rounds: int = 12

    def hash(self, password: str) -> str:
        """Return a bcrypt hash for the password."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prepare_password(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        try:
            return bcrypt.checkpw(
                _prepare_password(password), password_hash.encode("utf-8")
            )
        except ValueError:
            _logger.warning("Stored password hash is malformed")
            return False


@dataclass(frozen=True)
class TokenService:
    """Issues and verifies signed access tokens."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(days=7)

    def issue(self, user: UserRecord, now: datetime | None = None) -> str:
        """Return a signed token identifying the user."""
        issued_at = now or datetime.now(tz=UTC)
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def resolve_owner(self, token: str) -> UUID:
        """Return the user id carried by a valid token."""
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return UUID(str(claims["sub"]))
        except (JWTError, KeyError, ValueError):
            raise AuthenticationError("Invalid token") from None
