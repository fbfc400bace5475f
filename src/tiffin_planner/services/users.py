"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tiffin_planner.domain.errors import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)
from tiffin_planner.domain.models import UserCredentials, UserRecord
from tiffin_planner.services.auth import PasswordHasher


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(self, email: str) -> UserCredentials | None:
        """Return the user and password hash for an e-mail, if present."""

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return every registered user."""


@dataclass
class UserService:
    """Application service for registration and login."""

    repository: UserRepository
    hasher: PasswordHasher

    def register(self, name: str, email: str, password: str) -> UserRecord:
        """Create a user after checking required fields and e-mail uniqueness."""
        if not name or not email or not password:
            raise ValidationError("missing fields")
        if self.repository.get_by_email(email) is not None:
            raise ValidationError("Email already in use")
        try:
            return self.repository.create_user(
                name=name, email=email, password_hash=self.hasher.hash(password)
            )
        except ConflictError:
            raise ValidationError("Email already in use") from None

    def authenticate(self, email: str, password: str) -> UserRecord:
        """Return the user for valid credentials."""
        if not email or not password:
            raise ValidationError("missing fields")
        credentials = self.repository.get_by_email(email)
        if credentials is None or not self.hasher.verify(
            password, credentials.password_hash
        ):
            raise AuthenticationError("invalid credentials")
        return credentials.user

    def list_users(self, member_ids: set[UUID] | None = None) -> list[UserRecord]:
        """Return registered users, optionally limited to a group roster."""
        users = self.repository.list_users()
        if member_ids is None:
            return users
        return [user for user in users if user.id in member_ids]
