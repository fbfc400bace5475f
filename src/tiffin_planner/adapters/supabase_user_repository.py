"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from tiffin_planner.adapters.supabase_errors import execute
from tiffin_planner.domain.errors import StorageError
from tiffin_planner.domain.models import UserCredentials, UserRecord
from tiffin_planner.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserCredentials | None:
        """Return the user and password hash for an e-mail, if present."""
        response = execute(
            self.client.table("users")
            .select("id, name, email, password_hash")
            .eq("email", email)
            .limit(1),
            "load user",
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserCredentials(
            user=_parse_user(row), password_hash=str(row["password_hash"])
        )

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        response = execute(
            self.client.table("users").insert(
                {"name": name, "email": email, "password_hash": password_hash}
            ),
            "create user",
        )
        if not response.data:
            raise StorageError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by name."""
        response = execute(
            self.client.table("users").select("id, name, email").order("name"),
            "list users",
        )
        return [_parse_user(row) for row in response.data or []]


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
    )
