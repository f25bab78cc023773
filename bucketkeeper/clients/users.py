"""Users resource client."""

from typing import TYPE_CHECKING, Any

from bucketkeeper.exceptions import ResponseDecodeError
from bucketkeeper.types.users import User

if TYPE_CHECKING:
    from bucketkeeper.transport import Transport


def parse_user(data: dict[str, Any] | None) -> User:
    """Parse a user object, tolerating missing fields."""
    data = data or {}
    if not isinstance(data, dict):
        raise ResponseDecodeError("Response is not a user object", data)
    return User(
        login=data.get("login"),
        name=data.get("name"),
        email=data.get("email"),
    )


class UsersClient:
    """Client for user-related operations."""

    def __init__(self, transport: "Transport") -> None:
        self.transport = transport

    def current(self) -> User:
        """
        Get the authenticated user.

        Returns:
            User with login, name and email
        """
        response = self.transport.request("GET", "user")
        return parse_user(response)
