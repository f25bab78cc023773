"""Repositories resource client."""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlsplit

from bucketkeeper.clients.users import parse_user
from bucketkeeper.exceptions import ResponseDecodeError
from bucketkeeper.types.repos import Repository, UserPermissions

if TYPE_CHECKING:
    from bucketkeeper.transport import Transport


def normalise_clone_url(value: str | None) -> str | None:
    """
    Strip a trailing ".git" and a trailing "/" from a clone URL.

    Returns:
        The normalised absolute URL, or None for a blank value

    Raises:
        ResponseDecodeError: If the URL is not absolute
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None

    if not isinstance(value, str):
        raise ResponseDecodeError(f"Clone URL {value!r} is not a string", value)

    if value.lower().endswith(".git"):
        value = value[: -len(".git")]

    if value.endswith("/"):
        value = value[:-1]

    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc:
        raise ResponseDecodeError(f"Clone URL '{value}' is not an absolute URL", value)

    return value


def parse_repository(data: Any) -> Repository:
    """
    Map a GitBucket repository object onto the generic Repository model.

    Raises:
        ResponseDecodeError: If the data is not a repository object
    """
    if not isinstance(data, dict) or not data.get("name"):
        raise ResponseDecodeError("Response is not a repository object", data)

    permissions = data.get("permissions")
    parent = data.get("parent")

    return Repository(
        name=data["name"],
        archived=bool(data.get("archived", False)),
        user_permissions=UserPermissions(
            admin=bool(permissions.get("admin", False)),
            push=bool(permissions.get("push", False)),
            pull=bool(permissions.get("pull", False)),
        )
        if isinstance(permissions, dict)
        else None,
        clone_url=normalise_clone_url(data.get("clone_url")),
        owner=parse_user(data.get("owner")),
        fork=bool(data.get("fork", False)),
        parent=parse_repository(parent) if parent else None,
    )


class ReposClient:
    """Client for repository operations."""

    def __init__(self, transport: "Transport") -> None:
        self.transport = transport

    def get(self, owner: str, name: str) -> Repository:
        """
        Get repository information.

        Raises:
            NotFoundError: If the repository does not exist
        """
        response = self.transport.request("GET", f"repos/{owner}/{name}")
        return parse_repository(response)

    def get_branch(self, owner: str, name: str, branch: str) -> dict[str, Any]:
        """
        Get a branch of a repository.

        Raises:
            NotFoundError: If the repository or branch does not exist
        """
        return self.transport.request(
            "GET", f"repos/{owner}/{name}/branches/{quote(branch, safe='')}"
        )
