"""Repository-related data models."""

from dataclasses import dataclass

from bucketkeeper.types.users import User


@dataclass(frozen=True)
class UserPermissions:
    """Permissions of the authenticated user on a repository."""

    admin: bool
    push: bool
    pull: bool


@dataclass(frozen=True)
class Repository:
    """Platform-independent repository information."""

    name: str
    archived: bool
    user_permissions: UserPermissions | None
    clone_url: str | None  # absolute, without trailing ".git" or "/"
    owner: User
    fork: bool
    parent: "Repository | None" = None


@dataclass(frozen=True)
class ForkData:
    """Owner and name of the repository a pull request targets."""

    owner: str
    name: str


@dataclass(frozen=True)
class Organization:
    """An organisation on the platform."""

    name: str
