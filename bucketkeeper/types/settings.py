"""Settings data models shared by the settings reader and the platform adapter."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Platform(Enum):
    """Collaboration platforms a repository URI can belong to."""

    GITHUB = "github"
    AZURE_DEVOPS = "azuredevops"
    BITBUCKET = "bitbucket"
    BITBUCKET_LOCAL = "bitbucketlocal"
    GITLAB = "gitlab"
    GITEA = "gitea"
    GITBUCKET = "gitbucket"


class ForkMode(Enum):
    """Where update branches are pushed."""

    PREFER_FORK = "prefer_fork"
    PREFER_SINGLE_REPOSITORY = "prefer_single_repository"
    SINGLE_REPOSITORY_ONLY = "single_repository_only"


@dataclass(frozen=True)
class RemoteInfo:
    """Local tracking information for a repository."""

    local_repository_uri: Path | None = None
    working_folder: Path | None = None
    branch_name: str | None = None
    remote_name: str | None = None


@dataclass(frozen=True)
class RepositorySettings:
    """Resolved identity of a repository on the platform."""

    api_uri: str
    repository_uri: str
    repository_name: str
    repository_owner: str
    remote_info: RemoteInfo | None = None


@dataclass(frozen=True)
class AuthSettings:
    """Credentials used to initialise a platform adapter."""

    api_base: str
    token: str


@dataclass
class CollaborationPlatformSettings:
    """Platform settings, completed by the settings reader."""

    base_api_url: str | None = None
    token: str | None = None
    fork_mode: ForkMode | None = None
