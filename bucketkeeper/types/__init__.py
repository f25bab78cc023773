"""bucketkeeper type definitions.

This module exports all data model types used by the package.
"""

from bucketkeeper.types.packages import (
    NuGetVersion,
    PackageIdentity,
    PackageInProject,
    PackageLookupResult,
    PackageSearchMetadata,
    VersionChange,
    parse_version,
)
from bucketkeeper.types.pulls import PullRequest, PullRequestRequest
from bucketkeeper.types.repos import ForkData, Organization, Repository, UserPermissions
from bucketkeeper.types.settings import (
    AuthSettings,
    CollaborationPlatformSettings,
    ForkMode,
    Platform,
    RemoteInfo,
    RepositorySettings,
)
from bucketkeeper.types.users import User

__all__ = [
    # User types
    "User",
    # Repository types
    "Repository",
    "UserPermissions",
    "ForkData",
    "Organization",
    # Pull request types
    "PullRequest",
    "PullRequestRequest",
    # Settings types
    "Platform",
    "ForkMode",
    "RemoteInfo",
    "RepositorySettings",
    "AuthSettings",
    "CollaborationPlatformSettings",
    # Package types
    "VersionChange",
    "NuGetVersion",
    "PackageIdentity",
    "PackageSearchMetadata",
    "PackageLookupResult",
    "PackageInProject",
    "parse_version",
]
