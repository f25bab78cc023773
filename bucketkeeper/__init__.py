"""bucketkeeper - GitBucket adapter for automated NuGet package updates."""

from bucketkeeper.client import GitBucketClient
from bucketkeeper.config import EnvironmentVariablesProvider
from bucketkeeper.exceptions import (
    ApiError,
    BucketKeeperError,
    ConfigurationError,
    NotARepositoryError,
    NotFoundError,
    NotInitialisedError,
    NotSupportedError,
    PlatformError,
    ResponseDecodeError,
)
from bucketkeeper.git import GitDiscoveryDriver, GitRemote, SubprocessGitDiscoveryDriver
from bucketkeeper.logging import configure_logging, get_logger
from bucketkeeper.platform import GitBucketPlatform
from bucketkeeper.probe import GitBucketProbe
from bucketkeeper.settings_reader import GitBucketSettingsReader
from bucketkeeper.transport import HTTPTransport, Transport
from bucketkeeper.update_set import PackageUpdateSet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Platform adapter
    "GitBucketPlatform",
    "GitBucketClient",
    # Settings
    "GitBucketSettingsReader",
    "GitBucketProbe",
    "EnvironmentVariablesProvider",
    # Git discovery
    "GitDiscoveryDriver",
    "GitRemote",
    "SubprocessGitDiscoveryDriver",
    # Package updates
    "PackageUpdateSet",
    # Exceptions
    "BucketKeeperError",
    "ConfigurationError",
    "NotARepositoryError",
    "NotInitialisedError",
    "NotSupportedError",
    "PlatformError",
    "ApiError",
    "NotFoundError",
    "ResponseDecodeError",
    # Transport
    "Transport",
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
