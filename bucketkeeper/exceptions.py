"""bucketkeeper exception classes."""

from typing import Any


class BucketKeeperError(Exception):
    """Base exception for all bucketkeeper errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(BucketKeeperError):
    """Raised when a repository URI or platform setting is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class NotARepositoryError(BucketKeeperError):
    """Raised when a local path is not inside a git working copy."""

    def __init__(self, message: str = "No git repository found") -> None:
        super().__init__("NOT_A_REPOSITORY", message)


class NotInitialisedError(BucketKeeperError):
    """Raised when the platform adapter is used before initialise()."""

    def __init__(
        self, message: str = "GitBucket REST client has not been initialised"
    ) -> None:
        super().__init__("NOT_INITIALISED", message)


class NotSupportedError(BucketKeeperError):
    """Raised for capabilities GitBucket does not offer."""

    def __init__(self, message: str) -> None:
        super().__init__("NOT_SUPPORTED", message)


class PlatformError(BucketKeeperError):
    """Raised when a GitBucket API call fails."""

    def __init__(self, message: str) -> None:
        super().__init__("PLATFORM_ERROR", message)


# Transport-level errors. The platform adapter translates these into
# PlatformError; they are not part of its public contract.


class ApiError(Exception):
    """Raised by a transport when a request fails."""

    def __init__(
        self,
        status_code: int,
        message: str,
        body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(message)


class NotFoundError(ApiError):
    """Raised on 404 responses."""

    pass


class ResponseDecodeError(ApiError):
    """Raised when a successful response cannot be decoded into the expected shape."""

    def __init__(self, message: str, payload: Any = None) -> None:
        super().__init__(200, message)
        self.payload = payload
