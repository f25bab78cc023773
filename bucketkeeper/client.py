"""
GitBucket REST client.

Aggregates the resource clients over a single transport.
"""

import os
from typing import Any

from bucketkeeper.clients import IssuesClient, PullsClient, ReposClient, UsersClient
from bucketkeeper.config import (
    API_ENVIRONMENT_VARIABLE,
    TOKEN_ENVIRONMENT_VARIABLE,
    first_value,
)
from bucketkeeper.exceptions import ConfigurationError
from bucketkeeper.transport import HTTPTransport, Transport


class GitBucketClient:
    """
    Client for the GitBucket REST API.

    Example:
        ```python
        from bucketkeeper.client import GitBucketClient

        client = GitBucketClient(
            base_url="https://gitbucket.example.com/api/v3/",
            token="my-token",
        )
        user = client.users.current()
        repo = client.repos.get("acme", "widgets")
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
    ) -> None:
        """
        Initialize the GitBucket client.

        Args:
            base_url: API root, e.g. https://gitbucket.example.com/api/v3/
            token: Personal access token
            timeout: Request timeout in seconds (default: 30.0)
            transport: Transport to use instead of a new HTTPTransport
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = transport or HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
        )

        self.users = UsersClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.pulls = PullsClient(self._transport)
        self.issues = IssuesClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitBucketClient":
        """
        Create a client from environment variables.

        Environment variables:
            BUCKETKEEPER_GITBUCKET_API: API root (required)
            BUCKETKEEPER_GITBUCKET_TOKEN: Personal access token (required)

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        base_url = first_value(os.environ.get(API_ENVIRONMENT_VARIABLE))
        token = first_value(os.environ.get(TOKEN_ENVIRONMENT_VARIABLE))

        if not base_url:
            raise ConfigurationError(
                f"{API_ENVIRONMENT_VARIABLE} environment variable not set"
            )

        if not token:
            raise ConfigurationError(
                f"{TOKEN_ENVIRONMENT_VARIABLE} environment variable not set"
            )

        return cls(base_url=base_url, token=token, timeout=timeout)

    @property
    def transport(self) -> Transport:
        """Get the underlying transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitBucketClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
