"""
Pytest fixtures for bucketkeeper testing.

Provides a fake transport, an initialised platform adapter and GitBucket
wire payloads.
"""

from collections.abc import Generator
from typing import Any

import pytest

from bucketkeeper.platform import GitBucketPlatform
from bucketkeeper.testing.fake import FakeTransport
from bucketkeeper.types.settings import AuthSettings

TEST_API_BASE = "https://gitbucket.local/api/v3/"
TEST_TOKEN = "test-token-0123456789"


# ============================================================================
# Transport and Adapter Fixtures
# ============================================================================


@pytest.fixture
def fake_transport() -> Generator[FakeTransport, None, None]:
    """Provide a FakeTransport with no configured responses."""
    transport = FakeTransport()
    yield transport
    transport.reset()


@pytest.fixture
def platform(fake_transport: FakeTransport) -> GitBucketPlatform:
    """
    Provide a GitBucketPlatform initialised against fake_transport.

    Example:
        ```python
        def test_user(platform, fake_transport):
            fake_transport.configure("GET", "user", response={"login": "octo"})
            assert platform.get_current_user().login == "octo"
        ```
    """
    adapter = GitBucketPlatform(transport_factory=lambda api_base, token: fake_transport)
    adapter.initialise(AuthSettings(api_base=TEST_API_BASE, token=TEST_TOKEN))
    return adapter


# ============================================================================
# Payload Fixtures
# ============================================================================


@pytest.fixture
def sample_repository_payload() -> dict[str, Any]:
    """Provide a GitBucket repository object."""
    return create_repository_payload()


@pytest.fixture
def sample_pull_payload() -> dict[str, Any]:
    """Provide a GitBucket pull request object."""
    return create_pull_payload()


# ============================================================================
# Helper Functions
# ============================================================================


def create_repository_payload(
    owner: str = "acme",
    name: str = "widgets",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a GitBucket repository object with customizable fields.

    Args:
        owner: Owner login
        name: Repository name
        **kwargs: Additional fields to override
    """
    payload: dict[str, Any] = {
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner, "email": f"{owner}@example.com", "type": "User"},
        "private": False,
        "fork": False,
        "default_branch": "master",
        "clone_url": f"https://gitbucket.local/git/{owner}/{name}.git",
        "html_url": f"https://gitbucket.local/{owner}/{name}",
        "permissions": {"admin": True, "push": True, "pull": True},
    }
    payload.update(kwargs)
    return payload


def create_pull_payload(
    number: int = 1,
    title: str = "Automatic update of Newtonsoft.Json to 13.0.3",
    body: str | None = "Update body",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a GitBucket pull request object with customizable fields.

    Args:
        number: Pull request number
        title: Pull request title
        body: Pull request body
        **kwargs: Additional fields to override
    """
    payload: dict[str, Any] = {
        "number": number,
        "state": "open",
        "title": title,
        "body": body,
        "head": {"ref": "bucketkeeper-update", "sha": "0" * 40},
        "base": {"ref": "master", "sha": "1" * 40},
        "user": {"login": "acme"},
    }
    payload.update(kwargs)
    return payload
