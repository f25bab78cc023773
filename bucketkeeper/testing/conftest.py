"""
Pytest plugin for bucketkeeper testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["bucketkeeper.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from bucketkeeper.testing.fixtures import (
    fake_transport,
    platform,
    sample_pull_payload,
    sample_repository_payload,
)

__all__ = [
    "fake_transport",
    "platform",
    "sample_repository_payload",
    "sample_pull_payload",
]
