"""bucketkeeper testing utilities.

Provides a fake transport and payload helpers for testing code that uses
the GitBucket adapter.
"""

from bucketkeeper.testing.fake import FakeCall, FakeResponse, FakeTransport
from bucketkeeper.testing.fixtures import create_pull_payload, create_repository_payload

__all__ = [
    # Fake transport
    "FakeTransport",
    "FakeCall",
    "FakeResponse",
    # Helper functions
    "create_repository_payload",
    "create_pull_payload",
]
