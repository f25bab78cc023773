from bucketkeeper.testing.fixtures import (  # noqa: F401
    fake_transport,
    platform,
    sample_pull_payload,
    sample_repository_payload,
)
