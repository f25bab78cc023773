"""GitBucket resource clients."""

from bucketkeeper.clients.issues import IssuesClient
from bucketkeeper.clients.pulls import PullsClient
from bucketkeeper.clients.repos import ReposClient
from bucketkeeper.clients.users import UsersClient

__all__ = [
    "UsersClient",
    "ReposClient",
    "PullsClient",
    "IssuesClient",
]
