"""Issues resource client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bucketkeeper.transport import Transport


class IssuesClient:
    """Client for issue operations. Pull requests share the issue number space."""

    def __init__(self, transport: "Transport") -> None:
        self.transport = transport

    def add_labels(
        self, owner: str, name: str, number: int, labels: list[str]
    ) -> list[dict[str, Any]]:
        """Add labels to an issue or pull request."""
        response = self.transport.request(
            "POST", f"repos/{owner}/{name}/issues/{number}/labels", body=labels
        )
        return response or []
