"""Pull requests resource client."""

from typing import TYPE_CHECKING, Any

from bucketkeeper.exceptions import ResponseDecodeError
from bucketkeeper.types.pulls import PullRequest

if TYPE_CHECKING:
    from bucketkeeper.transport import Transport


def _ref(data: Any) -> str | None:
    if isinstance(data, dict):
        return data.get("ref")
    return None


def parse_pull_request(data: Any) -> PullRequest:
    """
    Parse a pull request object.

    Raises:
        ResponseDecodeError: If the data is not a pull request object
    """
    if not isinstance(data, dict) or "number" not in data:
        raise ResponseDecodeError("Response is not a pull request object", data)

    try:
        number = int(data["number"])
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"Invalid pull request number: {data['number']!r}", data) from e

    return PullRequest(
        number=number,
        title=data.get("title", ""),
        body=data.get("body"),
        head=_ref(data.get("head")),
        base=_ref(data.get("base")),
        state=data.get("state", "open"),
    )


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "Transport") -> None:
        self.transport = transport

    def create(
        self,
        owner: str,
        name: str,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
    ) -> PullRequest:
        """
        Create a pull request.

        Args:
            owner: Owner of the target repository
            name: Name of the target repository
            title: Pull request title
            head: Branch containing changes
            base: Branch to merge into
            body: Optional pull request description

        Returns:
            The created PullRequest

        Raises:
            ResponseDecodeError: If the response is not a pull request object.
                GitBucket can send such a response even though the pull
                request was created.
        """
        payload: dict[str, Any] = {"title": title, "head": head, "base": base}
        if body is not None:
            payload["body"] = body

        response = self.transport.request(
            "POST", f"repos/{owner}/{name}/pulls", body=payload
        )
        return parse_pull_request(response)

    def list(self, owner: str, name: str, state: str = "open") -> list[PullRequest]:
        """
        List pull requests on a repository, following every page.

        Pages are requested until one comes back empty or holds no pull
        request not already seen.

        Args:
            state: "open", "closed" or "all" (default: "open")
        """
        pulls: list[PullRequest] = []
        seen: set[int] = set()
        page = 1

        while True:
            response = self.transport.request(
                "GET", f"repos/{owner}/{name}/pulls", params={"state": state, "page": page}
            )
            page_pulls = [parse_pull_request(item) for item in response or []]
            new = [pr for pr in page_pulls if pr.number not in seen]
            if not new:
                return pulls

            pulls.extend(new)
            seen.update(pr.number for pr in new)
            page += 1
