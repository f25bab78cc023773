"""Pull request-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestRequest:
    """What to open a pull request with."""

    head: str
    title: str
    base_ref: str
    body: str | None = None


@dataclass
class PullRequest:
    """Pull request as listed by the platform."""

    number: int
    title: str
    body: str | None
    head: str | None
    base: str | None
    state: str  # "open" or "closed"
