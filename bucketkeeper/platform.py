"""
GitBucket collaboration platform adapter.

Implements the collaboration platform operations used by the update tool
on top of the GitBucket REST client. Transport errors are translated into
PlatformError; 404 responses on repository and branch lookups mean "absent".
"""

import json
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from bucketkeeper.client import GitBucketClient
from bucketkeeper.config import join_with_commas
from bucketkeeper.exceptions import (
    ApiError,
    NotFoundError,
    NotInitialisedError,
    NotSupportedError,
    PlatformError,
    ResponseDecodeError,
)
from bucketkeeper.logging import get_logger
from bucketkeeper.transport import HTTPTransport, Transport
from bucketkeeper.types.pulls import PullRequest, PullRequestRequest
from bucketkeeper.types.repos import ForkData, Organization, Repository
from bucketkeeper.types.settings import AuthSettings
from bucketkeeper.types.users import User

logger = get_logger("platform")

TransportFactory = Callable[[str, str], Transport]


def _default_transport(api_base: str, token: str) -> Transport:
    return HTTPTransport(base_url=api_base, token=token)


def error_message(error: ApiError) -> str:
    """
    Return the most specific message available for a failed request.

    GitBucket reports validation failures as {"errors": [{"message": ...}]};
    the first of those messages is preferred over the generic one.
    """
    if error.body:
        try:
            data = json.loads(error.body)
        except ValueError:
            data = None

        if isinstance(data, dict):
            errors = data.get("errors")
            if isinstance(errors, list) and errors:
                first = errors[0]
                if isinstance(first, dict) and first.get("message"):
                    return str(first["message"])
                if isinstance(first, str) and first:
                    return first

    return error.message


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except ApiError as e:
        raise PlatformError(error_message(e)) from e


class GitBucketPlatform:
    """
    Collaboration platform adapter for GitBucket.

    Example:
        ```python
        from bucketkeeper.platform import GitBucketPlatform
        from bucketkeeper.types import AuthSettings

        platform = GitBucketPlatform()
        platform.initialise(AuthSettings("https://gitbucket.example.com/api/v3/", "token"))
        user = platform.get_current_user()
        ```
    """

    def __init__(self, transport_factory: TransportFactory | None = None) -> None:
        """
        Args:
            transport_factory: Builds the transport from (api_base, token).
                Defaults to an HTTPTransport.
        """
        self._transport_factory = transport_factory or _default_transport
        self._client: GitBucketClient | None = None
        self._api_base: str | None = None

    @property
    def is_initialised(self) -> bool:
        return self._client is not None

    def initialise(self, settings: AuthSettings) -> None:
        """Build the REST client. May be called again to rebuild it."""
        if self._client is not None:
            self._client.close()

        self._api_base = settings.api_base
        self._client = GitBucketClient(
            base_url=settings.api_base,
            token=settings.token,
            transport=self._transport_factory(settings.api_base, settings.token),
        )

    def _checked_client(self) -> GitBucketClient:
        if self._client is None:
            raise NotInitialisedError()
        return self._client

    def get_current_user(self) -> User:
        client = self._checked_client()

        with _translate_errors():
            user = client.users.current()

        logger.debug("Read gitbucket user '%s'", user.login)
        return user

    def get_organizations(self) -> list[Organization]:
        logger.error("GitBucket organizations have not yet been implemented.")
        raise NotSupportedError("GitBucket organizations have not yet been implemented.")

    def get_repositories_for_organisation(self, organisation_name: str) -> list[Repository]:
        logger.error("GitBucket organizations have not yet been implemented.")
        raise NotSupportedError("GitBucket organizations have not yet been implemented.")

    def make_user_fork(self, owner: str, repository_name: str) -> Repository:
        logger.error("GitBucket Fork API has not yet been implemented.")
        raise NotSupportedError("GitBucket Fork API has not yet been implemented.")

    def search(self, search: Any) -> Any:
        logger.error("Search has not yet been implemented for GitBucket.")
        raise NotSupportedError("Search has not yet been implemented for GitBucket.")

    def get_user_repository(self, user_name: str, repository_name: str) -> Repository | None:
        """
        Look up a repository.

        Returns:
            The repository, or None if GitBucket reports it as not found
        """
        client = self._checked_client()

        logger.debug("Looking for user fork for %s/%s", user_name, repository_name)

        with _translate_errors():
            try:
                repository = client.repos.get(user_name, repository_name)
            except NotFoundError:
                logger.debug("User fork not found")
                return None

        logger.info(
            "User fork found at %s for %s", repository.clone_url, repository.owner.login
        )
        return repository

    def repository_branch_exists(
        self, user_name: str, repository_name: str, branch_name: str
    ) -> bool:
        client = self._checked_client()

        with _translate_errors():
            try:
                client.repos.get_branch(user_name, repository_name, branch_name)
            except NotFoundError:
                logger.debug(
                    "No branch found for %s / %s / %s", user_name, repository_name, branch_name
                )
                return False

        logger.debug("Branch found for %s / %s / %s", user_name, repository_name, branch_name)
        return True

    def open_pull_request(
        self,
        target: ForkData,
        request: PullRequestRequest,
        labels: Iterable[str] | None,
    ) -> None:
        """
        Open a pull request on the target repository and label it.

        GitBucket can answer a successful create with a body that does not
        decode into a pull request (https://github.com/gitbucket/gitbucket/issues/2306).
        That error is ignored and the new pull request is found again among
        the open pull requests by title and body to learn its number. When
        several match, the newest (highest number) is taken.
        """
        client = self._checked_client()

        logger.info(
            "Making PR onto '%s %s/%s from %s", self._api_base, target.owner, target.name, request.head
        )
        logger.debug("PR title: %s", request.title)

        with _translate_errors():
            try:
                client.pulls.create(
                    target.owner,
                    target.name,
                    title=request.title,
                    head=request.head,
                    base=request.base_ref,
                    body=request.body,
                )
            except ResponseDecodeError:
                logger.debug("Ignoring undecodable pull request create response")

            open_pulls = client.pulls.list(target.owner, target.name)

        number = self._find_created_pull(open_pulls, request).number
        self._add_labels_to_issue(client, target, number, labels)

    def _find_created_pull(
        self, pulls: list[PullRequest], request: PullRequestRequest
    ) -> PullRequest:
        matches = [
            pr
            for pr in pulls
            if pr.title == request.title and (pr.body or "") == (request.body or "")
        ]

        if not matches:
            raise PlatformError(f"No open pull request titled '{request.title}' was found")

        return max(matches, key=lambda pr: pr.number)

    def _add_labels_to_issue(
        self,
        client: GitBucketClient,
        target: ForkData,
        issue_number: int,
        labels: Iterable[str] | None,
    ) -> None:
        labels_to_apply = [label for label in labels or [] if label and label.strip()]

        if not labels_to_apply:
            return

        logger.info(
            "Adding label(s) '%s' to issue '%s %s/%s %s'",
            join_with_commas(labels_to_apply),
            self._api_base,
            target.owner,
            target.name,
            issue_number,
        )

        try:
            client.issues.add_labels(target.owner, target.name, issue_number, labels_to_apply)
        except ApiError:
            logger.error("Failed to add labels. Continuing", exc_info=True)
