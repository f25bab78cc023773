"""
Tests for the GitBucket resource clients and wire-shape normalisation.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bucketkeeper.client import GitBucketClient
from bucketkeeper.clients.pulls import parse_pull_request
from bucketkeeper.clients.repos import normalise_clone_url, parse_repository
from bucketkeeper.config import API_ENVIRONMENT_VARIABLE, TOKEN_ENVIRONMENT_VARIABLE
from bucketkeeper.exceptions import ConfigurationError, ResponseDecodeError
from bucketkeeper.testing import FakeTransport, create_pull_payload, create_repository_payload
from bucketkeeper.types import User, UserPermissions

API_BASE = "https://gitbucket.local/api/v3/"

name_strategy = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N"), whitelist_characters="-_"),
)


# ============================================================================
# Repository normalisation
# ============================================================================


def test_parse_repository(sample_repository_payload: dict) -> None:
    repository = parse_repository(sample_repository_payload)

    assert repository.name == "widgets"
    assert repository.archived is False
    assert repository.fork is False
    assert repository.user_permissions == UserPermissions(admin=True, push=True, pull=True)
    assert repository.owner == User(login="acme", name=None, email="acme@example.com")
    assert repository.clone_url == "https://gitbucket.local/git/acme/widgets"
    assert repository.parent is None


def test_parse_repository_without_permissions() -> None:
    payload = create_repository_payload()
    del payload["permissions"]

    assert parse_repository(payload).user_permissions is None


def test_parse_repository_normalises_parent_recursively() -> None:
    grandparent = create_repository_payload(owner="origin", name="widgets")
    parent = create_repository_payload(
        owner="acme", name="widgets", fork=True, parent=grandparent, clone_url="https://gitbucket.local/git/acme/widgets.GIT"
    )
    payload = create_repository_payload(owner="me", name="widgets", fork=True, parent=parent)

    repository = parse_repository(payload)

    assert repository.fork is True
    assert repository.parent is not None
    assert repository.parent.owner.login == "acme"
    assert repository.parent.clone_url == "https://gitbucket.local/git/acme/widgets"
    assert repository.parent.parent is not None
    assert repository.parent.parent.owner.login == "origin"
    assert repository.parent.parent.parent is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://host/git/acme/widgets.git", "https://host/git/acme/widgets"),
        ("https://host/git/acme/widgets.GIT", "https://host/git/acme/widgets"),
        ("https://host/git/acme/widgets/", "https://host/git/acme/widgets"),
        ("https://host/git/acme/widgets.git/", "https://host/git/acme/widgets.git"),
        ("https://host/git/acme/widgets", "https://host/git/acme/widgets"),
        (None, None),
        ("", None),
        ("   ", None),
    ],
)
def test_normalise_clone_url(value: str | None, expected: str | None) -> None:
    assert normalise_clone_url(value) == expected


def test_normalise_clone_url_requires_absolute_url() -> None:
    with pytest.raises(ResponseDecodeError):
        normalise_clone_url("git/acme/widgets.git")


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        "escaped",
        {"archived": False},
        {"name": "widgets", "clone_url": "/git/acme/widgets.git"},
        {"name": "widgets", "clone_url": 42},
        {"name": "widgets", "owner": ["acme"]},
    ],
)
def test_parse_repository_rejects_other_shapes(data: object) -> None:
    with pytest.raises(ResponseDecodeError):
        parse_repository(data)


@given(owner=name_strategy, name=name_strategy)
@settings(max_examples=100)
def test_clone_url_never_ends_with_git_or_slash(owner: str, name: str) -> None:
    url = normalise_clone_url(f"https://gitbucket.local/git/{owner}/{name}.git")

    assert url == f"https://gitbucket.local/git/{owner}/{name}"


# ============================================================================
# Pull request parsing
# ============================================================================


def test_parse_pull_request(sample_pull_payload: dict) -> None:
    pull = parse_pull_request(sample_pull_payload)

    assert pull.number == 1
    assert pull.head == "bucketkeeper-update"
    assert pull.base == "master"
    assert pull.state == "open"


@pytest.mark.parametrize("data", [None, "escaped", [], {"title": "no number"}, {"number": "x"}])
def test_parse_pull_request_rejects_other_shapes(data: object) -> None:
    with pytest.raises(ResponseDecodeError):
        parse_pull_request(data)


# ============================================================================
# Client
# ============================================================================


def test_client_routes_requests(fake_transport: FakeTransport) -> None:
    fake_transport.configure("GET", "repos/acme/widgets", response=create_repository_payload())
    fake_transport.configure("GET", "repos/acme/widgets/pulls", response=[create_pull_payload(number=4)])

    client = GitBucketClient(API_BASE, "token", transport=fake_transport)

    assert client.repos.get("acme", "widgets").name == "widgets"
    assert [p.number for p in client.pulls.list("acme", "widgets", state="all")] == [4]
    assert fake_transport.get_calls("GET")[1].params == {"state": "all", "page": 1}


def test_list_pull_requests_follows_pages(fake_transport: FakeTransport) -> None:
    pulls = "repos/acme/widgets/pulls"
    fake_transport.configure(
        "GET",
        pulls,
        response=[create_pull_payload(number=9), create_pull_payload(number=8)],
        params={"state": "open", "page": 1},
    )
    fake_transport.configure(
        "GET", pulls, response=[create_pull_payload(number=5)], params={"state": "open", "page": 2}
    )
    fake_transport.configure("GET", pulls, response=[], params={"state": "open", "page": 3})

    client = GitBucketClient(API_BASE, "token", transport=fake_transport)

    assert [p.number for p in client.pulls.list("acme", "widgets")] == [9, 8, 5]
    assert [c.params["page"] for c in fake_transport.get_calls("GET")] == [1, 2, 3]


def test_list_pull_requests_stops_when_page_is_ignored(fake_transport: FakeTransport) -> None:
    fake_transport.configure("GET", "repos/acme/widgets/pulls", response=[create_pull_payload(number=4)])

    client = GitBucketClient(API_BASE, "token", transport=fake_transport)

    assert [p.number for p in client.pulls.list("acme", "widgets")] == [4]
    assert fake_transport.call_count("GET", "repos/acme/widgets/pulls") == 2


def test_create_pull_request_omits_missing_body(fake_transport: FakeTransport) -> None:
    fake_transport.configure("POST", "repos/acme/widgets/pulls", response=create_pull_payload())

    client = GitBucketClient(API_BASE, "token", transport=fake_transport)
    client.pulls.create("acme", "widgets", title="t", head="h", base="b")

    assert fake_transport.get_calls("POST")[0].body == {"title": "t", "head": "h", "base": "b"}


def test_client_context_manager_closes_transport(fake_transport: FakeTransport) -> None:
    with GitBucketClient(API_BASE, "token", transport=fake_transport) as client:
        assert client.transport is fake_transport

    assert fake_transport.closed


def test_client_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(API_ENVIRONMENT_VARIABLE, API_BASE)
    monkeypatch.setenv(TOKEN_ENVIRONMENT_VARIABLE, "token")

    client = GitBucketClient.from_env()

    assert client.base_url == API_BASE
    client.close()


def test_client_from_env_missing_api(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(API_ENVIRONMENT_VARIABLE, raising=False)
    monkeypatch.setenv(TOKEN_ENVIRONMENT_VARIABLE, "token")

    with pytest.raises(ConfigurationError) as exc_info:
        GitBucketClient.from_env()

    assert API_ENVIRONMENT_VARIABLE in str(exc_info.value)


def test_client_from_env_missing_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(API_ENVIRONMENT_VARIABLE, API_BASE)
    monkeypatch.delenv(TOKEN_ENVIRONMENT_VARIABLE, raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        GitBucketClient.from_env()

    assert TOKEN_ENVIRONMENT_VARIABLE in str(exc_info.value)
