"""
Configuration helpers and constants for bucketkeeper.

Values that are not passed explicitly are sourced from environment
variables; an environment value wins over a configured one when present.
"""

import os
from collections.abc import Iterable

# Name of the environment variable holding the GitBucket API token
TOKEN_ENVIRONMENT_VARIABLE = "BUCKETKEEPER_GITBUCKET_TOKEN"

# Name of the environment variable holding the GitBucket API root
API_ENVIRONMENT_VARIABLE = "BUCKETKEEPER_GITBUCKET_API"

# Marker looked for in git remote hosts
PLATFORM_HOST = "gitbucket"

API_PATH = "/api/v3/"

# Diagnostic route used to detect a GitBucket server
PLUGINS_PATH = "gitbucket/plugins"

URL_PATTERN = "http(s)://yourgitbucket/git/{owner}/{reponame}.git"


class EnvironmentVariablesProvider:
    """Reads environment variables. Replace in tests to control the environment."""

    def get_environment_variable(self, name: str) -> str | None:
        return os.environ.get(name)


def first_value(*values: str | None) -> str | None:
    """Return the first value that is not None or blank."""
    for value in values:
        if value is not None and value.strip():
            return value
    return None


def join_with_commas(items: Iterable[object]) -> str:
    return ", ".join(str(item) for item in items)
