"""
Repository settings resolution for GitBucket.

Turns a repository URI, or a local working copy with a GitBucket remote,
into RepositorySettings. GitBucket repository URLs follow the pattern
http(s)://yourgitbucket/git/{owner}/{reponame}.git.
"""

from pathlib import Path
from urllib.parse import unquote, urlsplit, urlunsplit

from bucketkeeper.config import (
    API_PATH,
    PLATFORM_HOST,
    TOKEN_ENVIRONMENT_VARIABLE,
    URL_PATTERN,
    EnvironmentVariablesProvider,
    first_value,
)
from bucketkeeper.exceptions import ConfigurationError, NotARepositoryError
from bucketkeeper.git import GitDiscoveryDriver
from bucketkeeper.logging import get_logger, mask_sensitive_data
from bucketkeeper.probe import GitBucketProbe
from bucketkeeper.types.settings import (
    CollaborationPlatformSettings,
    ForkMode,
    Platform,
    RemoteInfo,
    RepositorySettings,
)

logger = get_logger("settings")


def _format_error(repository_uri: object) -> ConfigurationError:
    provided = "null" if repository_uri is None else mask_sensitive_data(str(repository_uri))
    return ConfigurationError(
        f"The provided uri was not in the correct format. "
        f"Provided {provided} and format should be {URL_PATTERN}"
    )


def local_path(repository_uri: str | Path) -> Path | None:
    """Return the local path a URI addresses, or None for a remote URI."""
    if isinstance(repository_uri, Path):
        return repository_uri

    if repository_uri.lower().startswith("file:"):
        return Path(unquote(urlsplit(repository_uri).path))

    if "://" not in repository_uri and Path(repository_uri).exists():
        return Path(repository_uri)

    return None


class GitBucketSettingsReader:
    """
    Resolves GitBucket repository settings.

    Example:
        ```python
        from bucketkeeper.config import EnvironmentVariablesProvider
        from bucketkeeper.git import SubprocessGitDiscoveryDriver
        from bucketkeeper.settings_reader import GitBucketSettingsReader

        reader = GitBucketSettingsReader(
            SubprocessGitDiscoveryDriver(), EnvironmentVariablesProvider()
        )
        settings = reader.repository_settings("https://gitbucket.example.com/git/acme/widgets.git")
        settings.api_uri  # "https://gitbucket.example.com/api/v3/"
        ```
    """

    def __init__(
        self,
        git_driver: GitDiscoveryDriver,
        environment_variables_provider: EnvironmentVariablesProvider,
        probe: GitBucketProbe | None = None,
    ) -> None:
        self._git_driver = git_driver
        self._environment_variables_provider = environment_variables_provider
        self._probe = probe or GitBucketProbe()

    @property
    def platform(self) -> Platform:
        return Platform.GITBUCKET

    def can_read(self, repository_uri: str | None) -> bool:
        """Return True if the URI belongs to a GitBucket server."""
        if repository_uri is None:
            return False
        return self._probe.can_claim(str(repository_uri))

    def update_collaboration_platform_settings(
        self, settings: CollaborationPlatformSettings
    ) -> None:
        """Fill in the token from the environment and default the fork mode."""
        env_token = self._environment_variables_provider.get_environment_variable(
            TOKEN_ENVIRONMENT_VARIABLE
        )
        settings.token = first_value(env_token, settings.token)
        if settings.fork_mode is None:
            settings.fork_mode = ForkMode.SINGLE_REPOSITORY_ONLY

    def repository_settings(
        self,
        repository_uri: str | Path | None,
        target_branch: str | None = None,
    ) -> RepositorySettings | None:
        """
        Resolve the settings for a repository.

        Args:
            repository_uri: GitBucket repository URL, file:// URI or local path
            target_branch: Branch to target instead of the current one

        Returns:
            RepositorySettings, or None when a local working copy has no
            GitBucket remote

        Raises:
            ConfigurationError: If the URI does not match the GitBucket pattern
            NotARepositoryError: If a local path is not in a git working copy
        """
        if repository_uri is None:
            raise _format_error(None)

        path = local_path(repository_uri)
        if path is not None:
            return self._settings_from_local(path, target_branch)

        remote_info = RemoteInfo(branch_name=target_branch) if target_branch is not None else None
        return self._parse_repository_uri(repository_uri, remote_info)

    def _settings_from_local(
        self, working_folder: Path, target_branch: str | None
    ) -> RepositorySettings | None:
        if not self._git_driver.is_git_repo(working_folder):
            raise NotARepositoryError()

        remote = self._git_driver.get_remote_for_platform(working_folder, PLATFORM_HOST)
        if remote is None:
            logger.debug("No %s remote found in %s", PLATFORM_HOST, working_folder)
            return None

        local_repository = self._git_driver.discover_repo(working_folder)
        remote_info = RemoteInfo(
            local_repository_uri=local_repository,
            working_folder=working_folder,
            branch_name=(
                target_branch
                if target_branch is not None
                else self._git_driver.get_current_head(local_repository)
            ),
            remote_name=remote.name,
        )

        return self._parse_repository_uri(remote.url, remote_info)

    def _parse_repository_uri(
        self, repository_uri: str, remote_info: RemoteInfo | None
    ) -> RepositorySettings:
        # general pattern is http(s)://yourgitbucket/git/owner/reponame.git
        parts = urlsplit(repository_uri)
        if not parts.scheme or not parts.netloc:
            raise _format_error(repository_uri)

        path_parts = [s for s in parts.path.split("/") if s.strip()]
        if len(path_parts) != 3:
            raise _format_error(repository_uri)

        repo_owner = path_parts[1]
        repo_name = path_parts[2]
        if repo_name.endswith(".git"):
            repo_name = repo_name[: -len(".git")]

        if not repo_owner or not repo_name:
            raise _format_error(repository_uri)

        settings = RepositorySettings(
            api_uri=urlunsplit((parts.scheme, parts.netloc, API_PATH, "", "")),
            repository_uri=repository_uri,
            repository_name=repo_name,
            repository_owner=repo_owner,
            remote_info=remote_info,
        )
        logger.debug(
            "Resolved %s/%s at %s", settings.repository_owner, settings.repository_name, settings.api_uri
        )
        return settings
