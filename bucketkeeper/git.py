"""
Git working copy discovery.

The settings reader asks a GitDiscoveryDriver about local repositories;
SubprocessGitDiscoveryDriver answers using the git command line.
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit


@dataclass(frozen=True)
class GitRemote:
    """A configured git remote."""

    name: str
    url: str


def remote_host(url: str) -> str:
    """Return the host of a remote URL, including scp-like "user@host:path" forms."""
    if "://" in url:
        return urlsplit(url).hostname or ""
    return url.split("@")[-1].split(":")[0]


class GitDiscoveryDriver(ABC):
    """Answers questions about local git working copies."""

    @abstractmethod
    def is_git_repo(self, path: Path) -> bool:
        """Return True if the path is inside a git working copy."""
        pass

    @abstractmethod
    def get_remote_for_platform(self, path: Path, platform_host: str) -> GitRemote | None:
        """Return the first remote whose host contains the platform marker."""
        pass

    @abstractmethod
    def discover_repo(self, path: Path) -> Path:
        """Return the root of the working copy containing path."""
        pass

    @abstractmethod
    def get_current_head(self, path: Path) -> str:
        """Return the name of the checked out branch."""
        pass


class SubprocessGitDiscoveryDriver(GitDiscoveryDriver):
    """
    GitDiscoveryDriver backed by the git executable.

    Example:
        ```python
        from pathlib import Path
        from bucketkeeper.git import SubprocessGitDiscoveryDriver

        driver = SubprocessGitDiscoveryDriver()
        if driver.is_git_repo(Path(".")):
            remote = driver.get_remote_for_platform(Path("."), "gitbucket")
        ```
    """

    def __init__(self, git_executable: str = "git") -> None:
        self.git_executable = git_executable

    def _run(self, path: Path, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.git_executable, *args],
            cwd=path,
            capture_output=True,
            text=True,
            check=check,
        )

    def is_git_repo(self, path: Path) -> bool:
        path = Path(path)
        if not path.is_dir():
            return False

        result = self._run(path, "rev-parse", "--is-inside-work-tree", check=False)
        return result.returncode == 0 and result.stdout.strip() == "true"

    def get_remote_for_platform(self, path: Path, platform_host: str) -> GitRemote | None:
        result = self._run(Path(path), "remote", "-v")
        marker = platform_host.lower()

        for line in result.stdout.splitlines():
            fields = line.split()
            if len(fields) < 2:
                continue
            name, url = fields[0], fields[1]
            if marker in remote_host(url).lower():
                return GitRemote(name=name, url=url)

        return None

    def discover_repo(self, path: Path) -> Path:
        result = self._run(Path(path), "rev-parse", "--show-toplevel")
        return Path(result.stdout.strip())

    def get_current_head(self, path: Path) -> str:
        result = self._run(Path(path), "symbolic-ref", "--short", "-q", "HEAD", check=False)
        if result.returncode == 0:
            return result.stdout.strip()

        # Detached HEAD
        result = self._run(Path(path), "rev-parse", "--short", "HEAD")
        return result.stdout.strip()
