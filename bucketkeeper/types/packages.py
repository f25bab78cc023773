"""Package and version data models.

Versions are held as ``NuGetVersion`` values so that NuGet strings such as
``"1.0"`` and ``"1.0.0"`` compare equal, and a fourth revision component
(``"1.0.0.3"``) takes part in ordering.
"""

import functools
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import semantic_version

_FOUR_PART = re.compile(r"^(\d+)\.(\d+)\.(\d+)\.(\d+)(.*)$")

class VersionChange(Enum):
    """How far an update may move a package version."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

@functools.total_ordering
@dataclass(frozen=True, eq=False)
class NuGetVersion:
    """
    A NuGet version: a semantic version plus a revision number.

    Build metadata is kept for display but ignored when comparing.
    """

    semver: semantic_version.Version
    revision: int = 0

    @property
    def major(self) -> int:
        return self.semver.major

    @property
    def minor(self) -> int:
        return self.semver.minor

    @property
    def patch(self) -> int:
        return self.semver.patch

    def _key(self) -> tuple:
        # 0.0.0 carries only the prerelease, so release sorts above prerelease
        prerelease = semantic_version.Version(
            major=0, minor=0, patch=0, prerelease=self.semver.prerelease
        )
        return (self.major, self.minor, self.patch, self.revision, prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "NuGetVersion") -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text += f".{self.revision}"
        if self.semver.prerelease:
            text += "-" + ".".join(self.semver.prerelease)
        if self.semver.build:
            text += "+" + ".".join(self.semver.build)
        return text

def parse_version(value: "str | NuGetVersion | semantic_version.Version") -> NuGetVersion:
    """Parse a NuGet version string, padding missing components."""
    if isinstance(value, NuGetVersion):
        return value
    if isinstance(value, semantic_version.Version):
        return NuGetVersion(value)

    text = value.strip()
    match = _FOUR_PART.match(text)
    if match:
        major, minor, patch, revision, rest = match.groups()
        return NuGetVersion(
            semantic_version.Version.coerce(f"{major}.{minor}.{patch}{rest}"), int(revision)
        )
    return NuGetVersion(semantic_version.Version.coerce(text))


@dataclass(frozen=True)
class PackageIdentity:
    """A package id at a specific version."""

    id: str
    version: NuGetVersion

    def __post_init__(self) -> None:
        object.__setattr__(self, "version", parse_version(self.version))

    def __str__(self) -> str:
        return f"{self.id} {self.version}"

@dataclass(frozen=True)
class PackageSearchMetadata:
    """A version of a package found by metadata search."""

    identity: PackageIdentity
    source: str | None = None
    published: datetime | None = None

@dataclass(frozen=True)
class PackageLookupResult:
    """Versions found for a package, with the newest version for each change level."""

    allowed_change: VersionChange
    major: PackageSearchMetadata | None
    minor: PackageSearchMetadata | None = None
    patch: PackageSearchMetadata | None = None

    def selected(self) -> PackageSearchMetadata | None:
        """Return the candidate allowed by ``allowed_change``."""
        if self.allowed_change is VersionChange.MAJOR:
            return self.major
        if self.allowed_change is VersionChange.MINOR:
            return self.minor
        if self.allowed_change is VersionChange.PATCH:
            return self.patch
        return None

@dataclass(frozen=True)
class PackageInProject:
    """An occurrence of a package reference in a project file."""

    id: str
    version: NuGetVersion
    path: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "version", parse_version(self.version))

    @property
    def identity(self) -> PackageIdentity:
        return PackageIdentity(self.id, self.version)
