"""A validated proposal to update one package across a set of projects."""

from collections.abc import Iterable

from bucketkeeper.config import join_with_commas
from bucketkeeper.types.packages import (
    NuGetVersion,
    PackageInProject,
    PackageLookupResult,
    PackageSearchMetadata,
    VersionChange,
)


class PackageUpdateSet:
    """
    Update of a single package to a selected version.

    ``match`` is the version selected under the allowed change and is the
    one applied; ``highest`` is the newest version known to exist. Every
    current occurrence must be of the matched package.

    Raises:
        ValueError: On construction, if any part is missing or the
            occurrences are for a different package
    """

    def __init__(
        self,
        data: PackageLookupResult | None,
        current_packages: Iterable[PackageInProject] | None,
    ) -> None:
        if data is None:
            raise ValueError("data is required")

        highest = data.major
        match = data.selected()

        if highest is None:
            raise ValueError("highest is required")

        if match is None:
            raise ValueError("match is required")

        if current_packages is None:
            raise ValueError("current_packages is required")

        current = tuple(current_packages)
        if not current:
            raise ValueError("current_packages is empty")

        self._check_id_consistency(match.identity.id, current)

        self._allowed_change = data.allowed_change
        self._highest = highest
        self._match = match
        self._current_packages = current

    @staticmethod
    def _check_id_consistency(match_id: str, current: tuple[PackageInProject, ...]) -> None:
        error_ids = list(dict.fromkeys(p.id for p in current if p.id != match_id))
        if error_ids:
            raise ValueError(
                f"Updates must all be for package '{match_id}', got '{join_with_commas(error_ids)}'"
            )

    @property
    def allowed_change(self) -> VersionChange:
        return self._allowed_change

    @property
    def highest(self) -> PackageSearchMetadata:
        return self._highest

    @property
    def match(self) -> PackageSearchMetadata:
        return self._match

    @property
    def current_packages(self) -> tuple[PackageInProject, ...]:
        return self._current_packages

    @property
    def match_id(self) -> str:
        return self._match.identity.id

    @property
    def match_version(self) -> NuGetVersion:
        return self._match.identity.version

    @property
    def highest_version(self) -> NuGetVersion:
        return self._highest.identity.version

    def count_current_versions(self) -> int:
        """Number of distinct versions among the current occurrences."""
        return len({p.version for p in self._current_packages})

    def __repr__(self) -> str:
        return (
            f"PackageUpdateSet({self.match_id} {self.match_version}, "
            f"{len(self._current_packages)} occurrence(s))"
        )
