"""Pull request title, commit message and description for a package update."""

from bucketkeeper.types.packages import NuGetVersion
from bucketkeeper.update_set import PackageUpdateSet

COMMIT_EMOJI = ":package:"

FOOTER = "This is an automated update. Merge only if it passes tests."


def make_pull_request_title(update_set: PackageUpdateSet) -> str:
    return f"Automatic update of {update_set.match_id} to {update_set.match_version}"


def make_commit_message(update_set: PackageUpdateSet) -> str:
    return f"{COMMIT_EMOJI} {make_pull_request_title(update_set)}"


def change_level(old: NuGetVersion, new: NuGetVersion) -> str:
    """Name the most significant version component that differs."""
    if old.major != new.major:
        return "major"
    if old.minor != new.minor:
        return "minor"
    if old.patch != new.patch:
        return "patch"
    if old.revision != new.revision:
        return "revision"
    return ""


def make_commit_details(update_set: PackageUpdateSet) -> str:
    """Render a markdown description of the update."""
    package_id = update_set.match_id
    new_version = update_set.match_version
    versions_in_use = sorted({p.version for p in update_set.current_packages})
    # measured from the oldest version in use
    level = change_level(versions_in_use[0], new_version)
    update_kind = f"a {level} update" if level else "an update"

    lines: list[str] = []
    if len(versions_in_use) > 1:
        lines.append(f"bucketkeeper has generated {update_kind} of `{package_id}` to `{new_version}`")
        in_use = ", ".join(f"`{v}`" for v in versions_in_use)
        lines.append(f"{len(versions_in_use)} versions of `{package_id}` were found in use: {in_use}")
    else:
        lines.append(
            f"bucketkeeper has generated {update_kind} of `{package_id}` to `{new_version}` "
            f"from `{versions_in_use[0]}`"
        )

    published = update_set.match.published
    if published is not None:
        lines.append(f"`{package_id} {new_version}` was published at `{published.isoformat()}`")

    if update_set.highest_version > new_version:
        lines.append(
            f"There is also a higher version, `{package_id} {update_set.highest_version}`, "
            f"but this was not applied as only `{update_set.allowed_change.value}` version changes are allowed."
        )

    count = len(update_set.current_packages)
    lines.append("")
    lines.append(f"{count} project update{'s' if count > 1 else ''}:")
    for current in update_set.current_packages:
        location = current.path or "project"
        lines.append(
            f"Updated `{location}` to `{package_id}` `{new_version}` from `{current.version}`"
        )

    lines.append("")
    lines.append(FOOTER)
    return "\n".join(lines)
