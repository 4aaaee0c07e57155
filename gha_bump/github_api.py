"""
GitHub releases lookup module
"""

import logging
from typing import Optional

import requests
import semver

from .exceptions import ResolutionError, VersionParseError
from .models import ActionReference

RELEASES_URL = "https://github.com/{owner}/{repo}/releases/latest"
DEFAULT_TIMEOUT = 10


def parse_version(tag: str) -> semver.Version:
    """Parse a tag such as v4, v4.2 or v4.2.1-rc.1 as a semantic version."""
    # Missing minor and patch numbers default to zero, as in v4 -> 4.0.0.
    version = tag[1:] if tag.startswith("v") else tag
    try:
        return semver.Version.parse(version, optional_minor_and_patch=True)
    except ValueError as e:
        raise VersionParseError(f"Invalid version '{tag}': {e}") from e


class GitHubReleases:
    """Resolves the latest released version of GitHub Actions."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/vnd.github.v3+json"})
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def get_latest_version(self, owner: str, repo: str) -> str:
        """Get the tag of the latest release from the releases/latest redirect."""
        url = RELEASES_URL.format(owner=owner, repo=repo)
        self.logger.debug(f"{owner}/{repo}: fetching {url}")

        try:
            with self.session.get(url, allow_redirects=False, timeout=self.timeout) as response:
                if response.status_code != requests.codes.found:
                    raise ResolutionError(
                        f"Failed to get latest version of {owner}/{repo}: "
                        f"{response.status_code} {response.reason}, body: {response.text}"
                    )
                location = response.headers.get("Location")
        except requests.exceptions.RequestException as e:
            raise ResolutionError(f"Request for {owner}/{repo} failed: {e}") from e

        if not location:
            raise ResolutionError(f"No Location header found for {owner}/{repo}")

        # https://github.com/owner/repo/releases/tag/v4.2.1
        parts = location.split("/")
        if len(parts) < 7:
            raise ResolutionError(f"Invalid Location header for {owner}/{repo}: {location}")

        latest = parts[-1]
        self.logger.debug(f"{owner}/{repo}: latest release is {latest}")
        return latest

    def suggest_major_upgrade(self, uses: str) -> Optional[str]:
        """Return the new major tag (e.g. v4) if upstream has a newer major, else None."""
        action = ActionReference.parse(uses)
        if action is None or not action.is_candidate():
            self.logger.debug(f"Skipping {uses}")
            return None

        latest = self.get_latest_version(action.owner, action.repo)
        current_version = parse_version(action.ref)
        latest_version = parse_version(latest)

        if latest_version.major > current_version.major:
            return f"v{latest_version.major}"

        self.logger.debug(f"{action.owner}/{action.repo}: {action.ref} is up to date ({latest})")
        return None
