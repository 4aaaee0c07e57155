"""Shared fixtures for gha-bump tests."""

from typing import Dict, Optional
from unittest.mock import MagicMock

import pytest

from gha_bump.github_api import GitHubReleases


def make_response(status_code: int = 302, location: Optional[str] = None, text: str = "") -> MagicMock:
    """Build a fake requests.Response usable as a context manager."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = "Found" if status_code == 302 else "Error"
    response.text = text
    response.headers = {"Location": location} if location is not None else {}
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def release_location(owner: str, repo: str, tag: str) -> str:
    return f"https://github.com/{owner}/{repo}/releases/tag/{tag}"


class FakeReleases:
    """Stands in for GitHubReleases with fixed upgrade suggestions."""

    def __init__(self, suggestions: Dict[str, Optional[str]]):
        self.suggestions = suggestions
        self.calls = []

    def suggest_major_upgrade(self, uses: str) -> Optional[str]:
        self.calls.append(uses)
        return self.suggestions.get(uses)


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def releases(session):
    return GitHubReleases(session=session)


WORKFLOW = """\
name: build

on:
  push:
    branches: [master]

jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      # actions/checkout@v3 fetches the sources
      - uses: actions/checkout@v3
      - name: Setup Go
        uses: actions/setup-go@v4
      - name: Test
        run: make test
  docker:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v3
      - uses: docker/setup-buildx-action@master
      - uses: actions/checkout@v3.1.0
"""


@pytest.fixture
def workflow_text():
    return WORKFLOW


@pytest.fixture
def repo_root(tmp_path):
    """A repository root holding a single workflow file."""
    workflows = tmp_path / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (workflows / "build.yaml").write_text(WORKFLOW, encoding="utf-8")
    return tmp_path
