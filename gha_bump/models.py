"""
Data models for gha-bump
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ActionReference:
    """Represents an action reference of the form owner/repo[/path]@ref."""

    uses: str
    path: str
    owner: str
    repo: str
    subpath: str
    ref: str

    @classmethod
    def parse(cls, uses: str) -> Optional["ActionReference"]:
        """Parse the 'uses' string, returning None if it is not an action reference."""
        # Handled formats:
        # - actions/checkout@v4
        # - github/codeql-action/init@v3
        # Anything without an owner/repo and a ref (./local-action,
        # docker://image) is not resolvable.
        path, sep, ref = uses.rpartition("@")
        if not sep or not path or not ref:
            return None

        owner, sep, rest = path.partition("/")
        if not sep or not owner:
            return None

        repo, _, subpath = rest.partition("/")
        if not repo:
            return None

        return cls(uses=uses, path=path, owner=owner, repo=repo, subpath=subpath, ref=ref)

    def is_candidate(self) -> bool:
        """Check if the ref is a version tag eligible for a major upgrade."""
        # Only tags that start with a v, e.g. v4 or v4.1.0. Bare versions
        # like 0.10.0 are left alone.
        return self.ref != "master" and self.ref.startswith("v")

    def __str__(self) -> str:
        return self.uses
