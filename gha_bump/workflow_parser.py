"""
GitHub Actions workflow parser module
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import WorkflowParseError, WorkflowSchemaError
from .github_api import GitHubReleases

# Characters that can continue an action reference on either side. A trailing
# dot only continues it when more of a version follows, as in @v3.1.0.
_BEFORE_REFERENCE = r"[\w.\-/@]"
_AFTER_REFERENCE = r"[\w\-/@]|\.\w"


def apply_replacements(text: str, replacements: Dict[str, str]) -> str:
    """Rewrite every occurrence of each old reference to point at its new tag.

    This is a text substitution over the whole file, not an edit of the parsed
    tree, so comments, anchors and formatting are kept. Occurrences outside of
    ``uses:`` lines (for example in comments) are rewritten too, but a match
    must not be part of a longer reference.
    """
    if not replacements:
        return text

    for old_uses, new_tag in replacements.items():
        path = old_uses.rpartition("@")[0]
        new_uses = f"{path}@{new_tag}"
        pattern = re.compile(
            rf"(?<!{_BEFORE_REFERENCE}){re.escape(old_uses)}(?!{_AFTER_REFERENCE})"
        )
        text = pattern.sub(lambda _: new_uses, text)

    return text


class WorkflowParser:
    """Parser for GitHub Actions workflow files."""

    def __init__(self, releases: GitHubReleases):
        self.releases = releases
        self.logger = logging.getLogger(__name__)

    def load(self, data: Union[str, bytes]) -> Any:
        """Parse raw workflow content into a tree of mappings and sequences."""
        try:
            return yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise WorkflowParseError(f"Invalid YAML in workflow file: {e}") from e

    def find_replacements(self, workflow: Any) -> Dict[str, str]:
        """Walk jobs and steps, returning a mapping of old uses to new major tags."""
        if not isinstance(workflow, dict):
            raise WorkflowSchemaError("jobs not found in workflow")

        jobs = workflow.get("jobs")
        if not isinstance(jobs, dict):
            raise WorkflowSchemaError("jobs not found in workflow")

        replacements: Dict[str, str] = {}
        checked = set()

        for job_name, job in jobs.items():
            if not isinstance(job, dict):
                raise WorkflowSchemaError(f"job {job_name} is not a map")

            steps = job.get("steps")
            if not isinstance(steps, list):
                raise WorkflowSchemaError(f"steps not found or not a list in job {job_name}")

            for step in steps:
                if not isinstance(step, dict):
                    raise WorkflowSchemaError(f"step is not a map in job {job_name}")

                name = step.get("name")
                uses = step.get("uses")
                name = name if isinstance(name, str) else ""
                uses = uses if isinstance(uses, str) else ""

                label = name or uses
                if uses:
                    self.logger.info(f"  {label}: {uses}")
                else:
                    self.logger.info(f"  {label}")

                if not uses or uses in checked:
                    continue
                checked.add(uses)

                new_tag = self.releases.suggest_major_upgrade(uses)
                if new_tag:
                    replacements[uses] = new_tag

        return replacements

    def process_file(self, workflow_path: Path, write: bool = True) -> Dict[str, str]:
        """Find replacements for a workflow file and optionally write them back."""
        self.logger.info(f"Processing: {workflow_path}")

        with open(workflow_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()

        workflow = self.load(content)
        replacements = self.find_replacements(workflow)

        if write and replacements:
            self.save_workflow(workflow_path, apply_replacements(content, replacements))

        return replacements

    def save_workflow(self, workflow_path: Path, content: str) -> None:
        """Overwrite the workflow file with new content."""
        with open(workflow_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

        self.logger.info(f"Updated workflow file: {workflow_path}")
