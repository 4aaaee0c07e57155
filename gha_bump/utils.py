"""
Utility functions for gha-bump
"""

import logging
import sys
from pathlib import Path
from typing import List

from .exceptions import NoWorkflowFilesError

WORKFLOWS_DIR = Path(".github") / "workflows"
WORKFLOW_EXTENSIONS = ("yaml", "yml")


def setup_logging(verbosity: int) -> None:
    """Set up logging based on verbosity level."""
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    log_format = "%(levelname)s: %(message)s"
    if verbosity >= 2:
        log_format = "%(levelname)s - %(name)s - %(filename)s:%(lineno)d - %(message)s"

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )

    # Reduce noise from external libraries
    if verbosity < 3:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("requests").setLevel(logging.WARNING)


def find_workflow_files(target: Path) -> List[Path]:
    """Resolve a target path to the workflow files it names.

    A file is returned as-is. A directory is treated as a repository root and
    its ``.github/workflows`` directory is searched for ``*.yaml`` and
    ``*.yml`` files.
    """
    if not target.exists():
        raise FileNotFoundError(f"No such file or directory: {target}")

    if not target.is_dir():
        return [target]

    workflows_dir = target / WORKFLOWS_DIR
    if not workflows_dir.is_dir():
        raise FileNotFoundError(f"Workflow directory not found: {workflows_dir}")

    workflow_files = []
    for ext in WORKFLOW_EXTENSIONS:
        workflow_files.extend(sorted(p for p in workflows_dir.glob(f"*.{ext}") if p.is_file()))

    if not workflow_files:
        raise NoWorkflowFilesError(f"No workflow files found in {workflows_dir}")

    return workflow_files
