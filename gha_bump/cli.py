import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import __version__
from .github_api import DEFAULT_TIMEOUT, GitHubReleases
from .utils import find_workflow_files, setup_logging
from .workflow_parser import WorkflowParser

BANNER = f"gha-bump {__version__} - Upgrade actions for GitHub Actions workflows."


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gha-bump",
        description=BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Process all workflow YAML files in .github/workflows/
  %(prog)s .

  # Process a single workflow YAML file without writing changes
  %(prog)s --no-write .github/workflows/build.yaml
        """
    )

    parser.add_argument(
        "target",
        nargs="?",
        type=Path,
        help="Repository root or a single workflow file"
    )

    parser.add_argument(
        "--write",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Write changes to the file (default: %(default)s)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes (same as --no-write)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase verbosity (use -v, -vv, or -vvv)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Timeout in seconds for each GitHub request (default: %(default)s)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments."""
    if args.timeout <= 0:
        raise ValueError("--timeout must be greater than zero")


def print_replacements(workflow_file: Path, replacements: Dict[str, str]) -> None:
    """Print the replacements detected for a workflow file."""
    if not replacements:
        return

    print(f"Detected replacements in {workflow_file}:")
    for old_uses, new_tag in replacements.items():
        print(f"  {old_uses} -> {new_tag}")


def process_workflows(workflow_files: List[Path], parser: WorkflowParser, write: bool) -> int:
    """Process workflow files in order, returning the number of replacements found."""
    total = 0

    for workflow_file in workflow_files:
        replacements = parser.process_file(workflow_file, write=write)
        print_replacements(workflow_file, replacements)
        total += len(replacements)

    return total


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    arg_parser = create_parser()
    args = arg_parser.parse_args(argv)

    if args.target is None:
        arg_parser.print_help(sys.stderr)
        return 0

    setup_logging(args.verbose)
    write = args.write and not args.dry_run

    try:
        validate_args(args)

        workflow_files = find_workflow_files(args.target)
        logging.info(f"Found {len(workflow_files)} workflow file(s) to process")

        parser = WorkflowParser(GitHubReleases(timeout=args.timeout))
        total = process_workflows(workflow_files, parser, write)

        if total == 0:
            print("All actions are up to date")
        elif write:
            print(f"Updated {total} action reference(s)")
        else:
            print(f"{total} action reference(s) can be updated (not written)")

        return 0

    except Exception as e:
        logging.error(f"Error: {e}")
        return 1
