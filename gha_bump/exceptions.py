"""
Exceptions raised while bumping workflow actions
"""


class GhaBumpError(Exception):
    """Base class for all gha-bump errors."""


class NoWorkflowFilesError(GhaBumpError):
    """Raised when a directory holds no workflow files."""


class WorkflowParseError(GhaBumpError):
    """Raised when a workflow file is not valid YAML."""


class WorkflowSchemaError(GhaBumpError):
    """Raised when a workflow is missing jobs or steps, or they have the wrong shape."""


class ResolutionError(GhaBumpError):
    """Raised when the latest release of an action cannot be determined."""


class VersionParseError(GhaBumpError):
    """Raised when a tag is not a valid version."""
