"""
gha-bump

Upgrade the major version of actions referenced by GitHub Actions workflows.
"""

__version__ = "1.0.0"
