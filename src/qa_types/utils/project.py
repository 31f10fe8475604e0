"""
Distribution metadata stamped on every JSON log line (`service`, `version`).
"""

from importlib import metadata

from qa_types import __version__

DISTRIBUTION_NAME = "qa-testing-types"


def get_project_name() -> str:
    return DISTRIBUTION_NAME


def get_project_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """
    Version of the installed `distribution`. Running from a source checkout that was never
    installed falls back to `qa_types.__version__`.
    """
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return __version__


__all__ = ["DISTRIBUTION_NAME", "get_project_name", "get_project_version"]
