import os
import platform
from importlib.metadata import PackageNotFoundError, version

# Stamped by the release build; overridable through the environment.
BUILD_COMMIT = "0000000000000000000000000000000000000000"
BUILD_DATE = "1970-01-01T00:00:00Z"  # RFC 3339


def _detect_version() -> str:
    """
    Detect txtidy version.

    Falls back to a development placeholder if the package metadata
    is not available.
    """
    try:
        return version("txtidy")
    except PackageNotFoundError:
        return "0.0.0-dev"


def version_line() -> str:
    commit = os.environ.get("TXTIDY_BUILD_COMMIT") or BUILD_COMMIT
    build_date = os.environ.get("TXTIDY_BUILD_DATE") or BUILD_DATE
    return f"txtidy {_detect_version()} ({commit[:10]}), built with Python {platform.python_version()} on {build_date}"
