"""Version and build metadata.

Release builds overwrite the build fields; development installs report
``unknown``.
"""

__version__ = "0.1.0"

GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"
GIT_TAG = "unknown"


def full_version() -> str:
    """Version string including the git tag when it differs from the version."""
    if GIT_TAG not in ("unknown", "", __version__, f"v{__version__}"):
        return f"{__version__} ({GIT_TAG})"
    return __version__
