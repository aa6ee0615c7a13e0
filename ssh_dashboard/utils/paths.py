"""Home-relative path expansion."""

from pathlib import Path


def expand_path(path: str, home: Path | str | None = None) -> str:
    """Expand a leading ``~/`` to the home directory.

    Args:
        path: Path as written in a config file
        home: Home directory to use (default: the current user's)

    Returns:
        Expanded path, or ``path`` unchanged if it is not ``~/``-relative
        or the home directory cannot be resolved
    """
    if not path.startswith("~/"):
        return path

    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError):
            return path

    return str(Path(home) / path[2:])
