import tomllib
from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any

DISTRIBUTION_NAME = "message-translator"

# --------------------
# Find pyproject.toml
# --------------------


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def load_pyproject_data(pyproject_path: Path) -> dict:
    """
    Parse and return the contents of a pyproject.toml file as a dictionary.
    """
    # tomllib expects a binary file object
    with pyproject_path.open("rb") as f:
        return tomllib.load(f)


def get_pyproject_value(
    key: str,
    start: str | Path | None = None,
    max_up: int = 5,
    default: Any = None,
) -> Any:
    """
    Return the value for a dot-separated `key` (e.g. "project.version") from the
    nearest pyproject.toml, searching upwards from `start` (defaults to this
    module's folder).

    Returns `default` if the file isn't found, can't be parsed, or the key is missing.
    Used for log metadata only, so lookups never raise.
    """
    start_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent

    pyproject = find_pyproject(start=start_path, max_up=max_up)
    if not pyproject or not key:
        return default

    try:
        data = load_pyproject_data(pyproject)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    cur = data
    for part in key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return default

    return cur


def _own_pyproject_value(key: str, start: Path | str | None, max_up: int) -> Any:
    """
    Read `key` from the nearest pyproject.toml only if it belongs to this
    distribution; a host project's pyproject (monorepo, vendored copy) is ignored.
    """
    if get_pyproject_value("project.name", start=start, max_up=max_up) != DISTRIBUTION_NAME:
        return None
    return get_pyproject_value(key, start=start, max_up=max_up)


def get_project_name(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str = DISTRIBUTION_NAME,
) -> str:
    name = _own_pyproject_value("project.name", start=start, max_up=max_up)
    return name if name is not None else default


def get_project_version(
    start: Path | str | None = None,
    max_up: int = 5,
    default: str = "unknown",
    prefer_installed: bool = True,
) -> str:
    """
    Installed distribution version first (importlib.metadata, looked up by
    DISTRIBUTION_NAME), then project.version from this project's own
    pyproject.toml, then `default`.
    """
    if prefer_installed:
        try:
            return importlib_metadata.version(DISTRIBUTION_NAME)
        except importlib_metadata.PackageNotFoundError:
            pass

    val = _own_pyproject_value("project.version", start=start, max_up=max_up)
    return val if val is not None else default


__all__ = [
    "DISTRIBUTION_NAME",
    "find_pyproject",
    "load_pyproject_data",
    "get_pyproject_value",
    "get_project_name",
    "get_project_version",
]
