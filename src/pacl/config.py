import os
from pathlib import Path

from pacl.constants import (
    DEFAULT_PACL_ROOT,
    ERR_HOME_NOT_DETECTED,
    ERR_USER_HOME_NOT_DETECTED,
    HOME_PREFIX,
    PACL_ROOT_ENV_VAR,
)
from pacl.url import derive_path


class HomeDirectoryError(RuntimeError):
    """Raised when a ``~`` path cannot be expanded."""


def get_pacl_root(base_dir: str | None = None) -> Path:
    """Get the clone root: base_dir, then PACL_ROOT, defaulting to ~/pacl."""
    root = base_dir or os.environ.get(PACL_ROOT_ENV_VAR) or DEFAULT_PACL_ROOT
    expanded = os.path.expanduser(root)
    if expanded.startswith(HOME_PREFIX):
        prefix = expanded.split(os.sep, 1)[0]
        if prefix == HOME_PREFIX:
            raise HomeDirectoryError(ERR_HOME_NOT_DETECTED)
        raise HomeDirectoryError(ERR_USER_HOME_NOT_DETECTED.format(prefix=prefix))
    return Path(expanded)


def get_destination(root: Path, locator: str) -> Path:
    """Get the directory a locator is cloned into under root."""
    return root / derive_path(locator)
