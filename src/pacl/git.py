import subprocess
from collections.abc import Sequence
from pathlib import Path

import click

from pacl.constants import (
    ERR_CREATE_DIR,
    ERR_GIT_NON_ZERO,
    ERR_GIT_NOT_FOUND,
    ERR_GIT_TERMINATED,
    GIT_DIR,
    GIT_EXECUTABLE,
)


class GitError(RuntimeError):
    """A git invocation that did not succeed."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def build_clone_command(
    locator: str, destination: Path, extra_args: Sequence[str] = ()
) -> list[str]:
    """Build the git clone command line."""
    return [GIT_EXECUTABLE, "clone", *extra_args, locator, str(destination)]


def is_cloned(destination: Path) -> bool:
    """Check if a repository has already been cloned into destination."""
    return (destination / GIT_DIR).exists()


def clone_repo(
    locator: str, destination: Path, extra_args: Sequence[str] = ()
) -> None:
    """Clone locator into destination, creating parent directories.

    Raises:
        GitError: if the parent directory cannot be created, or git is
            missing, exits non-zero or is killed by a signal.
    """
    click.secho(f"Cloning {locator}...", fg="blue", err=True)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise GitError(
            ERR_CREATE_DIR.format(path=destination.parent, reason=exc.strerror)
        ) from exc

    cmd = build_clone_command(locator, destination, extra_args)
    try:
        result = subprocess.run(cmd)
    except FileNotFoundError as exc:
        raise GitError(ERR_GIT_NOT_FOUND) from exc

    if result.returncode < 0:
        raise GitError(ERR_GIT_TERMINATED, result.returncode)
    if result.returncode > 0:
        raise GitError(
            ERR_GIT_NON_ZERO.format(status=result.returncode), result.returncode
        )
