"""Resolution of repository references into clone locators and local paths."""

import re

from pacl.constants import (
    DEFAULT_HOST,
    DEFAULT_SERVICE_USER,
    ERR_INVALID_REPO,
    GIT_CREDENTIAL_PREFIX,
    HTTPS_SHORTHAND_FMT,
    SCHEME_SEPARATOR,
    SCHEME_URL_PATTERN,
    SCP_URL_PATTERN,
    SHORTHAND_NAME_PATTERN,
    SHORTHAND_OWNER_PATTERN,
    SSH_SHORTHAND_FMT,
)


class ParseError(ValueError):
    """Raised when a locator matches neither the scheme nor the SCP-like form."""

    def __init__(self, locator: str) -> None:
        super().__init__(ERR_INVALID_REPO.format(repo=locator))
        self.locator = locator


def is_shorthand(repo: str) -> bool:
    """Check if a reference is an `owner/name` shorthand for the default host."""
    if "/" not in repo:
        return False

    owner, name = repo.split("/", 1)
    return bool(
        re.fullmatch(SHORTHAND_OWNER_PATTERN, owner)
        and re.fullmatch(SHORTHAND_NAME_PATTERN, name)
    )


def normalize_repo_url(repo: str, prefer_ssh: bool = False) -> str:
    """Turn a user supplied reference into a locator for `git clone`.

    Shorthand is expanded against the default host, over HTTPS unless
    ``prefer_ssh`` is set. Anything else is returned untouched and is
    validated later by :func:`derive_path`.

    Examples:
        "octocat/Spoon-Knife" -> "https://github.com/octocat/Spoon-Knife"
        "octocat/Spoon-Knife", prefer_ssh=True
            -> "git@github.com:octocat/Spoon-Knife"
        "ssh://host/foo.git" -> "ssh://host/foo.git"
    """
    if not is_shorthand(repo):
        return repo

    if prefer_ssh:
        return SSH_SHORTHAND_FMT.format(
            user=DEFAULT_SERVICE_USER, host=DEFAULT_HOST, repo=repo
        )
    return HTTPS_SHORTHAND_FMT.format(host=DEFAULT_HOST, repo=repo)


def derive_path(locator: str) -> str:
    """Derive the relative clone directory for a locator.

    Scheme URLs keep ``[user@]host[:port]/path`` and lose the ``.git``
    suffix. SCP-like locators become ``[user@]host/[~user/]path`` with the
    suffix left in place. A ``git@`` credential is dropped in both cases.

    Raises:
        ParseError: if the locator matches neither form.
    """
    if SCHEME_SEPARATOR in locator:
        match = re.match(SCHEME_URL_PATTERN, locator)
        if not match:
            raise ParseError(locator)
        return match.group(1).removeprefix(GIT_CREDENTIAL_PREFIX)

    match = re.match(SCP_URL_PATTERN, locator)
    if not match:
        raise ParseError(locator)

    host, home, path = match.groups()
    host = host.removeprefix(GIT_CREDENTIAL_PREFIX)
    return f"{host}/{home or ''}{path}"
