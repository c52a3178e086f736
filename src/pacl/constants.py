"""Constants for pacl - no magic strings/numbers allowed elsewhere."""

# Workspace
DEFAULT_PACL_ROOT = "~/pacl"
PACL_ROOT_ENV_VAR = "PACL_ROOT"
PACL_SSH_ENV_VAR = "PACL_SSH"
HOME_PREFIX = "~"

# Default hosting service used to expand owner/name shorthand
DEFAULT_HOST = "github.com"
DEFAULT_SERVICE_USER = "git"
HTTPS_SHORTHAND_FMT = "https://{host}/{repo}"
SSH_SHORTHAND_FMT = "{user}@{host}:{repo}"

# Git constants
GIT_EXECUTABLE = "git"
GIT_DIR = ".git"
GIT_CREDENTIAL_PREFIX = "git@"
SCHEME_SEPARATOR = "://"

# Reference grammars
SHORTHAND_OWNER_PATTERN = r"[A-Za-z0-9-]+"
SHORTHAND_NAME_PATTERN = r"[A-Za-z0-9._-]+"
SCHEME_URL_PATTERN = r"^\w+://([^/]\S+?)(\.git)?\Z"
SCP_URL_PATTERN = r"^([^/]+?):(~[^/]+?/)?(\S+)\Z"

# Error messages
ERR_INVALID_REPO = "Invalid repository reference: '{repo}'"
ERR_HOME_NOT_DETECTED = "Home directory not detected"
ERR_USER_HOME_NOT_DETECTED = "Home directory of '{prefix}' not detected"
ERR_GIT_NOT_FOUND = "git executable not found. Install git and make sure it is on PATH"
ERR_GIT_NON_ZERO = "Git returned non-zero status code '{status}'"
ERR_GIT_TERMINATED = "Git terminated by signal"
ERR_CREATE_DIR = "Cannot create directory '{path}': {reason}"
