"""Constants used throughout gitstage."""

# Label of the output console created for every add-to-index operation
ADD_TO_INDEX_COMMAND_NAME = "Git add to index"

# Configuration
CONFIG_FILE = ".gitstage.toml"
DEFAULT_BACKEND = "git"
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_SESSION_ID = "local"

# Entry point group for third-party backends
BACKEND_ENTRY_POINT_GROUP = "gitstage.backends"

# Relative path denoting the whole project root
EMPTY_PATH = ""

# Exit code for failed operations and bad input
EXIT_USER_ERROR = 1
