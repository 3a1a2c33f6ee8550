"""gitstage - Selective staging of project resources into the git index.

gitstage reconciles a selection of files and folders against the live status
of a git working tree, asks for confirmation, and stages the selection while
reporting the outcome to both a notification line and an output console.
"""

__version__ = "0.1.0"
__author__ = "gitstage Contributors"


class GitStageError(Exception):
    """Base class for all gitstage errors."""


__all__ = ["__version__", "__author__", "GitStageError"]
