"""Version-control backends for gitstage.

A backend implements both ``StatusSource`` and ``StageExecutor``. The built-in
``git`` backend drives the git command line; other backends are discovered via
the ``gitstage.backends`` entry point group.
"""

import logging
from importlib import metadata
from typing import Union

from gitstage import GitStageError
from gitstage.backends.git_cli import GitCliBackend, parse_porcelain
from gitstage.config import GitStageConfig
from gitstage.constants import BACKEND_ENTRY_POINT_GROUP
from gitstage.core.interfaces import StageExecutor, StatusSource

logger = logging.getLogger(__name__)


class BackendError(GitStageError):
    """Raised when a backend cannot be found or loaded."""


class Backend(StatusSource, StageExecutor):
    """Convenience base class for third-party backends."""


def create_backend(config: GitStageConfig) -> Union[Backend, GitCliBackend]:
    """Instantiate the backend named in ``config``.

    Args:
        config: Effective configuration

    Returns:
        An object that is both a StatusSource and a StageExecutor

    Raises:
        BackendError: If the backend is unknown or does not implement both
            interfaces
    """
    if config.backend == "git":
        return GitCliBackend(config.git_executable)

    entry_points = metadata.entry_points(group=BACKEND_ENTRY_POINT_GROUP)
    for entry_point in entry_points:
        if entry_point.name != config.backend:
            continue

        try:
            backend_class = entry_point.load()
            backend = backend_class()
        except Exception as e:
            raise BackendError(f"Failed to load backend '{config.backend}': {e}") from e

        if not isinstance(backend, StatusSource) or not isinstance(backend, StageExecutor):
            raise BackendError(
                f"Backend '{config.backend}' must implement StatusSource and StageExecutor"
            )

        logger.debug("Loaded backend %s from %s", config.backend, entry_point.value)
        return backend

    raise BackendError(f"Unknown backend '{config.backend}'")


__all__ = [
    "Backend",
    "BackendError",
    "GitCliBackend",
    "create_backend",
    "parse_porcelain",
]
