"""Conversion of absolute resource locations into project-relative paths."""

from pathlib import PurePosixPath
from typing import Union

from gitstage import GitStageError
from gitstage.constants import EMPTY_PATH

LocationLike = Union[str, PurePosixPath]


class PreconditionViolation(GitStageError):
    """Raised when the coordinator is misused by its caller.

    Examples are an empty selection or a resource that does not live under
    the project root. These are integration bugs and are never reported to
    the user as an operation failure.
    """


def is_prefix_of(prefix: LocationLike, location: LocationLike) -> bool:
    """Check whether ``prefix`` is an equal or strict segment prefix of ``location``.

    The comparison is done segment by segment, so ``/proj`` is a prefix of
    ``/proj/a`` but not of ``/project``.
    """
    prefix_parts = PurePosixPath(prefix).parts
    location_parts = PurePosixPath(location).parts
    return location_parts[: len(prefix_parts)] == prefix_parts


def relative_path(location: LocationLike, project_root: LocationLike) -> str:
    """Strip the project root segments from a resource location.

    Args:
        location: Absolute location of a resource
        project_root: Absolute location of the project

    Returns:
        Forward-slash relative path. ``EMPTY_PATH`` when the location is the
        project root itself.

    Raises:
        PreconditionViolation: If the location is not under the project root
    """
    location = PurePosixPath(location)
    project_root = PurePosixPath(project_root)

    if not is_prefix_of(project_root, location):
        raise PreconditionViolation(
            f"Resource {location} is outside project root {project_root}"
        )

    remainder = location.parts[len(project_root.parts):]
    if not remainder:
        return EMPTY_PATH
    return "/".join(remainder)
