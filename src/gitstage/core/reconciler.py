"""Decides whether a selection has anything to stage."""

import logging
from pathlib import PurePosixPath
from typing import List, Optional, Sequence, Tuple

from gitstage.core.models import Resource, StatusSnapshot
from gitstage.core.paths import relative_path
from gitstage.messages import Messages

logger = logging.getLogger(__name__)


def find_first_match(
    snapshot: StatusSnapshot,
    resources: Sequence[Resource],
    project_root: PurePosixPath,
) -> Optional[Resource]:
    """Find the first selected resource that covers a changed path.

    A resource covers a changed path when the path starts with the resource's
    relative path, so a folder covers every file nested under it and the
    project root covers everything. Changed paths are scanned in status order
    (modified, then untracked) and for each of them the selection in order;
    the first hit is returned.

    Args:
        snapshot: Current status of the project
        resources: Selected resources
        project_root: Absolute location of the project

    Returns:
        The matching resource, or None if nothing in the selection changed

    Raises:
        PreconditionViolation: If a resource is outside the project root
    """
    selected: List[Tuple[Resource, str]] = [
        (resource, relative_path(resource.location, project_root))
        for resource in resources
    ]

    for changed_path in snapshot.changed_paths():
        for resource, selected_path in selected:
            if changed_path.startswith(selected_path):
                logger.debug("%s matches changed path %s", resource.location, changed_path)
                return resource

    return None


def confirmation_message(
    messages: Messages,
    resources: Sequence[Resource],
    matched: Resource,
) -> str:
    """Pick the dialog message for a selection that has something to stage."""
    if len(resources) > 1:
        return messages.add_to_index_multiple
    if matched.is_container:
        return messages.folder(matched.name)
    return messages.file(matched.name)
