"""Value types shared by the staging coordinator and its collaborators."""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import List, Optional, Tuple


class Severity(Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    FAIL = "fail"


class DisplayMode(Enum):
    """How a notification is surfaced.

    NOT_EMERGE only lands in the notification list, FLOAT pops up immediately.
    """

    NOT_EMERGE = "not_emerge"
    FLOAT = "float"


class CoordinatorState(Enum):
    """Lifecycle of a single add-to-index invocation."""

    IDLE = "idle"
    STATUS_FETCHED = "status_fetched"
    STATUS_FAILED = "status_failed"
    NOTHING_TO_STAGE = "nothing_to_stage"
    PENDING_CONFIRMATION = "pending_confirmation"
    STAGING = "staging"
    STAGED = "staged"
    STAGE_FAILED = "stage_failed"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        CoordinatorState.STATUS_FAILED,
        CoordinatorState.NOTHING_TO_STAGE,
        CoordinatorState.STAGED,
        CoordinatorState.STAGE_FAILED,
    }
)


@dataclass(frozen=True)
class Resource:
    """A file or folder of the active project.

    Attributes:
        location: Absolute location, e.g. ``/proj/src/main.go``
        name: Display name; defaults to the last segment of the location
        is_container: True for folders (resources that can hold children)
    """

    location: PurePosixPath
    name: str = ""
    is_container: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", PurePosixPath(self.location))
        if not self.name:
            object.__setattr__(self, "name", self.location.name)


@dataclass(frozen=True)
class StatusSnapshot:
    """Modified and untracked paths of a project at one point in time.

    Paths are relative to the project root and use ``/`` separators.
    """

    modified: Tuple[str, ...] = ()
    untracked: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "modified", tuple(self.modified))
        object.__setattr__(self, "untracked", tuple(self.untracked))

    def changed_paths(self) -> List[str]:
        """Union of modified and untracked paths, modified first."""
        return [*self.modified, *self.untracked]

    def is_clean(self) -> bool:
        return not self.modified and not self.untracked


@dataclass(frozen=True)
class StageRequest:
    """A single request to the stage executor."""

    paths: Tuple[str, ...]
    update_only: bool = False


@dataclass(frozen=True)
class Outcome:
    """Result of an operation as handed to the reporter."""

    succeeded: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "Outcome":
        return cls(succeeded=True)

    @classmethod
    def failure(cls, reason: str) -> "Outcome":
        return cls(succeeded=False, reason=reason)

    @property
    def failed(self) -> bool:
        return not self.succeeded
