"""Collaborator contracts consumed by the staging coordinator.

The coordinator never talks to git, a terminal or an IDE directly. Everything
it needs is passed in as one of the interfaces below, so the same orchestration
runs against the git command line, a remote service or test doubles.
"""

from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Sequence

from gitstage import GitStageError
from gitstage.core.models import DisplayMode, Resource, Severity, StatusSnapshot


class RemoteOperationError(GitStageError):
    """Raised by a status source or stage executor when its operation fails."""


class StatusSource(ABC):
    """Provides the version-control status of a project."""

    @abstractmethod
    async def get_status(self, project_root: PurePosixPath) -> StatusSnapshot:
        """Fetch the current modified and untracked paths.

        Raises:
            RemoteOperationError: On any transport or service problem
        """


class StageExecutor(ABC):
    """Stages paths into the version-control index."""

    @abstractmethod
    async def stage(
        self,
        project_root: PurePosixPath,
        update_only: bool,
        paths: Sequence[str],
    ) -> None:
        """Stage ``paths`` (relative to ``project_root``).

        Args:
            project_root: Absolute location of the project
            update_only: Only stage files already known to the index
            paths: Relative paths; the empty path means the whole project

        Raises:
            RemoteOperationError: On any transport or service problem
        """


class OutputConsole(ABC):
    """Append-only log of a single operation."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Operation label the console was created for."""

    @abstractmethod
    def print(self, text: str) -> None:
        """Append a regular line."""

    @abstractmethod
    def print_error(self, text: str) -> None:
        """Append an error line."""


class OutputConsoleFactory(ABC):
    @abstractmethod
    def create(self, title: str) -> OutputConsole:
        """Create a fresh, empty console."""


class CommandOutputRegistry(ABC):
    """Keeps the consoles produced during a session."""

    @abstractmethod
    def add_command_output(self, session_id: str, console: OutputConsole) -> None:
        """Register ``console`` under ``session_id``."""


class Notifier(ABC):
    """Transient notification sink."""

    @abstractmethod
    def notify(
        self,
        message: str,
        severity: Severity = Severity.SUCCESS,
        display_mode: DisplayMode = DisplayMode.NOT_EMERGE,
    ) -> None:
        """Show a notification."""


class SelectionSource(ABC):
    """Current selection and active project, read-only."""

    @property
    @abstractmethod
    def resources(self) -> Sequence[Resource]:
        """Selected resources, in selection order."""

    @property
    @abstractmethod
    def project_root(self) -> PurePosixPath:
        """Absolute location of the active project."""


class ConfirmationView(ABC):
    """The add-to-index dialog."""

    @abstractmethod
    def set_message(self, message: str) -> None:
        pass

    @abstractmethod
    def set_update_only(self, update_only: bool) -> None:
        pass

    @abstractmethod
    def is_update_only(self) -> bool:
        pass

    @abstractmethod
    def show_dialog(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
