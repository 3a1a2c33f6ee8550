"""Pytest configuration and shared fixtures."""

import shutil
import subprocess
from pathlib import Path, PurePosixPath
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from gitstage.core import DualChannelReporter, StagingCoordinator
from gitstage.core.interfaces import (
    ConfirmationView,
    Notifier,
    RemoteOperationError,
    SelectionSource,
    StageExecutor,
    StatusSource,
)
from gitstage.core.models import DisplayMode, Resource, Severity, StatusSnapshot
from gitstage.ui import InMemoryOutputRegistry, RichOutputConsoleFactory

PROJECT_ROOT = PurePosixPath("/proj")


class FakeStatusSource(StatusSource):
    def __init__(self, snapshot: StatusSnapshot, error: Optional[str] = None):
        self.snapshot = snapshot
        self.error = error
        self.calls: List[PurePosixPath] = []

    async def get_status(self, project_root: PurePosixPath) -> StatusSnapshot:
        self.calls.append(project_root)
        if self.error is not None:
            raise RemoteOperationError(self.error)
        return self.snapshot


class FakeStageExecutor(StageExecutor):
    def __init__(self, error: Optional[str] = None):
        self.error = error
        self.calls: List[Tuple[PurePosixPath, bool, Tuple[str, ...]]] = []

    async def stage(
        self,
        project_root: PurePosixPath,
        update_only: bool,
        paths: Sequence[str],
    ) -> None:
        self.calls.append((project_root, update_only, tuple(paths)))
        if self.error is not None:
            raise RemoteOperationError(self.error)


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.notifications: List[Tuple[str, Severity, DisplayMode]] = []

    def notify(
        self,
        message: str,
        severity: Severity = Severity.SUCCESS,
        display_mode: DisplayMode = DisplayMode.NOT_EMERGE,
    ) -> None:
        self.notifications.append((message, severity, display_mode))


class RecordingView(ConfirmationView):
    def __init__(self) -> None:
        self.message: Optional[str] = None
        self.update_only = True
        self.shown = 0
        self.closed = 0

    def set_message(self, message: str) -> None:
        self.message = message

    def set_update_only(self, update_only: bool) -> None:
        self.update_only = update_only

    def is_update_only(self) -> bool:
        return self.update_only

    def show_dialog(self) -> None:
        self.shown += 1

    def close(self) -> None:
        self.closed += 1


class StaticSelection(SelectionSource):
    def __init__(self, resources: Sequence[Resource], project_root: PurePosixPath = PROJECT_ROOT):
        self._resources = list(resources)
        self._project_root = project_root

    @property
    def resources(self) -> List[Resource]:
        return self._resources

    @property
    def project_root(self) -> PurePosixPath:
        return self._project_root


class Harness:
    """Coordinator wired to recording fakes."""

    def __init__(
        self,
        resources: Sequence[Resource],
        snapshot: StatusSnapshot,
        status_error: Optional[str] = None,
        stage_error: Optional[str] = None,
    ):
        self.view = RecordingView()
        self.selection = StaticSelection(resources)
        self.status_source = FakeStatusSource(snapshot, status_error)
        self.stage_executor = FakeStageExecutor(stage_error)
        self.notifier = RecordingNotifier()
        self.registry = InMemoryOutputRegistry()
        self.reporter = DualChannelReporter(
            console_factory=RichOutputConsoleFactory(),
            output_registry=self.registry,
            notifier=self.notifier,
            session_id="machine-1",
        )
        self.coordinator = StagingCoordinator(
            view=self.view,
            selection=self.selection,
            status_source=self.status_source,
            stage_executor=self.stage_executor,
            reporter=self.reporter,
        )

    @property
    def consoles(self):
        return self.registry.consoles_for("machine-1")


@pytest.fixture
def make_harness() -> Callable[..., Harness]:
    """Factory building a coordinator around fakes."""

    def _make(
        resources: Sequence[Resource],
        modified: Sequence[str] = (),
        untracked: Sequence[str] = (),
        status_error: Optional[str] = None,
        stage_error: Optional[str] = None,
    ) -> Harness:
        snapshot = StatusSnapshot(modified=tuple(modified), untracked=tuple(untracked))
        return Harness(resources, snapshot, status_error, stage_error)

    return _make


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a git repository with one committed file.

    Skips the test if git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args: str) -> None:
        subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True)

    git("init", "-q")
    git("config", "user.email", "dev@example.com")
    git("config", "user.name", "Dev")
    git("config", "commit.gpgsign", "false")

    (repo / "readme.md").write_text("# Project\n")
    git("add", "readme.md")
    git("commit", "-q", "-m", "Initial commit")

    return repo


@pytest.fixture
def staged_files() -> Callable[[Path], List[str]]:
    """Return a helper listing the paths currently staged in a repository."""

    def _staged(repo: Path) -> List[str]:
        result = subprocess.run(
            ["git", "diff", "--cached", "--name-only"],
            cwd=repo,
            check=True,
            capture_output=True,
            text=True,
        )
        return result.stdout.split()

    return _staged
