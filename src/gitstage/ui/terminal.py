"""Terminal implementations of the coordinator's view and sinks, using rich."""

from pathlib import Path, PurePosixPath
from typing import Dict, List, Sequence, Tuple

import typer
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from gitstage.core.interfaces import (
    CommandOutputRegistry,
    ConfirmationView,
    Notifier,
    OutputConsole,
    OutputConsoleFactory,
    SelectionSource,
)
from gitstage.core.models import DisplayMode, Resource, Severity


class RichNotifier(Notifier):
    """Prints notifications as single lines.

    Floating notifications are printed in bold so they stand out.
    """

    def __init__(self, console: Console):
        self.console = console

    def notify(
        self,
        message: str,
        severity: Severity = Severity.SUCCESS,
        display_mode: DisplayMode = DisplayMode.NOT_EMERGE,
    ) -> None:
        if severity is Severity.FAIL:
            marker, style = "✗", "red"
        else:
            marker, style = "✓", "green"

        if display_mode is DisplayMode.FLOAT:
            style = f"bold {style}"

        self.console.print(f"[{style}]{marker}[/{style}] {escape(message)}", highlight=False)


class RichOutputConsole(OutputConsole):
    """In-memory output console rendered as a rich panel."""

    def __init__(self, title: str):
        self._title = title
        self.lines: List[Tuple[str, bool]] = []

    @property
    def title(self) -> str:
        return self._title

    def print(self, text: str) -> None:
        self.lines.append((text, False))

    def print_error(self, text: str) -> None:
        self.lines.append((text, True))

    def render(self) -> Panel:
        body = Group(
            *(Text(text, style="red" if is_error else "") for text, is_error in self.lines)
        )
        return Panel(body, title=Text(self._title), border_style="dim")


class RichOutputConsoleFactory(OutputConsoleFactory):
    def create(self, title: str) -> RichOutputConsole:
        return RichOutputConsole(title)


class InMemoryOutputRegistry(CommandOutputRegistry):
    """Keeps registered consoles per session, in registration order."""

    def __init__(self) -> None:
        self.outputs: Dict[str, List[OutputConsole]] = {}

    def add_command_output(self, session_id: str, console: OutputConsole) -> None:
        self.outputs.setdefault(session_id, []).append(console)

    def consoles_for(self, session_id: str) -> List[OutputConsole]:
        return list(self.outputs.get(session_id, []))


class TerminalConfirmationView(ConfirmationView):
    """Confirmation dialog on the terminal.

    ``show_dialog()`` prints the message; ``confirm()`` asks the question.
    """

    def __init__(self, console: Console):
        self.console = console
        self.message = ""
        self.update_only = False
        self.is_open = False

    def set_message(self, message: str) -> None:
        self.message = message

    def set_update_only(self, update_only: bool) -> None:
        self.update_only = update_only

    def is_update_only(self) -> bool:
        return self.update_only

    def show_dialog(self) -> None:
        self.is_open = True
        self.console.print(Panel(Text(self.message), title="Add to index", border_style="cyan"))

    def close(self) -> None:
        self.is_open = False

    def confirm(self) -> bool:
        """Ask the user to confirm staging."""
        return typer.confirm("Add to index?", default=True)


class PathSelection(SelectionSource):
    """Selection built from file system paths."""

    def __init__(self, project_root: Path, paths: Sequence[Path]):
        self._project_root = PurePosixPath(Path(project_root).resolve().as_posix())
        self._resources = [
            Resource(
                location=PurePosixPath(path.resolve().as_posix()),
                is_container=path.is_dir(),
            )
            for path in (Path(p) for p in paths)
        ]

    @property
    def resources(self) -> List[Resource]:
        return list(self._resources)

    @property
    def project_root(self) -> PurePosixPath:
        return self._project_root
