"""Terminal front end for gitstage."""

from gitstage.ui.terminal import (
    InMemoryOutputRegistry,
    PathSelection,
    RichNotifier,
    RichOutputConsole,
    RichOutputConsoleFactory,
    TerminalConfirmationView,
)

__all__ = [
    "InMemoryOutputRegistry",
    "PathSelection",
    "RichNotifier",
    "RichOutputConsole",
    "RichOutputConsoleFactory",
    "TerminalConfirmationView",
]
