"""Reporting of operation outcomes to the console and notification channels."""

import logging

from gitstage.constants import ADD_TO_INDEX_COMMAND_NAME, DEFAULT_SESSION_ID
from gitstage.core.interfaces import CommandOutputRegistry, Notifier, OutputConsoleFactory
from gitstage.core.models import DisplayMode, Outcome, Severity

logger = logging.getLogger(__name__)


class DualChannelReporter:
    """Sends every outcome to an output console and to a notification.

    Each report gets its own console, created with the operation label and
    registered under the session id. Failures are written as error lines and
    raised as floating FAIL notifications; everything else uses the notifier
    defaults.

    Attributes:
        console_factory: Creates output consoles
        output_registry: Receives every console written to
        notifier: Shows transient notifications
        session_id: Key used when registering consoles
        label: Title of the consoles
    """

    def __init__(
        self,
        console_factory: OutputConsoleFactory,
        output_registry: CommandOutputRegistry,
        notifier: Notifier,
        session_id: str = DEFAULT_SESSION_ID,
        label: str = ADD_TO_INDEX_COMMAND_NAME,
    ):
        self.console_factory = console_factory
        self.output_registry = output_registry
        self.notifier = notifier
        self.session_id = session_id
        self.label = label

    def report(self, outcome: Outcome, message: str) -> None:
        """Write ``message`` to both channels according to ``outcome``."""
        console = self.console_factory.create(self.label)

        if outcome.failed:
            logger.debug("Reporting failure: %s (%s)", message, outcome.reason)
            console.print_error(message)
            self.output_registry.add_command_output(self.session_id, console)
            self.notifier.notify(message, Severity.FAIL, DisplayMode.FLOAT)
        else:
            logger.debug("Reporting: %s", message)
            console.print(message)
            self.output_registry.add_command_output(self.session_id, console)
            self.notifier.notify(message)
