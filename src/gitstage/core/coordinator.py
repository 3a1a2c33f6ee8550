"""Coordinator of the add-to-index dialog.

The coordinator implements two entry points:

- ``show_dialog()`` fetches a fresh status snapshot, checks whether the
  selection has anything to stage and either reports "nothing to add" or
  prepares and shows the confirmation dialog.
- ``on_add_clicked()`` stages the selection. It is called when the user
  confirms the dialog, but can also be called directly to stage without the
  relevance check.

``on_cancel_clicked()`` closes the dialog without side effects.

Any error raised by the status source or stage executor ends the flow in a
failure state that is reported on both channels. Cancellation of the running
task returns the coordinator to IDLE and is re-raised.
"""

import asyncio
import logging
from typing import List, Optional

from gitstage.core.interfaces import (
    ConfirmationView,
    SelectionSource,
    StageExecutor,
    StatusSource,
)
from gitstage.core.models import CoordinatorState, Outcome, Resource, StageRequest
from gitstage.core.paths import PreconditionViolation, relative_path
from gitstage.core.reconciler import confirmation_message, find_first_match
from gitstage.core.reporting import DualChannelReporter
from gitstage.messages import Messages

logger = logging.getLogger(__name__)


class StagingCoordinator:
    """Drives a single add-to-index flow at a time.

    Attributes:
        view: Confirmation dialog
        selection: Source of the selected resources and project root
        status_source: Provides status snapshots
        stage_executor: Performs the staging
        reporter: Reports outcomes to console and notifications
        messages: Message catalog
    """

    def __init__(
        self,
        view: ConfirmationView,
        selection: SelectionSource,
        status_source: StatusSource,
        stage_executor: StageExecutor,
        reporter: DualChannelReporter,
        messages: Optional[Messages] = None,
    ):
        self.view = view
        self.selection = selection
        self.status_source = status_source
        self.stage_executor = stage_executor
        self.reporter = reporter
        self.messages = messages or Messages()
        self._state = CoordinatorState.IDLE

    @property
    def state(self) -> CoordinatorState:
        return self._state

    async def show_dialog(self) -> CoordinatorState:
        """Check the selection against the project status and ask for confirmation.

        Returns:
            The state reached: PENDING_CONFIRMATION, NOTHING_TO_STAGE or
            STATUS_FAILED

        Raises:
            PreconditionViolation: If the selection is empty, a resource is
                outside the project root, or a stage is in flight
        """
        self._ensure_not_staging()
        resources = self._selected_resources()
        project_root = self.selection.project_root
        self._relative_paths(resources)
        self._state = CoordinatorState.IDLE

        try:
            snapshot = await self.status_source.get_status(project_root)
        except asyncio.CancelledError:
            self._state = CoordinatorState.IDLE
            raise
        except Exception as e:
            logger.warning("Status of %s failed: %s", project_root, e)
            self._state = CoordinatorState.STATUS_FAILED
            self.reporter.report(
                Outcome.failure(self.messages.status_failed),
                self.messages.status_failed,
            )
            return self._state

        self._state = CoordinatorState.STATUS_FETCHED
        matched = find_first_match(snapshot, resources, project_root)

        if matched is None:
            self._state = CoordinatorState.NOTHING_TO_STAGE
            self.reporter.report(
                Outcome.success(),
                self.messages.nothing_to_add(len(resources)),
            )
            return self._state

        self.view.set_message(confirmation_message(self.messages, resources, matched))
        self.view.set_update_only(False)
        self._state = CoordinatorState.PENDING_CONFIRMATION
        self.view.show_dialog()
        return self._state

    async def on_add_clicked(self, update_only: Optional[bool] = None) -> CoordinatorState:
        """Stage the whole selection.

        Args:
            update_only: Only stage files already in the index. Read from the
                dialog when not given.

        Returns:
            STAGED or STAGE_FAILED

        Raises:
            PreconditionViolation: If the selection is empty, a resource is
                outside the project root, or a stage is already in flight
        """
        self._ensure_not_staging()
        request = self.build_request(
            self.view.is_update_only() if update_only is None else update_only
        )
        project_root = self.selection.project_root

        self._state = CoordinatorState.STAGING
        logger.debug("Staging %s in %s (update_only=%s)", request.paths, project_root, request.update_only)

        try:
            await self.stage_executor.stage(project_root, request.update_only, request.paths)
        except asyncio.CancelledError:
            self._state = CoordinatorState.IDLE
            self.view.close()
            raise
        except Exception as e:
            logger.warning("Staging in %s failed: %s", project_root, e)
            self._state = CoordinatorState.STAGE_FAILED
            self.reporter.report(
                Outcome.failure(self.messages.add_failed),
                self.messages.add_failed,
            )
            self.view.close()
            return self._state

        self._state = CoordinatorState.STAGED
        self.reporter.report(Outcome.success(), self.messages.add_success)
        self.view.close()
        return self._state

    def on_cancel_clicked(self) -> None:
        """Dismiss the dialog without staging or reporting anything."""
        self._ensure_not_staging()
        self._state = CoordinatorState.IDLE
        self.view.close()

    def build_request(self, update_only: bool) -> StageRequest:
        """Build the stage request for the current selection.

        Raises:
            PreconditionViolation: If the selection is empty or a resource is
                outside the project root
        """
        paths = self._relative_paths(self._selected_resources())
        return StageRequest(paths=tuple(paths), update_only=update_only)

    def _relative_paths(self, resources: List[Resource]) -> List[str]:
        project_root = self.selection.project_root
        return [relative_path(resource.location, project_root) for resource in resources]

    def _selected_resources(self) -> List[Resource]:
        resources = list(self.selection.resources)
        if not resources:
            raise PreconditionViolation("No resources selected")
        return resources

    def _ensure_not_staging(self) -> None:
        if self._state is CoordinatorState.STAGING:
            raise PreconditionViolation("A stage operation is already in progress")
