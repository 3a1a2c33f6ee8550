"""Core layer for gitstage.

This module provides the staging coordinator together with the path,
reconciliation and reporting logic it is built from.
"""

from gitstage.core.coordinator import StagingCoordinator
from gitstage.core.interfaces import RemoteOperationError
from gitstage.core.models import (
    CoordinatorState,
    DisplayMode,
    Outcome,
    Resource,
    Severity,
    StageRequest,
    StatusSnapshot,
)
from gitstage.core.paths import PreconditionViolation, relative_path
from gitstage.core.reporting import DualChannelReporter

__all__ = [
    "StagingCoordinator",
    "DualChannelReporter",
    "RemoteOperationError",
    "PreconditionViolation",
    "relative_path",
    "CoordinatorState",
    "DisplayMode",
    "Outcome",
    "Resource",
    "Severity",
    "StageRequest",
    "StatusSnapshot",
]
