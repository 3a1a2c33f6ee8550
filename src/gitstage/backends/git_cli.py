"""Status source and stage executor backed by the git command line."""

import asyncio
import logging
from pathlib import PurePosixPath
from typing import List, Sequence

from gitstage.constants import DEFAULT_GIT_EXECUTABLE, EMPTY_PATH
from gitstage.core.interfaces import RemoteOperationError, StageExecutor, StatusSource
from gitstage.core.models import StatusSnapshot

logger = logging.getLogger(__name__)

# Worktree status letters counted as "modified"
_MODIFIED_CODES = {"M", "T"}


def parse_porcelain(output: str, prefix: str = "") -> StatusSnapshot:
    """Parse ``git status --porcelain=v1 -z`` output.

    Args:
        output: Raw NUL-separated status output
        prefix: Project location inside the repository, as printed by
            ``git rev-parse --show-prefix`` (e.g. ``"sub/dir/"``)

    Returns:
        StatusSnapshot with paths relative to the project
    """
    modified: List[str] = []
    untracked: List[str] = []

    records = output.split("\0")
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if len(record) < 4:
            continue

        index_code, worktree_code, path = record[0], record[1], record[3:]

        # Renames and copies carry their source path as an extra record
        if index_code in ("R", "C") or worktree_code in ("R", "C"):
            i += 1

        if prefix:
            if not path.startswith(prefix):
                continue
            path = path[len(prefix):]

        if index_code == "?" and worktree_code == "?":
            untracked.append(path)
        elif worktree_code in _MODIFIED_CODES:
            modified.append(path)

    return StatusSnapshot(modified=tuple(modified), untracked=tuple(untracked))


class GitCliBackend(StatusSource, StageExecutor):
    """Runs ``git`` in the project directory.

    Attributes:
        git_executable: Name or path of the git binary
    """

    def __init__(self, git_executable: str = DEFAULT_GIT_EXECUTABLE):
        self.git_executable = git_executable

    async def get_status(self, project_root: PurePosixPath) -> StatusSnapshot:
        prefix = (await self._run(project_root, "rev-parse", "--show-prefix")).strip()
        output = await self._run(
            project_root,
            "status",
            "--porcelain=v1",
            "-z",
            "--untracked-files=all",
            "--",
            ".",
        )
        snapshot = parse_porcelain(output, prefix)
        logger.debug(
            "Status of %s: %d modified, %d untracked",
            project_root,
            len(snapshot.modified),
            len(snapshot.untracked),
        )
        return snapshot

    async def stage(
        self,
        project_root: PurePosixPath,
        update_only: bool,
        paths: Sequence[str],
    ) -> None:
        args = ["add"]
        if update_only:
            args.append("--update")
        args.append("--")
        args.extend("." if path == EMPTY_PATH else path for path in paths)
        await self._run(project_root, *args)

    async def _run(self, cwd: PurePosixPath, *args: str) -> str:
        """Run git and return its stdout.

        Raises:
            RemoteOperationError: If git cannot be started or exits non-zero
        """
        logger.debug("Running %s %s in %s", self.git_executable, " ".join(args), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                self.git_executable,
                *args,
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise RemoteOperationError(f"Cannot run {self.git_executable}: {e}") from e

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise RemoteOperationError(
                message or f"git {args[0]} exited with code {process.returncode}"
            )

        return stdout.decode("utf-8", errors="replace")
