"""Branch name lookup for heartbeat enrichment.

Branch resolution is best effort: failures are logged and reported as
``None`` so that a missing or broken git never blocks heartbeat creation.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .command_runner import CommandRunner, SubprocessRunner

BRANCH_ARGS = ("rev-parse", "--abbrev-ref", "HEAD")


class BranchResolver:
    """Resolves the current git branch of a working directory."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        git_executable: str = "git",
        timeout: float = 5.0,
    ):
        """Initialize branch resolver.

        Args:
            runner: Command runner, a SubprocessRunner by default
            git_executable: Name or path of the git executable
            timeout: Maximum seconds to wait for git
        """
        self.runner = runner or SubprocessRunner()
        self.git_executable = git_executable
        self.timeout = timeout

    def resolve(self, working_dir: str) -> Optional[str]:
        """Return the branch checked out in ``working_dir``, or None."""
        try:
            output = self.runner.run(self.git_executable, BRANCH_ARGS, working_dir, self.timeout)
        except Exception as e:
            logger.warning(f"Couldn't determine branch name, is git installed? ({e})")
            return None

        lines = output.splitlines()
        if not lines:
            return None

        return lines[0].strip() or None
