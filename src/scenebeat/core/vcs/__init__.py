"""Version-control helpers."""

from .branch_resolver import BranchResolver
from .command_runner import CommandRunner, SubprocessRunner

__all__ = ["BranchResolver", "CommandRunner", "SubprocessRunner"]
