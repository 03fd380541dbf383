"""External command execution with captured output."""

from __future__ import annotations

import subprocess
from typing import Protocol, Sequence

from ...errors import CommandError


class CommandRunner(Protocol):
    """Protocol for running an external command and capturing stdout."""

    def run(self, command: str, args: Sequence[str], working_dir: str, timeout: float) -> str:
        """Run ``command`` with ``args`` in ``working_dir``.

        Raises:
            CommandError: if the command cannot be started, times out or exits non-zero
        """
        ...


class SubprocessRunner:
    """CommandRunner backed by :func:`subprocess.run`."""

    def run(self, command: str, args: Sequence[str], working_dir: str, timeout: float) -> str:
        try:
            result = subprocess.run(
                [command, *args],
                cwd=working_dir,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except FileNotFoundError:
            raise CommandError(command, "executable or working directory not found") from None
        except subprocess.TimeoutExpired:
            raise CommandError(command, f"timed out after {timeout}s") from None
        except OSError as e:
            raise CommandError(command, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise CommandError(command, f"exit code {result.returncode}" + (f": {stderr}" if stderr else ""))

        return result.stdout
