"""Synchronous execution of external commands.

The pipeline never calls ``subprocess`` directly; it goes through a
``CommandRunner`` so tests can substitute a fake.
"""

import logging
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .errors import CommandError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one external command."""

    program: str
    args: list[str] = field(default_factory=list)
    returncode: int = 0

    def check_returncode(self) -> None:
        """Raise CommandError if the command exited non-zero."""
        if self.returncode != 0:
            raise CommandError(self.program, self.args, self.returncode)


class CommandRunner(Protocol):
    def run(
        self,
        program: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult: ...


class SubprocessRunner:
    """Runs commands with the parent's stdout/stderr so output streams live.

    There is no timeout and no retry: the call blocks until the child exits.
    """

    def run(
        self,
        program: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        argv = [program, *args]
        logger.debug(f"Executing: {shlex.join(argv)}")

        try:
            completed = subprocess.run(
                argv,
                env=dict(env) if env is not None else None,
                check=False,
            )
        except OSError as e:
            # Missing executable, permission denied, etc.
            raise CommandError(program, args, None, reason=str(e)) from e

        return CommandResult(
            program=program, args=list(args), returncode=completed.returncode
        )
