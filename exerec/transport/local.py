"""
Local runner - run commands on the local machine.
"""

import signal
import subprocess
from typing import Optional, Sequence

from exerec.core import Options, ProcessError
from exerec.logging import get_logger
from exerec.transport.base import Runner, RunResult

logger = get_logger(__name__)

# Keeps undecodable bytes intact through a recording file.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class LocalRunner(Runner):
    """
    Runner for processes on the local machine.

    Uses subprocess without a shell. stdin is written while stdout and stderr
    are drained, so a child filling its output pipe can't deadlock the run.
    There is no timeout: a run blocks until the child exits.
    """

    def run(
        self,
        command: str,
        arguments: Sequence[str] = (),
        stdin: str = "",
        options: Optional[Options] = None,
    ) -> RunResult:
        options = options or Options()
        arguments = list(arguments)

        kwargs = {}
        if stdin:
            kwargs["input"] = stdin.encode(ENCODING, ENCODING_ERRORS)
        else:
            kwargs["stdin"] = subprocess.DEVNULL

        try:
            result = subprocess.run(
                [command, *arguments],
                capture_output=True,
                cwd=options.cwd,
                env=options.env,
                **kwargs,
            )
        except OSError as e:
            logger.error(f"run {command}: {e}")
            return "", "", ProcessError(describe_failure(command, arguments, str(e), ""))

        stdout = result.stdout.decode(ENCODING, ENCODING_ERRORS)
        stderr = result.stderr.decode(ENCODING, ENCODING_ERRORS)
        logger.info(f"run-result {command}: stdout={stdout!r} stderr={stderr!r}")

        if result.returncode != 0:
            reason = exit_reason(result.returncode)
            return stdout, stderr, ProcessError(
                describe_failure(command, arguments, reason, stderr)
            )

        return stdout, stderr, None


def exit_reason(returncode: int) -> str:
    """
    Describe a non-zero return code.

    Negative codes mean the child was killed by that signal.
    """
    if returncode < 0:
        name = signal.strsignal(-returncode) or str(-returncode)
        return f"signal: {name.lower()}"
    return f"exit status {returncode}"


def describe_failure(command: str, arguments: Sequence[str], reason: str, stderr: str) -> str:
    """
    Message of a ProcessError.

    Example:
        describe_failure("ls", ["nonexisting"], "exit status 2", "ls: cannot access...")
        # "ls [nonexisting]: exit status 2 - ls: cannot access..."
    """
    return f"{command} [{' '.join(arguments)}]: {reason} - {stderr}"
