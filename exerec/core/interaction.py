"""
The unit of recording: one process run and what it produced.
"""

from dataclasses import dataclass, field
from typing import List, Optional


class ProcessError(RuntimeError):
    """
    Raised (or returned) when a process fails to spawn or exits non-zero.

    Only the message survives a recording; a replayed ProcessError carries
    the recorded text and nothing else.
    """

    pass


@dataclass
class Interaction:
    """
    A captured process interaction.

    Example:
        Interaction(
            command="base64",
            arguments=["-d"],
            stdin="aGVsbG8gd29ybGQ=",
            stdout="hello world",
        )
    """
    command: str
    arguments: List[str] = field(default_factory=list)
    stdin: str = ""
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        command: str,
        arguments: List[str],
        stdin: str,
        stdout: str,
        stderr: str,
        error: Optional[BaseException],
    ) -> "Interaction":
        """Build an interaction from a runner's (stdout, stderr, error) result."""
        return cls(
            command=command,
            arguments=list(arguments),
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            error=str(error) if error is not None else None,
        )

    @property
    def command_line(self) -> str:
        """Command and arguments joined by single spaces."""
        return " ".join([self.command, *self.arguments])

    @property
    def exception(self) -> Optional[ProcessError]:
        """The recorded error as an exception, or None on success."""
        if not self.error:
            return None
        return ProcessError(self.error)

    @property
    def succeeded(self) -> bool:
        return not self.error
