"""
Base runner interface.

All runners (Local, Record, Playback) implement this interface so callers
can swap a live process run for a recorded one.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from exerec.core import Options, ProcessError
from exerec.record.errors import RecordingError
from exerec.record.naming import recording_name

RunResult = Tuple[str, str, Optional[ProcessError]]


class Runner(ABC):
    """
    Abstract base class for running a command to completion.

    Implementations:
    - LocalRunner: Run the process on the local machine
    - RecordRunner: Run the process and save a recording of it
    - PlaybackRunner: Return a saved recording without running anything
    """

    @abstractmethod
    def run(
        self,
        command: str,
        arguments: Sequence[str] = (),
        stdin: str = "",
        options: Optional[Options] = None,
    ) -> RunResult:
        """
        Run command with arguments, feeding it stdin.

        Args:
            command: Executable name or path
            arguments: Command arguments
            stdin: Text written to the process's standard input
            options: Working directory and environment (None = inherit)

        Returns:
            Tuple of (stdout, stderr, error); error is None on success

        Example:
            stdout, stderr, err = runner.run("ls", ["-a"])
        """
        pass


class DirectoryRunner(Runner):
    """Runner backed by a directory of recordings."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, command: str, arguments: Sequence[str] = (), stdin: str = "") -> Path:
        """
        Path of the recording for a run.

        Raises:
            RecordingError: If the run holds text that can't be encoded to bytes
        """
        try:
            name = recording_name(stdin, command, arguments)
        except UnicodeEncodeError as e:
            raise RecordingError(f"Cannot name a recording of {command!r}: {e}") from e
        return self.directory / name
