"""
Record runner - run a command and save what it did.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence, Union

from exerec.core import Interaction, Options
from exerec.logging import get_logger
from exerec.record.codec import FILE_OPTIONS, encode
from exerec.record.errors import RecordingError
from exerec.transport.base import DirectoryRunner, Runner, RunResult
from exerec.transport.local import LocalRunner

logger = get_logger(__name__)


class RecordRunner(DirectoryRunner):
    """
    Runner that records every run into a directory.

    The run itself is delegated (LocalRunner by default) and its result is
    returned unchanged, failed runs included. Every run is saved to
    <directory>/<recording_name>, replacing an older recording of the same
    request.

    Example:
        runner = RecordRunner("tests/recordings")
        stdout, stderr, err = runner.run("kubectl", ["get", "pods"])
    """

    def __init__(self, directory: Union[str, Path], runner: Optional[Runner] = None):
        super().__init__(directory)
        self.runner = runner or LocalRunner()

    def run(
        self,
        command: str,
        arguments: Sequence[str] = (),
        stdin: str = "",
        options: Optional[Options] = None,
    ) -> RunResult:
        """
        Run command and record the result.

        Raises:
            RecordingError: If the recording can't be written
        """
        stdout, stderr, error = self.runner.run(command, arguments, stdin, options)

        self.record(Interaction.from_result(command, arguments, stdin, stdout, stderr, error))

        return stdout, stderr, error

    def record(self, interaction: Interaction) -> Path:
        """
        Save interaction to the recording directory.

        The file is written under a temporary name and moved into place, so a
        failed write never leaves a partial recording behind.

        Returns:
            Path of the recording

        Raises:
            RecordingError: If the directory or file can't be written
        """
        path = self.path_for(interaction.command, interaction.arguments, interaction.stdin)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with open(fd, "w", **FILE_OPTIONS) as f:
                    encode(interaction, f)
                os.replace(tmp, path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp)
                raise
        except (OSError, UnicodeError) as e:
            raise RecordingError(f"Failed to write recording {path}: {e}") from e

        logger.info(f"recorded {interaction.command_line!r} to {path}")
        return path
