"""
Playback runner - answer runs from recordings without running anything.
"""

from typing import Optional, Sequence

from exerec.core import Interaction, Options
from exerec.logging import get_logger
from exerec.record.codec import FILE_OPTIONS, decode
from exerec.record.errors import RecordingError, RecordingFormatError, RecordingNotFoundError
from exerec.transport.base import DirectoryRunner, RunResult

logger = get_logger(__name__)


class PlaybackRunner(DirectoryRunner):
    """
    Runner that plays back recordings made by RecordRunner.

    A recording is looked up by name only. options are ignored, and a
    recording whose stored command differs from the request (a hand-edited
    file, a hash collision) is still returned.

    Example:
        runner = PlaybackRunner("tests/recordings")
        stdout, stderr, err = runner.run("kubectl", ["get", "pods"])
    """

    def run(
        self,
        command: str,
        arguments: Sequence[str] = (),
        stdin: str = "",
        options: Optional[Options] = None,
    ) -> RunResult:
        """
        Return the recorded stdout, stderr and error of a run.

        Raises:
            RecordingNotFoundError: If there is no recording for this run
            RecordingFormatError: If the recording can't be decoded
        """
        interaction = self.load(command, arguments, stdin)
        return interaction.stdout, interaction.stderr, interaction.exception

    def load(self, command: str, arguments: Sequence[str] = (), stdin: str = "") -> Interaction:
        """Read the recording of a run."""
        path = self.path_for(command, arguments, stdin)
        requested = Interaction(command=command, arguments=list(arguments))

        try:
            with open(path, **FILE_OPTIONS) as f:
                interaction = decode(f)
        except FileNotFoundError as e:
            raise RecordingNotFoundError(
                f"No recording of {requested.command_line!r}: {path}"
            ) from e
        except RecordingFormatError:
            logger.error(f"cannot decode recording {path}")
            raise
        except OSError as e:
            raise RecordingError(f"Failed to read recording {path}: {e}") from e

        if interaction.command_line != requested.command_line:
            logger.warning(
                f"recording {path} holds {interaction.command_line!r}, "
                f"requested {requested.command_line!r}"
            )

        logger.debug(f"played back {requested.command_line!r} from {path}")
        return interaction
