__version__ = "0.1.0"

from exerec.core import Interaction, Options, ProcessError
from exerec.record import (
    RecordingError,
    RecordingFormatError,
    RecordingNotFoundError,
    decode,
    encode,
    recording_name,
)
from exerec.transport import LocalRunner, PlaybackRunner, RecordRunner, Runner
from exerec.logging import get_logger, get_exe_logger, setup_logging

"""
Building blocks of exerec:
    Interaction is one process run: command, arguments, stdin, stdout, stderr and error.
    Runner runs a command and returns (stdout, stderr, error).
    LocalRunner runs the command on the local machine.
    RecordRunner runs the command and saves the interaction to a directory.
    PlaybackRunner returns a saved interaction without running anything.
    encode/decode convert an interaction to and from the recording text format.
"""

__all__ = [
    "Interaction",
    "Options",
    "ProcessError",
    "RecordingError",
    "RecordingFormatError",
    "RecordingNotFoundError",
    "decode",
    "encode",
    "recording_name",
    "Runner",
    "LocalRunner",
    "RecordRunner",
    "PlaybackRunner",
    "get_logger",
    "get_exe_logger",
    "setup_logging",
]
