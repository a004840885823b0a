"""
Errors raised while reading or writing recordings.

Process failures are not errors here: they are part of a recording
(see exerec.core.ProcessError).
"""


class RecordingError(Exception):
    """Base class for recording infrastructure failures."""

    pass


class RecordingFormatError(RecordingError):
    """Raised when a recording file cannot be decoded."""

    pass


class UnsupportedVersionError(RecordingFormatError):
    """Raised when a recording header names a format version we can't read."""

    def __init__(self, version):
        super().__init__(f"Unsupported recording format version: {version!r}")
        self.version = version


class RecordingNotFoundError(RecordingError, FileNotFoundError):
    """Raised when playback finds no recording for a request."""

    pass
