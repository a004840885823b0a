"""
Recordings - persist process interactions as text files.

Components:
- Codec: encode/decode an Interaction in the line-indexed text format
- Naming: derive the file name a recording is stored under

Usage:
    from exerec.record import dumps, loads, recording_name

    name = recording_name("", "ls", ["-a"])
    text = dumps(interaction)
    assert loads(text) == interaction
"""

from exerec.record.codec import (
    FORMAT_VERSION,
    RecordingHeader,
    decode,
    dumps,
    encode,
    loads,
)
from exerec.record.errors import (
    RecordingError,
    RecordingFormatError,
    RecordingNotFoundError,
    UnsupportedVersionError,
)
from exerec.record.naming import recording_name, slugify

__all__ = [
    "FORMAT_VERSION",
    "RecordingHeader",
    "decode",
    "dumps",
    "encode",
    "loads",
    "RecordingError",
    "RecordingFormatError",
    "RecordingNotFoundError",
    "UnsupportedVersionError",
    "recording_name",
    "slugify",
]
