"""
Recording file names.

A recording is found by its name alone, so the recorder and the player must
derive exactly the same name from (stdin, command, arguments):

    <command>-<slug>-<hash>

slug is the arguments with everything but letters and digits removed,
limited to MAX_SLUG_LENGTH characters. It only keeps names readable; the
32-bit FNV-1a hash over stdin, command and arguments keeps them unique.

Bump NAMING_VERSION whenever the hash or slug rule changes, existing
recordings will no longer be found.
"""

import os
from typing import Sequence

NAMING_VERSION = 1

MAX_SLUG_LENGTH = 20

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def fnv1a_32(*chunks: bytes) -> int:
    """32-bit FNV-1a over the concatenation of chunks."""
    h = _FNV32_OFFSET
    for chunk in chunks:
        for byte in chunk:
            h = ((h ^ byte) * _FNV32_PRIME) & 0xFFFFFFFF
    return h


def slugify(arguments: Sequence[str], max_length: int = MAX_SLUG_LENGTH) -> str:
    """
    Concatenate arguments keeping only letters and decimal digits.

    Example:
        slugify(["-n", "hello world"])  # "nhelloworld"
    """
    kept = [ch for ch in "".join(arguments) if ch.isalpha() or ch.isdecimal()]
    return "".join(kept[:max_length])


def recording_name(stdin: str, command: str, arguments: Sequence[str] = ()) -> str:
    """
    Name of the recording file for a process run.

    Args:
        stdin: Text fed to the process
        command: Executable name or path
        arguments: Command arguments

    Returns:
        File name, without directory

    Example:
        recording_name("", "ls", ["-a"])  # "ls-a-<8 hex digits>"
    """
    h = fnv1a_32(
        _encode(stdin),
        _encode(command),
        *(_encode(arg) for arg in arguments),
    )

    # a path in command would otherwise turn into subdirectories
    prefix = os.path.basename(command)

    return f"{prefix}-{slugify(arguments)}-{h:08x}"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")
