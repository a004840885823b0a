"""
Recording codec - read and write recordings as plain text.

Recordings are meant to be easy to read, diff and edit by hand. The first
line is a JSON header holding the format version and, for every section, the
1-based line number where that section starts. Sections follow in a fixed
order, each terminated by a separator:

    {"version":1,"cmd":3,"stdin":5,"stdout":7,"stderr":9,"err":11,"timing":13}
    ----
    echo -n hello world
    ----

    ----
    hello world
    ----

    ----

    ----
    timing JSON TODO

Section boundaries come from the header, not from scanning for the
separator, so sections may hold any text (including "----" lines) without
escaping. The command line is the command and its arguments joined by
spaces; arguments containing a space do not survive a round trip.

Example:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        encode(interaction, f)

    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        interaction = decode(f)
"""

import io
import json
from dataclasses import asdict, dataclass, fields
from typing import List, TextIO

from exerec.core.interaction import Interaction
from exerec.record.errors import RecordingFormatError, UnsupportedVersionError

FORMAT_VERSION = 1

# Section separator. It must start with a linebreak, the rest is for readability.
SEPARATOR = "\n----\n"
# Lines a separator adds between the end of one section and the start of the next.
SEPARATOR_LINES = 2

# Reserved for timing data used by asynchronous replay.
TIMING_PLACEHOLDER = "timing JSON TODO"

# Keyword arguments for open() when reading or writing recording files.
FILE_OPTIONS = {"encoding": "utf-8", "errors": "surrogateescape", "newline": ""}


@dataclass
class RecordingHeader:
    """
    First line of a recording: format version and section start lines.

    All line numbers are 1-based.
    """
    version: int = FORMAT_VERSION
    cmd: int = 0
    stdin: int = 0
    stdout: int = 0
    stderr: int = 0
    err: int = 0
    timing: int = 0

    @classmethod
    def for_sections(cls, sections: List[str]) -> "RecordingHeader":
        """
        Compute the header for the given section texts.

        Args:
            sections: command line, stdin, stdout, stderr and error text, in order

        Returns:
            Header with the start line of every section and of the timing slot
        """
        starts = [1 + SEPARATOR_LINES]
        for text in sections:
            starts.append(starts[-1] + text.count("\n") + SEPARATOR_LINES)

        cmd, stdin, stdout, stderr, err, timing = starts
        return cls(
            version=FORMAT_VERSION,
            cmd=cmd,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            err=err,
            timing=timing,
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), separators=(",", ":"))

    @classmethod
    def from_json(cls, line: str) -> "RecordingHeader":
        """
        Parse a header line.

        Missing keys default to 0 and unknown keys are ignored.

        Raises:
            RecordingFormatError: If the line is not a JSON object of integers
        """
        try:
            data = json.loads(line)
        except ValueError as e:
            raise RecordingFormatError(f"Invalid recording header: {e}") from e

        if not isinstance(data, dict):
            raise RecordingFormatError("Invalid recording header: not a JSON object")

        values = {}
        for f in fields(cls):
            value = data.get(f.name, 0)
            if not isinstance(value, int) or isinstance(value, bool):
                raise RecordingFormatError(
                    f"Invalid recording header: {f.name} is not an integer"
                )
            values[f.name] = value

        return cls(**values)

    def section_starts(self) -> List[int]:
        return [self.cmd, self.stdin, self.stdout, self.stderr, self.err, self.timing]

    def validate(self, line_count: int) -> None:
        """
        Check that every section fits in a file of line_count lines.

        Raises:
            UnsupportedVersionError: If version is not FORMAT_VERSION
            RecordingFormatError: If offsets are out of order or out of range
        """
        if self.version != FORMAT_VERSION:
            raise UnsupportedVersionError(self.version)

        starts = self.section_starts()
        if starts[0] < 1 + SEPARATOR_LINES:
            raise RecordingFormatError(f"Invalid recording header: cmd offset {starts[0]}")

        for begin, end in zip(starts, starts[1:]):
            if end < begin + SEPARATOR_LINES:
                raise RecordingFormatError(
                    f"Invalid recording header: offsets {begin} and {end} overlap"
                )

        if self.timing > line_count:
            raise RecordingFormatError(
                f"Truncated recording: timing section at line {self.timing}, "
                f"file has {line_count} lines"
            )


def encode(interaction: Interaction, out: TextIO) -> None:
    """
    Write interaction to out in recording format.

    Args:
        interaction: Interaction to write
        out: Text stream; open files with FILE_OPTIONS

    Raises:
        OSError: If writing to out fails
    """
    sections = [
        interaction.command_line,
        interaction.stdin,
        interaction.stdout,
        interaction.stderr,
        interaction.error or "",
    ]
    header = RecordingHeader.for_sections(sections)

    out.write(header.to_json())
    out.write(SEPARATOR)
    for text in sections:
        out.write(text)
        out.write(SEPARATOR)
    out.write(TIMING_PLACEHOLDER)


def dumps(interaction: Interaction) -> str:
    """Return interaction in recording format."""
    buf = io.StringIO(newline="")
    encode(interaction, buf)
    return buf.getvalue()


def decode(stream: TextIO) -> Interaction:
    """
    Read a recording from stream.

    Args:
        stream: Text stream; open files with FILE_OPTIONS so linebreaks are
            not translated

    Returns:
        The recorded interaction

    Raises:
        RecordingFormatError: If the recording is malformed
    """
    return loads(stream.read())


def loads(text: str) -> Interaction:
    """Decode a recording held in a string."""
    lines = text.split("\n")
    header = RecordingHeader.from_json(lines[0])
    header.validate(len(lines))

    starts = header.section_starts()
    cmd, stdin, stdout, stderr, err = [
        _section(lines, begin, end) for begin, end in zip(starts, starts[1:])
    ]

    command, *arguments = cmd.split(" ")
    return Interaction(
        command=command,
        arguments=arguments,
        stdin=stdin,
        stdout=stdout,
        stderr=stderr,
        error=err or None,
    )


def _section(lines: List[str], start: int, next_start: int) -> str:
    """
    Rejoin the lines of the section starting at line start.

    The section ends where the separator in front of next_start begins. A
    plain split loses whether the text ended with a linebreak; the last line
    gets one back only if the line following it is empty.
    """
    begin = start - 1
    end = next_start - SEPARATOR_LINES
    if end >= len(lines):
        raise RecordingFormatError(f"Truncated recording: no line {end + 1}")

    parts = []
    for i in range(begin, end):
        parts.append(lines[i])
        if i < end - 1 or lines[i + 1] == "":
            parts.append("\n")
    return "".join(parts)
