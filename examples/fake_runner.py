"""
Record once, replay in tests - swap a live runner for a recorded one.

Code under test takes a Runner. Run this script once with RECORD=1 to
capture real output, then run it without to replay the recordings.

Run with:
    RECORD=1 python examples/fake_runner.py
    python examples/fake_runner.py
"""

import os

from exerec import PlaybackRunner, RecordRunner, Runner

RECORDINGS = os.path.join(os.path.dirname(__file__), "recordings")


def disk_usage(runner: Runner, path: str) -> str:
    """Code under test: report disk usage of path."""
    stdout, stderr, err = runner.run("du", ["-sh", path])
    if err is not None:
        raise err
    return stdout.split()[0]


if os.environ.get("RECORD"):
    runner = RecordRunner(RECORDINGS)
else:
    runner = PlaybackRunner(RECORDINGS)

print(f"/tmp uses {disk_usage(runner, '/tmp')}")
