"""
Runners for live, recorded and played back process execution.

Provides:
- Local command execution
- Recording of runs into a directory
- Playback of recorded runs
"""

from exerec.transport.base import Runner, RunResult
from exerec.transport.local import LocalRunner
from exerec.transport.playback import PlaybackRunner
from exerec.transport.recorder import RecordRunner

__all__ = ["Runner", "RunResult", "LocalRunner", "RecordRunner", "PlaybackRunner"]
