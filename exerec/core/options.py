"""
Execution options for a process run.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class Options:
    """
    Options passed to a runner alongside the command.

    Fields left as None inherit from the calling process.

    Example:
        Options(cwd="/tmp")
        Options(env={"SONG": "HappyHappyJoyJoy"})
    """
    cwd: Optional[str] = None
    env: Optional[Dict[str, str]] = None  # replaces the environment entirely
