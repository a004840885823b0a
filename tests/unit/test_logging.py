"""
Unit tests for exerec logging setup.
"""

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

from exerec.logging import get_logger

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestLibraryLogging:
    """Importing exerec leaves the application's logging alone."""

    def test_import_keeps_root_handlers_and_level(self):
        """Test in a fresh interpreter that importing exerec doesn't reconfigure root."""
        code = textwrap.dedent("""
            import logging

            root = logging.getLogger()
            handler = logging.StreamHandler()
            root.addHandler(handler)
            root.setLevel(logging.INFO)

            import exerec
            import exerec.cli.main

            print(handler in root.handlers, logging.getLevelName(root.level))
        """)
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env={**os.environ, "PYTHONPATH": os.pathsep.join(
                p for p in [str(PROJECT_ROOT), os.environ.get("PYTHONPATH")] if p
            )},
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "True INFO"

    def test_get_logger_adds_no_handlers(self):
        """Test that asking for a logger doesn't install handlers."""
        root = logging.getLogger()
        before = list(root.handlers)

        logger = get_logger("exerec.tests.sample")

        assert logger.name == "exerec.tests.sample"
        assert logger.handlers == []
        assert root.handlers == before
