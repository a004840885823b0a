"""
Unit tests for LocalRunner.

Runs real processes and checks what comes back.
"""

from exerec.core import Options, ProcessError
from exerec.transport.local import LocalRunner, describe_failure, exit_reason


class TestLocalRunner:
    """Unit tests for running local processes."""

    def test_echo_on_stdout(self):
        """Test a command that only writes to stdout."""
        stdout, stderr, err = LocalRunner().run("echo", ["-n", "hello world"])

        assert err is None
        assert stdout == "hello world"
        assert stderr == ""

    def test_error(self):
        """Test a command that fails and writes to stderr."""
        stdout, stderr, err = LocalRunner().run("ls", ["nonexisting"])

        assert isinstance(err, ProcessError)
        assert stdout == ""
        assert "nonexisting" in stderr
        assert str(err).startswith("ls [nonexisting]: exit status ")
        assert str(err).endswith(" - " + stderr)

    def test_read_stdin_and_write_stdout(self):
        """Test a command that reads piped stdin."""
        stdout, stderr, err = LocalRunner().run("base64", ["-d"], stdin="aGVsbG8gd29ybGQ=")

        assert err is None
        assert stdout == "hello world"

    def test_large_stdin_does_not_block(self):
        """Test that stdin larger than a pipe buffer is echoed back in full."""
        text = "0123456789abcdef\n" * 100000
        stdout, stderr, err = LocalRunner().run("cat", stdin=text)

        assert err is None
        assert stdout == text

    def test_specified_environment(self):
        """Test that env replaces the environment."""
        options = Options(env={"SONG": "HappyHappyJoyJoy"})
        stdout, stderr, err = LocalRunner().run("env", options=options)

        assert err is None
        assert stdout == "SONG=HappyHappyJoyJoy\n"

    def test_specified_dir(self, tmp_path):
        """Test that cwd sets the working directory."""
        stdout, stderr, err = LocalRunner().run("pwd", options=Options(cwd=str(tmp_path)))

        assert err is None
        assert stdout == f"{tmp_path.resolve()}\n"

    def test_spawn_failure(self):
        """Test a command that doesn't exist."""
        stdout, stderr, err = LocalRunner().run("exerec-no-such-command", ["x"])

        assert isinstance(err, ProcessError)
        assert stdout == ""
        assert stderr == ""
        assert str(err).startswith("exerec-no-such-command [x]: ")
        assert str(err).endswith(" - ")

    def test_killed_by_signal(self):
        """Test a command that is killed."""
        stdout, stderr, err = LocalRunner().run("sh", ["-c", "kill -9 $$"])

        assert isinstance(err, ProcessError)
        assert "signal: " in str(err)


class TestMessages:
    """Unit tests for ProcessError messages."""

    def test_exit_status(self):
        """Test a plain non-zero exit."""
        assert exit_reason(2) == "exit status 2"

    def test_signal(self):
        """Test a negative return code."""
        assert exit_reason(-9).startswith("signal: ")

    def test_describe_failure(self):
        """Test the command, arguments, reason and stderr layout."""
        msg = describe_failure("ls", ["-l", "x"], "exit status 2", "ls: x: nope\n")
        assert msg == "ls [-l x]: exit status 2 - ls: x: nope\n"
