"""
exerec CLI - record process runs for use in tests and fakes.

Commands:
    exerec record -d <dir> -- <command> [<args>]   - Run a command and record it
    exerec play -d <dir> -- <command> [<args>]     - Replay a recorded run
    exerec show <recording>                        - Show a recording file
    exerec name -- <command> [<args>]              - Print the recording file name
    exerec version                                 - Show version
"""

import os
import sys
from typing import Optional, Tuple

import click

from exerec.core import Options
from exerec.logging import get_exe_logger, setup_logging
from exerec.record.codec import FILE_OPTIONS, RecordingHeader, loads
from exerec.record.errors import RecordingError
from exerec.record.naming import recording_name
from exerec.transport.local import ENCODING, ENCODING_ERRORS
from exerec.transport.playback import PlaybackRunner
from exerec.transport.recorder import RecordRunner

logger = get_exe_logger(__name__)

# Verbosity (-v count) to log level.
LOG_LEVELS = ["WARNING", "INFO", "DEBUG"]

# Let the recorded command keep its own options: everything after the
# command name belongs to it.
COMMAND_CONTEXT = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', count=True, help='Log verbosity, repeat for more output')
@click.option('--log-level', envvar='EXEREC_LOG_LEVEL',
              help='Log level name, overrides -v (env: EXEREC_LOG_LEVEL)')
@click.pass_context
def cli(ctx, verbose: int, log_level: Optional[str]):
    """exerec - record process output for use in unit tests and fakes."""
    if log_level is None:
        log_level = LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)]
    setup_logging(level=log_level, force=True)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def directory_option(f):
    return click.option(
        '--directory', '-d', required=True, envvar='EXEREC_DIR',
        type=click.Path(file_okay=False),
        help='Directory to store recordings (env: EXEREC_DIR)',
    )(f)


def input_option(f):
    return click.option(
        '--input', '-i', 'input_file', type=click.File('rb'),
        help="File fed to the command's stdin ('-' for this process's stdin)",
    )(f)


@cli.command(context_settings=COMMAND_CONTEXT)
@directory_option
@click.option('--cwd', '-C', type=click.Path(exists=True, file_okay=False),
              help='Working directory of the command')
@click.option('--clean-env', is_flag=True,
              help='Run the command with an empty environment')
@input_option
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
def record(directory: str, cwd: Optional[str], clean_env: bool, input_file,
           command: Tuple[str, ...]):
    """
    Run a command and record its stdout/stderr.

    Example:
        exerec record -d /tmp/test -- ls -a
    """
    stdin = _read_input(input_file)
    options = Options(cwd=cwd, env={} if clean_env else dict(os.environ))

    runner = RecordRunner(directory)
    try:
        stdout, stderr, err = runner.run(command[0], command[1:], stdin, options)
    except RecordingError as e:
        logger.failure(str(e))
        sys.exit(1)

    _forward(stdout, stderr)

    if err is not None:
        logger.failure(str(err))
        sys.exit(1)

    logger.success(f"recorded {runner.path_for(command[0], command[1:], stdin)}")


@cli.command(context_settings=COMMAND_CONTEXT)
@directory_option
@input_option
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
def play(directory: str, input_file, command: Tuple[str, ...]):
    """
    Replay the recorded stdout/stderr of a command without running it.

    Example:
        exerec play -d /tmp/test -- ls -a
    """
    stdin = _read_input(input_file)

    runner = PlaybackRunner(directory)
    try:
        stdout, stderr, err = runner.run(command[0], command[1:], stdin)
    except RecordingError as e:
        logger.failure(str(e))
        sys.exit(1)

    _forward(stdout, stderr)

    if err is not None:
        logger.failure(str(err))
        sys.exit(1)


@cli.command()
@click.argument('recording_file', type=click.Path(exists=True, dir_okay=False))
def show(recording_file: str):
    """
    Show the sections of a recording file.

    Example:
        exerec show tests/recordings/ls-a-4f2c8d1e
    """
    try:
        with open(recording_file, **FILE_OPTIONS) as f:
            text = f.read()
        header = RecordingHeader.from_json(text.split("\n")[0])
        interaction = loads(text)
    except (OSError, RecordingError) as e:
        logger.failure(f"Cannot read {recording_file}", str(e))
        sys.exit(1)

    click.secho(f"Recording {recording_file} (format version {header.version})", bold=True)
    _show_section("command", interaction.command_line, header.cmd)
    _show_section("stdin", interaction.stdin, header.stdin)
    _show_section("stdout", interaction.stdout, header.stdout)
    _show_section("stderr", interaction.stderr, header.stderr)
    _show_section("error", interaction.error or "", header.err)


@cli.command(context_settings=COMMAND_CONTEXT)
@input_option
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
def name(input_file, command: Tuple[str, ...]):
    """
    Print the file name a command's recording is stored under.

    Example:
        exerec name -- ls -a
    """
    stdin = _read_input(input_file)
    click.echo(recording_name(stdin, command[0], command[1:]))


@cli.command()
def version():
    """Show exerec version."""
    from exerec import __version__
    click.echo(f"exerec version {__version__}")


def _read_input(input_file) -> str:
    if input_file is None:
        return ""
    return input_file.read().decode(ENCODING, ENCODING_ERRORS)


def _forward(stdout: str, stderr: str) -> None:
    """Write a run's output to our own stdout/stderr, byte for byte."""
    if stdout:
        click.echo(stdout.encode(ENCODING, ENCODING_ERRORS), nl=False)
    if stderr:
        click.echo(stderr.encode(ENCODING, ENCODING_ERRORS), nl=False, err=True)


def _show_section(title: str, text: str, line: int) -> None:
    click.secho(f"--- {title} (line {line})", fg="cyan")
    if text:
        click.echo(text, nl=not text.endswith("\n"))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
