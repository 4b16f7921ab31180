"""Run two commands joined by a pipe, reading one file and writing another."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Union

from pipex.strings import split, trim

EXIT_FAILURE = 1
EXIT_EMPTY_COMMAND = 255
_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o777

USAGE = 'Wrong input!\nTry : "./exec infile cmd1 cmd2 outfile".\n'


class PipexError(Exception):
    """A failure of one side of the pipeline, with the status it ends in."""

    def __init__(self, message: str, status: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    @classmethod
    def from_os_error(cls, message: str, error: OSError) -> "PipexError":
        """Build an error worded like ``perror``: message, colon, reason."""
        reason = os.strerror(error.errno) if error.errno else str(error)
        return cls(f"{message}: {reason}")

    def __str__(self) -> str:
        return self.message


def is_blank_command(command: str) -> bool:
    """True when the command holds nothing but spaces."""
    return not trim(command, " ")


def parse_command(command: str) -> list[str]:
    """Split a command on spaces into its program name and arguments."""
    words = split(command, " ")
    if not words:
        raise PipexError("Empty commands.", EXIT_EMPTY_COMMAND)
    return words


def find_executable(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Locate ``name``: as given if it exists, else in the PATH of ``env``.

    Returns None when it is found nowhere.
    """
    if os.path.exists(name):
        return name
    environment = os.environ if env is None else env
    search_path = environment.get("PATH")
    if search_path is None:
        return None
    for directory in split(search_path, ":"):
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    return None


def _report(error: PipexError) -> None:
    sys.stderr.write(f"{error}\n")
    sys.stderr.flush()


def _open(path: str, flags: int, mode: int = 0o777) -> int:
    try:
        return os.open(path, flags, mode)
    except OSError as error:
        raise PipexError.from_os_error("OPEN FAILED", error) from error


def _spawn(
    command: str, stdin_fd: int, stdout_fd: int, env: Optional[Mapping[str, str]]
) -> subprocess.Popen:
    args = parse_command(command)
    path = find_executable(args[0], env)
    if path is None:
        raise PipexError(f"INVALID PATH: {os.strerror(2)}")
    if not os.path.dirname(path):
        path = os.path.join(os.curdir, path)
    try:
        return subprocess.Popen(
            args,
            executable=path,
            stdin=stdin_fd,
            stdout=stdout_fd,
            env=None if env is None else dict(env),
        )
    except OSError as error:
        raise PipexError.from_os_error("EXECVE FAILED", error) from error


def _require_command(command: str) -> None:
    if is_blank_command(command):
        raise PipexError("Empty commands.", EXIT_EMPTY_COMMAND)


def _launch_first(
    infile: str, command: str, write_fd: int, env: Optional[Mapping[str, str]]
) -> subprocess.Popen:
    _require_command(command)
    infile_fd = _open(infile, os.O_RDONLY)
    try:
        return _spawn(command, infile_fd, write_fd, env)
    finally:
        os.close(infile_fd)


def _launch_second(
    outfile: str, command: str, read_fd: int, env: Optional[Mapping[str, str]]
) -> subprocess.Popen:
    _require_command(command)
    outfile_fd = _open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    try:
        return _spawn(command, read_fd, outfile_fd, env)
    finally:
        os.close(outfile_fd)


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> tuple[int, int]:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return both exit statuses.

    Each side fails on its own: its error is written to standard error and
    its status stands in for the command's, while the other side still runs.
    """
    read_fd, write_fd = os.pipe()
    outcomes: list[Union[subprocess.Popen, int]] = []
    try:
        launches = (
            lambda: _launch_first(infile, cmd1, write_fd, env),
            lambda: _launch_second(outfile, cmd2, read_fd, env),
        )
        for launch in launches:
            try:
                outcomes.append(launch())
            except PipexError as error:
                _report(error)
                outcomes.append(error.status)
    finally:
        os.close(read_fd)
        os.close(write_fd)
    first, second = (
        outcome.wait() if isinstance(outcome, subprocess.Popen) else outcome
        for outcome in outcomes
    )
    return first, second


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(USAGE)
        return EXIT_EMPTY_COMMAND
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0


if __name__ == "__main__":
    sys.exit(main())