"""Git command execution.

Thin wrapper around ``subprocess.run`` used to read configuration and branch
metadata from a working copy. Every call spawns its own process, so a single
GitCommand may be shared across threads.

Example:
    >>> from detect_git_service.git.command import GitCommand
    >>> git = GitCommand("/path/to/repo")
    >>> git.run("config", "--get", "remote.origin.url")
    'git@github.com:owner/repo.git'
"""

import subprocess
from pathlib import Path

from detect_git_service.exceptions import (
    CommandExecutionFailedError,
    CommandExitedNonZeroError,
)
from detect_git_service.utils.logging_config import get_logger

log = get_logger(__name__)


class GitCommand:
    """Runs git subcommands against a single directory.

    Attributes:
        directory: Working directory passed both as cwd and via ``-C``
        command: Name or path of the git executable
    """

    def __init__(self, directory: str | Path, command: str = "git") -> None:
        self.directory = Path(directory)
        self.command = command

    def run(self, *args: str) -> str:
        """Run ``git -C <directory> <args...>`` and return trimmed stdout.

        Args:
            *args: Git subcommand and its arguments

        Returns:
            Standard output with surrounding whitespace removed

        Raises:
            CommandExecutionFailedError: If the process could not be started
                (executable missing, directory does not exist, ...).
            CommandExitedNonZeroError: If git exited with a non-zero status.
        """
        log.debug("git_command_started", command=self.command, args=list(args), cwd=str(self.directory))

        try:
            result = subprocess.run(
                [self.command, "-C", str(self.directory), *args],
                cwd=self.directory,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise CommandExecutionFailedError(self.command, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            log.debug(
                "git_command_failed",
                command=self.command,
                args=list(args),
                returncode=result.returncode,
                stderr=stderr,
            )
            raise CommandExitedNonZeroError(stderr, args, command=self.command)

        return result.stdout.decode("utf-8", errors="replace").strip()
