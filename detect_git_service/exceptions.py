"""Exception hierarchy for git service detection.

Every detection failure is one of four terminal kinds. None of them are
retried; they propagate to the caller with messages that include the
offending URL or command arguments. ConfigurationError covers invalid
settings and is raised before any detection runs.

Exception Hierarchy:
    DetectGitServiceError (base)
    ├── CommandExecutionFailedError
    ├── CommandExitedNonZeroError
    ├── BrokenUrlError
    ├── CannotDetectError
    └── ConfigurationError

Example Usage:
    >>> from detect_git_service import detect, DetectGitServiceError
    >>> try:
    ...     service = detect("/path/to/repo")
    ... except DetectGitServiceError as e:
    ...     print(e.message)
"""

from collections.abc import Sequence


class DetectGitServiceError(Exception):
    """Base exception for all detection errors.

    Attributes:
        message: Human-readable error description
        hint: Optional hint for resolution
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional hint for resolution
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Format error message with hint.

        Returns:
            Formatted error message with optional hint
        """
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class CommandExecutionFailedError(DetectGitServiceError):
    """Raised when the git executable could not be started at all.

    Attributes:
        command: The executable that was invoked
        reason: OS-level failure description
    """

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(
            message=f"{reason}: cannot run command '{command}'",
            hint="Make sure git is installed or pass the path to the executable explicitly.",
        )
        self.command = command
        self.reason = reason


class CommandExitedNonZeroError(DetectGitServiceError):
    """Raised when a required git read exits unsuccessfully.

    Attributes:
        stderr: Trimmed stderr output of the command
        git_args: Arguments passed to git
        command: The executable that was invoked
    """

    def __init__(self, stderr: str, args: Sequence[str], command: str = "git") -> None:
        quoted = " ".join(f"'{arg}'" for arg in args)
        invocation = f"`{command} {quoted}`" if quoted else f"`{command}`"
        prefix = f"{stderr}: " if stderr else ""

        super().__init__(message=f"{prefix}{invocation} exited with non-zero status")
        self.stderr = stderr
        self.git_args = list(args)
        self.command = command


class BrokenUrlError(DetectGitServiceError):
    """Raised when a remote URL cannot be parsed or has no host.

    Attributes:
        url: The offending URL
        reason: Diagnostic message from the parser
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            message=f"Git URL {url} is broken: {reason}",
            hint=(
                "Expected formats:\n"
                "  - git@github.com:owner/repo.git\n"
                "  - ssh://git@github.com:22/owner/repo.git\n"
                "  - https://github.com/owner/repo.git"
            ),
        )
        self.url = url
        self.reason = reason


class CannotDetectError(DetectGitServiceError):
    """Raised when a valid URL does not identify a supported hosting service.

    Attributes:
        reason: Why detection failed, including the offending URL
    """

    def __init__(self, reason: str) -> None:
        super().__init__(message=f"Cannot detect service: {reason}")
        self.reason = reason


class ConfigurationError(DetectGitServiceError):
    """Configuration-related errors.

    Raised when settings read from the environment are invalid, e.g. an
    empty git command or an unknown log level.
    """

    pass
