"""Git service detection from paths on disk.

Composes resolution and classification: the remote and branch of the
working copy containing a path are resolved with git, then the remote URL
is classified into a hosting service.

Key Exports:
    detect: Detect the service using the configured git executable.
    detect_with_command: Detect the service with an explicit git executable.
    detect_or_none: Best-effort variant returning None on detection errors.

Example:
    >>> from detect_git_service.git.discovery import detect
    >>> service = detect(".")
    >>> print(f"{service.kind}: {service.full_name} @ {service.branch}")
    github: owner/repo @ main

Thread Safety:
    No state is shared between calls. Concurrent detection for different
    repositories is safe.
"""

from pathlib import Path

from detect_git_service.config.settings import load_settings
from detect_git_service.exceptions import DetectGitServiceError
from detect_git_service.git.classifier import classify
from detect_git_service.git.models import GitService
from detect_git_service.git.resolver import RemoteResolver
from detect_git_service.utils.logging_config import get_logger

log = get_logger(__name__)


def detect_with_command(path: str | Path, command: str) -> GitService:
    """Detect the hosting service of the working copy containing a path.

    Args:
        path: File or directory inside a working copy
        command: Name or path of the git executable

    Returns:
        GitService for the tracked (or origin) remote

    Raises:
        CommandExecutionFailedError: If git could not be started.
        CommandExitedNonZeroError: If no remote URL could be read.
        BrokenUrlError: If the remote URL is malformed.
        CannotDetectError: If the remote is not a supported hosting service.
    """
    identity = RemoteResolver(path, command=command).resolve()
    log.debug(
        "remote_resolved",
        remote=identity.remote_name,
        url=identity.remote_url,
        branch=identity.branch,
    )
    return classify(identity.remote_url, identity.branch)


def detect(path: str | Path = ".") -> GitService:
    """Detect the hosting service using the configured git executable.

    The executable defaults to ``git`` and can be overridden with the
    ``DETECT_GIT_SERVICE_GIT_COMMAND`` environment variable.

    Example:
        >>> service = detect("/path/to/repo/README.md")
        >>> service.user, service.repo
        ('owner', 'repo')
    """
    return detect_with_command(path, load_settings().git_command)


def detect_or_none(path: str | Path = ".") -> GitService | None:
    """Quick helper returning None when detection fails.

    Only detection errors are absorbed; anything else propagates.

    Args:
        path: File or directory inside a working copy

    Returns:
        GitService or None if the service could not be detected.
    """
    try:
        return detect(path)
    except DetectGitServiceError as e:
        log.debug("detection_failed", path=str(path), error=e.message)
        return None
