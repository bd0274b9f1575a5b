"""Detect the git hosting service a working copy belongs to.

The service is detected from the URL of the remote the current branch tracks
(or ``origin``), and reported as GitHub, GitHub Enterprise, GitLab or
Bitbucket together with the owner, repository and branch.

Example:
    >>> import detect_git_service
    >>> service = detect_git_service.detect(".")
    >>> service.user, service.repo, service.branch
    ('owner', 'repo', 'main')
"""

import logging

from detect_git_service.enums import ServiceKind
from detect_git_service.exceptions import (
    BrokenUrlError,
    CannotDetectError,
    CommandExecutionFailedError,
    CommandExitedNonZeroError,
    ConfigurationError,
    DetectGitServiceError,
)
from detect_git_service.git import (
    GitService,
    RemoteIdentity,
    classify,
    detect,
    detect_or_none,
    detect_with_command,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "detect",
    "detect_with_command",
    "detect_or_none",
    "classify",
    "GitService",
    "RemoteIdentity",
    "ServiceKind",
    "DetectGitServiceError",
    "CommandExecutionFailedError",
    "CommandExitedNonZeroError",
    "BrokenUrlError",
    "CannotDetectError",
    "ConfigurationError",
]
