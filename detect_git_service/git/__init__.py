"""Git remote resolution and hosting service classification.

The main entry point is ``detect``, which resolves the tracked remote of a
working copy and classifies its URL.

Example:
    >>> from detect_git_service.git import detect
    >>> service = detect()
    >>> print(f"{service.kind} {service.full_name}")
    github owner/repo

Error Handling:
    All exceptions inherit from DetectGitServiceError.

    >>> from detect_git_service.git import classify
    >>> from detect_git_service.exceptions import CannotDetectError
    >>> try:
    ...     classify("https://example.com/owner/repo")
    ... except CannotDetectError as e:
    ...     print(e)
    Cannot detect service: No service detected from URL https://example.com/owner/repo
"""

from detect_git_service.git.classifier import ParsedUrl, ServiceClassifier, classify, parse_remote_url
from detect_git_service.git.command import GitCommand
from detect_git_service.git.discovery import detect, detect_or_none, detect_with_command
from detect_git_service.git.models import GitService, RemoteIdentity
from detect_git_service.git.resolver import RemoteResolver, normalize_scp_url

__all__ = [
    # Main API
    "detect",
    "detect_with_command",
    "detect_or_none",
    # Resolution
    "GitCommand",
    "RemoteResolver",
    "normalize_scp_url",
    # Classification
    "ServiceClassifier",
    "classify",
    "parse_remote_url",
    "ParsedUrl",
    # Models
    "GitService",
    "RemoteIdentity",
]
