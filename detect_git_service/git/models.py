"""Git service data models.

This module defines the intermediate remote identity produced by resolution
and the GitService value produced by classification.

GitService is a tagged variant: every hosting service carries the same
``user``, ``repo`` and ``branch`` fields and differs only in ``kind``.

Example:
    >>> from detect_git_service.git.models import GitService
    >>> service = GitService.github(user="myorg", repo="myrepo", branch="main")
    >>> service.full_name
    'myorg/myrepo'
    >>> service.kind
    <ServiceKind.GITHUB: 'github'>
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from detect_git_service.enums import ServiceKind


@dataclass(frozen=True)
class RemoteIdentity:
    """Remote URL and branch resolved from a working copy.

    Attributes:
        remote_url: URL of the remote, with SCP-style syntax rewritten to ssh://
        branch: Tracked or current branch name, None when unknown
        remote_name: Which remote the URL was read from
    """

    remote_url: str
    branch: str | None
    remote_name: str = "origin"


class GitService(BaseModel):
    """Hosting service identity of a repository.

    Attributes:
        kind: Which hosting service matched
        user: Owner or organization (first path segment of the remote URL)
        repo: Repository name (second path segment of the URL without its .git suffix)
        branch: Resolved branch name, None when it could not be determined

    Example:
        >>> service = GitService(kind=ServiceKind.GITLAB, user="group", repo="project")
        >>> service.branch is None
        True
        >>> service.is_gitlab
        True
    """

    model_config = ConfigDict(frozen=True)

    kind: ServiceKind
    user: str
    repo: str
    branch: str | None = None

    @field_validator("user", "repo")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure user and repo are not empty.

        Args:
            v: The value to validate

        Returns:
            Stripped value

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not v or not v.strip():
            raise ValueError("User and repo must not be empty")
        return v.strip()

    @classmethod
    def github(cls, user: str, repo: str, branch: str | None = None) -> "GitService":
        return cls(kind=ServiceKind.GITHUB, user=user, repo=repo, branch=branch)

    @classmethod
    def github_enterprise(cls, user: str, repo: str, branch: str | None = None) -> "GitService":
        return cls(kind=ServiceKind.GITHUB_ENTERPRISE, user=user, repo=repo, branch=branch)

    @classmethod
    def gitlab(cls, user: str, repo: str, branch: str | None = None) -> "GitService":
        return cls(kind=ServiceKind.GITLAB, user=user, repo=repo, branch=branch)

    @classmethod
    def bitbucket(cls, user: str, repo: str, branch: str | None = None) -> "GitService":
        return cls(kind=ServiceKind.BITBUCKET, user=user, repo=repo, branch=branch)

    @property
    def full_name(self) -> str:
        """Return user/repo format.

        Returns:
            Repository full name in user/repo format
        """
        return f"{self.user}/{self.repo}"

    @property
    def is_github(self) -> bool:
        """True for both github.com and GitHub Enterprise."""
        return self.kind in (ServiceKind.GITHUB, ServiceKind.GITHUB_ENTERPRISE)

    @property
    def is_gitlab(self) -> bool:
        return self.kind == ServiceKind.GITLAB

    @property
    def is_bitbucket(self) -> bool:
        return self.kind == ServiceKind.BITBUCKET
