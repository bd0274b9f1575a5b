"""Enumerations for git hosting service kinds."""

from enum import Enum


class ServiceKind(str, Enum):
    """Hosting services a remote URL can be classified as.

    Self-hosted GitLab instances are reported as GITLAB; self-hosted GitHub
    instances get their own GITHUB_ENTERPRISE tag.
    """

    GITHUB = "github"
    GITHUB_ENTERPRISE = "github-enterprise"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable service name."""
        if self == ServiceKind.GITHUB:
            return "GitHub"
        elif self == ServiceKind.GITHUB_ENTERPRISE:
            return "GitHub Enterprise"
        elif self == ServiceKind.GITLAB:
            return "GitLab"
        else:
            return "Bitbucket"
