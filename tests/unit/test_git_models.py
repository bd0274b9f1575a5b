"""Unit tests for git models."""

import pytest
from pydantic import ValidationError

from detect_git_service.enums import ServiceKind
from detect_git_service.git.models import GitService, RemoteIdentity


class TestRemoteIdentity:
    """Tests for RemoteIdentity."""

    def test_defaults_to_origin(self):
        """Test remote name defaults to origin."""
        identity = RemoteIdentity(remote_url="https://github.com/o/r", branch=None)

        assert identity.remote_name == "origin"
        assert identity.branch is None

    def test_frozen(self):
        """Test identity cannot be modified."""
        identity = RemoteIdentity(remote_url="https://github.com/o/r", branch="main")

        with pytest.raises(AttributeError):
            identity.branch = "other"  # type: ignore[misc]


class TestGitService:
    """Tests for GitService."""

    @pytest.mark.parametrize(
        ("factory", "kind"),
        [
            (GitService.github, ServiceKind.GITHUB),
            (GitService.github_enterprise, ServiceKind.GITHUB_ENTERPRISE),
            (GitService.gitlab, ServiceKind.GITLAB),
            (GitService.bitbucket, ServiceKind.BITBUCKET),
        ],
    )
    def test_variant_constructors(self, factory, kind):
        """Test every variant carries the same fields."""
        service = factory("myorg", "myrepo", "main")

        assert service.kind == kind
        assert service.user == "myorg"
        assert service.repo == "myrepo"
        assert service.branch == "main"
        assert service.full_name == "myorg/myrepo"

    def test_branch_is_optional(self):
        """Test branch defaults to None."""
        assert GitService.gitlab("group", "project").branch is None

    @pytest.mark.parametrize("field", ["user", "repo"])
    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_fields_rejected(self, field, value):
        """Test construction fails instead of producing empty fields."""
        values = {"kind": ServiceKind.GITHUB, "user": "myorg", "repo": "myrepo", field: value}

        with pytest.raises(ValidationError):
            GitService(**values)

    def test_repo_kept_as_given(self):
        """Test the model does not rewrite repo names."""
        assert GitService.github("myorg", "myrepo.git").repo == "myrepo.git"

    def test_equality(self):
        """Test values compare by kind and fields."""
        assert GitService.github("o", "r", "main") == GitService.github("o", "r", "main")
        assert GitService.github("o", "r") != GitService.github_enterprise("o", "r")
        assert GitService.github("o", "r", "main") != GitService.github("o", "r", "dev")

    def test_frozen(self):
        """Test services cannot be modified after construction."""
        service = GitService.github("o", "r")

        with pytest.raises(ValidationError):
            service.user = "other"

    def test_predicates(self):
        """Test provider predicates."""
        assert GitService.github("o", "r").is_github
        assert GitService.github_enterprise("o", "r").is_github
        assert not GitService.gitlab("o", "r").is_github
        assert GitService.gitlab("o", "r").is_gitlab
        assert GitService.bitbucket("o", "r").is_bitbucket
        assert not GitService.bitbucket("o", "r").is_gitlab

    def test_dump(self):
        """Test JSON serialization uses the kind value."""
        dumped = GitService.github_enterprise("o", "r", "main").model_dump(mode="json")

        assert dumped == {"kind": "github-enterprise", "user": "o", "repo": "r", "branch": "main"}
