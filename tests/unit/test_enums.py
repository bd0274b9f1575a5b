"""Tests for service kind enumeration."""

import pytest

from detect_git_service.enums import ServiceKind


class TestServiceKind:
    """Tests for ServiceKind."""

    def test_str_is_value(self):
        """Should render as its value."""
        assert str(ServiceKind.GITHUB_ENTERPRISE) == "github-enterprise"

    def test_lookup_by_value(self):
        """Should be constructible from its value."""
        assert ServiceKind("bitbucket") is ServiceKind.BITBUCKET

    @pytest.mark.parametrize(
        ("kind", "name"),
        [
            (ServiceKind.GITHUB, "GitHub"),
            (ServiceKind.GITHUB_ENTERPRISE, "GitHub Enterprise"),
            (ServiceKind.GITLAB, "GitLab"),
            (ServiceKind.BITBUCKET, "Bitbucket"),
        ],
    )
    def test_display_name(self, kind, name):
        """Should have a human readable name."""
        assert kind.display_name == name
