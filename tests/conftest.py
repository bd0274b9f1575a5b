"""Pytest configuration and shared fixtures."""

import logging
import shutil
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("detect_git_service")
    package_logger.handlers = [logging.NullHandler()]
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


class FakeGit:
    """Stand-in for ``subprocess.run`` answering git invocations by arguments.

    Invocations are matched on the arguments after ``git -C <dir>``. Anything
    not registered exits with status 1 and no output, like a missing config key.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], tuple[int, str, str]] = {}
        self.calls: list[list[str]] = []

    def on(self, *args: str, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.responses[args] = (returncode, stdout, stderr)

    def fail(self, *args: str, stderr: str = "", returncode: int = 1) -> None:
        self.on(*args, stderr=stderr, returncode=returncode)

    @property
    def git_args(self) -> list[tuple[str, ...]]:
        """Arguments of each call, without the executable and ``-C <dir>``."""
        return [tuple(call[3:]) for call in self.calls]

    def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        self.calls.append(list(cmd))
        returncode, stdout, stderr = self.responses.get(tuple(cmd[3:]), (1, "", ""))
        return subprocess.CompletedProcess(cmd, returncode, stdout.encode(), stderr.encode())


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    """Patch subprocess.run used by GitCommand with a FakeGit."""
    fake = FakeGit()
    monkeypatch.setattr("detect_git_service.git.command.subprocess.run", fake)
    return fake


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)
    return result.stdout.strip()


@pytest.fixture
def git() -> Callable[..., str]:
    """Run a real git command in a directory."""
    return _git


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Temporary git repository on branch 'main' with one commit and no remotes."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()

    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# Test Repository\n")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "Initial commit")

    return repo
