"""Remote and branch resolution for a working copy.

Decides which remote and branch describe a path on disk. The tracked
upstream of HEAD wins; when there is none the ``origin`` remote is used and
the branch falls back to whatever HEAD currently points to.

Resolution steps:
    1. ``git rev-parse --abbrev-ref --symbolic @{u}`` -> ``remote/branch``
       (failure means "no answer", not an error)
    2. Without an upstream, use ``origin`` and no branch
    3. Without a branch, ``git symbolic-ref --short -q HEAD``
       (failure leaves the branch unknown)
    4. ``git config --get remote.<name>.url``, rewriting SCP-style URLs

Example:
    >>> from detect_git_service.git.resolver import RemoteResolver
    >>> identity = RemoteResolver("/path/to/repo/src/main.py").resolve()
    >>> identity.remote_url
    'ssh://git@github.com:22/owner/repo.git'
    >>> identity.branch
    'main'

Thread Safety:
    RemoteResolver keeps no state between calls. Each git invocation runs
    in its own process.
"""

from pathlib import Path

from detect_git_service.exceptions import CommandExitedNonZeroError
from detect_git_service.git.command import GitCommand
from detect_git_service.git.models import RemoteIdentity
from detect_git_service.utils.logging_config import get_logger

log = get_logger(__name__)

DEFAULT_REMOTE = "origin"


def normalize_scp_url(url: str) -> str:
    """Rewrite SCP-style remote syntax into an explicit ssh:// URL.

    ``git@host:owner/repo.git`` is not an absolute URL, so the scheme and an
    explicit port are inserted: ``ssh://git@host:22/owner/repo.git``. Any
    other URL is returned unchanged.

    Args:
        url: Remote URL as stored in git config

    Returns:
        URL that a generic URL parser accepts
    """
    if not url.startswith("git@"):
        return url

    head, sep, tail = url.partition(":")
    if sep:
        url = f"{head}:22/{tail}"
    return f"ssh://{url}"


class RemoteResolver:
    """Resolves the remote URL and branch of a working copy.

    Attributes:
        location: Path given by the caller (file or directory)
        git: Command runner bound to the repository directory
    """

    def __init__(self, location: str | Path, command: str = "git") -> None:
        """Initialize resolver.

        Args:
            location: File or directory inside a working copy. Files are
                resolved to their containing directory. Existence is not
                checked here; git reports it.
            command: Name or path of the git executable
        """
        self.location = Path(location)
        self.git = GitCommand(self.directory, command=command)

    @property
    def directory(self) -> Path:
        if self.location.is_file():
            return self.location.parent
        return self.location

    def _try_git(self, *args: str) -> str | None:
        """Run an optional query; a non-zero exit means no answer."""
        try:
            return self.git.run(*args)
        except CommandExitedNonZeroError:
            return None

    def remote_url(self, name: str) -> str:
        """Get the URL of a remote.

        ``git remote get-url`` is avoided since older git releases lack it.

        Args:
            name: Remote name (e.g. 'origin')

        Returns:
            Remote URL with SCP-style syntax rewritten to ssh://

        Raises:
            CommandExecutionFailedError: If git could not be started.
            CommandExitedNonZeroError: If the remote is not configured.
        """
        url = self.git.run("config", "--get", f"remote.{name}.url")
        return normalize_scp_url(url)

    def tracking_branch(self) -> tuple[str, str | None] | None:
        """Get the remote and branch HEAD is tracking.

        Returns:
            ``(remote_name, branch)`` split on the first '/', where branch
            keeps any further slashes and is None when absent. None if HEAD
            tracks nothing (detached HEAD, no upstream configured).
        """
        output = self._try_git("rev-parse", "--abbrev-ref", "--symbolic", "@{u}")
        if not output:
            return None

        name, sep, branch = output.partition("/")
        if not name:
            return None
        return name, (branch if sep and branch else None)

    def current_branch(self) -> str | None:
        """Get the branch HEAD points to, None on detached HEAD."""
        return self._try_git("symbolic-ref", "--short", "-q", "HEAD") or None

    def _lookup_remote_url(self, name: str) -> tuple[str, str]:
        try:
            return self.remote_url(name), name
        except CommandExitedNonZeroError:
            if name == DEFAULT_REMOTE:
                raise
            log.debug("remote_lookup_retrying_origin", remote=name)

        return self.remote_url(DEFAULT_REMOTE), DEFAULT_REMOTE

    def resolve(self) -> RemoteIdentity:
        """Resolve the remote URL and branch.

        Returns:
            RemoteIdentity for the working copy

        Raises:
            CommandExecutionFailedError: If git could not be started.
            CommandExitedNonZeroError: If no usable remote URL is configured.
        """
        tracking = self.tracking_branch()
        if tracking is None:
            log.debug("tracking_branch_unavailable", directory=str(self.directory))
            remote_name, branch = DEFAULT_REMOTE, None
        else:
            remote_name, branch = tracking

        if branch is None:
            branch = self.current_branch()

        remote_url, remote_name = self._lookup_remote_url(remote_name)
        return RemoteIdentity(remote_url=remote_url, branch=branch, remote_name=remote_name)
