"""Remote URL classification.

Turns a remote URL and an optional branch into a GitService. URLs are parsed
with pydantic's ``AnyUrl`` (WHATWG URL parsing from pydantic-core), so the
URL must be absolute; SCP-style remotes are rewritten to ``ssh://`` by the
resolver before they get here.

Host rules, first match wins:
    github.com      -> GITHUB
    gitlab.com      -> GITLAB
    bitbucket.org   -> BITBUCKET
    github.*        -> GITHUB_ENTERPRISE
    gitlab.*        -> GITLAB

Example:
    >>> from detect_git_service.git.classifier import classify
    >>> service = classify("https://github.mycompany.com/team/tool.git", "main")
    >>> service.kind, service.full_name, service.branch
    (<ServiceKind.GITHUB_ENTERPRISE: 'github-enterprise'>, 'team/tool', 'main')

See Also:
    - detect_git_service.git.resolver: Where remote URLs come from
"""

import ipaddress
from dataclasses import dataclass
from typing import Literal

from pydantic import AnyUrl, TypeAdapter, ValidationError

from detect_git_service.enums import ServiceKind
from detect_git_service.exceptions import BrokenUrlError, CannotDetectError
from detect_git_service.git.models import GitService
from detect_git_service.utils.logging_config import get_logger

log = get_logger(__name__)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

HostKind = Literal["domain", "ipv4", "ipv6"]


@dataclass(frozen=True)
class ParsedUrl:
    """Components of an absolute URL.

    Attributes:
        scheme: URL scheme (e.g. 'https', 'ssh')
        host: Host as parsed, None when the URL has none
        host_kind: Whether the host is a domain name or an IP literal
        path: Path component, always starting with '/' when present
    """

    scheme: str
    host: str | None
    host_kind: HostKind | None
    path: str

    @property
    def segments(self) -> list[str]:
        """Non-empty path segments."""
        return [segment for segment in self.path.split("/") if segment]


def _host_kind(host: str) -> HostKind:
    try:
        address = ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return "domain"
    return "ipv4" if address.version == 4 else "ipv6"


def parse_remote_url(url: str) -> ParsedUrl:
    """Parse an absolute URL.

    Args:
        url: URL string to parse

    Returns:
        ParsedUrl with the host tagged as domain name or IP literal

    Raises:
        BrokenUrlError: If the string is not an absolute URL.
    """
    try:
        parsed = _URL_ADAPTER.validate_python(url)
    except ValidationError as e:
        errors = e.errors()
        reason = errors[0]["msg"] if errors else str(e)
        raise BrokenUrlError(url, reason) from e

    host = parsed.host or None
    return ParsedUrl(
        scheme=parsed.scheme,
        host=host,
        host_kind=_host_kind(host) if host else None,
        path=parsed.path or "",
    )


class ServiceClassifier:
    """Classifies remote URLs into hosting services.

    Exact host matches are checked before prefix matches, so SaaS hosts are
    told apart from self-hosted instances on vendor subdomains
    (``github.mycompany.com``).

    Attributes:
        EXACT_HOSTS: Hosts matched exactly, in priority order
        HOST_PREFIXES: Host prefixes matched after exact hosts, in priority order
    """

    EXACT_HOSTS: dict[str, ServiceKind] = {
        "github.com": ServiceKind.GITHUB,
        "gitlab.com": ServiceKind.GITLAB,
        "bitbucket.org": ServiceKind.BITBUCKET,
    }

    HOST_PREFIXES: list[tuple[str, ServiceKind]] = [
        ("github.", ServiceKind.GITHUB_ENTERPRISE),
        ("gitlab.", ServiceKind.GITLAB),
    ]

    def match_host(self, host: str) -> ServiceKind | None:
        """Find the service for a host name, None if no rule matches."""
        host = host.lower()
        if host in self.EXACT_HOSTS:
            return self.EXACT_HOSTS[host]

        for prefix, kind in self.HOST_PREFIXES:
            if host.startswith(prefix):
                return kind

        return None

    def classify(self, remote_url: str, branch: str | None = None) -> GitService:
        """Classify a remote URL.

        Args:
            remote_url: Absolute remote URL, optionally ending in '.git'
            branch: Branch to carry into the result unchanged

        Returns:
            GitService for the matched hosting service

        Raises:
            BrokenUrlError: If the URL cannot be parsed or has no host.
            CannotDetectError: If the host is an IP literal, the path has
                fewer than two segments, or no service matches the host.

        Example:
            >>> ServiceClassifier().classify("ssh://git@gitlab.com:22/group/project.git").full_name
            'group/project'
        """
        url = remote_url.removesuffix(".git")
        parsed = parse_remote_url(url)

        if parsed.host is None:
            raise BrokenUrlError(url, "No host in URL")

        if parsed.host_kind != "domain":
            raise CannotDetectError(f"Domain name must be contained in URL {url}")

        segments = parsed.segments
        if len(segments) < 2:
            raise CannotDetectError(f"Path does not represent user/repo: {url}")
        user, repo = segments[0], segments[1]

        kind = self.match_host(parsed.host)
        if kind is None:
            raise CannotDetectError(f"No service detected from URL {url}")

        service = GitService(kind=kind, user=user, repo=repo, branch=branch)

        log.debug("service_detected", kind=str(kind), user=service.user, repo=service.repo, branch=branch)
        return service


_default_classifier = ServiceClassifier()


def classify(remote_url: str, branch: str | None = None) -> GitService:
    """Classify a remote URL with the default host rules.

    See ServiceClassifier.classify for details.
    """
    return _default_classifier.classify(remote_url, branch)
