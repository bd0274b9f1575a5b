"""CLI entry point for git service detection."""

import json
import sys

import click

from detect_git_service.config.settings import load_settings
from detect_git_service.exceptions import ConfigurationError, DetectGitServiceError
from detect_git_service.git.discovery import detect_with_command
from detect_git_service.utils.logging_config import configure_logging, get_logger

log = get_logger(__name__)


@click.command()
@click.argument("path", default=".", type=click.Path(file_okay=True, dir_okay=True))
@click.option("--git-command", default=None, help="Name or path of the git executable")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def cli(path: str, git_command: str | None, log_level: str | None, as_json: bool) -> None:
    """Detect the git hosting service of the repository containing PATH."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    configure_logging(log_level or settings.log_level)

    try:
        service = detect_with_command(path, git_command or settings.git_command)
    except DetectGitServiceError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("detect_error", exc_info=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(service.model_dump(mode="json")))
        return

    line = f"{service.kind} {service.full_name}"
    if service.branch:
        line += f" {service.branch}"
    click.echo(line)


if __name__ == "__main__":
    cli()
