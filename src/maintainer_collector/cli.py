"""maintainer-collector CLI - Main entry point.

Usage:
    maintainer-collector collect
    maintainer-collector collect --output build/MAINTAINERS --project cli --project moby/moby
    maintainer-collector projects
"""

from pathlib import Path
from typing import List, Optional

import typer

from maintainer_collector.aggregator import collect_maintainers, get_project_org
from maintainer_collector.config import VALID_LOG_LEVELS, get_settings
from maintainer_collector.errors import OutputWriteError, SerializationError
from maintainer_collector.fetcher import MaintainersFetcher
from maintainer_collector.logging_config import configure_logging, get_logger
from maintainer_collector.sections import HEADER, ROLES, RULES
from maintainer_collector.serializer import assemble, serialize, write_output

logger = get_logger(__name__)

app = typer.Typer(
    name="maintainer-collector",
    help="Combine per-project MAINTAINERS files into a single MAINTAINERS file.",
    add_completion=False,
)


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if value.upper() not in VALID_LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")
    return value.upper()


@app.command()
def collect(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output path (default: settings output_path)"
    ),
    project: Optional[List[str]] = typer.Option(
        None,
        "--project",
        "-p",
        help="Project identifier, 'name' or 'org/name' (repeatable; replaces the configured list)",
    ),
    default_org: Optional[str] = typer.Option(
        None, "--default-org", help="Organization for identifiers without an org prefix"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", callback=_validate_log_level, help="Log level override"
    ),
):
    """Fetch every project's MAINTAINERS file and write the combined file.

    Examples:

        maintainer-collector collect

        maintainer-collector collect -p cli -p moby/moby -o MAINTAINERS
    """
    settings = get_settings()
    configure_logging(level=log_level)

    projects = project or settings.projects
    org = default_org or settings.default_org
    path = output or Path(settings.output_path)

    with MaintainersFetcher(
        base_url=settings.raw_base_url,
        branch=settings.branch,
        filename=settings.filename,
    ) as fetcher:
        combined = collect_maintainers(projects, fetcher, org)

    try:
        body = serialize(combined)
        write_output(path, assemble(HEADER, RULES, ROLES, body), settings.output_mode)
    except (SerializationError, OutputWriteError) as e:
        logger.error("combined_maintainers_failed", error=str(e))
        raise typer.Exit(1)

    logger.info(
        "combined_maintainers_written",
        path=str(path),
        groups=len(combined.org),
        people=len(combined.people),
    )


@app.command(name="projects")
def list_projects(
    default_org: Optional[str] = typer.Option(
        None, "--default-org", help="Organization for identifiers without an org prefix"
    ),
):
    """List configured projects with their resolved MAINTAINERS URLs."""
    settings = get_settings()
    org_default = default_org or settings.default_org
    fetcher = MaintainersFetcher(
        base_url=settings.raw_base_url,
        branch=settings.branch,
        filename=settings.filename,
    )

    typer.echo(f"Configured projects: {len(settings.projects)}\n")
    for identifier in settings.projects:
        org, name = get_project_org(identifier, org_default)
        typer.echo(f"  {org + '/' + name:45} {fetcher.build_url(org, name)}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
