"""``arctl agent``: check preconditions and resolve images for an agent project."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from arctl.cli_commands._output import console, print_error, print_images_table, print_preflight
from arctl.config import Settings
from arctl.errors import PreflightError

if TYPE_CHECKING:
    from arctl.agent.preflight import PreflightReport

_project_dir = click.argument("project_dir", default=".", type=click.Path(exists=False))
_image = click.option(
    "--image",
    default="",
    help="Full image reference to use for the agent, overriding the manifest.",
)
_registry = click.option(
    "--registry",
    default=None,
    help="Registry prefix for computed image names (default: $ARCTL_DOCKER_REGISTRY or localhost:5001).",
)
_as_json = click.option("--json", "as_json", is_flag=True, help="Output as JSON.")


def _preflight_or_exit(
    settings: Settings | None,
    project_dir: str,
    image: str,
    registry: str | None,
    *,
    check_credentials: bool = True,
) -> PreflightReport:
    from arctl.agent.preflight import run_preflight

    settings = (settings or Settings.from_env()).with_registry(registry)
    try:
        return run_preflight(
            Path(project_dir),
            settings=settings,
            flag_image=image,
            check_credentials=check_credentials,
        )
    except (PreflightError, OSError) as exc:
        print_error(exc)
        sys.exit(1)


@click.group()
def agent() -> None:
    """Work with agent projects."""


@agent.command("check")
@_project_dir
@_image
@_registry
@_as_json
@click.pass_obj
def check(
    settings: Settings | None,
    project_dir: str,
    image: str,
    registry: str | None,
    as_json: bool,
) -> None:
    """Validate that PROJECT_DIR is ready to build and run."""
    report = _preflight_or_exit(settings, project_dir, image, registry)
    print_preflight(report, as_json=as_json)


@agent.command("images")
@_project_dir
@_image
@_registry
@_as_json
@click.pass_obj
def images(
    settings: Settings | None,
    project_dir: str,
    image: str,
    registry: str | None,
    as_json: bool,
) -> None:
    """Show the image references PROJECT_DIR would be built as.

    Model provider credentials are not checked; use ``arctl agent check``
    for the full set of preconditions.
    """
    report = _preflight_or_exit(settings, project_dir, image, registry, check_credentials=False)
    if as_json:
        console.print_json(data={"agent": report.agent_image, "mcp_servers": report.server_images})
    else:
        print_images_table(report)
