"""arctl CLI entrypoint."""

from __future__ import annotations

import logging

import click
from pydantic import ValidationError

from arctl import __version__
from arctl.config import Settings
from arctl.utils.telemetry import configure_telemetry


@click.group()
@click.version_option(version=__version__, prog_name="arctl")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--trace", is_flag=True, help="Print tracing spans to stdout (needs arctl[otel]).")
@click.pass_context
def main(ctx: click.Context, verbose: bool, trace: bool) -> None:
    """arctl: build and run agents as container images."""
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        raise click.ClickException(
            f"Invalid configuration in ARCTL_* environment variables:\n{exc}"
        ) from exc

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if trace or settings.otlp_endpoint:
        try:
            configure_telemetry(export_to_console=trace, otlp_endpoint=settings.otlp_endpoint)
        except ImportError as exc:
            raise click.ClickException(str(exc)) from exc

    ctx.obj = settings


# Register subcommands
from arctl.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
