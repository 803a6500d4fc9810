"""Shared CLI output formatters.

Values taken from manifests or paths are escaped before they reach rich
markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from arctl.agent.preflight import PreflightReport  # noqa: TC001

console = Console()


def print_error(exc: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)


def print_preflight(report: PreflightReport, *, as_json: bool = False) -> None:
    """Pretty-print the outcome of a successful preflight."""
    if as_json:
        console.print_json(report.model_dump_json())
        return

    console.print(
        f"[green]Preconditions satisfied for agent {escape(report.agent_name)}.[/green]",
        soft_wrap=True,
    )
    console.print(f"  Project: {escape(report.project_dir)}", soft_wrap=True)
    console.print(f"  Model provider: {escape(report.model_provider or '(none)')}")
    console.print(f"  Image: {escape(report.agent_image)}", highlight=False, soft_wrap=True)
    if report.needs_registry_resolution:
        names = ", ".join(report.registry_servers)
        console.print(f"  Registry MCP servers to resolve: {escape(names)}", soft_wrap=True)
    else:
        console.print("  Registry MCP servers to resolve: -")


def print_images_table(report: PreflightReport) -> None:
    """Pretty-print the agent image and its MCP sidecar images."""
    table = Table(title=f"Images for {escape(report.agent_name)}")
    table.add_column("Component", style="cyan")
    table.add_column("Image")

    table.add_row("agent", escape(report.agent_image))
    for server_name, image in report.server_images.items():
        table.add_row(f"mcp:{escape(server_name)}", escape(image))

    console.print(table)
