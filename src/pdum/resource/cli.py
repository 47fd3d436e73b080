"""CLI entry point for pdum_resource."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pdum.resource.client import Resource
from pdum.resource.config import ClientConfig, default_config_path
from pdum.resource.types import HttpError, OperationError, OperationTimeoutError, Project

app = typer.Typer(
    help="Manage Google Cloud projects through the Cloud Resource Manager API",
    no_args_is_help=True,
)
console = Console()


def _build_resource(config_file: Optional[Path], endpoint: Optional[str]) -> Resource:
    """Create the client from a YAML config (explicit or default path) and the environment."""
    if config_file is None and default_config_path().exists():
        config_file = default_config_path()

    if config_file is not None:
        config = ClientConfig.from_yaml(config_file, api_endpoint=endpoint)
    else:
        config = ClientConfig.from_env(api_endpoint=endpoint)
    return Resource(config)


def _resource(ctx: typer.Context) -> Resource:
    return ctx.obj["resource"]


def _print_json(data) -> None:
    console.print_json(json.dumps(data))


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML client config (defaults to ~/.config/gcloud/pdum_resource/config.yaml when present)",
    ),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="API endpoint hostname"),
):
    """Build the shared client before running a command."""
    ctx.obj = {"resource": _build_resource(config_file, endpoint)}


@app.command("version")
def version():
    """Show the version of pdum_resource."""
    from pdum.resource import __version__

    console.print(f"pdum_resource version: [bold green]{__version__}[/bold green]")


@app.command("projects")
def projects(
    ctx: typer.Context,
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Server-side filter, e.g. 'labels.env:prod'"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Projects per API call"),
    max_results: Optional[int] = typer.Option(None, "--max-results", "-n", help="Stop after this many projects"),
):
    """List projects visible to the current credentials."""
    options = {"filter": filter, "pageSize": page_size, "maxResults": max_results}
    options = {k: v for k, v in options.items() if v is not None}
    found, _, _ = _resource(ctx).get_projects(options)

    table = Table(title="Projects")
    table.add_column("Project ID", style="cyan")
    table.add_column("Name")
    table.add_column("Number")
    table.add_column("State")
    for project in found:
        table.add_row(
            project.id,
            project.metadata.get("name", ""),
            str(project.metadata.get("projectNumber", "")),
            project.metadata.get("lifecycleState", ""),
        )
    console.print(table)


@app.command("create")
def create(
    ctx: typer.Context,
    project_id: Optional[str] = typer.Argument(None, help="New project id (suggested when omitted)"),
    name: Optional[str] = typer.Option(None, "--name", help="Display name"),
    folder: Optional[str] = typer.Option(None, "--folder", help="Parent folder id"),
    organization: Optional[str] = typer.Option(None, "--organization", help="Parent organization id"),
    wait: bool = typer.Option(True, "--wait/--no-wait", help="Block until the create operation finishes"),
    timeout: float = typer.Option(600.0, "--timeout", help="Seconds to wait for the operation"),
):
    """Create a project."""
    if folder and organization:
        console.print("[bold red]Error:[/bold red] --folder and --organization are mutually exclusive")
        raise typer.Exit(2)

    project_id = project_id or Project.suggest_id()
    options: dict = {}
    if name:
        options["name"] = name
    if folder:
        options["parent"] = {"type": "folder", "id": folder}
    elif organization:
        options["parent"] = {"type": "organization", "id": organization}

    project, operation, _ = _resource(ctx).create_project(project_id, options)
    console.print(f"[cyan]Creating project:[/cyan] {project.id} ([dim]{operation.name}[/dim])")

    if wait:
        try:
            with console.status("Waiting for the create operation..."):
                operation.wait(timeout=timeout)
        except KeyboardInterrupt:
            console.print(f"\n[yellow]Stopped waiting.[/yellow] Operation {operation.name} is still running.")
            raise typer.Exit(130) from None
        console.print(f"[green]Created project:[/green] {project.id}")


@app.command("delete")
def delete(ctx: typer.Context, project_id: str = typer.Argument(..., help="Project id")):
    """Request deletion of a project."""
    _resource(ctx).project(project_id).delete()
    console.print(f"[yellow]Deletion requested:[/yellow] {project_id}")


@app.command("restore")
def restore(ctx: typer.Context, project_id: str = typer.Argument(..., help="Project id")):
    """Undelete a project that is pending deletion."""
    _resource(ctx).project(project_id).restore()
    console.print(f"[green]Restored:[/green] {project_id}")


@app.command("ancestry")
def ancestry(ctx: typer.Context, project_id: str = typer.Argument(..., help="Project id")):
    """Show the folder/organization chain above a project."""
    result = _resource(ctx).project(project_id).get_ancestry()
    chain = [f"{a['resourceId']['type']}/{a['resourceId']['id']}" for a in result.get("ancestor", [])]
    console.print(" → ".join(chain))


@app.command("iam-policy")
def iam_policy(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project id"),
    policy_version: Optional[int] = typer.Option(None, "--policy-version", help="requestedPolicyVersion (1 or 3)"),
):
    """Print a project's IAM policy as JSON."""
    options = {"requestedPolicyVersion": policy_version} if policy_version else None
    _print_json(_resource(ctx).project(project_id).get_iam_policy(options))


@app.command("org-policy")
def org_policy(
    ctx: typer.Context,
    project_id: str = typer.Argument(..., help="Project id"),
    constraint: str = typer.Argument(..., help="Constraint name, e.g. constraints/compute.disableSerialPortAccess"),
    effective: bool = typer.Option(False, "--effective", help="Evaluate the hierarchy instead of the project's own policy"),
):
    """Print an org policy as JSON."""
    project = _resource(ctx).project(project_id)
    if effective:
        _print_json(project.get_effective_org_policy(constraint))
    else:
        _print_json(project.get_org_policy(constraint))


@app.command("constraints")
def constraints(ctx: typer.Context, project_id: str = typer.Argument(..., help="Project id")):
    """List org policy constraints available to a project."""
    table = Table(title=f"Constraints for {project_id}")
    table.add_column("Name", style="cyan")
    table.add_column("Display name")
    table.add_column("Default")
    for constraint in _resource(ctx).project(project_id).iter_available_org_policy_constraints():
        table.add_row(
            constraint.get("name", ""),
            constraint.get("displayName", ""),
            constraint.get("constraintDefault", ""),
        )
    console.print(table)


def main():
    """Main entry point for the CLI."""
    try:
        app()
    except HttpError as e:
        console.print(f"[bold red]API error:[/bold red] {e}")
        sys.exit(1)
    except (OperationError, OperationTimeoutError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
