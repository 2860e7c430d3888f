import logging

import typer
from rich.console import Console
from rich.table import Table

import config
from domain_resolver import DomainResolver

app = typer.Typer(no_args_is_help=True, help="Inspect per-domain environment and storage resolution.")

_console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    base_path: str = typer.Option(config.BASE_PATH, "--base-path", help="Application base path."),
    domain: str | None = typer.Option(None, "--domain", help="Domain to resolve (CLI detection)."),
) -> None:
    # Feed the option back as a CLI token so detection follows the console path.
    args = [f"{config.DOMAIN_ARGUMENT}={domain}"] if domain else []
    ctx.obj = DomainResolver(base_path, args=args)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the files and paths selected for the detected domain."""

    resolver: DomainResolver = ctx.obj

    table = Table(title="Domain resolution")
    table.add_column("Key", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white", overflow="fold")

    table.add_row("full_domain", resolver.full_domain())
    table.add_row("domain", resolver.domain())
    table.add_row("domain_scheme", resolver.domain_scheme())
    table.add_row("domain_port", resolver.domain_port())
    table.add_row("environment_file", resolver.environment_file())
    table.add_row("storage_path", resolver.storage_path())
    table.add_row("exact_storage_path", resolver.exact_domain_storage_path())
    table.add_row("cached_config_path", resolver.cached_config_path())
    table.add_row("cached_routes_path", resolver.cached_routes_path())

    _console.print(table)


@app.command("list")
def list_domains(ctx: typer.Context) -> None:
    """List configured domains with their storage path and environment file."""

    resolver: DomainResolver = ctx.obj
    domains = resolver.domains_list()
    if not domains:
        _console.print("[yellow]No domains configured.[/yellow]")
        return

    table = Table(title="Configured domains")
    table.add_column("Domain", style="bright_green", no_wrap=True)
    table.add_column("Storage path", style="white", overflow="fold")
    table.add_column("Env file", style="dim", overflow="fold")
    for name, resolved in domains.items():
        table.add_row(name, resolved["storage_path"], resolved["env"])

    _console.print(table)


def run() -> None:
    # Setup logging
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app()


if __name__ == '__main__':
    run()
