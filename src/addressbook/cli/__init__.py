"""Main CLI application module."""

import typer
from rich.console import Console
from rich.panel import Panel

from src.addressbook.runtime.config.config_template import load_config
from src.addressbook.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    help="Address Book API command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the API server."""
    import uvicorn

    config = load_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Address Book API[/bold green] on {bind_host}:{bind_port}",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.addressbook.api.http.app:build_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


@app.command(name="init-db")
def init_db_command() -> None:
    """Create every database table."""
    config = load_config()
    init_db(config)
    console.print(f"[green]Tables created[/green] in {config.database.url}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
