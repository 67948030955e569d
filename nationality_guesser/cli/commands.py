"""CLI commands for the nationality guesser."""

import asyncio

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from nationality_guesser import __logo__, __version__

app = typer.Typer(
    name="nationality-guesser",
    help=f"{__logo__} Nationality Guesser - voice skill backend",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} Nationality Guesser v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """Nationality Guesser - guess where a first name comes from."""
    pass


# ============================================================================
# Guess
# ============================================================================


@app.command()
def guess(
    name: str = typer.Argument(..., help="First name to guess a nationality for"),
    ssml: bool = typer.Option(False, "--ssml", help="Print the raw SSML instead of plain text"),
    logs: bool = typer.Option(False, "--logs/--no-logs", help="Show runtime logs"),
):
    """Run the guess pipeline for NAME and print what the skill would say."""
    from nationality_guesser.clients import CountryClient, PredictionClient, UpstreamError
    from nationality_guesser.settings import get_settings
    from nationality_guesser.skill.handlers import guess_nationality

    if logs:
        logger.enable("nationality_guesser")
    else:
        logger.disable("nationality_guesser")

    settings = get_settings()
    predictions = PredictionClient(settings.nationalize_url, settings.http_timeout)
    countries = CountryClient(settings.countries_url, settings.http_timeout)

    try:
        utterance = asyncio.run(
            guess_nationality(name, predictions, countries, pause_ms=settings.pause_ms)
        )
    except UpstreamError as e:
        console.print(f"[red]Upstream error:[/red] {e}")
        raise typer.Exit(1)

    console.print(utterance.to_ssml() if ssml else utterance.plain_text, markup=False)


# ============================================================================
# Config
# ============================================================================


@app.command()
def config():
    """Show the effective settings."""
    from nationality_guesser.settings import get_settings

    settings = get_settings()
    table = Table(title=f"{__logo__} {settings.app_name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


# ============================================================================
# Serve (FastAPI HTTP)
# ============================================================================


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind host (default: settings)"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port (default: settings)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
):
    """Start the skill webhook server (FastAPI + Uvicorn)."""
    import uvicorn

    from nationality_guesser.settings import get_settings

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    console.print(f"{__logo__} Starting Nationality Guesser on {host}:{port} ...")
    uvicorn.run(
        "nationality_guesser.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    app()
