"""CLI interface for GOG Achievements."""

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt

from gog_achievements.exporter import (
    MissingCredentialsError,
    NoGamesError,
    export_achievements,
)
from gog_achievements.gog import GOGAPIError
from gog_achievements.models import Credentials
from gog_achievements.storage import AchievementStorage

# Load .env file - try current directory, then home directory
load_dotenv(Path.cwd() / ".env")
load_dotenv(Path.home() / ".gog_achievements" / ".env")

app = typer.Typer(
    name="gog-achievements",
    help="Export your GOG achievements to JSON files",
    no_args_is_help=True,
)
console = Console()

EXIT_MISSING_CREDENTIALS = 1
EXIT_CATALOG_FAILED = 2


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def export(
    user_id: str = typer.Option(
        None, "--user-id", "-u", envvar="GOG_USER_ID", help="Your GOG user ID"
    ),
    token: str = typer.Option(
        None, "--token", "-t", envvar="GOG_ACCESS_TOKEN", help="Your GOG OAuth access token"
    ),
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", envvar="GOG_EXPORT_DIR",
        help="Base directory; files are written to <dir>/Achievements/GOG/",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Export achievements for every game you own on GOG."""
    _setup_logging(verbose)

    if user_id is None:
        user_id = Prompt.ask("Please enter your GOG User ID", console=console)
    if token is None:
        token = Prompt.ask(
            "Please enter your GOG OAuth Access Token", console=console, password=True
        )

    credentials = Credentials(user_id=user_id, access_token=token)

    try:
        summary = export_achievements(credentials, output_dir)
    except MissingCredentialsError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(EXIT_MISSING_CREDENTIALS)
    except GOGAPIError as e:
        console.print(f"[bold red]Error fetching data from GOG API:[/bold red] {e}")
        console.print(
            "Please ensure your User ID and Access Token are correct and have not expired."
        )
        raise typer.Exit(EXIT_CATALOG_FAILED)
    except NoGamesError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(EXIT_CATALOG_FAILED)

    console.print(
        f"\n[bold green]Done![/bold green] {summary.games_found} games, "
        f"{len(summary.exported)} exported, {len(summary.skipped)} without achievements."
    )


@app.command()
def status(
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", envvar="GOG_EXPORT_DIR",
        help="Base directory used for the export",
    ),
):
    """Show the games that have been exported so far."""
    storage = AchievementStorage(output_dir)
    games = storage.list_games()

    if not games:
        console.print(
            f"[yellow]No exported games in {storage.achievements_dir}. "
            "Run 'gog-achievements export' first.[/yellow]"
        )
        return

    console.print(Panel("[bold]GOG Achievements Status[/bold]", style="blue"))
    console.print(f"Export directory: {storage.achievements_dir}")
    console.print(f"Games exported: {len(games)}")

    total = sum(len(g.achievements) for g in games)
    unlocked = sum(g.unlocked_count for g in games)
    console.print(f"Achievements unlocked: {unlocked}/{total}\n")

    for game in games:
        console.print(
            f"  {game.app_id}  {game.name} - {game.unlocked_count}/{len(game.achievements)}"
        )


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
