"""Export pipeline: owned games -> achievements -> one JSON file per game."""

import logging
from pathlib import Path

import httpx
from pydantic import BaseModel, Field

from gog_achievements.gog import GOGClient
from gog_achievements.mapper import map_game
from gog_achievements.models import Credentials, GameSummary
from gog_achievements.storage import AchievementStorage

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """A condition that aborts the whole export."""

    pass


class MissingCredentialsError(ExportError):
    """User ID or access token is empty."""

    pass


class NoGamesError(ExportError):
    """The owned games list resolved to no games."""

    pass


class ExportSummary(BaseModel):
    """Outcome of an export run."""

    games_found: int = 0
    exported: list[GameSummary] = Field(default_factory=list)
    skipped: list[GameSummary] = Field(default_factory=list)


class AchievementExporter:
    """Runs the export for one user, one game at a time."""

    def __init__(self, client: GOGClient, storage: AchievementStorage, user_id: str):
        self.client = client
        self.storage = storage
        self.user_id = user_id

    def run(self) -> ExportSummary:
        """Export achievements for every owned game that has any.

        Raises:
            GOGAPIError: If the owned games list can't be fetched.
            NoGamesError: If no owned game could be resolved.
        """
        games = self.client.get_owned_games()
        if not games:
            raise NoGamesError(
                "Could not retrieve any games. Please check your access token "
                "and that your profile is public."
            )

        logger.info("Found %d games. Fetching achievements...", len(games))
        summary = ExportSummary(games_found=len(games))

        for game in games:
            if self.export_game(game):
                summary.exported.append(game)
            else:
                summary.skipped.append(game)

        logger.info(
            "Processing complete: %d exported, %d skipped.",
            len(summary.exported),
            len(summary.skipped),
        )
        return summary

    def export_game(self, game: GameSummary) -> bool:
        """Fetch and save one game's achievements. Returns True if a file was written."""
        achievements = self.client.get_achievements(game.id, self.user_id)
        if not achievements:
            logger.info(
                "No achievements found for %s (%s) or game does not support them.",
                game.title,
                game.id,
            )
            return False

        file_path = self.storage.save_game(map_game(game, achievements))
        logger.info("Saved achievements for %s (%s) to %s", game.title, game.id, file_path)
        return True


def export_achievements(
    credentials: Credentials,
    output_dir: Path | str | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> ExportSummary:
    """Run a full export for the given credentials.

    Args:
        credentials: GOG user ID and access token.
        output_dir: Base directory; files go to `<output_dir>/Achievements/GOG/`.
        transport: Optional httpx transport passed to the GOG client.

    Raises:
        MissingCredentialsError: If either credential is blank. No request is made.
        GOGAPIError: If the owned games list can't be fetched.
        NoGamesError: If the user has no resolvable games.
    """
    if not credentials.is_complete:
        raise MissingCredentialsError("User ID and Access Token cannot be empty.")

    storage = AchievementStorage(output_dir)
    with GOGClient(credentials.access_token, transport=transport) as client:
        exporter = AchievementExporter(client, storage, credentials.user_id.strip())
        return exporter.run()
