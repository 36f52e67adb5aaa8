"""Local file-based storage for exported achievement files."""

import json
import logging
import os
from pathlib import Path

from gog_achievements.models import PROVIDER_NAME, ExportedGame

logger = logging.getLogger(__name__)


def default_base_dir() -> Path:
    """Base directory for exports: GOG_EXPORT_DIR, or the working directory."""
    env_dir = os.getenv("GOG_EXPORT_DIR")
    return Path(env_dir) if env_dir else Path.cwd()


class AchievementStorage:
    """Writes one JSON file per game under `<base>/Achievements/GOG/`."""

    def __init__(self, base_dir: Path | str | None = None):
        self.base_dir = Path(base_dir) if base_dir else default_base_dir()
        # Created on first save so that aborted runs leave nothing behind
        self.achievements_dir = self.base_dir / "Achievements" / PROVIDER_NAME

    def path_for(self, app_id: int) -> Path:
        """Path of the export file for a game."""
        return self.achievements_dir / f"{app_id}.json"

    def save_game(self, game: ExportedGame) -> Path:
        """Write a game's export file, replacing any previous one."""
        self.achievements_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.path_for(game.app_id)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(
                game.model_dump(mode="json", by_alias=True),
                f,
                indent=2,
                ensure_ascii=False,
            )
            f.write("\n")
        return file_path

    def load_game(self, app_id: int) -> ExportedGame | None:
        """Load an exported game by app ID."""
        file_path = self.path_for(app_id)
        if not file_path.exists():
            return None
        with open(file_path, "r", encoding="utf-8") as f:
            return ExportedGame.model_validate(json.load(f))

    def list_games(self) -> list[ExportedGame]:
        """Load all exported games, sorted by app ID."""
        if not self.achievements_dir.exists():
            return []

        games = []
        for file_path in self.achievements_dir.glob("*.json"):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    games.append(ExportedGame.model_validate(json.load(f)))
            except (OSError, ValueError) as e:
                logger.warning("Skipping unreadable export %s: %s", file_path.name, e)
        games.sort(key=lambda g: g.app_id)
        return games
