"""Map GOG achievement data onto the export file format."""

from collections.abc import Iterable

from gog_achievements.models import (
    ExportedAchievement,
    ExportedGame,
    GameSummary,
    GOGAchievement,
)


def map_achievement(record: GOGAchievement) -> ExportedAchievement:
    """Convert a GOG achievement into an export entry."""
    return ExportedAchievement(
        name=record.name,
        description=record.description,
        image_url=record.image_url_unlocked,
        hidden=0 if record.visible else 1,
        unlocked=record.date_unlocked is not None,
        api_name=record.key,
    )


def map_game(summary: GameSummary, achievements: Iterable[GOGAchievement]) -> ExportedGame:
    """Build the export document for a game, keeping achievement order."""
    return ExportedGame(
        name=summary.title,
        app_id=summary.id,
        achievements=[map_achievement(a) for a in achievements],
    )
