"""Data models for GOG Achievements."""

from gog_achievements.models.game import (
    # GOG API responses
    AchievementsResponse,
    GameDetailsResponse,
    GOGAchievement,
    OwnedGamesResponse,
    # Domain
    Credentials,
    GameSummary,
    # Export files
    ExportedAchievement,
    ExportedGame,
    EXPORT_METHOD,
    PROVIDER_NAME,
)

__all__ = [
    # GOG API responses
    "AchievementsResponse",
    "GameDetailsResponse",
    "GOGAchievement",
    "OwnedGamesResponse",
    # Domain
    "Credentials",
    "GameSummary",
    # Export files
    "ExportedAchievement",
    "ExportedGame",
    "EXPORT_METHOD",
    "PROVIDER_NAME",
]
