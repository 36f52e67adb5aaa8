"""Storage for exported achievement files."""

from gog_achievements.storage.local import AchievementStorage

__all__ = ["AchievementStorage"]
