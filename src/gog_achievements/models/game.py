"""Data models for GOG responses and exported achievement files."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROVIDER_NAME = "GOG"
EXPORT_METHOD = f"{PROVIDER_NAME} API"


# =============================================================================
# GOG API Response Models
# =============================================================================


class OwnedGamesResponse(BaseModel):
    """Response of the embed `user/data/games` endpoint."""

    owned: list[int] | None = None


class GameDetailsResponse(BaseModel):
    """Response of the embed `account/gameDetails/{id}.json` endpoint."""

    title: str = ""


class GOGAchievement(BaseModel):
    """A single achievement as returned by the gameplay API."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(default="", alias="achievement_key")
    visible: bool = False
    name: str = ""
    description: str = ""
    image_url_unlocked: str = ""
    date_unlocked: datetime | None = None  # None while still locked

    @field_validator("key", "name", "description", "image_url_unlocked", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class AchievementsResponse(BaseModel):
    """Response of the gameplay `clients/{id}/users/{user}/achievements` endpoint."""

    items: list[GOGAchievement] | None = None


# =============================================================================
# Domain Models
# =============================================================================


class Credentials(BaseModel):
    """GOG user ID and OAuth access token for a single run."""

    user_id: str = ""
    access_token: str = Field(default="", repr=False)

    @property
    def is_complete(self) -> bool:
        """Both values present and not just whitespace."""
        return bool(self.user_id.strip()) and bool(self.access_token.strip())


class GameSummary(BaseModel):
    """An owned game resolved to its display title."""

    id: int
    title: str

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be empty")
        return v


# =============================================================================
# Export File Models
# =============================================================================


class ExportedAchievement(BaseModel):
    """Achievement entry in an exported game file.

    `id`, `global_percentage` and `difficulty` are never filled from GOG data;
    they stay at their defaults so the file matches the shared export format.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    hidden: int = 0  # 1 when the achievement is not visible
    id: int = 0
    unlocked: bool = False
    api_name: str = Field(default="", alias="apiName")
    global_percentage: int = Field(default=0, alias="getglobalpercentage")
    difficulty: int = 0


class ExportedGame(BaseModel):
    """One exported game file."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    platform: str = PROVIDER_NAME
    image_url: str = Field(default="", alias="imageUrl")
    description: str = ""
    method: str = EXPORT_METHOD
    app_id: int = Field(alias="appid")
    achievements: list[ExportedAchievement] = Field(default_factory=list)

    @property
    def unlocked_count(self) -> int:
        """Number of unlocked achievements."""
        return len([a for a in self.achievements if a.unlocked])
