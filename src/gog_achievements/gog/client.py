"""GOG web API client.

To get your GOG user ID and access token:
1. Log in at https://www.gog.com
2. Visit https://embed.gog.com/userData.json and copy the "galaxyUserId" value
3. Copy the "gog-al" cookie value (or a Galaxy OAuth access token)

Set these as environment variables:
    export GOG_USER_ID="your_user_id"
    export GOG_ACCESS_TOKEN="your_access_token"
"""

import logging

import httpx
from pydantic import ValidationError

from gog_achievements.models import (
    AchievementsResponse,
    GameDetailsResponse,
    GameSummary,
    GOGAchievement,
    OwnedGamesResponse,
)

GOG_EMBED_BASE = "https://embed.gog.com"
GOG_GAMEPLAY_BASE = "https://gameplay.gog.com"

USER_AGENT = "gog-achievements/0.1"

logger = logging.getLogger(__name__)


class GOGAPIError(Exception):
    """Error from GOG API."""

    pass


class GOGClient:
    """Client for the GOG embed and gameplay APIs."""

    def __init__(self, access_token: str, transport: httpx.BaseTransport | None = None):
        """Initialize GOG client.

        Args:
            access_token: OAuth bearer token sent with every request.
            transport: Optional httpx transport (used to mock the API in tests).
        """
        if not access_token or not access_token.strip():
            raise GOGAPIError("GOG access token not provided.")

        self._http_client = httpx.Client(
            timeout=30.0,
            transport=transport,
            headers={
                "Authorization": f"Bearer {access_token.strip()}",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
        )

    def get_owned_game_ids(self) -> list[int]:
        """Fetch the IDs of all games owned by the authenticated user.

        Returns:
            List of GOG product IDs, in the order GOG returns them.

        Raises:
            GOGAPIError: If the list can't be fetched or parsed.
        """
        url = f"{GOG_EMBED_BASE}/user/data/games"

        try:
            response = self._http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GOGAPIError(
                f"Failed to fetch owned games: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise GOGAPIError(f"Failed to fetch owned games: {e}") from e

        try:
            data = OwnedGamesResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise GOGAPIError(f"Unexpected owned games response: {e}") from e

        return data.owned or []

    def get_game_details(self, game_id: int) -> GameSummary | None:
        """Resolve a game ID to its title.

        Args:
            game_id: GOG product ID.

        Returns:
            GameSummary, or None if the details can't be fetched or have no title.
        """
        url = f"{GOG_EMBED_BASE}/account/gameDetails/{game_id}.json"

        try:
            response = self._http_client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Could not fetch details for game ID %s: %s", game_id, e)
            return None

        if not response.is_success:
            logger.warning(
                "Could not fetch details for game ID %s. Status: %s",
                game_id,
                response.status_code,
            )
            return None

        if not response.content.strip():
            logger.warning("Game details for game ID %s are empty. Skipping.", game_id)
            return None

        try:
            details = GameDetailsResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Failed to parse details for game ID %s: %s. Skipping.", game_id, e)
            return None

        if not details.title.strip():
            logger.warning("Title is empty for game ID %s. Skipping.", game_id)
            return None

        return GameSummary(id=game_id, title=details.title)

    def get_owned_games(self) -> list[GameSummary]:
        """Fetch all owned games with their titles.

        Games whose details can't be resolved (delisted, region-locked, ...)
        are skipped.

        Returns:
            List of GameSummary objects in the order GOG lists them.

        Raises:
            GOGAPIError: If the owned games list itself can't be fetched.
        """
        game_ids = self.get_owned_game_ids()
        if not game_ids:
            return []

        logger.info("Found %d owned game IDs. Fetching details...", len(game_ids))

        games = []
        for game_id in game_ids:
            summary = self.get_game_details(game_id)
            if summary is None:
                continue
            logger.debug("Fetched details for: %s", summary.title)
            games.append(summary)

        return games

    def get_achievements(self, game_id: int, user_id: str) -> list[GOGAchievement] | None:
        """Fetch a user's achievements for a specific game.

        Args:
            game_id: GOG product ID.
            user_id: GOG user ID.

        Returns:
            List of GOGAchievement, or None if the request fails or the
            response can't be parsed.
        """
        url = f"{GOG_GAMEPLAY_BASE}/clients/{game_id}/users/{user_id}/achievements"

        try:
            response = self._http_client.get(url)
        except httpx.HTTPError as e:
            logger.debug("Achievements request failed for game ID %s: %s", game_id, e)
            return None

        if not response.is_success:
            logger.debug(
                "Achievements request for game ID %s returned HTTP %s",
                game_id,
                response.status_code,
            )
            return None

        try:
            data = AchievementsResponse.model_validate_json(response.content)
        except ValidationError as e:
            # Usually means GOG changed the response format
            logger.warning(
                "Error deserializing achievements for game ID %s: %s\n"
                "Raw JSON response that caused the error:\n%s",
                game_id,
                e,
                response.text,
            )
            return None

        return data.items or []

    def close(self):
        """Close the HTTP client."""
        self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
