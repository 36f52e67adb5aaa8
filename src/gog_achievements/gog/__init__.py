"""GOG API integration."""

from gog_achievements.gog.client import GOGAPIError, GOGClient

__all__ = ["GOGAPIError", "GOGClient"]
