"""GOG Achievements - export your GOG achievements to JSON files."""

__version__ = "0.1.0"
