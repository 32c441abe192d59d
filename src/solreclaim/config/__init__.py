"""Configuration module for SolReclaim.

Usage:
    from solreclaim.config import load_settings

    settings = load_settings()  # Cached singleton
    print(settings.channel_name)

Note:
    No module-level `settings` instance is exported because that would
    fail on import if required env vars aren't set.
"""

from solreclaim.config.settings import Settings, get_settings, load_settings

__all__ = ["Settings", "get_settings", "load_settings"]
