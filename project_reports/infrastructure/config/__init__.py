from .settings import Settings, get_settings, DEFAULT_PORT

__all__ = ["Settings", "get_settings", "DEFAULT_PORT"]
