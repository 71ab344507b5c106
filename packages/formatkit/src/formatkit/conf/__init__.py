from .defaults import DEFAULTS
from .settings import Settings, get_settings, reset_settings

__all__ = ["DEFAULTS", "Settings", "get_settings", "reset_settings"]
