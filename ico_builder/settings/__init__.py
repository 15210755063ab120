"""Application settings persistence."""

from ico_builder.settings.common import app_config_dir
from ico_builder.settings.conversion import (
    get_default_conversion_settings,
    load_conversion_settings,
    save_conversion_settings,
)

__all__ = [
    "app_config_dir",
    # Conversion
    "get_default_conversion_settings",
    "load_conversion_settings",
    "save_conversion_settings",
]
