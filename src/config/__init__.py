"""
Configuration package for mdinclude

Provides application settings via keyword options and environment variables
using pydantic-settings.
"""

from .settings import AppSettings, settings_build

__all__ = ["AppSettings", "settings_build"]
