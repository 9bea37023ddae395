"""
/**
 * @file dashboard/config/__init__.py
 * @description Configuration exports.
 */
"""

from .settings import Settings, get_settings, load_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH

__all__ = ["Settings", "get_settings", "load_settings", "reload_settings", "CONFIG_PATH", "CONFIG_LOCAL_PATH"]
