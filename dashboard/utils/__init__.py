"""
/**
 * @file dashboard/utils/__init__.py
 * @description Utility exports.
 */
"""

from .templates import TEMPLATES_DIR, templates
from .validators import is_valid_url

__all__ = ["TEMPLATES_DIR", "templates", "is_valid_url"]
