"""
/**
 * @file dashboard/controllers/__init__.py
 * @description Controller (router) exports.
 */
"""

from .dashboard_controller import router as dashboard_router
from .health_controller import router as health_router
from .prepare_controller import router as prepare_router
from .translate_controller import router as translate_router
from .translator_controller import router as translator_router

__all__ = [
    "dashboard_router",
    "health_router",
    "prepare_router",
    "translate_router",
    "translator_router",
]
