"""
/**
 * @file dashboard/models/__init__.py
 * @description Data model exports.
 */
"""

from .prepare_request_model import PrepareRequest
from .translate_request_model import TranslateRequest
from .translator_state_model import LANGUAGES, Language, TranslatorState, ViewState

__all__ = ["PrepareRequest", "TranslateRequest", "TranslatorState", "ViewState", "Language", "LANGUAGES"]
