"""
/**
 * @file dashboard/services/__init__.py
 * @description Service layer exports.
 */
"""

from .webhook_forward_service import ForwardResult, ForwardStatus, forward_json
from .proxy_service import PrepareProxy, ProxyResponse, TranslateProxy
from .translator_view_service import ProxyClient, TranslatorView

__all__ = [
    "ForwardResult",
    "ForwardStatus",
    "forward_json",
    "PrepareProxy",
    "ProxyResponse",
    "TranslateProxy",
    "ProxyClient",
    "TranslatorView",
]
