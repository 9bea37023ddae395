"""
/**
 * @file dashboard/services/proxy_service.py
 * @description Prepare and translate proxies between the dashboard and the n8n workflows.
 */
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from dashboard.config import Settings
from dashboard.config.settings import PREPARE_WEBHOOK_ENV, TRANSLATE_WEBHOOK_ENV
from dashboard.models.prepare_request_model import PrepareRequest
from dashboard.models.translate_request_model import TranslateRequest
from dashboard.services.webhook_forward_service import ForwardResult, ForwardStatus, forward_json


PROXY_FAILURE_MESSAGE = "Proxy-Fehler"
NULL_BODY_MESSAGE = "Anfrage ohne Inhalt (null)"


@dataclass(frozen=True)
class ProxyResponse:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def error_response(status_code: int, message: str) -> ProxyResponse:
    return ProxyResponse(status_code, {"error": message})


def _reject_constant(name: str):
    raise ValueError(f"Ungültiger JSON-Wert: {name}")


def parse_body(raw: bytes) -> Any:
    """Decode a request body; raises ``ValueError`` on malformed JSON, including NaN and Infinity."""
    return json.loads(raw, parse_constant=_reject_constant)


class _WebhookProxy(ABC):
    env_name = ""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    @abstractmethod
    def webhook_url(self) -> Optional[str]:
        ...

    def config_error(self) -> ProxyResponse:
        return error_response(500, f"{self.env_name} nicht konfiguriert")

    def to_response(self, result: ForwardResult) -> ProxyResponse:
        if result.status is ForwardStatus.SUCCESS:
            return ProxyResponse(200, result.body)
        if result.status is ForwardStatus.CONFIG_MISSING:
            return self.config_error()
        if result.status is ForwardStatus.UPSTREAM_ERROR:
            # 502 Bad Gateway: the workflow itself failed
            return error_response(502, f"n8n Webhook Fehler: {result.upstream_status}")
        return error_response(500, result.message or PROXY_FAILURE_MESSAGE)

    @abstractmethod
    def forward(self, url: str, body: Any) -> ProxyResponse:
        ...

    def handle(self, body: Any) -> ProxyResponse:
        url = self.webhook_url
        if not url:
            return self.config_error()
        if body is None:
            return error_response(500, NULL_BODY_MESSAGE)
        return self.forward(url, body)

    def handle_raw(self, raw: bytes) -> ProxyResponse:
        """Entry point for HTTP routes: config first, then body decoding, then ``handle``."""
        if not self.webhook_url:
            return self.config_error()
        try:
            body = parse_body(raw)
        except ValueError as e:
            return error_response(500, str(e) or PROXY_FAILURE_MESSAGE)
        return self.handle(body)


class PrepareProxy(_WebhookProxy):
    """Forwards a record reference to the "prepare for translation" workflow."""

    env_name = PREPARE_WEBHOOK_ENV

    @property
    def webhook_url(self) -> Optional[str]:
        return self.settings.resolve_prepare_webhook_url()

    def forward(self, url: str, body: Any) -> ProxyResponse:
        req = PrepareRequest.from_body(body)
        if not req.has_record:
            return error_response(400, "recordId ist erforderlich")
        return self.to_response(forward_json(url, req.to_payload(self.settings.default_table)))


class TranslateProxy(_WebhookProxy):
    """Forwards text to the translation workflow; the text itself is not validated here."""

    env_name = TRANSLATE_WEBHOOK_ENV

    @property
    def webhook_url(self) -> Optional[str]:
        return self.settings.resolve_translate_webhook_url()

    def forward(self, url: str, body: Any) -> ProxyResponse:
        req = TranslateRequest.from_body(body)
        return self.to_response(forward_json(url, req.to_payload()))