"""
/**
 * @file dashboard/services/translator_view_service.py
 * @description Translator page logic: auto-load prepared text and run translations through the proxies.
 */
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from dashboard.config import Settings
from dashboard.config.settings import DEFAULT_TABLE, DEFAULT_TARGET_LANG
from dashboard.models.translator_state_model import AUTO_DETECT, DEFAULT_SOURCE_LANG, TranslatorState, ViewState
from dashboard.services.proxy_service import PrepareProxy, ProxyResponse, TranslateProxy


logger = logging.getLogger("translator_view")

PREPARE_FAILED_MESSAGE = "Vorbereitung fehlgeschlagen"
TRANSLATE_FAILED_MESSAGE = "Übersetzung fehlgeschlagen"


class ProxyCallError(Exception):
    pass


class ProxyClient:
    """Calls the prepare and translate proxies in-process, as the page's backend."""

    def __init__(self, settings: Settings):
        self._prepare = PrepareProxy(settings)
        self._translate = TranslateProxy(settings)

    def prepare(self, payload: Dict[str, Any]) -> ProxyResponse:
        return self._prepare.handle(payload)

    def translate(self, payload: Dict[str, Any]) -> ProxyResponse:
        return self._translate.handle(payload)


def _payload_dict(resp: ProxyResponse) -> Dict[str, Any]:
    return resp.body if isinstance(resp.body, dict) else {}


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


class TranslatorView:
    def __init__(
        self,
        client: ProxyClient,
        target_lang: str = DEFAULT_TARGET_LANG,
        default_table: str = DEFAULT_TABLE,
    ):
        self.client = client
        self.target_lang = target_lang
        self.default_table = default_table

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[ProxyClient] = None) -> "TranslatorView":
        return cls(client or ProxyClient(settings), target_lang=settings.target_lang, default_table=settings.default_table)

    def initial_state(self, input_text: str = "", source_lang: Optional[str] = None) -> TranslatorState:
        return TranslatorState(
            input_text=input_text or "",
            source_lang=DEFAULT_SOURCE_LANG if source_lang is None else source_lang,
        )

    def auto_load(self, state: TranslatorState, record_id: Optional[str], table: Optional[str] = None) -> TranslatorState:
        """Fill the input with the cleaned record text when the page was opened with a record reference."""
        if not record_id:
            return state

        state = state.enter(ViewState.PREPARING)
        try:
            resp = self.client.prepare({"recordId": record_id, "table": table or self.default_table})
            data = _payload_dict(resp)
            if not resp.ok:
                raise ProxyCallError(data.get("error") or f"Fehler: {resp.status_code}")
            if data.get("status") == "error":
                raise ProxyCallError(data.get("message") or data.get("error") or PREPARE_FAILED_MESSAGE)
        except Exception as e:
            logger.warning(f"Auto-load of record {record_id} failed: {e}")
            return state.fail(str(e) or PREPARE_FAILED_MESSAGE)

        text = data.get("text")
        return state.enter(
            ViewState.IDLE,
            input_text=text if isinstance(text, str) else "",
            subject=data.get("subject") or None,
        )

    def translate(self, state: TranslatorState) -> TranslatorState:
        if not state.can_translate:
            return state

        state = state.enter(ViewState.LOADING, output_text="")
        payload: Dict[str, Any] = {"text": state.input_text}
        if state.source_lang and state.source_lang != AUTO_DETECT.code:
            payload["sourceLang"] = state.source_lang
        payload["targetLang"] = self.target_lang

        try:
            resp = self.client.translate(payload)
            if not resp.ok:
                raise ProxyCallError(f"Fehler: {resp.status_code}")
            translated = _first_present(_payload_dict(resp), "translation", "translatedText")
        except Exception as e:
            logger.warning(f"Translation failed: {e}")
            return state.fail(str(e) or TRANSLATE_FAILED_MESSAGE)

        return state.enter(ViewState.IDLE, output_text="" if translated is None else str(translated))
