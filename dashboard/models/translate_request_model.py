"""
/**
 * @file dashboard/models/translate_request_model.py
 * @description Translate request model (Pydantic).
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


FORWARDED_FIELDS = ("text", "sourceLang", "targetLang")


class TranslateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Optional[Any] = None
    # Omitted means the workflow detects the language itself
    sourceLang: Optional[Any] = None
    targetLang: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> "TranslateRequest":
        return cls.model_validate(body) if isinstance(body, dict) else cls()

    def to_payload(self) -> Dict[str, Any]:
        # Fields the caller never sent stay absent; explicit nulls are kept.
        return {name: getattr(self, name) for name in FORWARDED_FIELDS if name in self.model_fields_set}
