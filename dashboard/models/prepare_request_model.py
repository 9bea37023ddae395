"""
/**
 * @file dashboard/models/prepare_request_model.py
 * @description Prepare request model (Pydantic).
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class PrepareRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    recordId: Optional[Any] = None
    table: Optional[Any] = None

    @classmethod
    def from_body(cls, body: Any) -> "PrepareRequest":
        return cls.model_validate(body) if isinstance(body, dict) else cls()

    @property
    def has_record(self) -> bool:
        return bool(self.recordId)

    def to_payload(self, default_table: str) -> Dict[str, Any]:
        return {"recordId": self.recordId, "table": self.table or default_table}
