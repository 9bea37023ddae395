"""
/**
 * @file dashboard/services/webhook_forward_service.py
 * @description Forwards a JSON payload to an n8n workflow webhook and tags the outcome.
 */
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import requests


logger = logging.getLogger("webhook_forward")


class ForwardStatus(str, Enum):
    SUCCESS = "success"
    CONFIG_MISSING = "config_missing"
    UPSTREAM_ERROR = "upstream_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class ForwardResult:
    status: ForwardStatus
    body: Any = None
    upstream_status: Optional[int] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ForwardStatus.SUCCESS

    @classmethod
    def success(cls, body: Any) -> "ForwardResult":
        return cls(ForwardStatus.SUCCESS, body=body)

    @classmethod
    def config_missing(cls) -> "ForwardResult":
        return cls(ForwardStatus.CONFIG_MISSING)

    @classmethod
    def upstream_error(cls, upstream_status: int) -> "ForwardResult":
        return cls(ForwardStatus.UPSTREAM_ERROR, upstream_status=upstream_status)

    @classmethod
    def transport_error(cls, message: str) -> "ForwardResult":
        return cls(ForwardStatus.TRANSPORT_ERROR, message=message)


def forward_json(url: Optional[str], payload: Dict[str, Any]) -> ForwardResult:
    """
    POST ``payload`` to ``url`` and relay the JSON answer.

    Never raises: a missing URL, a non-2xx answer and any transport or
    decoding failure each come back as a tagged ``ForwardResult``.
    No timeout is applied, a hung webhook hangs the caller.
    """
    if not url:
        return ForwardResult.config_missing()

    try:
        response = requests.post(url, json=payload, headers={"Content-Type": "application/json"})
        if not 200 <= response.status_code < 300:
            logger.warning(f"Webhook answered with status {response.status_code}")
            return ForwardResult.upstream_error(response.status_code)
        body = response.json()
        # The body is re-rendered with allow_nan=False, NaN and Infinity count as malformed
        json.dumps(body, allow_nan=False)
        return ForwardResult.success(body)
    except Exception as e:
        logger.error(f"Webhook call failed: {e}")
        return ForwardResult.transport_error(str(e))
