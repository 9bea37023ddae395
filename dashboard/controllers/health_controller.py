"""
/**
 * @file dashboard/controllers/health_controller.py
 * @description Health check.
 */
"""

from fastapi import APIRouter, Depends

from dashboard.config import Settings, get_settings
from dashboard.utils import is_valid_url


router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    webhooks_status = {
        "prepare": is_valid_url(settings.resolve_prepare_webhook_url() or ""),
        "translate": is_valid_url(settings.resolve_translate_webhook_url() or ""),
    }

    return {
        "status": "ok" if all(webhooks_status.values()) else "degraded",
        "checks": {
            "webhooks": webhooks_status,
        },
    }
