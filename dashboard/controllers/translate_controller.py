"""
/**
 * @file dashboard/controllers/translate_controller.py
 * @description Proxy route to the n8n translation workflow.
 */
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from dashboard.config import Settings, get_settings
from dashboard.services import TranslateProxy


router = APIRouter()


@router.post("/api/translate")
async def translate(request: Request, settings: Settings = Depends(get_settings)):
    raw = await request.body()
    resp = await run_in_threadpool(TranslateProxy(settings).handle_raw, raw)
    return JSONResponse(content=resp.body, status_code=resp.status_code)
