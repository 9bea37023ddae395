"""
/**
 * @file dashboard/controllers/prepare_controller.py
 * @description Proxy route to the n8n "prepare for translation" workflow.
 */
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from dashboard.config import Settings, get_settings
from dashboard.services import PrepareProxy


router = APIRouter()


@router.post("/api/prepare")
async def prepare(request: Request, settings: Settings = Depends(get_settings)):
    raw = await request.body()
    resp = await run_in_threadpool(PrepareProxy(settings).handle_raw, raw)
    return JSONResponse(content=resp.body, status_code=resp.status_code)
