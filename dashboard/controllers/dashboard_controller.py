"""
/**
 * @file dashboard/controllers/dashboard_controller.py
 * @description Dashboard start page listing the available tools.
 */
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from dashboard.utils import templates


router = APIRouter()

# New tools get a tile here and a link in the navigation (templates/base.html)
TOOLS = [
    {"href": "/translator", "title": "Übersetzer", "description": "Texte übersetzen via n8n Workflow"},
]


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"tools": TOOLS})
