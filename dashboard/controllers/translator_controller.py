"""
/**
 * @file dashboard/controllers/translator_controller.py
 * @description Translator page: optional auto-load of a record, translation on submit.
 */
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from dashboard.config import Settings, get_settings
from dashboard.models.translator_state_model import DEFAULT_SOURCE_LANG, TranslatorState, language_label, source_languages
from dashboard.services import TranslatorView
from dashboard.utils import templates


router = APIRouter()


def get_translator_view(settings: Settings = Depends(get_settings)) -> TranslatorView:
    return TranslatorView.from_settings(settings)


def _render(request: Request, view: TranslatorView, state: TranslatorState):
    return templates.TemplateResponse(
        request,
        "translator.html",
        {
            "view": state,
            "languages": source_languages(view.target_lang),
            "target_label": language_label(view.target_lang),
        },
    )


@router.get("/translator", response_class=HTMLResponse)
def translator_page(
    request: Request,
    recordId: Optional[str] = None,
    table: Optional[str] = None,
    view: TranslatorView = Depends(get_translator_view),
):
    state = view.auto_load(view.initial_state(), recordId, table)
    return _render(request, view, state)


@router.post("/translator", response_class=HTMLResponse)
def translator_submit(
    request: Request,
    text: str = Form(""),
    sourceLang: str = Form(DEFAULT_SOURCE_LANG),
    view: TranslatorView = Depends(get_translator_view),
):
    state = view.translate(view.initial_state(text, sourceLang))
    return _render(request, view, state)
