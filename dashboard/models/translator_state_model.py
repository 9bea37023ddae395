"""
/**
 * @file dashboard/models/translator_state_model.py
 * @description Translator page state.
 */
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple


class ViewState(str, Enum):
    IDLE = "idle"
    PREPARING = "preparing"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class Language:
    code: str
    label: str


LANGUAGES: List[Language] = [
    Language("en", "Englisch"),
    Language("de", "Deutsch"),
    Language("fr", "Französisch"),
    Language("es", "Spanisch"),
    Language("it", "Italienisch"),
    Language("nl", "Niederländisch"),
    Language("pl", "Polnisch"),
    Language("pt", "Portugiesisch"),
    Language("zh", "Chinesisch"),
]

# Sent as a form value, the workflow receives no sourceLang at all
AUTO_DETECT = Language("auto", "Automatisch erkennen")
DEFAULT_SOURCE_LANG = "en"


def source_languages(target_lang: str) -> List[Language]:
    return [AUTO_DETECT] + [lang for lang in LANGUAGES if lang.code != target_lang]


def language_label(code: str) -> str:
    for lang in LANGUAGES:
        if lang.code == code:
            return lang.label
    return code


@dataclass(frozen=True)
class TranslatorState:
    """
    Everything the translator page shows.

    ``error`` is only set while ``state`` is ``ViewState.ERROR``; use the
    transition helpers instead of building inconsistent combinations.
    """

    state: ViewState = ViewState.IDLE
    error: Optional[str] = None
    input_text: str = ""
    output_text: str = ""
    source_lang: str = DEFAULT_SOURCE_LANG
    subject: Optional[str] = None
    transitions: Tuple[ViewState, ...] = ()

    @property
    def is_busy(self) -> bool:
        return self.state in (ViewState.PREPARING, ViewState.LOADING)

    @property
    def can_translate(self) -> bool:
        return self.state is not ViewState.LOADING and bool(self.input_text.strip())

    def enter(self, state: ViewState, **changes) -> "TranslatorState":
        return replace(self, state=state, error=None, transitions=self.transitions + (state,), **changes)

    def fail(self, message: str, **changes) -> "TranslatorState":
        return replace(
            self, state=ViewState.ERROR, error=message, transitions=self.transitions + (ViewState.ERROR,), **changes
        )
