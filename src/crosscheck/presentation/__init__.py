"""Presentation sinks and payload formatters."""

from crosscheck.presentation.base import Presenter
from crosscheck.presentation.console import ConsolePresenter, html_to_text
from crosscheck.presentation.formatting import (
    format_claim_summary,
    format_search_results,
    format_text_response,
    status_html,
)
from crosscheck.presentation.memory import FactCheckPanelState, PanelState, RecordingPresenter

__all__ = [
    "ConsolePresenter",
    "FactCheckPanelState",
    "PanelState",
    "Presenter",
    "RecordingPresenter",
    "format_claim_summary",
    "format_search_results",
    "format_text_response",
    "html_to_text",
    "status_html",
]
