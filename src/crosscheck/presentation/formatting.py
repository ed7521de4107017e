"""HTML fragments for provider payloads.

All provider-supplied text is escaped before it is embedded.
"""

import html
from collections.abc import Sequence

from crosscheck.data import FactCheckSummary, SearchItem


def status_html(message: str, css_class: str = "status") -> str:
    return f'<span class="{css_class}">{html.escape(message)}</span>'


def format_text_response(text: str) -> str:
    """Render chat output, turning newlines into line breaks."""
    if not text:
        return status_html("No response.")
    return html.escape(text).replace("\n", "<br />")


def format_search_results(items: Sequence[SearchItem]) -> str:
    """Render search hits as a list of links with snippets."""
    if not items:
        return status_html("No results.")
    list_items = "".join(
        f'<li><a href="{html.escape(item.link)}" target="_blank" rel="noreferrer">'
        f"{html.escape(item.title)}</a><br />{html.escape(item.snippet)}</li>"
        for item in items
    )
    return f"<ul>{list_items}</ul>"


def format_claim_summary(summary: FactCheckSummary) -> str:
    """Render the claim list sub-block of the fact-check panel."""
    if not summary.items:
        return status_html(summary.message or "No claims found.")
    return "".join(
        f"<div>&bull; {html.escape(item.text)} - <strong>{html.escape(item.rating)}</strong>"
        f" ({html.escape(item.publisher)})</div>"
        for item in summary.items
    )
