"""Plain-text presenter for the command line."""

import html
import logging
import re
import sys
from typing import TextIO

from crosscheck.data import FactCheckSummary, SourceId

logger = logging.getLogger(__name__)

PANEL_TITLES: dict[SourceId, str] = {
    SourceId.GEMINI: "Gemini",
    SourceId.GOOGLE: "Google",
    SourceId.CLAUDE: "Claude",
    SourceId.CHATGPT: "ChatGPT",
    SourceId.FACT_CHECK: "Fact check",
}

_TAG_RE = re.compile(r"<[^>]+>")


def html_to_text(fragment: str) -> str:
    """Flatten an HTML fragment from the formatters into plain text."""
    text = fragment.replace("<br />", "\n").replace("<li>", "\n- ").replace("</div>", "\n")
    text = _TAG_RE.sub("", text)
    return html.unescape(text).strip()


class ConsolePresenter:
    """Write each panel to a text stream as soon as it settles.

    Loading statuses go to the logger; results and errors go to ``stream``.

    Args:
        stream: Output stream (default: stdout).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def set_input_enabled(self, enabled: bool) -> None:
        logger.debug(f"Input {'enabled' if enabled else 'disabled'}")

    def show_status(self, source: SourceId, message: str, *, error: bool = False) -> None:
        if error:
            self._write_panel(source, f"[error] {message}")
        else:
            logger.info(message)

    def show_content(self, source: SourceId, content: str) -> None:
        self._write_panel(source, html_to_text(content))

    def show_fact_check(self, summary: FactCheckSummary) -> None:
        lines = [
            f"Truth score: {summary.truth_score_display}",
            f"Coverage score: {summary.coverage_score}",
        ]
        if summary.items:
            lines.extend(
                f"- {item.text} ({item.rating}, {item.publisher})" for item in summary.items
            )
        elif summary.message:
            lines.append(summary.message)
        self._write_panel(SourceId.FACT_CHECK, "\n".join(lines))

    def show_fact_check_status(self, message: str, *, error: bool = False) -> None:
        if not error:
            logger.info(message)
            return
        self._write_panel(SourceId.FACT_CHECK, f"Truth score: --\nCoverage score: --\n{message}")

    def _write_panel(self, source: SourceId, body: str) -> None:
        self._stream.write(f"\n== {PANEL_TITLES[source]} ==\n{body}\n")
        self._stream.flush()
