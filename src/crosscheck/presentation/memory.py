"""In-memory presenter that records every update."""

from dataclasses import dataclass, field
from typing import Literal

from crosscheck.data import FactCheckSummary, SourceId
from crosscheck.presentation.formatting import format_claim_summary

PanelKind = Literal["status", "error", "content"]


@dataclass
class PanelState:
    """Latest value shown in a provider panel."""

    kind: PanelKind
    text: str


@dataclass
class FactCheckPanelState:
    """Latest values of the three fact-check sub-blocks."""

    truth_score: str = "--"
    coverage_score: str = "--"
    claims: str = ""
    summary: FactCheckSummary | None = None


@dataclass
class RecordingPresenter:
    """Presenter that keeps panel state in memory.

    ``events`` lists ``(event, target)`` pairs in call order, e.g.
    ``("content", "gemini")`` or ``("input", "enabled")``.
    """

    input_enabled: bool = True
    panels: dict[SourceId, PanelState] = field(default_factory=dict)
    fact_check: FactCheckPanelState = field(default_factory=FactCheckPanelState)
    events: list[tuple[str, str]] = field(default_factory=list)

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled
        self.events.append(("input", "enabled" if enabled else "disabled"))

    def show_status(self, source: SourceId, message: str, *, error: bool = False) -> None:
        kind: PanelKind = "error" if error else "status"
        self.panels[source] = PanelState(kind=kind, text=message)
        self.events.append((kind, str(source)))

    def show_content(self, source: SourceId, content: str) -> None:
        self.panels[source] = PanelState(kind="content", text=content)
        self.events.append(("content", str(source)))

    def show_fact_check(self, summary: FactCheckSummary) -> None:
        self.fact_check = FactCheckPanelState(
            truth_score=summary.truth_score_display,
            coverage_score=summary.coverage_score,
            claims=format_claim_summary(summary),
            summary=summary,
        )
        self.events.append(("fact_check", str(SourceId.FACT_CHECK)))

    def show_fact_check_status(self, message: str, *, error: bool = False) -> None:
        self.fact_check = FactCheckPanelState(claims=message)
        kind = "fact_check_error" if error else "fact_check_status"
        self.events.append((kind, str(SourceId.FACT_CHECK)))
