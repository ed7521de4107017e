from typing import Protocol

from crosscheck.data import FactCheckSummary, SourceId


class Presenter(Protocol):
    """Interface for the surface that displays one panel per source.

    Every method is called synchronously by the orchestrator. The fact-check
    panel has three sub-blocks: truth score, coverage score and claim list.
    """

    def set_input_enabled(self, enabled: bool) -> None:
        """Enable or disable the query input."""
        ...

    def show_status(self, source: SourceId, message: str, *, error: bool = False) -> None:
        """Show a loading or error status in a provider panel."""
        ...

    def show_content(self, source: SourceId, content: str) -> None:
        """Show a formatted provider payload."""
        ...

    def show_fact_check(self, summary: FactCheckSummary) -> None:
        """Fill the fact-check panel from an aggregated summary."""
        ...

    def show_fact_check_status(self, message: str, *, error: bool = False) -> None:
        """Reset the scores to ``--`` and show ``message`` as the claim list."""
        ...
