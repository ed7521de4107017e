"""Concurrent fan-out of one query to every source."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from crosscheck.aggregator import build_summary
from crosscheck.data import (
    Claim,
    CredentialCheck,
    FactCheckSummary,
    Failure,
    ProviderResult,
    Query,
    SourceId,
    Success,
)
from crosscheck.presentation.base import Presenter
from crosscheck.providers.base import ProviderClient

if TYPE_CHECKING:
    from crosscheck.config.models import Credentials

logger = logging.getLogger(__name__)

FACT_CHECK_LOADING = "Fetching fact checks..."
FACT_CHECK_UNAVAILABLE = "Fact check unavailable."


class RunState(StrEnum):
    """Orchestrator state within a single run."""

    IDLE = "idle"
    DISPATCHING = "dispatching"
    AWAITING_FACT_CHECK = "awaiting_fact_check"
    AWAITING_OTHERS = "awaiting_others"


@dataclass(frozen=True)
class Panel:
    """A provider and the panel its answer is shown in.

    Args:
        source: Presentation area the result goes to.
        client: Provider to query.
        formatter: Turns a successful payload into display content.
        loading_message: Status shown while the call is in flight.
    """

    source: SourceId
    client: ProviderClient[Any]
    formatter: Callable[[Any], str]
    loading_message: str


def _settle(result: Any) -> ProviderResult[Any]:
    """Turn an ``asyncio.gather(..., return_exceptions=True)`` item into a result."""
    if isinstance(result, BaseException):
        return Failure(error=result)
    return Success(payload=result)


class QueryOrchestrator:
    """Ask the fact-check provider and every panel provider about one query.

    Flow of ``run``:
    1. Input is disabled and every panel shows its loading status
    2. All calls are started together
    3. The fact-check call alone is awaited and its panel revealed
    4. The remaining calls are joined with an all-settle gather and each
       panel is revealed from its own outcome
    5. Input is re-enabled, whatever happened. If presentation raised
       early, calls still in flight are cancelled first

    A failing provider only affects its own panel.

    Args:
        fact_checker: Client returning fact-check claims.
        panels: Panel providers, in display order.
        presenter: Sink for every display update.
        credentials: Checked once here; missing keys are logged and
            reported through ``credential_check``.
    """

    def __init__(
        self,
        fact_checker: ProviderClient[list[Claim]],
        panels: Sequence[Panel],
        presenter: Presenter,
        *,
        credentials: Credentials | None = None,
    ) -> None:
        self._fact_checker = fact_checker
        self._panels = tuple(panels)
        self._presenter = presenter
        self._state = RunState.IDLE

        self.credential_check = credentials.check() if credentials else CredentialCheck()
        if not self.credential_check.ok:
            logger.warning(
                f"Missing credentials: {', '.join(self.credential_check.missing)}. "
                "Affected sources will report a configuration error."
            )

    @property
    def state(self) -> RunState:
        return self._state

    async def run(self, query: str | Query) -> None:
        """Query every source and present each outcome as it settles.

        Blank input is ignored. Provider failures never propagate.

        Args:
            query: Raw user input or an already parsed query.
        """
        parsed = query if isinstance(query, Query) else Query.parse(query)
        if parsed is None:
            logger.debug("Ignoring blank query")
            return

        logger.info(f"Running query: {parsed.text}")
        t0 = time.monotonic()
        self._state = RunState.DISPATCHING
        self._presenter.set_input_enabled(False)
        tasks: list[asyncio.Task[Any]] = []
        try:
            for panel in self._panels:
                self._presenter.show_status(panel.source, panel.loading_message)
            self._presenter.show_fact_check_status(FACT_CHECK_LOADING)

            fact_check_task = asyncio.create_task(self._check_facts(parsed.text))
            panel_tasks = [
                asyncio.create_task(panel.client.fetch(parsed.text)) for panel in self._panels
            ]
            tasks = [fact_check_task, *panel_tasks]

            self._state = RunState.AWAITING_FACT_CHECK
            (fact_check_result,) = await asyncio.gather(fact_check_task, return_exceptions=True)
            self._reveal_fact_check(_settle(fact_check_result))

            self._state = RunState.AWAITING_OTHERS
            panel_results = await asyncio.gather(*panel_tasks, return_exceptions=True)
            succeeded = 0
            for panel, raw in zip(self._panels, panel_results, strict=True):
                result = _settle(raw)
                if isinstance(result, Success):
                    succeeded += 1
                self._reveal_panel(panel, result)

            logger.info(
                f"Query finished in {time.monotonic() - t0:.2f}s: "
                f"{succeeded}/{len(self._panels)} panels answered"
            )
        finally:
            await self._discard(tasks)
            self._presenter.set_input_enabled(True)
            self._state = RunState.IDLE

    async def _discard(self, tasks: list[asyncio.Task[Any]]) -> None:
        """Cancel provider calls still in flight and collect every outcome.

        Calls are only left unfinished when ``run`` is leaving early, e.g. a
        presenter call raised before the second join.
        """
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.warning(f"Cancelling {len(pending)} unfinished provider call(s)")
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _check_facts(self, query: str) -> FactCheckSummary:
        claims = await self._fact_checker.fetch(query)
        return build_summary(claims)

    def _reveal_fact_check(self, result: ProviderResult[FactCheckSummary]) -> None:
        if isinstance(result, Success):
            self._presenter.show_fact_check(result.payload)
            return
        logger.warning(f"Error during fact check: {result.message}")
        self._presenter.show_fact_check_status(FACT_CHECK_UNAVAILABLE, error=True)

    def _reveal_panel(self, panel: Panel, result: ProviderResult[Any]) -> None:
        if isinstance(result, Success):
            self._presenter.show_content(panel.source, panel.formatter(result.payload))
            return
        logger.warning(f"Error from {panel.client.name}: {result.message}")
        self._presenter.show_status(panel.source, result.message, error=True)
