"""
Dashboard Controller - Owns the filter state and the fetch cycle lifecycle.

Every trigger (mount, filter change, refresh, clear) starts a new,
independent fetch cycle. Cycles are numbered in the order they are
initiated and only the most recently initiated cycle may update the
displayed data, so a slow superseded cycle can never overwrite the
result of a newer one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sales_dashboard.exceptions import FetchError
from sales_dashboard.services.merge_service import build_display_model
from sales_dashboard.types import (
    CycleOutcome,
    DateValue,
    DisplayModel,
    FilterState,
    JoinPolicy,
    LoadState,
    describe_period,
)

if TYPE_CHECKING:
    from sales_dashboard.services.fetch_orchestrator import FetchOrchestrator

logger = logging.getLogger(__name__)


class DashboardController:
    """
    View-model controller for the sales dashboard.

    State machine:
        IDLE -> LOADING on the first trigger, LOADING -> READY when the
        latest cycle settles, READY -> LOADING on every new trigger.
        A failed cycle also ends in READY: the previous display model is
        kept and the error is exposed through last_error and the
        returned CycleOutcome. Unexpected errors and cancellation are
        propagated to the caller, but the state still returns to READY.

    Attributes:
        _orchestrator: Performs the five-source fetch.
        _join_policy: Daily join policy passed to the merge stage.
        _resort_rankings: Whether rankings are sorted locally.
        _issued_sequence: Number of the most recently initiated cycle.
    """

    def __init__(
        self,
        orchestrator: FetchOrchestrator,
        join_policy: JoinPolicy = JoinPolicy.SALES_DRIVEN,
        resort_rankings: bool = True,
    ) -> None:
        self._orchestrator = orchestrator
        self._join_policy = join_policy
        self._resort_rankings = resort_rankings

        self._filters = FilterState.cleared()
        self._display_model: Optional[DisplayModel] = None
        self._load_state = LoadState.IDLE
        self._last_error: Optional[FetchError] = None
        self._issued_sequence = 0

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def display_model(self) -> Optional[DisplayModel]:
        """Model of the latest successful cycle, None before the first one."""
        return self._display_model

    @property
    def load_state(self) -> LoadState:
        return self._load_state

    @property
    def last_error(self) -> Optional[FetchError]:
        """Error of the latest settled cycle, None if it succeeded."""
        return self._last_error

    @property
    def is_stale(self) -> bool:
        """True when the shown data predates a failed cycle."""
        return self._last_error is not None and self._display_model is not None

    async def mount(self) -> CycleOutcome:
        """Run the initial cycle."""
        return await self._run_cycle("mount")

    async def refresh(self) -> CycleOutcome:
        """Re-fetch with the current filters."""
        return await self._run_cycle("refresh")

    async def set_start(self, value: Optional[DateValue]) -> CycleOutcome:
        """Change the start bound and fetch."""
        self._filters = self._filters.with_start(value)
        return await self._run_cycle("start changed")

    async def set_end(self, value: Optional[DateValue]) -> CycleOutcome:
        """Change the end bound and fetch."""
        self._filters = self._filters.with_end(value)
        return await self._run_cycle("end changed")

    async def set_filters(self, filters: FilterState) -> CycleOutcome:
        """Replace both bounds and fetch."""
        self._filters = filters
        return await self._run_cycle("filters changed")

    async def clear_filter(self) -> CycleOutcome:
        """Reset the filters to fully unset and fetch."""
        self._filters = FilterState.cleared()
        return await self._run_cycle("filter cleared")

    def _is_superseded(self, sequence: int) -> bool:
        return sequence != self._issued_sequence

    async def _run_cycle(self, trigger: str) -> CycleOutcome:
        """
        Run one fetch cycle for a snapshot of the current filters.

        Args:
            trigger: Short description of what started the cycle, for logs.

        Returns:
            CycleOutcome of this cycle. accepted is False when a newer
            cycle was initiated while this one was in flight.
        """
        self._issued_sequence += 1
        sequence = self._issued_sequence
        snapshot = self._filters
        self._load_state = LoadState.LOADING

        logger.debug(
            "Cycle %d started (%s): %s", sequence, trigger, describe_period(snapshot)
        )

        try:
            raw = await self._orchestrator.fetch_all(snapshot)
            model = build_display_model(raw, self._join_policy, self._resort_rankings)
        except FetchError as e:
            if self._is_superseded(sequence):
                logger.debug("Cycle %d superseded, discarding error: %s", sequence, e)
                return CycleOutcome(sequence, snapshot, error=e, accepted=False)

            logger.error("Fetch error in cycle %d: %s", sequence, e)
            self._last_error = e
            return CycleOutcome(sequence, snapshot, error=e)
        finally:
            # The latest cycle always leaves LOADING, even when it raised
            # something other than FetchError or was cancelled
            if not self._is_superseded(sequence):
                self._load_state = LoadState.READY

        if self._is_superseded(sequence):
            logger.debug("Cycle %d superseded, discarding result", sequence)
            return CycleOutcome(sequence, snapshot, model=model, accepted=False)

        self._display_model = model
        self._last_error = None
        logger.info(
            "Cycle %d ready: %d days, %d products, %d customers",
            sequence,
            len(model.combined_daily),
            len(model.top_products),
            len(model.top_customers),
        )
        return CycleOutcome(sequence, snapshot, model=model)
