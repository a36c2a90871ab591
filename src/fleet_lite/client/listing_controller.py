"""Listing controller: fetch once, then filter and page in memory.

The controller is the only component that talks to the truck API. It owns
a :class:`ListingState` and changes it exclusively through
:func:`fleet_lite.client.listing_state.reduce`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from fleet_lite.client.config import ClientConfig
from fleet_lite.client.errors import FetchError, ListingStateError
from fleet_lite.client.listing_state import (
    AddDialogClosed,
    AddDialogOpened,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    GenderChanged,
    ListingAction,
    ListingState,
    ListingStatus,
    PageChanged,
    SkinChanged,
    TextChanged,
    TruckSaved,
    reduce,
)
from fleet_lite.client.trucks_api import TrucksApiClient
from fleet_lite.domain.pagination import page_count
from fleet_lite.domain.truck import GenderFacet, Truck, TruckDraft, TruckFilters

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListingView:
    """What the rendering layer needs to draw the truck table."""

    trucks: tuple[Truck, ...]
    filters: TruckFilters
    total: int
    offset: int
    page_size: int
    is_loading: bool
    error: str | None
    add_dialog_open: bool
    # Lets the view offer a "clear filters" control
    has_active_filters: bool

    @property
    def page_number(self) -> int:
        """1-based number of the visible page."""
        return self.offset // self.page_size + 1

    @property
    def page_count(self) -> int:
        return page_count(self.total, self.page_size)


class ListingController:
    def __init__(self, api_client: TrucksApiClient, config: ClientConfig) -> None:
        self._api = api_client
        self._config = config
        self._state = ListingState(page_size=config.page_size)
        self._fetch_task: asyncio.Task[list[Truck]] | None = None
        self._torn_down = False
        self._text_generation = 0

    @property
    def state(self) -> ListingState:
        return self._state

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    @property
    def view(self) -> ListingView:
        state = self._state
        return ListingView(
            trucks=state.page,
            filters=state.filters,
            total=len(state.filtered),
            offset=state.offset,
            page_size=state.page_size,
            is_loading=state.status is ListingStatus.LOADING,
            error=state.error,
            add_dialog_open=state.add_dialog_open,
            has_active_filters=not state.filters.is_empty(),
        )

    def _dispatch(self, action: ListingAction) -> ListingState:
        if self._torn_down:
            raise ListingStateError(f"Controller torn down; rejected {type(action).__name__}")
        self._state = reduce(self._state, action)
        return self._state

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def mount(self) -> None:
        """Fetch the full truck set once.

        A fetch failure moves the state to ``errored`` instead of raising.
        A result that arrives after :meth:`teardown` is discarded.

        Raises:
            ListingStateError: If called twice or after teardown
        """
        self._dispatch(FetchStarted())
        _logger.info("Fetching trucks", extra={"base_url": self._config.base_url})

        self._fetch_task = asyncio.ensure_future(self._api.list_trucks())
        try:
            trucks = await self._fetch_task
        except asyncio.CancelledError:
            if self._torn_down:
                _logger.info("Truck fetch cancelled by teardown")
                return
            raise
        except FetchError as exc:
            if self._torn_down:
                _logger.info("Discarding truck fetch failure after teardown")
                return
            _logger.warning(
                "Truck fetch failed",
                extra={
                    "error_code": exc.error_code,
                    "status_code": exc.status_code,
                    "error_message": exc.message,
                },
            )
            self._dispatch(FetchFailed(message=exc.message))
            return
        except Exception as exc:
            if self._torn_down:
                _logger.info("Discarding truck fetch failure after teardown")
                return
            _logger.exception(
                "Unexpected truck fetch failure",
                extra={"error_type": type(exc).__name__, "error_message": str(exc)},
            )
            self._dispatch(FetchFailed(message=f"Unexpected error while fetching trucks: {exc}"))
            return
        finally:
            self._fetch_task = None

        if self._torn_down:
            _logger.info("Discarding truck fetch result after teardown")
            return

        self._dispatch(FetchSucceeded(trucks=tuple(trucks)))
        _logger.info("Trucks loaded", extra={"count": len(trucks)})

    def teardown(self) -> None:
        """Detach the controller. Pending fetches are cancelled; later results are dropped."""
        if self._torn_down:
            return
        self._torn_down = True
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()

    # ------------------------------------------------------------------
    # Filter and page callbacks (synchronous, no network)
    # ------------------------------------------------------------------

    def change_text(self, query: str) -> ListingView:
        # Supersedes any debounced keystroke still waiting
        self._text_generation += 1
        self._dispatch(TextChanged(query=query))
        return self.view

    async def change_text_debounced(self, query: str) -> bool:
        """Apply a keystroke once typing pauses.

        Returns:
            True if this query was applied, False if a newer keystroke (or
            teardown) superseded it
        """
        self._text_generation += 1
        generation = self._text_generation
        await asyncio.sleep(self._config.text_debounce_seconds)
        if generation != self._text_generation or self._torn_down:
            return False
        self._dispatch(TextChanged(query=query))
        return True

    def change_gender(self, facet: GenderFacet | str) -> ListingView:
        self._dispatch(GenderChanged(facet=facet))
        return self.view

    def change_skin(self, facet: str) -> ListingView:
        self._dispatch(SkinChanged(facet=facet))
        return self.view

    def change_page(self, offset: int) -> ListingView:
        self._dispatch(PageChanged(offset=offset))
        return self.view

    def next_page(self) -> ListingView:
        return self.change_page(self._state.offset + self._state.page_size)

    def previous_page(self) -> ListingView:
        return self.change_page(max(self._state.offset - self._state.page_size, 0))

    # ------------------------------------------------------------------
    # Add / edit dialog
    # ------------------------------------------------------------------

    def open_add_dialog(self) -> ListingView:
        self._dispatch(AddDialogOpened())
        return self.view

    def close_add_dialog(self) -> ListingView:
        self._dispatch(AddDialogClosed())
        return self.view

    async def save_truck(self, draft: TruckDraft, truck_id: str | None = None) -> Truck:
        """Create (or update, when truck_id is given) a truck and merge it locally.

        The dialog closes on success. Errors propagate to the dialog so it
        can show them next to the form.

        Raises:
            TruckValidationError: If the draft is invalid
            FetchError: If the API rejects the request or is unreachable
            ListingStateError: If the listing has no data or was torn down
        """
        if self._torn_down:
            raise ListingStateError("Controller torn down; cannot save truck")
        if not self._state.has_data:
            raise ListingStateError(f"Cannot save a truck while {self._state.status.value}")

        draft.validate()
        if truck_id is None:
            truck = await self._api.create_truck(draft)
        else:
            truck = await self._api.update_truck(truck_id, draft)

        if self._torn_down:
            _logger.info("Discarding saved truck after teardown", extra={"truck_id": truck.id})
            return truck

        self._dispatch(TruckSaved(truck=truck))
        self._dispatch(AddDialogClosed())
        _logger.info("Truck saved", extra={"truck_id": truck.id, "updated": truck_id is not None})
        return truck
