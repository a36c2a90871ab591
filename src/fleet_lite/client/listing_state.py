"""Listing state, the actions that change it, and the reducer.

The state is a frozen value. Every change goes through :func:`reduce`,
which never performs I/O, so a listing session can be replayed from its
action log.

Transitions::

    idle --FetchStarted--> loading --FetchSucceeded--> loaded
                                   --FetchFailed----> errored
    loaded | filtered --TextChanged/GenderChanged/SkinChanged--> filtered
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from fleet_lite.client.errors import ListingStateError
from fleet_lite.domain.pagination import ITEMS_PER_PAGE, last_page_offset, paginate
from fleet_lite.domain.truck import GenderFacet, PagingValidationError, Truck, TruckFilters
from fleet_lite.domain.truck_filter import apply_filters


class ListingStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FILTERED = "filtered"
    ERRORED = "errored"


_DATA_READY = (ListingStatus.LOADED, ListingStatus.FILTERED)


@dataclass(frozen=True, slots=True)
class ListingState:
    status: ListingStatus = ListingStatus.IDLE
    all_trucks: tuple[Truck, ...] = ()
    filtered: tuple[Truck, ...] = ()
    page: tuple[Truck, ...] = ()
    filters: TruckFilters = field(default_factory=TruckFilters)
    offset: int = 0
    page_size: int = ITEMS_PER_PAGE
    error: str | None = None
    add_dialog_open: bool = False

    @property
    def has_data(self) -> bool:
        return self.status in _DATA_READY

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly snapshot of the whole state."""
        return {
            "status": self.status.value,
            "all_trucks": [dataclasses.asdict(truck) for truck in self.all_trucks],
            "filtered_ids": [truck.id for truck in self.filtered],
            "page_ids": [truck.id for truck in self.page],
            "filters": {
                "text": self.filters.text,
                "gender": self.filters.gender.value,
                "skin": self.filters.skin,
            },
            "offset": self.offset,
            "page_size": self.page_size,
            "error": self.error,
            "add_dialog_open": self.add_dialog_open,
        }


# ==============================================================================
# Actions
# ==============================================================================


@dataclass(frozen=True, slots=True)
class FetchStarted:
    pass


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    trucks: tuple[Truck, ...]


@dataclass(frozen=True, slots=True)
class FetchFailed:
    message: str


@dataclass(frozen=True, slots=True)
class TextChanged:
    query: str


@dataclass(frozen=True, slots=True)
class GenderChanged:
    facet: GenderFacet | str


@dataclass(frozen=True, slots=True)
class SkinChanged:
    facet: str


@dataclass(frozen=True, slots=True)
class PageChanged:
    offset: int


@dataclass(frozen=True, slots=True)
class AddDialogOpened:
    pass


@dataclass(frozen=True, slots=True)
class AddDialogClosed:
    pass


@dataclass(frozen=True, slots=True)
class TruckSaved:
    truck: Truck


ListingAction = (
    FetchStarted
    | FetchSucceeded
    | FetchFailed
    | TextChanged
    | GenderChanged
    | SkinChanged
    | PageChanged
    | AddDialogOpened
    | AddDialogClosed
    | TruckSaved
)


# ==============================================================================
# Reducer
# ==============================================================================


def _refilter(state: ListingState, filters: TruckFilters, status: ListingStatus) -> ListingState:
    """Recompute filtered set and first page from the resident full set."""
    filtered = tuple(apply_filters(state.all_trucks, filters))
    return dataclasses.replace(
        state,
        status=status,
        filters=filters,
        filtered=filtered,
        offset=0,
        page=tuple(paginate(filtered, state.page_size, 0)),
    )


def _change_filters(state: ListingState, filters: TruckFilters) -> ListingState:
    if not state.has_data:
        # Kept until the data arrive; FetchSucceeded applies them
        return dataclasses.replace(state, filters=filters)
    return _refilter(state, filters, ListingStatus.FILTERED)


def _change_page(state: ListingState, offset: int) -> ListingState:
    if offset < 0 or offset % state.page_size:
        raise PagingValidationError(
            f"offset must be a non-negative multiple of {state.page_size}, got {offset}"
        )
    if not state.has_data:
        raise ListingStateError(f"Cannot change page while {state.status.value}")

    offset = min(offset, last_page_offset(len(state.filtered), state.page_size))
    return dataclasses.replace(
        state,
        offset=offset,
        page=tuple(paginate(state.filtered, state.page_size, offset)),
    )


def _save_truck(state: ListingState, truck: Truck) -> ListingState:
    if not state.has_data:
        raise ListingStateError(f"Cannot merge a saved truck while {state.status.value}")

    if any(existing.id == truck.id for existing in state.all_trucks):
        all_trucks = tuple(
            truck if existing.id == truck.id else existing for existing in state.all_trucks
        )
    else:
        all_trucks = state.all_trucks + (truck,)

    filtered = tuple(apply_filters(all_trucks, state.filters))
    offset = min(state.offset, last_page_offset(len(filtered), state.page_size))
    return dataclasses.replace(
        state,
        all_trucks=all_trucks,
        filtered=filtered,
        offset=offset,
        page=tuple(paginate(filtered, state.page_size, offset)),
    )


def reduce(state: ListingState, action: ListingAction) -> ListingState:
    """
    Apply one action to the state.

    Raises:
        ListingStateError: If the action is not allowed in the current status
        FilterValidationError: If a gender facet is not a known value
        PagingValidationError: If a page offset is malformed
    """
    if isinstance(action, FetchStarted):
        if state.status is not ListingStatus.IDLE:
            raise ListingStateError(f"Fetch already issued (status: {state.status.value})")
        return dataclasses.replace(state, status=ListingStatus.LOADING, error=None)

    if isinstance(action, FetchSucceeded):
        if state.status is not ListingStatus.LOADING:
            raise ListingStateError(f"No fetch in flight (status: {state.status.value})")
        loaded = dataclasses.replace(state, all_trucks=tuple(action.trucks))
        return _refilter(loaded, state.filters, ListingStatus.LOADED)

    if isinstance(action, FetchFailed):
        if state.status is not ListingStatus.LOADING:
            raise ListingStateError(f"No fetch in flight (status: {state.status.value})")
        return dataclasses.replace(state, status=ListingStatus.ERRORED, error=action.message)

    if isinstance(action, TextChanged):
        return _change_filters(state, dataclasses.replace(state.filters, text=action.query))

    if isinstance(action, GenderChanged):
        facet = GenderFacet.parse(action.facet)
        return _change_filters(state, dataclasses.replace(state.filters, gender=facet))

    if isinstance(action, SkinChanged):
        return _change_filters(state, dataclasses.replace(state.filters, skin=action.facet))

    if isinstance(action, PageChanged):
        return _change_page(state, action.offset)

    if isinstance(action, AddDialogOpened):
        return dataclasses.replace(state, add_dialog_open=True)

    if isinstance(action, AddDialogClosed):
        return dataclasses.replace(state, add_dialog_open=False)

    if isinstance(action, TruckSaved):
        return _save_truck(state, action.truck)

    raise TypeError(f"Unknown listing action: {action!r}")
