"""Errors raised on the listing client side."""

from __future__ import annotations

from typing import Any

from fleet_lite.domain.errors import DomainError


class FetchError(DomainError):
    """HTTP-level failure talking to the truck API.

    Covers network errors, timeouts, non-2xx responses and payloads that
    cannot be read as trucks.
    """

    error_code: str = "FETCH_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
        **context: Any,
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message, status_code=status_code, endpoint=endpoint, **context)


class ListingStateError(DomainError):
    """Action not allowed in the controller's current lifecycle state."""

    error_code: str = "LISTING_STATE_ERROR"
