"""Listing client configuration."""

from __future__ import annotations

import dataclasses
import os

from fleet_lite.domain.pagination import ITEMS_PER_PAGE


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Settings for the truck API client and listing controller.

    Parameters
    ----------
    base_url : str
        Root of the truck API, without the ``/v1`` prefix
        (e.g. ``"http://localhost:8000"``).
    timeout_seconds : float
        Timeout applied to every HTTP call, including the initial fetch.
    page_size : int
        Rows per listing page.
    text_debounce_seconds : float
        Quiet period before a debounced text query is applied.
    """

    base_url: str
    timeout_seconds: float = 10.0
    page_size: int = ITEMS_PER_PAGE
    text_debounce_seconds: float = 0.3

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        # Endpoint paths are joined with a leading slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")
        if self.text_debounce_seconds < 0:
            raise ValueError("text_debounce_seconds must be >= 0")

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``FLEET_*`` environment variables."""
        base_url = os.getenv("FLEET_API_BASE_URL")
        if not base_url:
            raise RuntimeError("FLEET_API_BASE_URL environment variable is not set")

        page_size_raw = os.getenv("FLEET_PAGE_SIZE")
        try:
            page_size = int(page_size_raw) if page_size_raw else ITEMS_PER_PAGE
        except ValueError:
            raise RuntimeError(f"FLEET_PAGE_SIZE must be an integer, got {page_size_raw!r}")

        return cls(
            base_url=base_url,
            timeout_seconds=_float_env("FLEET_API_TIMEOUT_SECONDS", 10.0),
            page_size=page_size,
            text_debounce_seconds=_float_env("FLEET_TEXT_DEBOUNCE_SECONDS", 0.3),
        )
