"""HTTP client for the truck API, used by the listing controller."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from fleet_lite.client.config import ClientConfig
from fleet_lite.client.errors import FetchError
from fleet_lite.domain.truck import Truck, TruckDraft

_logger = logging.getLogger(__name__)

TRUCKS_ENDPOINT = "/v1/trucks"


class TruckPayload(BaseModel):
    """Truck as received from the API. Unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    license_number: str = Field(alias="License_number")
    truck_type: str = Field(alias="Truck_type")
    license_type: str = Field(alias="License_type")
    production_year: int = Field(alias="Production_year")
    name: str | None = None
    gender: str | None = None
    skin_color: str | None = Field(default=None, alias="skinColor")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Some backends serve integer ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_domain(self) -> Truck:
        return Truck(
            id=self.id,
            license_number=self.license_number,
            truck_type=self.truck_type,
            license_type=self.license_type,
            production_year=self.production_year,
            name=self.name,
            gender=self.gender,
            skin_color=self.skin_color,
        )


_TRUCK_LIST = TypeAdapter(list[TruckPayload])


def _draft_body(draft: TruckDraft) -> dict[str, Any]:
    return {
        "License_number": draft.license_number,
        "Truck_type": draft.truck_type,
        "License_type": draft.license_type,
        "Production_year": draft.production_year,
        "name": draft.name,
        "gender": draft.gender,
        "skinColor": draft.skin_color,
    }


class TrucksApiClient:
    """Async client for ``/v1/trucks``.

    The httpx client is created on first use and closed by :meth:`aclose`
    unless one was injected, in which case its owner closes it.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> TrucksApiClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._config.timeout_seconds)
        return self._http

    async def _request(self, method: str, endpoint: str, json: Any = None) -> Any:
        url = f"{self._config.base_url}{endpoint}"
        _logger.debug("%s %s", method, url)

        try:
            resp = await self._client().request(
                method, url, json=json, timeout=self._config.timeout_seconds
            )
        except httpx.TimeoutException as exc:
            raise FetchError(
                f"Request to {endpoint} timed out after {self._config.timeout_seconds}s",
                endpoint=endpoint,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc
        except (httpx.InvalidURL, RuntimeError) as exc:
            # Bad base_url, or an injected client that was already closed
            raise FetchError(f"Request to {endpoint} failed: {exc}", endpoint=endpoint) from exc

        if not resp.is_success:
            raise FetchError(
                f"HTTP {resp.status_code} from {endpoint}: {resp.text[:200]}",
                status_code=resp.status_code,
                endpoint=endpoint,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError(
                f"Invalid JSON from {endpoint}: {resp.text[:200]}",
                status_code=resp.status_code,
                endpoint=endpoint,
            ) from exc

    async def list_trucks(self) -> list[Truck]:
        """Fetch the full truck set.

        Raises:
            FetchError: On transport failure, non-2xx status, malformed
                payload or a repeated truck id
        """
        body = await self._request("GET", TRUCKS_ENDPOINT)

        try:
            payloads = _TRUCK_LIST.validate_python(body)
        except PydanticValidationError as exc:
            raise FetchError(
                f"Unexpected truck list payload from {TRUCKS_ENDPOINT}: "
                f"{exc.error_count()} invalid field(s)",
                endpoint=TRUCKS_ENDPOINT,
            ) from exc

        trucks = [payload.to_domain() for payload in payloads]

        seen: set[str] = set()
        for truck in trucks:
            if truck.id in seen:
                raise FetchError(
                    f"Duplicate truck id '{truck.id}' in {TRUCKS_ENDPOINT} response",
                    endpoint=TRUCKS_ENDPOINT,
                )
            seen.add(truck.id)

        return trucks

    async def create_truck(self, draft: TruckDraft) -> Truck:
        body = await self._request("POST", TRUCKS_ENDPOINT, json=_draft_body(draft))
        return self._parse_one(body, TRUCKS_ENDPOINT)

    async def update_truck(self, truck_id: str, draft: TruckDraft) -> Truck:
        endpoint = f"{TRUCKS_ENDPOINT}/{truck_id}"
        body = await self._request("PUT", endpoint, json=_draft_body(draft))
        return self._parse_one(body, endpoint)

    @staticmethod
    def _parse_one(body: Any, endpoint: str) -> Truck:
        try:
            return TruckPayload.model_validate(body).to_domain()
        except PydanticValidationError as exc:
            raise FetchError(
                f"Unexpected truck payload from {endpoint}", endpoint=endpoint
            ) from exc
