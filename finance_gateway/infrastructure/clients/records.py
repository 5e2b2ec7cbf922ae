"""Hosted record store HTTP client with exponential backoff retry logic"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from finance_gateway.config import settings
from finance_gateway.domain.exceptions import RecordStoreError
from finance_gateway.infrastructure.observability.metrics import (
    record_store_failures_counter,
    record_store_latency_histogram,
)

logger = logging.getLogger(__name__)

# Only records that have not been soft-deleted
NOT_DELETED = {"field": "IsDeleted", "operator": "ExactMatch", "values": [False]}


class _RetryableError(Exception):
    pass


class RecordStoreClient:
    """Client for the hosted record store (fetch/create/update/delete per table)"""

    def __init__(
        self,
        owner_id: str,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.owner_id = owner_id
        self.base_url = (base_url or settings.record_store_base).rstrip("/")
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.max_retries = settings.record_store_max_retries if max_retries is None else max_retries
        self.backoff_base = settings.record_store_backoff_base if backoff_base is None else backoff_base
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "X-Project-Id": settings.record_store_project_id,
            "X-Public-Key": settings.record_store_public_key,
            "X-Owner-Id": self.owner_id,
        }

    async def _send(self, operation: str, method: str, table: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one request to the record store and return the decoded body.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base, ...
        - Retries on timeouts, connection failures and 5xx responses
        - 4xx responses and malformed bodies fail immediately

        Raises:
            RecordStoreError: On exhausted retries, HTTP errors, or invalid response
        """
        url = f"{self.base_url}/v1/tables/{table}/{path}"
        attempt = 0

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            while True:
                try:
                    with record_store_latency_histogram.labels(operation=operation).time():
                        response = await client.request(method, url, json=payload, headers=self._headers())
                    if response.status_code >= 500:
                        raise _RetryableError(f"Record store error: {response.status_code}")
                    response.raise_for_status()
                    body = response.json()
                    if not isinstance(body, dict):
                        raise RecordStoreError("Invalid response from record store")
                    return body

                except (_RetryableError, httpx.TimeoutException, httpx.TransportError) as e:
                    attempt += 1
                    record_store_failures_counter.labels(operation=operation).inc()

                    if attempt >= self.max_retries:
                        if isinstance(e, httpx.TimeoutException):
                            raise RecordStoreError(f"Record store timeout after {self.timeout}s") from e
                        raise RecordStoreError(f"Record store unavailable: {e}") from e

                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    logger.warning(
                        "Record store call failed, retrying",
                        extra={"operation": operation, "table": table, "attempt": attempt, "backoff": backoff},
                    )
                    await asyncio.sleep(backoff)

                except httpx.HTTPStatusError as e:
                    record_store_failures_counter.labels(operation=operation).inc()
                    raise RecordStoreError(f"Record store error: {e.response.status_code}") from e
                except ValueError as e:
                    record_store_failures_counter.labels(operation=operation).inc()
                    raise RecordStoreError(f"Invalid response from record store: {e}") from e

    @staticmethod
    def _results(body: Dict[str, Any], default_message: str) -> List[Dict[str, Any]]:
        """Unwrap per-record results, surfacing the store's own error message"""
        results = body.get("results") or []
        if not body.get("success") or not results or not isinstance(results, list):
            raise RecordStoreError(default_message)

        records = []
        for result in results:
            if not isinstance(result, dict):
                raise RecordStoreError(f"{default_message}: invalid response from record store")
            if not result.get("success"):
                raise RecordStoreError(result.get("message") or default_message)
            data = result.get("data") or {}
            if not isinstance(data, dict):
                raise RecordStoreError(f"{default_message}: invalid response from record store")
            records.append(data)

        return records

    async def fetch_records(
        self,
        table: str,
        fields: List[str],
        order_by: Optional[List[Dict[str, str]]] = None,
        where: Optional[List[Dict[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch all non-deleted records of a table.

        Returns an empty list when the store answers without data.
        """
        payload = {
            "fields": fields,
            "where": where if where is not None else [NOT_DELETED],
            "order_by": order_by or [],
        }
        body = await self._send("fetch", "POST", table, "query", payload)

        data = body.get("data")
        if not data:
            return []
        if not isinstance(data, list):
            raise RecordStoreError(f"Invalid {table} data from record store")
        return data

    async def create_records(self, table: str, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        body = await self._send("create", "POST", table, "records", {"records": records})
        return self._results(body, f"Failed to create {table}")

    async def update_records(self, table: str, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        body = await self._send("update", "PATCH", table, "records", {"records": records})
        return self._results(body, f"Failed to update {table}")

    async def delete_records(self, table: str, record_ids: List[int]) -> None:
        body = await self._send("delete", "DELETE", table, "records", {"record_ids": record_ids})
        if not body.get("success"):
            raise RecordStoreError(f"Failed to delete {table}")
