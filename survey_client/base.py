"""Base HTTP client for the SurveyMonkey v2 API."""

import asyncio

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from settings import ApiConfig
from survey_client.errors import RemoteError, RemoteNotFoundError


# Envelope status for a malformed request, e.g. an unknown survey_id
STATUS_INVALID_REQUEST = 3


def _is_retryable_status(status_code: int) -> bool:
    """5xx and rate-limit responses are worth another attempt."""
    return status_code >= 500 or status_code == 429


class BaseClient:
    """Base async HTTP client with rate limiting.

    Retries are left to the caller; every failure surfaces as ``RemoteError``.
    """

    def __init__(self, config: ApiConfig, transport: httpx.AsyncBaseTransport | None = None):
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(config.max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, config.max_concurrent)

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def open(self) -> None:
        """Create the underlying connection pool."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
            headers={
                "Authorization": f"bearer {self._config.access_token}",
                "Content-Type": "application/json",
            },
            params={"api_key": self._config.api_key},
            transport=self._transport,
        )

    async def aclose(self) -> None:
        """Close the connection pool."""
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _post(self, method: str, payload: dict | None = None) -> dict | list:
        """POST to an API method and unwrap the ``{"status", "data"}`` envelope."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")

        async with self._sem:
            if self._config.request_delay:
                await asyncio.sleep(self._config.request_delay)
            self._request_count += 1
            try:
                resp = await self._client.post(method, json=payload or {})
            except httpx.TimeoutException as e:
                raise RemoteError(f"{method}: timed out", retryable=True) from e
            except httpx.TransportError as e:
                raise RemoteError(f"{method}: {e}", retryable=True) from e

        if resp.status_code == 404:
            raise RemoteNotFoundError(f"{method}: not found")
        if resp.is_error:
            raise RemoteError(
                f"{method}: HTTP {resp.status_code}",
                status_code=resp.status_code,
                retryable=_is_retryable_status(resp.status_code),
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise RemoteError(f"{method}: response is not JSON") from e

        if not isinstance(body, dict) or "status" not in body:
            raise RemoteError(f"{method}: missing response envelope")
        if body["status"] != 0:
            raise RemoteError(
                f"{method}: upstream status {body['status']} {body.get('errmsg') or ''}".strip(),
                upstream_status=body["status"],
            )

        data = body.get("data")
        if data is None:
            raise RemoteError(f"{method}: response has no data")
        return data


def parse(schema, data, method: str):
    """Validate raw data against a schema or type, as ``RemoteError`` on mismatch."""
    try:
        return TypeAdapter(schema).validate_python(data)
    except ValidationError as e:
        raise RemoteError(f"{method}: unexpected response shape ({e.error_count()} errors)") from e
