"""Shared HTTP plumbing for the name-prediction services.

Each call is a GET with a ``name`` query parameter and a per-call timeout.
Transport failures map to ``ProviderTimeoutError`` / ``ProviderUnavailableError``;
deciding whether a decoded body carries a prediction is left to subclasses.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any

import httpx

from personinfo.domain.exceptions import ProviderTimeoutError, ProviderUnavailableError

logger = logging.getLogger(__name__)


class PredictionClient:
    """Base class for one upstream lookup service. Stateless; share freely."""

    op: str = "predictor"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def _get(self, name: str) -> dict[str, Any]:
        # httpx bounds each connect/read separately; the deadline bounds the whole call
        deadline = time.monotonic() + self._timeout
        try:
            with self._client.stream(
                "GET", self._base_url, params={"name": name}, timeout=self._timeout,
            ) as resp:
                logger.debug("%s response status %s", self.op, resp.status_code)
                chunks: list[bytes] = []
                for chunk in resp.iter_bytes():
                    self._check_deadline(deadline)
                    chunks.append(chunk)
                self._check_deadline(deadline)
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"{self.op}: no response within {self._timeout:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(f"{self.op}: {exc}") from exc

        if not resp.is_success:
            raise ProviderUnavailableError(
                f"{self.op}: upstream returned HTTP {resp.status_code}"
            )
        try:
            body = json.loads(b"".join(chunks))
        except ValueError as exc:
            raise ProviderUnavailableError(f"{self.op}: response is not JSON") from exc
        if not isinstance(body, dict):
            raise ProviderUnavailableError(f"{self.op}: unexpected response shape")
        return body

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise ProviderTimeoutError(
                f"{self.op}: no complete response within {self._timeout:g}s"
            )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
