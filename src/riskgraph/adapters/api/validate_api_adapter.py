from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from riskgraph.adapters.api.rate_limiter import SimpleRateLimiter, backoff_sleep
from riskgraph.config import settings
from riskgraph.core.errors import DataSourceError
from riskgraph.ports.wallet_graph_port import WalletGraphPort


logger = logging.getLogger(__name__)


class ValidateApiAdapter(WalletGraphPort):

    def __init__(
        self,
        url: str = settings.RISKGRAPH_API_URL,
        requests_per_sec: float = settings.RISKGRAPH_API_REQUESTS_PER_SEC,
        timeout_sec: int = settings.RISKGRAPH_API_TIMEOUT_SEC,
        max_retries: int = settings.RISKGRAPH_API_MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_sec
        self._max_retries = max(1, max_retries)
        self._rl = SimpleRateLimiter(requests_per_sec)
        self._session = session or requests.Session()

    def fetch_payload(self) -> Dict[str, Any]:
        last_err: Optional[Exception] = None
        for attempt in range(self._max_retries):
            if attempt:
                backoff_sleep(attempt - 1)
            try:
                self._rl.wait()
                resp = self._session.get(
                    self._url,
                    headers={"Content-Type": "application/json"},
                    timeout=self._timeout,
                )
            except requests.RequestException as e:
                last_err = e
                self._log_retry(attempt, e)
                continue

            # only throttling and server errors are worth retrying
            if resp.status_code == 429 or resp.status_code >= 500:
                last_err = DataSourceError(f"API error: {resp.status_code} {resp.reason}")
                self._log_retry(attempt, last_err)
                continue
            if not resp.ok:
                raise DataSourceError(f"API error: {resp.status_code} {resp.reason}")

            try:
                data = resp.json()
            except ValueError as e:
                raise DataSourceError(f"Validate response is not JSON: {e}") from e
            if not isinstance(data, dict):
                raise DataSourceError(f"Invalid validate response: {data!r}")
            return data

        raise DataSourceError(f"Validate API failed after retries: {last_err}")

    def _log_retry(self, attempt: int, err: Exception) -> None:
        logger.warning(
            "Fetching %s failed (attempt %d/%d): %s",
            self._url, attempt + 1, self._max_retries, err,
        )
