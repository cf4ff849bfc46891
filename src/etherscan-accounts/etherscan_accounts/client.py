import logging
import time
from typing import Any, Dict, Mapping, Optional

import requests

logger = logging.getLogger(__name__)


class EtherscanClient:
    """Thin wrapper around the Etherscan API with basic retry."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        chain_id: str,
        timeout: int = 10,
        max_retries: int = 3,
        backoff_seconds: float = 0.5,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.chain_id = chain_id
        self.timeout = timeout
        self.max_retries = max(1, int(max_retries))
        self.backoff_seconds = backoff_seconds
        self.session = session or requests.Session()
        self.session.headers.update({"X-API-Key": api_key})

    def perform(self, module: str, action: str, params: Mapping[str, str]) -> Any:
        """Run one API call and return the decoded JSON payload."""
        query: Dict[str, Any] = {
            "module": module,
            "action": action,
            **params,
            "chainid": self.chain_id,
        }
        return self._request(query)

    def _is_rate_limit_payload(self, payload: Any) -> bool:
        if not isinstance(payload, dict):
            return False

        candidates: list[str] = []
        for key in ("message", "result"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                candidates.append(value)

        haystack = " ".join(candidates).lower()
        if not haystack:
            return False

        return (
            "rate limit" in haystack
            or "max calls per sec" in haystack
            or "max calls per second" in haystack
            or "too many requests" in haystack
        )

    def _sleep(self, attempt: int) -> None:
        time.sleep(self.backoff_seconds * attempt)

    def _request(self, params: Dict[str, Any]) -> Any:
        merged = {**params, "apikey": self.api_key}
        last_error: Optional[Exception] = None
        action = params.get("action")

        for attempt in range(1, self.max_retries + 1):
            try:
                logger.debug("GET %s action=%s attempt=%d", self.base_url, action, attempt)
                response = self.session.get(
                    self.base_url,
                    params=merged,
                    timeout=self.timeout,
                )
                if response.status_code >= 500 and attempt < self.max_retries:
                    logger.warning(
                        "Etherscan returned HTTP %d for action=%s (attempt %d/%d)",
                        response.status_code,
                        action,
                        attempt,
                        self.max_retries,
                    )
                    self._sleep(attempt)
                    continue

                response.raise_for_status()
                payload = response.json()
                if self._is_rate_limit_payload(payload) and attempt < self.max_retries:
                    logger.warning(
                        "Rate limited on action=%s (attempt %d/%d)", action, attempt, self.max_retries
                    )
                    self._sleep(attempt)
                    continue
                return payload
            except requests.RequestException as exc:
                last_error = exc
                if attempt < self.max_retries:
                    logger.warning("Request for action=%s failed: %s", action, exc)
                    self._sleep(attempt)
                else:
                    raise
            except ValueError as exc:
                last_error = exc
                if attempt < self.max_retries:
                    self._sleep(attempt)
                else:
                    raise ValueError("Failed to parse response from Etherscan.") from exc

        if last_error:
            raise last_error

        raise RuntimeError("Request failed without raising an exception.")
