"""Discord webhook notifier implementation."""

import logging
import time
from typing import Optional

import requests

from ...domain.entities.delivery_result import DeliveryResult
from ...domain.repositories.notifier import Notifier

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = {429, 500, 502, 503, 504}


class DiscordWebhookNotifier(Notifier):
    """Posts message content to Discord webhooks with requests."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_sleep_sec: float = 1.0,
    ):
        """
        Initialize notifier.

        Args:
            session: HTTP session (default: a new requests.Session)
            timeout: Per-request timeout in seconds
            max_retries: Attempts per message, including the first
            retry_sleep_sec: Base delay; attempt n waits n times this long
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_sleep_sec = retry_sleep_sec

    def _retry_delay(self, attempt: int, response: Optional[requests.Response]) -> float:
        if response is not None and response.status_code == 429:
            try:
                return float(response.json().get("retry_after", 0)) or self.retry_sleep_sec
            except (ValueError, AttributeError):
                pass
        return self.retry_sleep_sec * attempt

    def send(self, webhook_url: str, content: str, webhook_index: int = 1) -> DeliveryResult:
        """Post `{"content": ...}`; any 2xx response counts as delivered."""
        last_error = None
        last_status = None

        for attempt in range(1, self.max_retries + 1):
            response = None
            try:
                response = self.session.post(
                    webhook_url,
                    json={"content": content},
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
            except requests.RequestException as e:
                last_error = str(e)
                logger.warning(
                    f"Webhook {webhook_index} request failed "
                    f"(attempt {attempt}/{self.max_retries}): {e}"
                )
            else:
                last_status = response.status_code
                if 200 <= response.status_code < 300:
                    logger.info(f"Message posted successfully to webhook {webhook_index}")
                    return DeliveryResult(
                        webhook_index=webhook_index,
                        webhook_url=webhook_url,
                        success=True,
                        status=response.status_code,
                    )
                last_error = f"Unexpected response status: {response.status_code}"
                logger.warning(f"{last_error} for webhook {webhook_index}")
                if response.status_code not in RETRYABLE_STATUSES:
                    break

            if attempt < self.max_retries:
                time.sleep(self._retry_delay(attempt, response))

        logger.error(f"Failed to send to webhook {webhook_index}: {last_error}")
        return DeliveryResult(
            webhook_index=webhook_index,
            webhook_url=webhook_url,
            success=False,
            status=last_status,
            error=last_error,
        )
