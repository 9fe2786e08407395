"""Dry-run notifier that prints messages instead of posting them."""

import logging
from typing import List, Tuple

from ...domain.entities.delivery_result import DeliveryResult
from ...domain.repositories.notifier import Notifier

logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):
    """Writes each message to stdout and records it; always succeeds."""

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.sent: List[Tuple[str, str]] = []

    def send(self, webhook_url: str, content: str, webhook_index: int = 1) -> DeliveryResult:
        self.sent.append((webhook_url, content))
        logger.info(
            f"DRY RUN: would post {len(content)} characters to webhook {webhook_index}"
        )
        if self.echo:
            print(f"\n📡 Webhook URL: {webhook_url}")
            print(f"📏 Content Length: {len(content)} characters")
            print("─" * 50)
            print(content)
            print("─" * 50)
        return DeliveryResult(
            webhook_index=webhook_index,
            webhook_url=webhook_url,
            success=True,
            status=204,
        )
