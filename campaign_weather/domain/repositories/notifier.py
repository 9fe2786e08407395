"""Notifier interface."""

from abc import ABC, abstractmethod

from ..entities.delivery_result import DeliveryResult


class Notifier(ABC):
    """Abstract transport delivering formatted messages to a webhook."""

    @abstractmethod
    def send(self, webhook_url: str, content: str, webhook_index: int = 1) -> DeliveryResult:
        """
        Deliver one message.

        Args:
            webhook_url: Target webhook URL
            content: Message text, already within the transport's size limit
            webhook_index: 1-based position of the URL, used in reports

        Returns:
            DeliveryResult describing success or failure; delivery problems
            are reported here rather than raised
        """
        pass
