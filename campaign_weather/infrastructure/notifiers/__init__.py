"""Message delivery transports."""

from .discord_webhook_notifier import DiscordWebhookNotifier
from .console_notifier import ConsoleNotifier

__all__ = [
    "DiscordWebhookNotifier",
    "ConsoleNotifier",
]
