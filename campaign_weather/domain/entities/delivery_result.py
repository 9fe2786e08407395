"""Delivery bookkeeping entities."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of posting one message to one webhook."""

    webhook_index: int  # 1-based position in the job's URL list
    webhook_url: str
    success: bool
    status: Optional[int] = None
    error: Optional[str] = None


@dataclass
class NotificationReport:
    """Aggregate outcome of a notification job."""

    job: str
    deliveries: List[DeliveryResult] = field(default_factory=list)
    region_errors: Dict[str, str] = field(default_factory=dict)
    content: str = ""
    skipped: bool = False

    @property
    def successful(self) -> int:
        return sum(1 for d in self.deliveries if d.success)

    @property
    def failed(self) -> int:
        return len(self.deliveries) - self.successful

    @property
    def all_delivered(self) -> bool:
        return self.failed == 0

    def __str__(self) -> str:
        if self.skipped:
            return f"{self.job}: skipped"
        return (
            f"{self.job}: {self.successful} successful, {self.failed} failed, "
            f"{len(self.region_errors)} region error(s)"
        )
