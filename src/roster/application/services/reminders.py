"""Reminder dispatcher"""

from dataclasses import dataclass

from loguru import logger

from roster.infrastructure.api import RemoteDataService


@dataclass(frozen=True)
class ReminderReceipt:
    """Confirmation of a dispatched reminder batch"""

    days: int
    batch: str

    @property
    def message(self) -> str:
        return (
            f"Reminder emails sent to {self.batch} candidates "
            f"for {self.days} days before program"
        )


class ReminderDispatcher:
    """Forwards reminder requests to the remote service (no local state)"""

    def __init__(self, service: RemoteDataService) -> None:
        self._service = service

    async def send_reminders(
        self, days_before_program: int, batch_label: str
    ) -> ReminderReceipt:
        """Trigger reminder emails for one batch

        Args:
            days_before_program: Days until the program starts
            batch_label: Batch to email

        Returns:
            ReminderReceipt, produced only after a 2xx response

        Raises:
            ReminderFailure: If the dispatch request fails
        """
        logger.info(
            f"Sending reminders to {batch_label} "
            f"({days_before_program} days before program)"
        )
        await self._service.send_reminders(days_before_program, batch_label)
        return ReminderReceipt(days=days_before_program, batch=batch_label)
