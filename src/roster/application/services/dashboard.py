"""Dashboard session - owns the roster state for one operator session"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from loguru import logger

from roster.application.services.reminders import ReminderDispatcher, ReminderReceipt
from roster.application.services.toggle import StatusToggleController, ToggleResult
from roster.application.store import CandidateStore
from roster.domain.filters import filter_by_batch
from roster.domain.models import Candidate, Statistics, StatusField
from roster.domain.statistics import compute_statistics
from roster.infrastructure.api import RemoteDataService
from roster.shared.constants import ALL_BATCHES
from roster.shared.exceptions import LoadFailure, ReminderFailure, UpdateFailure


@dataclass
class Notice:
    """Transient operator message"""

    level: Literal["info", "error"]
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


class DashboardSession:
    """Single-writer owner of the candidate store and batch selection

    Derived values are pulled on demand: ``filtered()`` from the store and
    selection, ``statistics()`` from ``filtered()``. Nothing is cached, so
    no derived value can be stale.
    """

    def __init__(self, service: RemoteDataService) -> None:
        self.store = CandidateStore()
        self.selection = ALL_BATCHES
        self.error: str | None = None
        self.notices: list[Notice] = []
        self._load_attempted = False
        self._toggle_controller = StatusToggleController(self.store, service)
        self._reminder_dispatcher = ReminderDispatcher(service)
        self._service = service

    async def load(self) -> list[Candidate]:
        """Fetch the roster once for this session

        Returns:
            Loaded candidates

        Raises:
            RuntimeError: If a load was already attempted
            LoadFailure: If the fetch fails (the session stays empty)
        """
        if self._load_attempted:
            raise RuntimeError("Candidates are loaded once per session")
        self._load_attempted = True

        try:
            candidates = await self._service.fetch_candidates()
        except LoadFailure as e:
            self.error = str(e)
            logger.error(f"Failed to load candidates: {e}")
            raise

        self.store.populate(candidates)
        logger.info(
            f"Loaded {len(self.store)} candidates in "
            f"{len(self.store.batches)} batches"
        )
        return self.store.candidates

    @property
    def batches(self) -> list[str]:
        return self.store.batches

    def select(self, selection: str) -> None:
        """Change the batch selection

        Raises:
            ValueError: If ``selection`` is neither ALL_BATCHES nor a known batch
        """
        if selection != ALL_BATCHES and selection not in self.store.batches:
            raise ValueError(f"Unknown batch: {selection!r}")
        self.selection = selection
        logger.debug(f"Selected batch: {selection}")

    def filtered(self) -> list[Candidate]:
        return filter_by_batch(self.store.candidates, self.selection)

    def statistics(self) -> Statistics:
        return compute_statistics(self.filtered())

    @property
    def title(self) -> str:
        if self.selection == ALL_BATCHES:
            return "All Candidates"
        return f"{self.selection} Candidates"

    @property
    def can_send_reminders(self) -> bool:
        return self.selection != ALL_BATCHES

    async def toggle(
        self, candidate_id: object, field: StatusField | str
    ) -> ToggleResult:
        """Toggle a status field starting from its currently displayed value

        Raises:
            ValueError: If ``field`` is not a status field
            KeyError: If no candidate has ``candidate_id``
            UpdateFailure: If the remote write fails
        """
        status_field = StatusField.from_wire(field)
        current_value = self.store.get(candidate_id).status(status_field)
        try:
            return await self._toggle_controller.toggle(
                candidate_id, status_field, current_value
            )
        except UpdateFailure as e:
            self._notify("error", f"Failed to update. Please try again. ({e})")
            raise

    async def send_reminders(self, days_before_program: int) -> ReminderReceipt:
        """Send reminders to the selected batch

        Raises:
            ValueError: If no specific batch is selected
            ReminderFailure: If the dispatch fails
        """
        if not self.can_send_reminders:
            raise ValueError("Select a specific batch to send reminders")
        try:
            receipt = await self._reminder_dispatcher.send_reminders(
                days_before_program, self.selection
            )
        except ReminderFailure as e:
            self._notify(
                "error", f"Failed to send reminders. Please try again. ({e})"
            )
            raise
        self._notify("info", receipt.message)
        return receipt

    def drain_notices(self) -> list[Notice]:
        """Return pending notices and clear them"""
        notices, self.notices = self.notices, []
        return notices

    def _notify(self, level: Literal["info", "error"], message: str) -> None:
        if level == "error":
            logger.error(message)
        else:
            logger.info(message)
        self.notices.append(Notice(level=level, message=message))
