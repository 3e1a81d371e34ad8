"""RemoteDataService - client for the spreadsheet-backed candidate API"""

from loguru import logger

from roster.domain.models import Candidate, StatusField
from roster.shared.exceptions import (
    LoadFailure,
    ReminderFailure,
    RemoteServiceError,
    UpdateFailure,
)
from roster.validation.candidates import (
    SendRemindersRequest,
    UpdateCandidateRequest,
    parse_candidates,
)

from .requests import RosterRequestClient


class RemoteDataService:
    """Remote data service client (three endpoints)

    The service owns candidate persistence and email sending. Each method
    issues exactly one request and maps failures to its error category.
    """

    CANDIDATES_ENDPOINT = "/api/candidates"
    UPDATE_ENDPOINT = "/api/update-candidate"
    REMINDERS_ENDPOINT = "/api/send-reminders"

    def __init__(self, request_client: RosterRequestClient) -> None:
        self._request_client = request_client

    async def fetch_candidates(self) -> list[Candidate]:
        """Fetch the full candidate roster

        Raises:
            LoadFailure: If the request fails or the payload is malformed
        """
        try:
            payload = await self._request_client.request(
                "GET", self.CANDIDATES_ENDPOINT
            )
        except RemoteServiceError as e:
            raise LoadFailure(str(e), status_code=e.status_code) from e

        try:
            candidates = parse_candidates(payload)
        except ValueError as e:
            raise LoadFailure(f"Malformed candidate data: {e}") from e

        logger.info(f"Fetched {len(candidates)} candidates")
        return candidates

    async def update_candidate(
        self, candidate_id: object, status_field: StatusField, value: str
    ) -> None:
        """Write one status field back to the service

        Raises:
            UpdateFailure: If the request fails
        """
        body = UpdateCandidateRequest(
            id=candidate_id, field=status_field.wire_name, value=value
        )
        try:
            await self._request_client.request(
                "POST", self.UPDATE_ENDPOINT, data=body.model_dump()
            )
        except RemoteServiceError as e:
            raise UpdateFailure(str(e), status_code=e.status_code) from e

        logger.info(f"Updated candidate {candidate_id}: {status_field} = {value}")

    async def send_reminders(self, days: int, batch: str) -> None:
        """Ask the service to email reminders to a batch

        Raises:
            ReminderFailure: If the request fails
        """
        body = SendRemindersRequest(days=days, batch=batch)
        try:
            await self._request_client.request(
                "POST", self.REMINDERS_ENDPOINT, data=body.model_dump()
            )
        except RemoteServiceError as e:
            raise ReminderFailure(str(e), status_code=e.status_code) from e

        logger.info(f"Reminders sent to {batch} ({days} days before program)")
