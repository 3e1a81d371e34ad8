"""Status toggle controller"""

from dataclasses import dataclass

from loguru import logger

from roster.application.store import CandidateStore
from roster.domain.models import StatusField
from roster.infrastructure.api import RemoteDataService
from roster.shared.exceptions import UpdateFailure


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a confirmed toggle"""

    candidate_id: object
    field: StatusField
    previous_value: str | None
    value: str


class StatusToggleController:
    """Flips one status field on one candidate and forwards the change

    The store is updated before the network call is awaited, so the new
    value is visible immediately. If the remote write fails the field is
    put back to its pre-toggle value and UpdateFailure is raised.
    """

    def __init__(self, store: CandidateStore, service: RemoteDataService) -> None:
        self._store = store
        self._service = service
        # Latest toggle per (candidate id, field); only the latest may revert
        self._generations: dict[tuple[object, StatusField], int] = {}

    async def toggle(
        self,
        candidate_id: object,
        field: StatusField | str,
        current_value: str | None,
    ) -> ToggleResult:
        """Toggle ``field`` on ``candidate_id`` starting from ``current_value``

        Args:
            candidate_id: Identifier of the candidate
            field: StatusField member or its wire name (e.g. "whatsappMsg")
            current_value: Value the operator saw when clicking

        Returns:
            ToggleResult with the value written

        Raises:
            ValueError: If ``field`` is not a status field
            KeyError: If no candidate has ``candidate_id``
            UpdateFailure: If the remote write fails (field reverted)
        """
        status_field = StatusField.from_wire(field)
        next_value = status_field.next_value(current_value)

        self._store.set_status(candidate_id, status_field, next_value)
        key = (candidate_id, status_field)
        generation = self._generations.get(key, 0) + 1
        self._generations[key] = generation
        logger.debug(
            f"Toggled {status_field} on {candidate_id}: "
            f"{current_value!r} -> {next_value!r}"
        )

        try:
            await self._service.update_candidate(
                candidate_id, status_field, next_value
            )
        except UpdateFailure:
            self._revert(candidate_id, status_field, generation, current_value)
            raise

        return ToggleResult(
            candidate_id=candidate_id,
            field=status_field,
            previous_value=current_value,
            value=next_value,
        )

    def _revert(
        self,
        candidate_id: object,
        status_field: StatusField,
        generation: int,
        previous_value: str | None,
    ) -> None:
        """Restore the pre-toggle value unless a later toggle was applied"""
        if self._generations.get((candidate_id, status_field)) != generation:
            logger.warning(
                f"Not reverting {status_field} on {candidate_id}: "
                "a newer toggle was applied"
            )
            return
        self._store.set_status(candidate_id, status_field, previous_value)
        logger.warning(
            f"Reverted {status_field} on {candidate_id} to {previous_value!r}"
        )
