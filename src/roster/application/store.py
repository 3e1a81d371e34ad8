"""Candidate store - the session's single in-memory roster"""

from collections.abc import Iterator

from roster.domain.filters import distinct_batches
from roster.domain.models import Candidate, StatusField


class CandidateStore:
    """In-memory candidate collection owned by one dashboard session

    Populated once from the remote service. Afterwards only status fields
    change, through ``set_status``. Records are never added or removed.
    """

    def __init__(self) -> None:
        self._candidates: list[Candidate] = []
        self._batches: list[str] = []
        self.loaded = False

    def populate(self, candidates: list[Candidate]) -> None:
        """Replace the store contents with a freshly fetched roster"""
        self._candidates = list(candidates)
        self._batches = distinct_batches(self._candidates)
        self.loaded = True

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    @property
    def batches(self) -> list[str]:
        """Distinct non-empty batch labels in first-seen order"""
        return list(self._batches)

    def find(self, candidate_id: object) -> Candidate | None:
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    def get(self, candidate_id: object) -> Candidate:
        """Look up a candidate by id

        Raises:
            KeyError: If no candidate has this id
        """
        candidate = self.find(candidate_id)
        if candidate is None:
            raise KeyError(f"No candidate with id {candidate_id!r}")
        return candidate

    def resolve_id(self, text: str) -> object:
        """Map an id typed by the operator to the stored id

        Ids arrive from the service as strings or numbers; the console only
        has text, so an exact match is tried first and then a textual one.

        Raises:
            KeyError: If no candidate matches
        """
        if self.find(text) is not None:
            return text
        for candidate in self._candidates:
            if str(candidate.id) == text:
                return candidate.id
        raise KeyError(f"No candidate with id {text!r}")

    def set_status(
        self, candidate_id: object, status_field: StatusField, value: str | None
    ) -> None:
        """Set one status field on the candidate(s) with this id

        Every other record and field is left untouched.

        Raises:
            KeyError: If no candidate has this id
        """
        matched = False
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                candidate.set_status(status_field, value)
                matched = True
        if not matched:
            raise KeyError(f"No candidate with id {candidate_id!r}")

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)
