"""Unit tests for payload validation models"""

from datetime import date

import pytest
from loguru import logger
from pydantic import ValidationError

from roster.domain.models import Candidate
from roster.validation.candidates import (
    CandidatePayload,
    SendRemindersRequest,
    UpdateCandidateRequest,
    parse_candidates,
)


class TestCandidatePayload:
    """Tests for CandidatePayload"""

    def test_converts_wire_record_to_domain(self, raw_candidates):
        candidate = CandidatePayload.model_validate(raw_candidates[0]).to_domain()

        assert isinstance(candidate, Candidate)
        assert candidate.id == 1
        assert candidate.full_name == "Asha Rao"
        assert candidate.email_id == "asha@example.com"
        assert candidate.name_of_college == "City College"
        assert candidate.date_of_application == date(2024, 3, 5)
        assert candidate.year_of_completion == "2024"
        assert candidate.batch == "Batch March 2024"
        assert candidate.whatsapp_msg == "pending"
        assert candidate.phone_enquiry == "done"
        assert candidate.online == "attended"
        assert candidate.program == "attended"

    def test_numeric_cells_become_text(self, raw_candidates):
        candidate = CandidatePayload.model_validate(raw_candidates[1]).to_domain()

        assert candidate.contact_number == "9123456780"

    def test_iso_datetime_is_reduced_to_date(self, raw_candidates):
        candidate = CandidatePayload.model_validate(raw_candidates[1]).to_domain()

        assert candidate.date_of_application == date(2024, 4, 11)

    def test_unparseable_date_is_kept_as_received(self):
        payload = CandidatePayload.model_validate(
            {"id": 9, "dateOfApplication": "5th March"}
        )

        assert payload.dateOfApplication == "5th March"

    def test_empty_date_becomes_none(self):
        payload = CandidatePayload.model_validate({"id": 9, "dateOfApplication": ""})

        assert payload.dateOfApplication is None

    def test_year_is_kept_exactly(self):
        as_text = CandidatePayload.model_validate({"id": 1, "yearOfCompletion": "2023"})
        as_int = CandidatePayload.model_validate({"id": 2, "yearOfCompletion": 2023})

        assert as_text.yearOfCompletion == "2023"
        assert as_int.yearOfCompletion == 2023

    def test_malformed_status_values_survive_load(self):
        payload = CandidatePayload.model_validate(
            {"id": 5, "phoneEnquiry": "unexpected-value", "online": None}
        )

        assert payload.phoneEnquiry == "unexpected-value"
        assert payload.online is None

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            CandidatePayload.model_validate({"fullName": "No Id"})

    def test_unknown_keys_are_ignored(self):
        payload = CandidatePayload.model_validate({"id": 1, "rowNumber": 12})

        assert not hasattr(payload, "rowNumber")


class TestParseCandidates:
    """Tests for parse_candidates"""

    def test_preserves_payload_order(self, raw_candidates):
        candidates = parse_candidates(raw_candidates)

        assert [c.id for c in candidates] == [1, 2, 3, 4]

    @pytest.mark.parametrize("payload", [{"candidates": []}, None, "text"])
    def test_rejects_non_list_payload(self, payload):
        with pytest.raises(ValueError, match="JSON array"):
            parse_candidates(payload)

    def test_skips_invalid_records(self, raw_candidates):
        messages = []
        handler_id = logger.add(messages.append, format="{message}")
        payload = [
            raw_candidates[0],
            {"fullName": "No Id"},
            7,
            {**raw_candidates[1], "yearOfCompletion": 2023.5},
            raw_candidates[2],
        ]

        try:
            candidates = parse_candidates(payload)
        finally:
            logger.remove(handler_id)

        assert [c.id for c in candidates] == [1, 3]
        skipped = [m for m in messages if "Skipping invalid candidate" in m]
        assert len(skipped) == 3
        assert "index 1" in skipped[0]


class TestUpdateCandidateRequest:
    """Tests for UpdateCandidateRequest"""

    def test_dumps_wire_body(self):
        body = UpdateCandidateRequest(id=1, field="whatsappMsg", value="sent")

        assert body.model_dump() == {"id": 1, "field": "whatsappMsg", "value": "sent"}

    def test_rejects_unknown_field(self):
        with pytest.raises(ValidationError):
            UpdateCandidateRequest(id=1, field="batch", value="A")

    def test_rejects_value_outside_field_cycle(self):
        with pytest.raises(ValidationError, match="Invalid value"):
            UpdateCandidateRequest(id=1, field="program", value="absent")


class TestSendRemindersRequest:
    """Tests for SendRemindersRequest"""

    def test_dumps_wire_body(self):
        body = SendRemindersRequest(days=7, batch="Batch March 2024")

        assert body.model_dump() == {"days": 7, "batch": "Batch March 2024"}

    @pytest.mark.parametrize("days", [0, -1, True])
    def test_rejects_invalid_days(self, days):
        with pytest.raises(ValidationError):
            SendRemindersRequest(days=days, batch="A")

    def test_rejects_empty_batch(self):
        with pytest.raises(ValidationError):
            SendRemindersRequest(days=3, batch="")
