"""Tests for the Candidate domain model"""

import pytest

from roster.domain.models import Candidate, StatusField


@pytest.mark.unit
def test_status_reads_and_writes_the_mapped_attribute():
    candidate = Candidate(id="c-1", phone_enquiry="not done")

    assert candidate.status(StatusField.PHONE_ENQUIRY) == "not done"

    candidate.set_status(StatusField.PHONE_ENQUIRY, "done")

    assert candidate.phone_enquiry == "done"
    assert candidate.whatsapp_msg is None


@pytest.mark.unit
def test_defaults_for_descriptive_fields():
    candidate = Candidate(id=7)

    assert candidate.full_name == ""
    assert candidate.batch is None
    assert candidate.year_of_completion is None
