"""Tests for the StatusField toggle table"""

import pytest

from roster.domain.models import StatusField


@pytest.mark.unit
@pytest.mark.parametrize(
    "status_field,current,expected",
    [
        (StatusField.WHATSAPP_MSG, "sent", "pending"),
        (StatusField.WHATSAPP_MSG, "pending", "sent"),
        (StatusField.PHONE_ENQUIRY, "done", "not done"),
        (StatusField.PHONE_ENQUIRY, "not done", "done"),
        (StatusField.ONLINE, "attended", "absent"),
        (StatusField.ONLINE, "absent", "attended"),
        (StatusField.PROGRAM, "attended", "ghosted"),
        (StatusField.PROGRAM, "ghosted", "attended"),
    ],
)
def test_next_value_follows_toggle_table(status_field, current, expected):
    assert status_field.next_value(current) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "status_field,fallback",
    [
        (StatusField.WHATSAPP_MSG, "sent"),
        (StatusField.PHONE_ENQUIRY, "done"),
        (StatusField.ONLINE, "attended"),
        (StatusField.PROGRAM, "attended"),
    ],
)
@pytest.mark.parametrize("current", [None, "", "unexpected-value", "Sent"])
def test_next_value_falls_back_to_positive_value(status_field, fallback, current):
    """Missing or malformed values recover to the field's positive value"""
    assert status_field.next_value(current) == fallback


@pytest.mark.unit
def test_two_toggles_restore_original_value():
    for status_field in StatusField:
        for value in status_field.values:
            once = status_field.next_value(value)
            assert status_field.next_value(once) == value


@pytest.mark.unit
def test_from_wire_resolves_wire_and_attribute_names():
    assert StatusField.from_wire("whatsappMsg") is StatusField.WHATSAPP_MSG
    assert StatusField.from_wire("phoneEnquiry") is StatusField.PHONE_ENQUIRY
    assert StatusField.from_wire("phone_enquiry") is StatusField.PHONE_ENQUIRY
    assert StatusField.from_wire("online") is StatusField.ONLINE
    assert StatusField.from_wire(StatusField.PROGRAM) is StatusField.PROGRAM


@pytest.mark.unit
def test_from_wire_rejects_unknown_field():
    with pytest.raises(ValueError, match="Unknown status field"):
        StatusField.from_wire("batch")


@pytest.mark.unit
def test_str_is_wire_name():
    assert str(StatusField.WHATSAPP_MSG) == "whatsappMsg"
    assert StatusField.ONLINE.attribute == "online"
    assert StatusField.PHONE_ENQUIRY.attribute == "phone_enquiry"
