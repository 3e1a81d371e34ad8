"""Status field enumeration and toggle table"""

from enum import Enum


class StatusField(Enum):
    """The four mutable status flags of a candidate

    Each member carries its wire name and its two-value cycle. The first
    value is the "positive" one and doubles as the fallback when the
    current value is missing or unexpected.

    Members:
        - WHATSAPP_MSG: outreach message sent / pending
        - PHONE_ENQUIRY: phone follow-up done / not done
        - ONLINE: online session attended / absent
        - PROGRAM: program attended / ghosted
    """

    WHATSAPP_MSG = ("whatsappMsg", "sent", "pending")
    PHONE_ENQUIRY = ("phoneEnquiry", "done", "not done")
    ONLINE = ("online", "attended", "absent")
    PROGRAM = ("program", "attended", "ghosted")

    def __init__(self, wire_name: str, positive: str, negative: str) -> None:
        self.wire_name = wire_name
        self.positive = positive
        self.negative = negative

    @property
    def attribute(self) -> str:
        """Candidate attribute holding this field"""
        return _ATTRIBUTES[self.wire_name]

    @property
    def values(self) -> tuple[str, str]:
        return (self.positive, self.negative)

    def next_value(self, current: object) -> str:
        """Return the value a toggle moves to from ``current``

        Unknown or missing values fall back to the positive value.
        """
        if current == self.positive:
            return self.negative
        if current == self.negative:
            return self.positive
        return self.positive

    @classmethod
    def from_wire(cls, name: "str | StatusField") -> "StatusField":
        """Resolve a wire name (e.g. ``"whatsappMsg"``) to a member

        Raises:
            ValueError: If the name is not one of the four status fields
        """
        if isinstance(name, cls):
            return name
        for member in cls:
            if member.wire_name == name or member.attribute == name:
                return member
        valid = ", ".join(member.wire_name for member in cls)
        raise ValueError(f"Unknown status field {name!r} (expected one of {valid})")

    def __str__(self) -> str:
        return self.wire_name


_ATTRIBUTES = {
    "whatsappMsg": "whatsapp_msg",
    "phoneEnquiry": "phone_enquiry",
    "online": "online",
    "program": "program",
}
