"""Statistics value objects"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class YearCount:
    """Number of candidates completing in one year"""

    year: str | int
    count: int


@dataclass(frozen=True)
class Statistics:
    """Aggregate figures over a filtered candidate set (never persisted)"""

    candidate_count: int = 0
    whatsapp_sent: int = 0
    phone_enquiry_done: int = 0
    online_attended: int = 0
    top_years: tuple[YearCount, ...] = field(default_factory=tuple)
    attendance_rate: float = 0.0

    @property
    def attendance_rate_display(self) -> str:
        return f"{self.attendance_rate:.1f}%"
