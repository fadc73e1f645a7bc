import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    FACULTY = "faculty"
    ACCOUNTANT = "accountant"


class StudentStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    GRADUATED = "graduated"


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"


class FeeStatus(str, enum.Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    PARTIALLY_PAID = "partially paid"
    OVERDUE = "overdue"

    @classmethod
    def _missing_(cls, value):
        # The fees screen filters with "partial".
        if isinstance(value, str) and value.strip().lower() == "partial":
            return cls.PARTIALLY_PAID
        return None


class FeeFrequency(str, enum.Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BI_ANNUAL = "bi-annual"
    ANNUAL = "annual"


class Weekday(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None


def enum_column(enum_cls: type[enum.Enum]) -> Enum:
    """String-backed column type storing the enum's values, not its names."""
    return Enum(
        enum_cls,
        native_enum=False,
        length=20,
        validate_strings=True,
        values_callable=lambda members: [member.value for member in members],
    )
