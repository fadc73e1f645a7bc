class SchoolError(Exception):
    """Base class for errors raised by the persistence layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConstraintViolation(SchoolError):
    """A write was rejected by a unique or foreign-key constraint."""

    def __init__(self, entity: str, reason: str):
        super().__init__(f"{entity} violates a data constraint: {reason}")
        self.entity = entity
        self.reason = reason
