# app/errors.py


# -------------------------
# Field validation
# -------------------------
class TicketValidationError(ValueError):
    """Base class for rejected ticket field values."""


class EmptyTitle(TicketValidationError):
    def __init__(self):
        super().__init__("Title cannot be empty")


class TitleTooLong(TicketValidationError):
    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"Title cannot be longer than {max_length} characters")


class DescriptionTooLong(TicketValidationError):
    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"Description cannot be longer than {max_length} characters")


class InvalidTicketId(ValueError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid ticket ID format: {raw!r}")


# -------------------------
# Store
# -------------------------
class StoreError(Exception):
    """Raised by TicketStore operations."""


class TicketNotFound(StoreError):
    def __init__(self, ticket_id):
        self.ticket_id = ticket_id
        super().__init__(f"Ticket with id {ticket_id} not found")


class ValidationFailed(StoreError):
    def __init__(self, reason: TicketValidationError):
        self.reason = reason
        super().__init__(f"Invalid field: {reason}")
