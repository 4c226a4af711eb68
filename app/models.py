"""
Domain model for tickets.

Value objects (TicketId, TicketTitle, TicketDescription) are frozen
pydantic models; titles and descriptions are only built through
validate_title / validate_description so a Ticket never holds an
unchecked string.
"""
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from app import config
from app.errors import DescriptionTooLong, EmptyTitle, InvalidTicketId, TitleTooLong


# -------------------------
# Value objects
# -------------------------
class TicketId(BaseModel):
    value: UUID = Field(default_factory=uuid4)
    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, raw: str) -> "TicketId":
        try:
            return cls(value=UUID(raw))
        except (ValueError, TypeError, AttributeError):
            raise InvalidTicketId(raw)

    def __str__(self) -> str:
        return str(self.value)


class TicketTitle(BaseModel):
    value: str
    model_config = ConfigDict(frozen=True)


class TicketDescription(BaseModel):
    value: str
    model_config = ConfigDict(frozen=True)


class TicketStatus(str, Enum):
    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TicketStatus.TODO: "To Do",
    TicketStatus.IN_PROGRESS: "In Progress",
    TicketStatus.DONE: "Done",
}


# -------------------------
# Validation
# -------------------------
def validate_title(raw: str, max_length: Optional[int] = None) -> TicketTitle:
    """Reject blank titles and titles over the configured bound.

    The title is stored as given; only the emptiness check looks at the
    trimmed form.
    """
    if max_length is None:
        max_length = config.TICKET_TITLE_MAX_LENGTH
    if not raw.strip():
        raise EmptyTitle()
    if len(raw) > max_length:
        raise TitleTooLong(max_length)
    return TicketTitle(value=raw)


def validate_description(raw: str, max_length: Optional[int] = None) -> TicketDescription:
    """Reject descriptions over the configured bound. Empty is fine."""
    if max_length is None:
        max_length = config.TICKET_DESCRIPTION_MAX_LENGTH
    if len(raw) > max_length:
        raise DescriptionTooLong(max_length)
    return TicketDescription(value=raw)


# -------------------------
# Entity and inputs
# -------------------------
class Ticket(BaseModel):
    id: TicketId
    title: TicketTitle
    description: TicketDescription
    status: TicketStatus = TicketStatus.TODO
    model_config = ConfigDict(frozen=True)


class TicketDraft(BaseModel):
    title: str
    description: str


class TicketPatch(BaseModel):
    # None means "leave unchanged"
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None
