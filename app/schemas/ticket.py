from typing import Optional

from pydantic import BaseModel

from app.models import Ticket, TicketDraft, TicketPatch, TicketStatus


class TicketCreate(BaseModel):
    title: str
    description: str

    def to_draft(self) -> TicketDraft:
        return TicketDraft(title=self.title, description=self.description)


class TicketUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None

    def to_patch(self) -> TicketPatch:
        return TicketPatch(title=self.title, description=self.description, status=self.status)


class TicketOut(BaseModel):
    id: str
    title: str
    description: str
    status: TicketStatus

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketOut":
        return cls(
            id=str(ticket.id),
            title=ticket.title.value,
            description=ticket.description.value,
            status=ticket.status,
        )


class ErrorOut(BaseModel):
    error: str
