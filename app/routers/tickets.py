# app/routers/tickets.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_store
from app.errors import InvalidTicketId, TicketNotFound, ValidationFailed
from app.models import TicketId
from app.schemas.ticket import ErrorOut, TicketCreate, TicketOut, TicketUpdate
from app.store import TicketStore

router = APIRouter(prefix="/tickets", tags=["Tickets"])

# Handlers are plain functions: FastAPI runs them in its threadpool and
# the store does its own locking.


# -----------------------------
# Helper: path id -> TicketId
# -----------------------------
def parse_ticket_id(ticket_id: str) -> TicketId:
    try:
        return TicketId.parse(ticket_id)
    except InvalidTicketId:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ticket ID format")


# -----------------------------
# CREATE Ticket
# -----------------------------
@router.post(
    "",
    response_model=TicketOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}},
)
def create_ticket(data: TicketCreate, store: TicketStore = Depends(get_store)):
    try:
        ticket = store.add(data.to_draft())
    except ValidationFailed as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e.reason))
    return TicketOut.from_ticket(ticket)


# -----------------------------
# LIST Tickets
# -----------------------------
@router.get("", response_model=List[TicketOut])
def list_tickets(store: TicketStore = Depends(get_store)):
    return [TicketOut.from_ticket(t) for t in store.list()]


# -----------------------------
# GET Ticket Detail
# -----------------------------
@router.get(
    "/{ticket_id}",
    response_model=TicketOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
def get_ticket(ticket_id: str, store: TicketStore = Depends(get_store)):
    tid = parse_ticket_id(ticket_id)
    try:
        ticket = store.get(tid)
    except TicketNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found")
    return TicketOut.from_ticket(ticket)


# -----------------------------
# UPDATE Ticket
# -----------------------------
@router.patch(
    "/{ticket_id}",
    response_model=TicketOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
def update_ticket(ticket_id: str, data: TicketUpdate, store: TicketStore = Depends(get_store)):
    tid = parse_ticket_id(ticket_id)
    try:
        ticket = store.patch(tid, data.to_patch())
    except TicketNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found")
    except ValidationFailed as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e.reason))
    return TicketOut.from_ticket(ticket)
