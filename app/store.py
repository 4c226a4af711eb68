# app/store.py
import logging
import threading
from contextlib import contextmanager
from typing import Dict, List

from app.errors import TicketNotFound, TicketValidationError, ValidationFailed
from app.models import (
    Ticket,
    TicketDraft,
    TicketId,
    TicketPatch,
    TicketStatus,
    validate_description,
    validate_title,
)

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Shared/exclusive lock over the ticket mapping.
    Any number of readers may hold it at once; a writer holds it alone.
    Waiting writers block new readers so writes are not starved.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                self._writer = True
            finally:
                self._waiting_writers -= 1
                # A writer that gave up must release the readers queued behind it
                if not self._writer:
                    self._cond.notify_all()
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class TicketStore:
    """
    Thread-safe, in-memory ticket storage.

    The store is the only owner of the mapping. Tickets are frozen, and a
    patch swaps in a new record, so whatever a caller receives is a
    snapshot that later writes cannot touch.
    """

    def __init__(self):
        self._tickets: Dict[TicketId, Ticket] = {}
        self._lock = ReadWriteLock()

    def add(self, draft: TicketDraft) -> Ticket:
        try:
            title = validate_title(draft.title)
            description = validate_description(draft.description)
        except TicketValidationError as e:
            logger.warning(f"Rejected new ticket: {e}")
            raise ValidationFailed(e) from e

        ticket = Ticket(
            id=TicketId(),
            title=title,
            description=description,
            status=TicketStatus.TODO,
        )
        with self._lock.write_locked():
            self._tickets[ticket.id] = ticket

        logger.info(f"Created ticket {ticket.id}")
        return ticket

    def get(self, ticket_id: TicketId) -> Ticket:
        with self._lock.read_locked():
            ticket = self._tickets.get(ticket_id)
        if ticket is None:
            raise TicketNotFound(ticket_id)
        return ticket

    def patch(self, ticket_id: TicketId, patch: TicketPatch) -> Ticket:
        with self._lock.write_locked():
            current = self._tickets.get(ticket_id)
            if current is None:
                raise TicketNotFound(ticket_id)

            # Validate every present field before touching the record
            changes = {}
            failure = None
            try:
                if patch.title is not None:
                    changes["title"] = validate_title(patch.title)
                if patch.description is not None:
                    changes["description"] = validate_description(patch.description)
            except TicketValidationError as e:
                failure = e
            else:
                if patch.status is not None:
                    changes["status"] = patch.status
                updated = current.model_copy(update=changes)
                self._tickets[ticket_id] = updated

        if failure is not None:
            logger.warning(f"Rejected update for ticket {ticket_id}: {failure}")
            raise ValidationFailed(failure) from failure

        logger.info(f"Updated ticket {ticket_id} ({', '.join(changes) or 'no changes'})")
        return updated

    def list(self) -> List[Ticket]:
        """All tickets, in insertion order."""
        with self._lock.read_locked():
            return list(self._tickets.values())

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tickets)
