# app/dependencies.py
from app.store import TicketStore

# One store per process; the app never hands out the mapping itself
store = TicketStore()


def get_store() -> TicketStore:
    return store
