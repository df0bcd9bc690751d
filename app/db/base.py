"""
Database base module - imports all models so that ``Base.metadata`` knows
every table before ``create_all`` runs.
"""

from app.auth.models.user import User
from app.events.models.event import Event
from app.events.models.ticket import Ticket

__all__ = [
    "User",
    "Event",
    "Ticket",
]
