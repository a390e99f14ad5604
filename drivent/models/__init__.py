"""
Models package for the Drivent application.
"""
from .base import db

from .user import User, Session
from .enrollment import Enrollment, Address
from .ticket import Ticket, TicketType, TicketStatus
from .hotel import Hotel, Room

__all__ = [
    'db',
    'User',
    'Session',
    'Enrollment',
    'Address',
    'Ticket',
    'TicketType',
    'TicketStatus',
    'Hotel',
    'Room',
]
