from .enrollment_repository import EnrollmentRepository
from .ticket_repository import TicketRepository
from .hotel_repository import HotelRepository

__all__ = ['EnrollmentRepository', 'TicketRepository', 'HotelRepository']
