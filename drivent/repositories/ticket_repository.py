from drivent import db
from drivent.models import Ticket


class TicketRepository:
    @staticmethod
    def find_ticket_by_enrollment_id(enrollment_id):
        return Ticket.query\
            .options(db.joinedload(Ticket.ticket_type))\
            .filter(Ticket.enrollment_id == enrollment_id)\
            .first()
