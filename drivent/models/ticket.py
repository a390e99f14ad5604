import enum

from .base import db, TimestampMixin


class TicketStatus(enum.Enum):
    RESERVED = 'RESERVED'
    PAID = 'PAID'


class TicketType(TimestampMixin, db.Model):
    __tablename__ = 'ticket_types'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False, default=0)
    is_remote = db.Column(db.Boolean, nullable=False)
    includes_hotel = db.Column(db.Boolean, nullable=False)

    def __repr__(self):
        return f'<TicketType {self.name}>'


class Ticket(TimestampMixin, db.Model):
    __tablename__ = 'tickets'
    id = db.Column(db.Integer, primary_key=True)
    ticket_type_id = db.Column(db.Integer, db.ForeignKey('ticket_types.id'), nullable=False)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), nullable=False, index=True)
    status = db.Column(db.Enum(TicketStatus), nullable=False, default=TicketStatus.RESERVED)

    ticket_type = db.relationship('TicketType', backref='tickets')

    @property
    def grants_hotel_access(self):
        """Paid, in-person and with hotel included."""
        return (
            self.status == TicketStatus.PAID
            and self.ticket_type.is_remote is False
            and self.ticket_type.includes_hotel is True
        )

    def __repr__(self):
        return f'<Ticket {self.id} {self.status.value}>'
