"""Enrollment and Address models."""
from .base import db, TimestampMixin


class Enrollment(TimestampMixin, db.Model):
    __tablename__ = 'enrollments'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    cpf = db.Column(db.String(20), nullable=False)
    birthday = db.Column(db.DateTime, nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, unique=True)

    addresses = db.relationship('Address', backref='enrollment', lazy='select',
                                cascade='all, delete-orphan', order_by='Address.id')
    tickets = db.relationship('Ticket', backref='enrollment', lazy='dynamic')

    def __repr__(self):
        return f'<Enrollment {self.id} user={self.user_id}>'


class Address(TimestampMixin, db.Model):
    __tablename__ = 'addresses'
    id = db.Column(db.Integer, primary_key=True)
    cep = db.Column(db.String(10), nullable=False)
    street = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(255), nullable=False)
    state = db.Column(db.String(2), nullable=False)
    number = db.Column(db.String(20), nullable=False)
    neighborhood = db.Column(db.String(255), nullable=False)
    address_detail = db.Column(db.String(255), nullable=True)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), nullable=False)

    def __repr__(self):
        return f'<Address {self.city}/{self.state}>'
