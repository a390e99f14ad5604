"""User and Session models for authentication."""
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from .base import db, TimestampMixin


class User(UserMixin, TimestampMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Relationships
    sessions = db.relationship('Session', backref='user', lazy='dynamic',
                               cascade='all, delete-orphan')
    enrollment = db.relationship('Enrollment', backref='user', uselist=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
        }

    def __repr__(self):
        return f'<User {self.email}>'


class Session(TimestampMixin, db.Model):
    """A sign-in. The bearer token is only honoured while its row exists."""
    __tablename__ = 'sessions'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    token = db.Column(db.String(512), nullable=False, unique=True)

    def __repr__(self):
        return f'<Session {self.id} user={self.user_id}>'
