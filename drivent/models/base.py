"""Shared model helpers."""
from datetime import datetime

from .. import db


def utcnow():
    return datetime.utcnow()


def isoformat(value):
    """Serialize a timestamp the way the API clients expect it."""
    if value is None:
        return None
    return value.isoformat(timespec='milliseconds') + 'Z'


class TimestampMixin:
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)
