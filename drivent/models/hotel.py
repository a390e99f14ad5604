"""Hotel and Room models."""
from .base import db, TimestampMixin, isoformat


class Hotel(TimestampMixin, db.Model):
    __tablename__ = 'hotels'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    image = db.Column(db.String(1024), nullable=False)

    # Relationships
    rooms = db.relationship('Room', backref='hotel', lazy='select',
                            cascade='all, delete-orphan', order_by='Room.id')

    def __repr__(self):
        return f'<Hotel {self.id}: {self.name}>'

    def to_dict(self, include_rooms=False):
        """Convert hotel to dictionary for JSON serialization."""
        data = {
            'id': self.id,
            'name': self.name,
            'image': self.image,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
        if include_rooms:
            data['Rooms'] = [room.to_dict() for room in self.rooms]
        return data


class Room(TimestampMixin, db.Model):
    __tablename__ = 'rooms'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    capacity = db.Column(db.Integer, nullable=False)
    hotel_id = db.Column(db.Integer, db.ForeignKey('hotels.id'), nullable=False, index=True)

    def __repr__(self):
        return f'<Room {self.name} hotel={self.hotel_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'capacity': self.capacity,
            'hotelId': self.hotel_id,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
