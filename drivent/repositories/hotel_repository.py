from drivent import db
from drivent.models import Hotel


class HotelRepository:
    @staticmethod
    def get_hotels():
        """Return every hotel, or an empty list when there are none."""
        return Hotel.query.order_by(Hotel.id.asc()).all()

    @staticmethod
    def get_hotel_by_id(hotel_id):
        """
        Return the hotel with the given id, rooms loaded, or None.

        Absence is not an error here; callers decide what it means.
        """
        return Hotel.query\
            .options(db.selectinload(Hotel.rooms))\
            .filter(Hotel.id == hotel_id)\
            .first()
