from drivent import db
from drivent.models import Enrollment


class EnrollmentRepository:
    @staticmethod
    def find_with_address_by_user_id(user_id):
        return Enrollment.query\
            .options(db.selectinload(Enrollment.addresses))\
            .filter(Enrollment.user_id == user_id)\
            .first()
