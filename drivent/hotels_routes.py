import re

from flask import Blueprint, jsonify, current_app
from flask_login import login_required, current_user

from .errors import NotFoundError, PaymentRequiredError, error_payload
from .services.hotel_service import HotelService

hotels_bp = Blueprint('hotels_bp', __name__)


# Plain ASCII integers only. Exponent and decimal forms such as
# 1e0 or 1.0 are refused with a 400 even though they name a whole number.
HOTEL_ID_PATTERN = re.compile(r'\s*[+-]?[0-9]+\s*')


def _parse_hotel_id(raw_id):
    if not HOTEL_ID_PATTERN.fullmatch(raw_id or ''):
        return None
    return int(raw_id)


def _error_response(error):
    if isinstance(error, NotFoundError):
        return jsonify(error_payload(error)), 404
    if isinstance(error, PaymentRequiredError):
        return jsonify(error_payload(error)), 402
    current_app.logger.exception(f"Unexpected error while reading hotels: {error}")
    return jsonify(error_payload(error)), 400


@hotels_bp.route('', methods=['GET'])
@hotels_bp.route('/', methods=['GET'])
@login_required
def get_hotels():
    """List every hotel the signed-in user is entitled to see."""
    try:
        hotels = HotelService.get_hotels(current_user.id)
    except Exception as e:
        return _error_response(e)

    return jsonify([hotel.to_dict() for hotel in hotels])


@hotels_bp.route('/<hotel_id>', methods=['GET'])
@login_required
def get_hotel_by_id(hotel_id):
    """Return a single hotel with its rooms."""
    parsed_id = _parse_hotel_id(hotel_id)
    if parsed_id is None:
        return '', 400

    try:
        hotel = HotelService.get_hotel_by_id(current_user.id, parsed_id)
    except Exception as e:
        return _error_response(e)

    return jsonify(hotel.to_dict(include_rooms=True))
