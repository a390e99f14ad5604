"""Tests for HotelService entitlement checks."""
import pytest
from drivent.errors import NotFoundError, PaymentRequiredError
from drivent.models import TicketStatus
from drivent.services.hotel_service import HotelService


@pytest.fixture
def enrolled(create_user, create_enrollment):
    user = create_user()
    enrollment = create_enrollment(user)
    return user, enrollment


def test_get_hotels_without_enrollment(app, create_user):
    user = create_user()
    with app.app_context():
        with pytest.raises(NotFoundError):
            HotelService.get_hotels(user.id)


def test_get_hotels_without_ticket(app, enrolled):
    user, _ = enrolled
    with app.app_context():
        with pytest.raises(NotFoundError):
            HotelService.get_hotels(user.id)


def test_get_hotels_returns_every_hotel(app, eligible_user, create_hotel):
    create_hotel(name='A')
    create_hotel(name='B')
    with app.app_context():
        hotels = HotelService.get_hotels(eligible_user.id)
        assert [h.name for h in hotels] == ['A', 'B']


def test_get_hotels_empty_is_not_found(app, eligible_user):
    with app.app_context():
        with pytest.raises(NotFoundError):
            HotelService.get_hotels(eligible_user.id)


def test_ineligible_ticket_is_reported_before_missing_hotels(app, enrolled, create_ticket_type, create_ticket):
    user, enrollment = enrolled
    ticket_type = create_ticket_type(is_remote=False, includes_hotel=False)
    create_ticket(enrollment.id, ticket_type.id, TicketStatus.PAID)

    with app.app_context():
        with pytest.raises(PaymentRequiredError):
            HotelService.get_hotels(user.id)
        with pytest.raises(PaymentRequiredError):
            HotelService.get_hotel_by_id(user.id, 1)


def test_get_hotel_by_id_loads_rooms(app, eligible_user, create_hotel):
    hotel = create_hotel(rooms=2)
    with app.app_context():
        found = HotelService.get_hotel_by_id(eligible_user.id, hotel.id)
        assert found.id == hotel.id
        assert [r.capacity for r in found.rooms] == [1, 2]


def test_get_hotel_by_id_missing(app, eligible_user, create_hotel):
    create_hotel()
    with app.app_context():
        with pytest.raises(NotFoundError):
            HotelService.get_hotel_by_id(eligible_user.id, 999)


def test_rejections_are_logged(app, create_user, caplog):
    user = create_user()
    with app.app_context():
        with caplog.at_level('INFO', logger=app.logger.name):
            with pytest.raises(NotFoundError):
                HotelService.get_hotels(user.id)
    assert f'User {user.id} has no enrollment' in caplog.text
