from flask import current_app

from drivent.errors import NotFoundError, PaymentRequiredError
from drivent.repositories import EnrollmentRepository, TicketRepository, HotelRepository


class HotelService:
    @staticmethod
    def get_hotels(user_id):
        """
        Lists every hotel for a user whose ticket grants hotel access.

        Raises:
            NotFoundError: no enrollment, no ticket, or no hotels at all.
            PaymentRequiredError: the ticket is unpaid, remote, or excludes hotel.
        """
        ticket = HotelService._get_ticket_for_user(user_id)
        hotels = HotelRepository.get_hotels()

        # Eligibility is checked before existence, so an ineligible
        # ticket answers 402 even when no hotel is registered.
        HotelService._ensure_hotel_access(user_id, ticket)

        if not hotels:
            current_app.logger.info("No hotels registered (user %s)", user_id)
            raise NotFoundError()
        return hotels

    @staticmethod
    def get_hotel_by_id(user_id, hotel_id):
        """Same checks as get_hotels, for a single hotel with its rooms."""
        ticket = HotelService._get_ticket_for_user(user_id)
        hotel = HotelRepository.get_hotel_by_id(hotel_id)

        HotelService._ensure_hotel_access(user_id, ticket)

        if not hotel:
            current_app.logger.info("Hotel %s not found (user %s)", hotel_id, user_id)
            raise NotFoundError()
        return hotel

    @staticmethod
    def _get_ticket_for_user(user_id):
        enrollment = EnrollmentRepository.find_with_address_by_user_id(user_id)
        if not enrollment:
            current_app.logger.info("User %s has no enrollment", user_id)
            raise NotFoundError()

        ticket = TicketRepository.find_ticket_by_enrollment_id(enrollment.id)
        if not ticket:
            current_app.logger.info("Enrollment %s has no ticket", enrollment.id)
            raise NotFoundError()
        return ticket

    @staticmethod
    def _ensure_hotel_access(user_id, ticket):
        if not ticket.grants_hotel_access:
            current_app.logger.info(
                "Ticket %s does not grant hotel access (user %s, status %s)",
                ticket.id, user_id, ticket.status.value
            )
            raise PaymentRequiredError()
