"""
Pytest configuration and fixtures.
"""
import sys
import os
from datetime import datetime
import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    from drivent import create_app
    from config import Config

    # Temporary SQLite file so every app context sees the same database
    class TestConfig(Config):
        TESTING = True
        import tempfile
        db_fd, db_path = tempfile.mkstemp()
        SQLALCHEMY_DATABASE_URI = f'sqlite:///{db_path}'
        SECRET_KEY = 'test-secret-key'
        TOKEN_MAX_AGE = 3600

    app = create_app(TestConfig)

    # Initialize database
    with app.app_context():
        from drivent import db
        db.session.configure(expire_on_commit=False)
        db.create_all()

    yield app

    os.close(TestConfig.db_fd)
    try:
        os.remove(TestConfig.db_path)
    except OSError:
        pass


@pytest.fixture(scope='function', autouse=True)
def clean_db(app):
    """Clean database between tests."""
    with app.app_context():
        from drivent import db
        # Drop all tables and recreate them to ensure a clean slate
        db.drop_all()
        db.create_all()
    yield


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def create_user(app):
    """Factory for users. Emails are unique per call."""
    from drivent.models import db, User
    counter = {'n': 0}

    def _create(email=None, password='password123'):
        counter['n'] += 1
        with app.app_context():
            user = User(email=email or f'user{counter["n"]}@example.com')
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user

    return _create


@pytest.fixture(scope='function')
def generate_valid_token(app, create_user):
    """Sign a token and persist its session, creating a user if none is given."""
    from drivent.auth.utils import start_session

    def _generate(user=None):
        user = user or create_user()
        with app.app_context():
            return start_session(user)

    return _generate


@pytest.fixture(scope='function')
def auth_headers(generate_valid_token):
    def _headers(user=None):
        return {'Authorization': f'Bearer {generate_valid_token(user)}'}
    return _headers


@pytest.fixture(scope='function')
def create_enrollment(app):
    """Factory for an enrollment with one address."""
    from drivent.models import db, Enrollment, Address

    def _create(user):
        with app.app_context():
            enrollment = Enrollment(
                name='Test Enrollee',
                cpf='12345678909',
                birthday=datetime(1990, 5, 17),
                phone='(21) 98999-9999',
                user_id=user.id
            )
            enrollment.addresses.append(Address(
                cep='20000-000',
                street='Rua Teste',
                city='Rio de Janeiro',
                state='RJ',
                number='100',
                neighborhood='Centro',
                address_detail=None
            ))
            db.session.add(enrollment)
            db.session.commit()
            return enrollment

    return _create


@pytest.fixture(scope='function')
def create_ticket_type(app):
    """Factory for ticket types: create_ticket_type(is_remote, includes_hotel)."""
    from drivent.models import db, TicketType

    def _create(is_remote=False, includes_hotel=True, price=600):
        with app.app_context():
            ticket_type = TicketType(
                name='Presential + Hotel' if includes_hotel else 'Ticket',
                price=price,
                is_remote=is_remote,
                includes_hotel=includes_hotel
            )
            db.session.add(ticket_type)
            db.session.commit()
            return ticket_type

    return _create


@pytest.fixture(scope='function')
def create_ticket(app):
    from drivent.models import db, Ticket

    def _create(enrollment_id, ticket_type_id, status):
        with app.app_context():
            ticket = Ticket(
                enrollment_id=enrollment_id,
                ticket_type_id=ticket_type_id,
                status=status
            )
            db.session.add(ticket)
            db.session.commit()
            return ticket

    return _create


@pytest.fixture(scope='function')
def create_hotel(app):
    """Factory for hotels, optionally with rooms."""
    from drivent.models import db, Hotel, Room

    def _create(name='Driven Resort', rooms=0):
        with app.app_context():
            hotel = Hotel(name=name, image='https://example.com/hotel.png')
            for n in range(rooms):
                hotel.rooms.append(Room(name=str(101 + n), capacity=n + 1))
            db.session.add(hotel)
            db.session.commit()
            # Load rooms while still attached to the session
            hotel.rooms
            return hotel

    return _create


@pytest.fixture(scope='function')
def eligible_user(create_user, create_enrollment, create_ticket_type, create_ticket):
    """A user holding a paid, in-person ticket that includes hotel."""
    from drivent.models import TicketStatus

    user = create_user()
    enrollment = create_enrollment(user)
    ticket_type = create_ticket_type(is_remote=False, includes_hotel=True)
    create_ticket(enrollment.id, ticket_type.id, TicketStatus.PAID)
    return user
