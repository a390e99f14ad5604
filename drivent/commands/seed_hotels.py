import click
from flask.cli import with_appcontext
from drivent import db
from drivent.models import Hotel, Room

HOTEL_NAMES = [
    'Driven Resort',
    'Driven Palace',
    'Driven World',
    'Driven Inn',
    'Driven Suites',
]
ROOM_CAPACITIES = [1, 2, 3]
DEFAULT_IMAGE = 'https://images.unsplash.com/photo-1566073771259-6a8506099945'


@click.command('seed-hotels')
@click.option('--count', default=3, show_default=True, type=click.IntRange(min=1), help='Hotels to create')
@click.option('--rooms', default=4, show_default=True, type=click.IntRange(min=0), help='Rooms per hotel')
@click.option('--force', is_flag=True, default=False, help='Seed even if hotels already exist')
@with_appcontext
def seed_hotels(count, rooms, force):
    """Populate the hotels table with sample hotels and rooms."""
    existing = Hotel.query.count()
    if existing and not force:
        click.echo(f"{existing} hotel(s) already registered, nothing to do. Use --force to add more.")
        return

    try:
        for i in range(count):
            name = HOTEL_NAMES[i % len(HOTEL_NAMES)]
            if i >= len(HOTEL_NAMES):
                name = f"{name} {i // len(HOTEL_NAMES) + 1}"
            hotel = Hotel(name=name, image=DEFAULT_IMAGE)
            for n in range(rooms):
                hotel.rooms.append(Room(
                    name=str(101 + n),
                    capacity=ROOM_CAPACITIES[n % len(ROOM_CAPACITIES)]
                ))
            db.session.add(hotel)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        click.echo(f"Error seeding hotels: {e}", err=True)
        raise

    click.echo(f"Seeded {count} hotel(s) with {rooms} room(s) each")
