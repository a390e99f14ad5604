import click
from flask.cli import with_appcontext
from drivent import db
from drivent.models import User


@click.command('create-user')
@click.option('--email', prompt=True, help='User email')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True, help='User password')
@with_appcontext
def create_user(email, password):
    """Create a user that can sign in to the API."""
    email = str(email).strip().lower()

    if User.query.filter_by(email=email).first():
        click.echo(f"Error: Email '{email}' is already in use.", err=True)
        return

    user = User(email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    click.echo(f"Created user {email} (id {user.id})")
