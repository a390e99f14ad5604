import secrets

from flask import current_app, request, jsonify
from itsdangerous import URLSafeTimedSerializer as Serializer, BadSignature

from .. import db, login_manager
from ..errors import UnauthorizedError
from ..models import User, Session

TOKEN_SALT = 'session-token'


def _serializer():
    return Serializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def generate_token(user):
    """Sign a bearer token for the given user."""
    # Nonce keeps two sign-ins within the same second distinct
    return _serializer().dumps({'user_id': user.id, 'nonce': secrets.token_hex(8)})


def verify_token(token):
    """
    Returns the user id carried by a token, or None when the
    signature is invalid or older than TOKEN_MAX_AGE.
    """
    try:
        payload = _serializer().loads(token, max_age=current_app.config['TOKEN_MAX_AGE'])
    except BadSignature:
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get('user_id')


def get_bearer_token(req):
    header = req.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme != 'Bearer' or not token.strip():
        return None
    return token.strip()


def start_session(user):
    """Issue a token for the user and persist it as a Session."""
    token = generate_token(user)
    db.session.add(Session(user_id=user.id, token=token))
    db.session.commit()
    return token


@login_manager.request_loader
def load_user_from_request(req):
    token = get_bearer_token(req)
    if not token:
        return None

    user_id = verify_token(token)
    if user_id is None:
        current_app.logger.debug("Rejected bearer token with bad signature")
        return None

    session = Session.query.filter_by(token=token).first()
    if not session or session.user_id != user_id:
        current_app.logger.debug("No session for bearer token of user %s", user_id)
        return None

    return db.session.get(User, session.user_id)


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify(UnauthorizedError().to_dict()), 401


def current_token():
    return get_bearer_token(request)
