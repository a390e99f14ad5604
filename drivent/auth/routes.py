from flask import request, jsonify, current_app
from flask_login import login_required, current_user

from . import auth_bp
from .utils import start_session, current_token
from .. import db
from ..errors import BadRequestError, InvalidCredentialsError
from ..models import User, Session


@auth_bp.route('/sign-in', methods=['POST'])
def sign_in():
    data = request.get_json(silent=True) or {}
    email = (data.get('email') or '').strip().lower()
    password = data.get('password') or ''

    # Input validation
    if not email or not password:
        return jsonify(BadRequestError("email and password are required").to_dict()), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        current_app.logger.info(f"Failed sign-in for {email}")
        return jsonify(InvalidCredentialsError().to_dict()), 401

    token = start_session(user)
    return jsonify(user=user.to_dict(), token=token)


@auth_bp.route('/sign-out', methods=['POST'])
@login_required
def sign_out():
    Session.query.filter_by(user_id=current_user.id, token=current_token()).delete()
    db.session.commit()
    return '', 204
