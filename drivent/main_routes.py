from flask import Blueprint

main_bp = Blueprint('main_bp', __name__)

@main_bp.route('/health')
def health():
    return 'OK!', 200, {'Content-Type': 'text/plain; charset=utf-8'}
