"""
Authentication routes: register and login.

Endpoints:
- POST /register - Register new user
- POST /login - Verify credentials and return the user ID
"""
import logging

from flask import current_app, request, jsonify

from errors import AuthError, ConflictError, StoreError, ValidationError
from extensions import limiter
from blueprints.auth import auth_bp

logger = logging.getLogger(__name__)


def _auth_rate_limit():
    return current_app.config.get('AUTH_RATE_LIMIT', '10 per minute')


@auth_bp.route('/register', methods=['POST'])
@limiter.limit(_auth_rate_limit, methods=["POST"])
def register():
    """Register a new user account.

    Request body:
        {"email": "user@example.com", "senha": "secret"}

    Returns:
        201 {"message": "...", "userId": 1}
    """
    data = request.get_json(silent=True) or {}
    account_service = current_app.extensions['account_service']

    try:
        user_id = account_service.register(data.get('email'), data.get('senha'))
    except ValidationError as e:
        return jsonify({'message': e.message}), 400
    except ConflictError:
        logger.warning(f"Registration rejected for existing email from IP: {request.remote_addr}")
        return jsonify({'message': 'Error registering user. The email may already exist.'}), 500
    except StoreError as e:
        return jsonify({'message': e.message, 'error': e.detail}), 500

    return jsonify({'message': 'User registered successfully!', 'userId': user_id}), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(_auth_rate_limit, methods=["POST"])
def login():
    """Verify credentials.

    Request body:
        {"email": "user@example.com", "senha": "secret"}

    Returns:
        200 {"message": "...", "usuarioId": 1}
    """
    data = request.get_json(silent=True) or {}
    account_service = current_app.extensions['account_service']

    try:
        user_id = account_service.login(data.get('email'), data.get('senha'))
    except ValidationError as e:
        return jsonify({'message': e.message}), 400
    except AuthError as e:
        logger.warning(f"Failed login attempt from IP: {request.remote_addr}")
        return jsonify({'message': e.message}), 401
    except StoreError as e:
        return jsonify({'message': e.message, 'error': e.detail}), 500

    logger.info(f"Successful login for user ID {user_id} from IP: {request.remote_addr}")
    return jsonify({'message': 'Login successful!', 'usuarioId': user_id}), 200
