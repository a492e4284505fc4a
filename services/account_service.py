"""
Account service.

Handles registration and login against the credential store.
"""
import logging

from werkzeug.security import generate_password_hash, check_password_hash

from errors import AuthError, ValidationError
from utils import is_blank

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password'


class AccountService:
    """Service for account operations."""

    def __init__(self, credential_store, hash_method='pbkdf2:sha256'):
        self.credential_store = credential_store
        self.hash_method = hash_method

    @staticmethod
    def _require_credentials(email, password):
        if is_blank(email) or is_blank(password):
            raise ValidationError('Email and password are required')
        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError('Email and password must be text')

    def register(self, email, password):
        """
        Register a new user.

        Args:
            email (str): Email address, kept exactly as given
            password (str): Plaintext password, only its hash is stored

        Returns:
            int: The new user's ID

        Raises:
            ValidationError: If a field is missing
            ConflictError: If the email is already registered
        """
        self._require_credentials(email, password)

        password_hash = generate_password_hash(password, method=self.hash_method)
        user_id = self.credential_store.create_user(email, password_hash)

        logger.info(f"Registered user {user_id}")
        return user_id

    def login(self, email, password):
        """
        Verify credentials.

        Returns:
            int: The user's ID. No session is created; the caller keeps the ID.

        Raises:
            ValidationError: If a field is missing
            AuthError: If the email is unknown or the password does not match
        """
        self._require_credentials(email, password)

        user = self.credential_store.find_user_by_email(email)
        if user is None:
            raise AuthError(INVALID_CREDENTIALS)

        if not check_password_hash(user.password_hash, password):
            raise AuthError(INVALID_CREDENTIALS)

        return user.id
