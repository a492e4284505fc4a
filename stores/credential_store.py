"""
Credential store.

Persists users and their password hashes.
"""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from errors import ConflictError, StoreError
from models import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Store for user identities and salted password hashes."""

    def __init__(self, db):
        self.db = db

    def create_user(self, email, password_hash):
        """
        Insert a new user row.

        Args:
            email (str): Email, stored exactly as given
            password_hash (str): Salted hash of the password

        Returns:
            int: The new user's ID

        Raises:
            ConflictError: If the email is already taken
            StoreError: If the insert fails for any other reason
        """
        user = User(email=email, password_hash=password_hash)
        try:
            self.db.session.add(user)
            self.db.session.commit()
        except IntegrityError as e:
            self.db.session.rollback()
            raise ConflictError('Email already registered') from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Failed to insert user')
            raise StoreError('Error registering user', detail=str(e)) from e

        return user.id

    def find_user_by_email(self, email):
        """
        Look up a user by email.

        Returns:
            User or None
        """
        try:
            return User.query.filter_by(email=email).first()
        except SQLAlchemyError as e:
            logger.exception('Failed to look up user')
            raise StoreError('Error looking up user', detail=str(e)) from e
