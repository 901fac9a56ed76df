"""Point queries against the users table."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StorageError, UserAlreadyExistsError
from app.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Thin wrapper over a Session for the handful of user queries the auth flow needs."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        try:
            return self.session.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            logger.error("Error looking up user by email: %s", e)
            raise StorageError("Error reading user") from e

    def find_by_id(self, user_id: int) -> User | None:
        try:
            return self.session.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError as e:
            logger.error("Error looking up user by id: %s", e)
            raise StorageError("Error reading user") from e

    def list_users(self) -> list[User]:
        try:
            return self.session.query(User).order_by(User.id).all()
        except SQLAlchemyError as e:
            logger.error("Error listing users: %s", e)
            raise StorageError("Error reading users") from e

    def insert(self, name: str, email: str, password_hash: str, role: str) -> User:
        """
        Insert one user and return the persisted row.

        The unique index on email is the authority on duplicates: a concurrent
        registration that slips past the existence check surfaces here as
        UserAlreadyExistsError. Other constraint failures are StorageError.
        """
        user = User(name=name, email=email, password=password_hash, role=role)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if self.find_by_email(email) is not None:
                raise UserAlreadyExistsError() from e
            logger.error("Integrity error inserting user: %s", e)
            raise StorageError("Error creating user") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Error inserting user: %s", e)
            raise StorageError("Error creating user") from e
        self.session.refresh(user)
        return user
