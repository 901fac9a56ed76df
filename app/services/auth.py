"""Registration and authentication: compose the repository and the password hasher."""

import logging

from app.core.errors import (
    AuthServiceError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from app.core.security import dummy_password_hash, hash_password, verify_password
from app.schemas.auth import SignInRequest, SignUpRequest, UserPublic
from app.services.users import UserRepository


class AuthService:
    """
    create_user / authenticate_user over an injected UserRepository.

    Raises typed errors from app.core.errors; callers map them to responses.
    """

    def __init__(
        self,
        repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    def create_user(self, payload: SignUpRequest) -> UserPublic:
        """Create a user with a unique email; returns the public projection."""
        try:
            if self.repository.find_by_email(payload.email) is not None:
                raise UserAlreadyExistsError()

            password_hash = hash_password(payload.password)
            user = self.repository.insert(
                name=payload.name,
                email=payload.email,
                password_hash=password_hash,
                role=payload.role,
            )
        except AuthServiceError as e:
            self.logger.error("Creating the user: %s", e)
            raise

        self.logger.info("User %s created successfully.", user.email)
        return UserPublic.model_validate(user)

    def authenticate_user(self, payload: SignInRequest) -> UserPublic:
        """
        Return the user for valid credentials.

        Unknown email and wrong password raise the same InvalidCredentialsError.
        """
        try:
            user = self.repository.find_by_email(payload.email)
            if user is None:
                verify_password(payload.password, dummy_password_hash())
                raise InvalidCredentialsError()
            if not verify_password(payload.password, user.password):
                raise InvalidCredentialsError()
        except AuthServiceError as e:
            self.logger.error("Error authenticating user: %s", e)
            raise

        self.logger.info("User %s authenticated successfully.", user.email)
        return UserPublic.model_validate(user)

    def get_user(self, user_id: int) -> UserPublic | None:
        user = self.repository.find_by_id(user_id)
        return UserPublic.model_validate(user) if user is not None else None

    def list_users(self) -> list[UserPublic]:
        return [UserPublic.model_validate(u) for u in self.repository.list_users()]
