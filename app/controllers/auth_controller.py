import logging
from typing import Optional

from app.exceptions import DuplicateRecordError, UsernameTakenError
from app.services.auth_service import get_password_hash, verify_password
from app.storage.base import CatalogStore
from database.schemas import UserCreate, UserPublic

logger = logging.getLogger(__name__)

class AuthController:
    def register(self, store: CatalogStore, username: str, password: str) -> UserPublic:
        if store.get_user_by_username(username):
            raise UsernameTakenError(username)

        try:
            user = store.create_user(UserCreate(username=username, hashed_password=get_password_hash(password)))
        except DuplicateRecordError as e:
            # Lost a race with a concurrent registration
            raise UsernameTakenError(username) from e

        logger.info(f"Registered user {user.username}")
        return UserPublic.model_validate(user)

    def login(self, store: CatalogStore, username: str, password: str) -> Optional[UserPublic]:
        user = store.get_user_by_username(username)
        if user is None:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return UserPublic.model_validate(user)
