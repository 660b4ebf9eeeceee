# shop/services/auth_service.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from shop.data.models.user import UserModel
from shop.repos.user_repo import UserRepo
from shop.domain.errors import DuplicateUsernameError, InvalidCredentialsError
from shop.domain.schemas import UserRead
from shop.services.token_service import TokenService
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    signup - zapis usera z hashem hasla (surowe haslo nigdy nie jest zapisywane ani logowane)
    login - weryfikacja hasla i wydanie tokenu
    """

    def __init__(self, db: Session, token_service: TokenService):
        self.repo = UserRepo(db)
        self.token_service = token_service

    def signup(self, username: str, raw_password: str) -> UserRead:
        if self.repo.get_by_username(username):
            logger.info(f"Signup rejected, username '{username}' already taken")
            raise DuplicateUsernameError(username)

        user = UserModel(
            username=username,
            password_hash=generate_password_hash(raw_password),
        )

        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # ktos inny zalozyl konto w miedzyczasie
            logger.info(f"Signup rejected on insert, username '{username}' already taken")
            raise DuplicateUsernameError(username)

        logger.info(f"Created user {created.id} ({created.username})")
        return UserRead.model_validate(created)

    def login(self, username: str, raw_password: str) -> str:
        user = self.repo.get_by_username(username)

        # nieznany user i zle haslo -> ten sam blad, bez enumeracji kont
        if user is None or not check_password_hash(user.password_hash, raw_password):
            logger.info("Login failed")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return self.token_service.issue({"id": user.id, "username": user.username})
