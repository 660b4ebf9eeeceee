from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from shop.data.models.user import UserModel
from shop.domain.errors import STORE_ERRORS, translate_store_error


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_username(self, username: str) -> UserModel | None:
        try:
            return self.db.execute(
                select(UserModel).where(UserModel.username == username)
            ).scalar_one_or_none()
        except STORE_ERRORS as e:
            raise translate_store_error(e) from e

    def create_user(self, user: UserModel) -> UserModel:
        # IntegrityError (unikalny username) idzie wyzej - serwis decyduje co to znaczy
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except STORE_ERRORS as e:
            self.db.rollback()
            raise translate_store_error(e) from e
        self.db.refresh(user)
        return user
