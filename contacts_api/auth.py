import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from contacts_api import models
from contacts_api.config import TOKEN_HEADER
from contacts_api.db import get_db
from contacts_api.errors import Unauthorized

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
api_token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_token() -> str:
    """
    Генерує непрозорий токен сесії користувача.

    :return: Токен у вигляді рядка.
    """
    return str(uuid.uuid4())


def get_user_by_token(db: Session, token: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.token == token).first()


def get_current_user(db: Session = Depends(get_db), token: Optional[str] = Depends(api_token_header)):
    """
    Отримує поточного користувача за токеном із заголовка ``X-API-TOKEN``.

    :param db: Сесія для роботи з базою даних.
    :param token: Токен користувача для автентифікації.
    :return: Користувач, якому належить токен.
    :raises Unauthorized: Якщо токен відсутній або не належить жодному користувачу.
    """
    if not token:
        raise Unauthorized()
    user = get_user_by_token(db, token)
    if user is None:
        raise Unauthorized()
    return user
