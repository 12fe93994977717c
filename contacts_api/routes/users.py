from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from contacts_api import crud, models, schemas
from contacts_api.auth import get_current_user
from contacts_api.db import get_db

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=schemas.WebResponse[schemas.User])
def register_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    """
    Реєструє нового користувача.

    :param user: Ім'я користувача, пароль та відображуване ім'я.
    :param db: Сесія бази даних.
    :return: Публічні дані користувача без пароля та токена.
    """
    db_user = crud.create_user(db, user)
    return {"data": schemas.User.model_validate(db_user)}


@router.post("/login", response_model=schemas.WebResponse[schemas.UserToken])
def login_user(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    """
    Логін користувача за іменем користувача та паролем.

    :param credentials: Ім'я користувача та пароль.
    :param db: Сесія бази даних.
    :return: Дані користувача разом з новим токеном.
    """
    db_user = crud.login_user(db, credentials)
    return {"data": schemas.UserToken.model_validate(db_user)}


@router.get("/current", response_model=schemas.WebResponse[schemas.User])
def get_user(current_user: models.User = Depends(get_current_user)):
    return {"data": schemas.User.model_validate(current_user)}


@router.patch("/current", response_model=schemas.WebResponse[schemas.User])
def update_user(
    changes: schemas.UserUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """
    Оновлює ім'я та/або пароль поточного користувача.

    Поля, яких немає в запиті, залишаються без змін.
    """
    db_user = crud.update_user(db, current_user, changes)
    return {"data": schemas.User.model_validate(db_user)}


@router.delete("/current", response_model=schemas.WebResponse[str])
def logout_user(db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    crud.logout_user(db, current_user)
    return {"data": "OK"}
