"""
Операції з базою даних для користувачів, контактів та адрес.

Кожен пошук контакту містить ідентифікатор власника в умові запиту, тому чужий
контакт неможливо відрізнити від неіснуючого. Адреси шукаються через свій
контакт з тією ж умовою.
"""

import logging
import math
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contacts_api import auth, models, schemas
from contacts_api.errors import NotFound, Unauthorized, ValidationError

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def create_user(db: Session, user: schemas.UserCreate) -> models.User:
    """
    Реєструє нового користувача.

    :param db: Сесія бази даних.
    :param user: Ім'я користувача, пароль та відображуване ім'я.
    :return: Створений користувач.
    :raises ValidationError: Якщо ім'я користувача вже зайняте.
    """
    if get_user_by_username(db, user.username):
        raise ValidationError("Username already exists")
    db_user = models.User(
        username=user.username,
        password=auth.hash_password(user.password),
        name=user.name,
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Username already exists")
    db.refresh(db_user)
    logger.info("Registered user %s", db_user.username)
    return db_user


def login_user(db: Session, credentials: schemas.UserLogin) -> models.User:
    """
    Перевіряє облікові дані та видає користувачу новий токен.

    Невідоме ім'я користувача та невірний пароль дають однакову помилку.

    :param db: Сесія бази даних.
    :param credentials: Ім'я користувача та пароль.
    :return: Користувач з новим токеном.
    :raises Unauthorized: Якщо облікові дані не співпадають.
    """
    db_user = get_user_by_username(db, credentials.username)
    if not db_user or not auth.verify_password(credentials.password, db_user.password):
        logger.info("Failed login for %s", credentials.username)
        raise Unauthorized("Username or password is wrong")
    db_user.token = auth.generate_token()
    db.commit()
    db.refresh(db_user)
    logger.info("User %s logged in", db_user.username)
    return db_user


def update_user(db: Session, user: models.User, changes: schemas.UserUpdate) -> models.User:
    if changes.name is not None:
        user.name = changes.name
    if changes.password is not None:
        user.password = auth.hash_password(changes.password)
    db.commit()
    db.refresh(user)
    return user


def logout_user(db: Session, user: models.User) -> None:
    user.token = None
    db.commit()
    logger.info("User %s logged out", user.username)


def create_contact(db: Session, contact: schemas.ContactCreate, user_id: int) -> models.Contact:
    db_contact = models.Contact(**contact.model_dump(), user_id=user_id)
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    logger.info("Created contact %s for user %s", db_contact.id, user_id)
    return db_contact


def get_contact(db: Session, contact_id: int, user_id: int) -> models.Contact:
    """
    Шукає контакт за ідентифікатором серед контактів власника.

    :raises NotFound: Якщо контакту немає або він належить іншому користувачу.
    """
    db_contact = (
        db.query(models.Contact)
        .filter(models.Contact.id == contact_id, models.Contact.user_id == user_id)
        .first()
    )
    if db_contact is None:
        raise NotFound("Contact")
    return db_contact


def update_contact(db: Session, contact_id: int, contact: schemas.ContactUpdate, user_id: int) -> models.Contact:
    db_contact = get_contact(db, contact_id, user_id)
    for field, value in contact.model_dump().items():
        setattr(db_contact, field, value)
    db.commit()
    db.refresh(db_contact)
    logger.info("Updated contact %s", db_contact.id)
    return db_contact


def delete_contact(db: Session, contact_id: int, user_id: int) -> None:
    db_contact = get_contact(db, contact_id, user_id)
    db.delete(db_contact)
    db.commit()
    logger.info("Deleted contact %s", contact_id)


def search_contacts(
    db: Session, search: schemas.ContactSearch, user_id: int
) -> Tuple[List[models.Contact], schemas.Paging]:
    """
    Шукає контакти власника за фільтрами зі сторінковою розбивкою.

    Ім'я порівнюється без урахування регістру з рядком "ім'я прізвище",
    email та телефон шукаються як підрядок. Усі задані фільтри поєднуються через AND.

    :param db: Сесія бази даних.
    :param search: Фільтри, номер сторінки та її розмір.
    :param user_id: Ідентифікатор власника контактів.
    :return: Контакти поточної сторінки та дані про сторінки.
    """
    query = db.query(models.Contact).filter(models.Contact.user_id == user_id)

    if search.name:
        full_name = models.Contact.first_name + " " + func.coalesce(models.Contact.last_name, "")
        query = query.filter(full_name.icontains(search.name, autoescape=True))
    if search.email:
        query = query.filter(models.Contact.email.contains(search.email, autoescape=True))
    if search.phone:
        query = query.filter(models.Contact.phone.contains(search.phone, autoescape=True))

    total = query.count()
    contacts = (
        query.order_by(models.Contact.id)
        .offset((search.page - 1) * search.size)
        .limit(search.size)
        .all()
    )
    paging = schemas.Paging(
        current_page=search.page,
        total_page=math.ceil(total / search.size),
        size=search.size,
    )
    return contacts, paging


def create_address(db: Session, contact_id: int, address: schemas.AddressCreate, user_id: int) -> models.Address:
    db_contact = get_contact(db, contact_id, user_id)
    db_address = models.Address(**address.model_dump(), contact_id=db_contact.id)
    db.add(db_address)
    db.commit()
    db.refresh(db_address)
    logger.info("Created address %s for contact %s", db_address.id, contact_id)
    return db_address


def get_address(db: Session, contact_id: int, address_id: int, user_id: int) -> models.Address:
    """
    Шукає адресу контакту, який належить користувачу.

    :raises NotFound: Якщо контакт чужий або відсутній, або адреса не належить цьому контакту.
    """
    db_address = (
        db.query(models.Address)
        .join(models.Contact)
        .filter(
            models.Address.id == address_id,
            models.Address.contact_id == contact_id,
            models.Contact.user_id == user_id,
        )
        .first()
    )
    if db_address is None:
        raise NotFound("Address")
    return db_address


def update_address(
    db: Session, contact_id: int, address_id: int, address: schemas.AddressUpdate, user_id: int
) -> models.Address:
    db_address = get_address(db, contact_id, address_id, user_id)
    for field, value in address.model_dump().items():
        setattr(db_address, field, value)
    db.commit()
    db.refresh(db_address)
    logger.info("Updated address %s", db_address.id)
    return db_address


def delete_address(db: Session, contact_id: int, address_id: int, user_id: int) -> None:
    db_address = get_address(db, contact_id, address_id, user_id)
    db.delete(db_address)
    db.commit()
    logger.info("Deleted address %s", address_id)


def get_addresses(db: Session, contact_id: int, user_id: int) -> List[models.Address]:
    get_contact(db, contact_id, user_id)
    return (
        db.query(models.Address)
        .filter(models.Address.contact_id == contact_id)
        .order_by(models.Address.id)
        .all()
    )
