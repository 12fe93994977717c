from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from contacts_api import crud, models, schemas
from contacts_api.auth import get_current_user
from contacts_api.db import get_db

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=schemas.WebResponse[schemas.Contact])
def create_contact(
    contact: schemas.ContactCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """
    Створює новий контакт для поточного користувача.

    :param contact: Дані нового контакту (ім'я, прізвище, email, телефон).
    :param db: Сесія для роботи з базою даних.
    :param current_user: Поточний користувач, який додає контакт.
    :return: Створений контакт разом з ID.
    """
    db_contact = crud.create_contact(db, contact, current_user.id)
    return {"data": schemas.Contact.model_validate(db_contact)}


@router.get("", response_model=schemas.ContactPage)
def search_contacts(
    search: Annotated[schemas.ContactSearch, Query()],
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """
    Шукає контакти поточного користувача.

    :param search: Фільтри name, email, phone та номер і розмір сторінки.
    :return: Контакти сторінки та дані про сторінки.
    """
    contacts, paging = crud.search_contacts(db, search, current_user.id)
    return {"data": [schemas.Contact.model_validate(contact) for contact in contacts], "paging": paging}


@router.get("/{contact_id}", response_model=schemas.WebResponse[schemas.Contact])
def get_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    db_contact = crud.get_contact(db, contact_id, current_user.id)
    return {"data": schemas.Contact.model_validate(db_contact)}


@router.put("/{contact_id}", response_model=schemas.WebResponse[schemas.Contact])
def update_contact(
    contact_id: int,
    contact: schemas.ContactUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    db_contact = crud.update_contact(db, contact_id, contact, current_user.id)
    return {"data": schemas.Contact.model_validate(db_contact)}


@router.delete("/{contact_id}", response_model=schemas.WebResponse[str])
def delete_contact(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    crud.delete_contact(db, contact_id, current_user.id)
    return {"data": "OK"}
