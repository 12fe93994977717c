from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from contacts_api import crud, models, schemas
from contacts_api.auth import get_current_user
from contacts_api.db import get_db

router = APIRouter(prefix="/api/contacts/{contact_id}/addresses", tags=["addresses"])


@router.post("", response_model=schemas.WebResponse[schemas.Address])
def create_address(
    contact_id: int,
    address: schemas.AddressCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    """
    Додає адресу до контакту поточного користувача.

    :param contact_id: Ідентифікатор контакту.
    :param address: Дані адреси, країна та поштовий індекс обов'язкові.
    :return: Створена адреса.
    """
    db_address = crud.create_address(db, contact_id, address, current_user.id)
    return {"data": schemas.Address.model_validate(db_address)}


@router.get("", response_model=schemas.WebResponse[List[schemas.Address]])
def list_addresses(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    addresses = crud.get_addresses(db, contact_id, current_user.id)
    return {"data": [schemas.Address.model_validate(address) for address in addresses]}


@router.get("/{address_id}", response_model=schemas.WebResponse[schemas.Address])
def get_address(
    contact_id: int,
    address_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    db_address = crud.get_address(db, contact_id, address_id, current_user.id)
    return {"data": schemas.Address.model_validate(db_address)}


@router.put("/{address_id}", response_model=schemas.WebResponse[schemas.Address])
def update_address(
    contact_id: int,
    address_id: int,
    address: schemas.AddressUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    db_address = crud.update_address(db, contact_id, address_id, address, current_user.id)
    return {"data": schemas.Address.model_validate(db_address)}


@router.delete("/{address_id}", response_model=schemas.WebResponse[str])
def delete_address(
    contact_id: int,
    address_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    crud.delete_address(db, contact_id, address_id, current_user.id)
    return {"data": "OK"}
