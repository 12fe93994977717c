from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, Field

T = TypeVar("T")

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
# bcrypt ignores everything after the first 72 bytes
PASSWORD_MAX_BYTES = 72


def check_password_bytes(password: str) -> str:
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return password


Password = Annotated[str, Field(min_length=1, max_length=PASSWORD_MAX_BYTES), AfterValidator(check_password_bytes)]


class WebResponse(BaseModel, Generic[T]):
    data: T


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: Password
    name: str = Field(min_length=1, max_length=100)


class UserLogin(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: Password


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[Password] = None


class User(BaseModel):
    username: str
    name: str

    class Config:
        from_attributes = True


class UserToken(User):
    token: str


class ContactBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=100, pattern=EMAIL_PATTERN)
    phone: Optional[str] = Field(None, max_length=20)


class ContactCreate(ContactBase):
    pass


class ContactUpdate(ContactBase):
    pass


class Contact(ContactBase):
    id: int

    class Config:
        from_attributes = True


class ContactSearch(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    page: int = Field(1, ge=1)
    size: int = Field(10, ge=1, le=100)


class Paging(BaseModel):
    current_page: int
    total_page: int
    size: int


class ContactPage(BaseModel):
    data: List[Contact]
    paging: Paging


class AddressBase(BaseModel):
    street: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    province: Optional[str] = Field(None, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class AddressCreate(AddressBase):
    pass


class AddressUpdate(AddressBase):
    pass


class Address(AddressBase):
    id: int

    class Config:
        from_attributes = True
