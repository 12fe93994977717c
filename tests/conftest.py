import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from contacts_api import auth, models
from contacts_api.db import Base, get_db
from contacts_api.main import app

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    db_session = TestingSessionLocal()
    yield db_session
    db_session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    db_user = models.User(username="test", password=auth.hash_password("secret"), name="Test", token="test")
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


@pytest.fixture
def other_user(db):
    db_user = models.User(username="other", password=auth.hash_password("secret"), name="Other", token="other")
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


@pytest.fixture
def contact(db, user):
    db_contact = models.Contact(
        first_name="test", last_name="test", email="test@example.com", phone="08123456789", user_id=user.id
    )
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    return db_contact


@pytest.fixture
def address(db, contact):
    db_address = models.Address(
        street="Jalan test",
        city="Kota test",
        province="Provinsi test",
        country="Indonesia",
        postal_code="12345",
        contact_id=contact.id,
    )
    db.add(db_address)
    db.commit()
    db.refresh(db_address)
    return db_address
