import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api import db, models  # noqa: F401  models registers the tables on Base
from contacts_api.config import CORS_ORIGINS
from contacts_api.errors import register_error_handlers
from contacts_api.logging_config import log_requests, setup_logging
from contacts_api.routes import addresses, contacts, users

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.Base.metadata.create_all(bind=db.engine)
    logger.info("Contacts API started")
    yield
    logger.info("Contacts API stopped")


app = FastAPI(title="Contacts API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_error_handlers(app)

app.include_router(users.router)
app.include_router(contacts.router)
app.include_router(addresses.router)
