from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from .disk_store import DiskDocumentStore
from .errors import DocumentStoreError
from .logger import ConsoleLogger
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

USERS = "users"


class Address(BaseModel):
    city: str
    state: str
    country: str
    pincode: str


class User(BaseModel):
    name: str
    age: int
    address: Address


SAMPLE_USERS = [
    User(name="John Doe", age=25, address=Address(city="New York", state="NY", country="USA", pincode="10001")),
    User(name="Jane Doe", age=30, address=Address(city="San Francisco", state="CA", country="USA", pincode="94101")),
    User(name="John Smith", age=35, address=Address(city="Los Angeles", state="CA", country="USA", pincode="90001")),
    User(name="Jane Smith", age=40, address=Address(city="Chicago", state="IL", country="USA", pincode="60007")),
]


def run(settings: Settings) -> int:
    try:
        db = DiskDocumentStore(settings.root_dir, logger=ConsoleLogger(settings.log_level))
    except DocumentStoreError as e:
        logger.error("Failed to initialize database: %s", e)
        return 1

    for user in SAMPLE_USERS:
        try:
            db.write(USERS, user.name, user)
        except DocumentStoreError as e:
            logger.warning("Failed to add user %s: %s", user.name, e)
            continue
        if settings.log_demo_writes:
            logger.info("Added: %s", user.name)

    try:
        records = db.read_all(USERS)
    except DocumentStoreError as e:
        logger.error("Failed to read all records: %s", e)
        return 1

    all_users: list[User] = []
    for filename, raw in records.items():
        try:
            all_users.append(User.model_validate_json(raw))
        except ValidationError as e:
            logger.error("Failed to decode %s: %s", filename, e)
            return 1

    print("All Users:", [u.model_dump() for u in all_users])
    return 0


def main() -> int:
    load_dotenv("local.env")
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    return run(settings)
