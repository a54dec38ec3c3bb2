# uninits/core/database.py
from dataclasses import dataclass
from functools import lru_cache, wraps

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from uninits.core.config import CONFIG
from uninits.core.errors import PersistenceFault
from uninits.core.logger import get_logger

log = get_logger("db")


@dataclass
class Store:
    """The three collections the portal reads and writes."""

    students: Collection
    courses: Collection
    attendances: Collection

    @classmethod
    def from_database(cls, db: Database) -> "Store":
        return cls(
            students=db["students"],
            courses=db["courses"],
            attendances=db["attendances"],
        )


@lru_cache(maxsize=1)
def _client() -> MongoClient:
    # MongoClient connects lazily, so building it never blocks on the server
    log.info("Creating MongoDB client for database %s", CONFIG.DB_NAME)
    return MongoClient(CONFIG.MONGO_URI)


def get_store() -> Store:
    return Store.from_database(_client()[CONFIG.DB_NAME])


def ensure_indexes(store: Store) -> None:
    store.courses.create_index(
        [("branchCode", ASCENDING), ("semester", ASCENDING)], unique=True
    )
    store.attendances.create_index("scholarId", unique=True)
    # Not unique until canonicalize_scholar_ids has been run on legacy data
    store.students.create_index("scholarId")


def persistence_guard(func):
    """Report any driver error raised by ``func`` as a PersistenceFault."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PyMongoError as exc:
            log.exception("Store access failed in %s", func.__name__)
            raise PersistenceFault() from exc

    return wrapper
