# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""MongoDB client singleton."""
from pymongo import MongoClient
from pymongo.database import Database

from app.core.config import settings

client: MongoClient = MongoClient(
    settings.MONGO_URI,
    serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    connect=False,
)


def get_database() -> Database:
    return client.get_default_database(default=settings.MONGO_DB_NAME)


def verify_connection() -> None:
    """Raise if the server does not answer a ping within the selection timeout."""
    client.admin.command("ping")


def close() -> None:
    client.close()
