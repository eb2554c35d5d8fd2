import logging

from pymongo import MongoClient
from pymongo.collection import Collection

from tasker.config import Config

logger = logging.getLogger(__name__)


def connect(config=Config) -> MongoClient:
    """
    Open a client for config.DATABASE_URI and ping it. A store that cannot be
    reached raises here, so the server never starts without one.
    """
    client = MongoClient(
        config.DATABASE_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=config.SERVER_SELECTION_TIMEOUT_MS,
    )
    client.admin.command("ping")
    logger.info("Connected to MongoDB database %r", config.DATABASE_NAME)
    return client


def get_collection(client: MongoClient, config=Config) -> Collection:
    return client[config.DATABASE_NAME][config.COLLECTION_NAME]
