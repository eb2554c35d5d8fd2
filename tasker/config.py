import logging
import os

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

# a .env in the working directory fills in whatever the process environment leaves unset
env_path = find_dotenv(usecwd=True)
if env_path:
    load_dotenv(dotenv_path=env_path)
else:
    logger.warning("Error loading .env file")


class Config:
    DATABASE_URI = os.environ.get("DATABASE_URI", "mongodb://localhost:27017")
    DATABASE_NAME = "tasker"
    COLLECTION_NAME = "tasks"
    SERVER_SELECTION_TIMEOUT_MS = int(os.environ.get("SERVER_SELECTION_TIMEOUT_MS", "5000"))
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "5000"))
    STATIC_DIR = os.environ.get("STATIC_DIR", "public")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
