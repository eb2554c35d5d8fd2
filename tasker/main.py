import logging

import uvicorn

from tasker.app import create_app
from tasker.config import Config
from tasker.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def run():
    setup_logging(Config.LOG_LEVEL)
    app = create_app()
    logger.info("Server listening on port %s", Config.PORT)
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


# ---------- Run with: python -m tasker.main  (or the `tasker` script) ----------
if __name__ == "__main__":
    run()
