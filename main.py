import logging

import uvicorn

from adminkit.config import settings
from adminkit.main import create_app

logger = logging.getLogger(__name__)

app = create_app()


if __name__ == "__main__":
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=settings.debug)
