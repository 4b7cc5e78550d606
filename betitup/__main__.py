import logging

import uvicorn

from betitup.core.config import get_settings
from betitup.main import app

logger = logging.getLogger("betitup")


def main() -> None:
    settings = get_settings()
    logger.info("BetItUp backend running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
