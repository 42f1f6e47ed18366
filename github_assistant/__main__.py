# github_assistant/__main__.py
import logging

import uvicorn

from .main import app

logger = logging.getLogger(__name__)


def main():
    port = app.state.settings.port
    logger.info("Server running on port %d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
