"""Run the feed server: ``python -m slackfeed``."""

import uvicorn

from slackfeed.adapters.web.server import app
from slackfeed.config import AppConfig


def main():
    config = AppConfig.from_env()
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level="info")


if __name__ == "__main__":
    main()
