import logging
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logger = logging.getLogger("data_url_utils")
logger.setLevel(LOG_LEVEL)
