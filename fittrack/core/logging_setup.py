import logging
import sys

from fittrack.config.paths import LOG_FILE_PATH


def setup_logging(level=logging.INFO):
    LOG_FILE_PATH.parent.mkdir(exist_ok=True, parents=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(LOG_FILE_PATH, encoding="utf-8")
        ]
    )
    return logging.getLogger("fittrack")
