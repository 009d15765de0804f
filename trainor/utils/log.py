import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# force=True replaces handlers installed by uvicorn or an earlier import
logging.basicConfig(level=LOG_LEVEL, format=FORMAT, stream=sys.stdout, force=True)

# client libraries log every request and frame at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "urllib3")

for name in NOISY_LOGGERS:
    logging.getLogger(name).setLevel(logging.INFO)

logger = logging.getLogger("trainor")
logger.setLevel(LOG_LEVEL)

logger.debug(f"Logger initialised level={LOG_LEVEL}")
