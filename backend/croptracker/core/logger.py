import logging
import json
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone

from .config import settings

SERVICE_NAME = "croptracker"
EXTRA_FIELDS = ("request_id", "user_id", "path", "method", "status_code", "duration_ms")


def json_formatter(record):
    log = {
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "level": record.levelname,
        "service": SERVICE_NAME,
        "message": record.getMessage(),
    }

    for field in EXTRA_FIELDS:
        if hasattr(record, field):
            log[field] = getattr(record, field)

    if record.exc_info:
        log["exception"] = logging.Formatter().formatException(record.exc_info)

    return json.dumps(log, default=str)


class JSONFormatter(logging.Formatter):
    def format(self, record):
        return json_formatter(record)


logger = logging.getLogger(SERVICE_NAME)
logger.setLevel(settings.LOG_LEVEL.upper())
logger.propagate = False

json_f = JSONFormatter()

if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(json_f)
    logger.addHandler(console_handler)

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.LOG_DIR, "app.json.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setFormatter(json_f)
        logger.addHandler(file_handler)
