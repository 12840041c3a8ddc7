# Copyright (c) 2026 Mohammed Hassan. All rights reserved.
# Proprietary and confidential. Unauthorized copying, modification, distribution, or use is prohibited.

import logging
import sys
import contextvars
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger
from .config import settings

request_id_var = contextvars.ContextVar("request_id", default=None)

SERVICE_NAME = "aguli-admin"

# Keys whose values never reach a log sink
SECRETS = ["token", "secret", "password", "key", "authorization", "cookie", "credential"]

class RedactingJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')

        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname

        req_id = request_id_var.get()
        if req_id:
            log_record["request_id"] = req_id

        log_record["environment"] = settings.environment
        log_record["service_name"] = SERVICE_NAME

        for key, value in list(log_record.items()):
            if any(s in key.lower() for s in SECRETS) and isinstance(value, str):
                log_record[key] = "***REDACTED***"

def setup_logging(level: int = logging.INFO):
    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = RedactingJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

def log_event(event: str, level: str = "info", **fields):
    """Log a structured event; None-valued fields are dropped."""
    logger = logging.getLogger(SERVICE_NAME)
    fields["event"] = event
    extra = {k: v for k, v in fields.items() if v is not None}

    level = level.lower()
    if level == "debug":
        logger.debug(event, extra=extra)
    elif level == "warning":
        logger.warning(event, extra=extra)
    elif level == "error":
        logger.error(event, extra=extra)
    else:
        logger.info(event, extra=extra)
