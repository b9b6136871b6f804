import logging
import sys
from datetime import datetime, timezone
from enum import Enum

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "attachment-quiz"


class QuizJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON log lines tagged with the service name.

    Quiz context passed through ``extra`` (result_type, anxiety_point,
    avoidance_point, path) lands as top-level keys; enum members are written
    as their plain values.
    """

    def __init__(self, *args, service: str = SERVICE_NAME, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = self.service
        log_record.pop('name', None)
        for key, value in list(log_record.items()):
            if isinstance(value, Enum):
                log_record[key] = value.value


def setup_logging(log_level_str: str = "INFO") -> None:
    """
    Configures structured JSON logging for the quiz service.

    Safe to call more than once: a second call only adjusts the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(isinstance(h.formatter, QuizJsonFormatter) for h in root_logger.handlers):
        log_handler = logging.StreamHandler(sys.stdout)
        log_handler.setFormatter(QuizJsonFormatter('%(name)s %(message)s'))
        root_logger.addHandler(log_handler)
        root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
    else:
        root_logger.info(f"Structured JSON logging already configured. Current level: {logging.getLevelName(root_logger.getEffectiveLevel())}")
