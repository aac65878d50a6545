"""Diagnostic logging for realty-engine.

Catalog changes and closed deals attach their context through ``extra``
(``address``, ``total_price`` and friends); the JSON format lifts those
fields to the top level of each line.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# Keys passed via ``extra=`` that JsonFormatter emits when present.
CONTEXT_FIELDS = ("address", "total_price", "user_id", "services", "count", "source")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure the diagnostic loggers.

    Deal and notification narrative lines are printed to stdout directly and
    are not affected by this.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" for one human-readable line per record, "json" for
        JsonFormatter output.
    stream : TextIO, optional
        Destination for log lines. Defaults to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("realty_engine").setLevel(log_level)
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying any catalog or deal context."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            if key in record.__dict__:
                log_data[key] = record.__dict__[key]

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
