import logging
import json

# Attributes every LogRecord carries; anything else on a record came from 'extra'.
_RESERVED = frozenset(logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format log records as JSON objects."""
    def format(self, record):
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, self.datefmt),
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                log_record[key] = value
        # numpy scalars, paths and the like fall back to their str()
        return json.dumps(log_record, default=str)


def setup_json_logging(level=logging.INFO, stream=None):
    """Configure the root logger to emit JSON, replacing any existing handlers."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
