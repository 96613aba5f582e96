import json
from datetime import datetime, timezone

from pythonjsonlogger.jsonlogger import JsonFormatter
from sentry_sdk import get_current_span

from utils.config import RUN_ENV

DEFAULT_SERVICE_NAME = "memberhub-api"


class ServiceJsonFormatter(JsonFormatter):
    """
    Stamps each record with the service that emitted it, the environment it
    runs in and its creation time in UTC.

    Built from `LOGGING` with the `()` factory key so that `service` can be set
    per deployment, e.g.

        "json": {
            "()": "utils.logging_configuration.CustomJsonFormatter",
            "fmt": "%(message)s %(asctime)s %(name)s %(levelname)s",
            "service": "memberhub-api",
        }
    """

    def __init__(self, *args, service=DEFAULT_SERVICE_NAME, env=RUN_ENV, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service
        self.env = env

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = self.service
        log_record["env"] = self.env
        log_record["utctime"] = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).isoformat()


class CustomLocalJsonFormatter(ServiceJsonFormatter):
    # a dev console only ever shows one service
    hidden_fields = ("service", "env")

    def jsonify_log_record(self, log_record):
        """Returns a readable, multi-line rendering of the log record."""
        levelname = log_record.pop("levelname")
        message = log_record.pop("message")
        exc_info = log_record.pop("exc_info", "")
        for field in self.hidden_fields:
            log_record.pop(field, None)

        body = json.dumps(log_record, indent=4, default=str) if log_record else "{}"
        rendered = f"{levelname}: {message} \n {body}"
        if exc_info:
            rendered = f"{rendered}\n{exc_info}"
        return rendered


class CustomJsonFormatter(ServiceJsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("logger.name", record.name)
        log_record.setdefault("logger.thread_name", record.threadName)
        level = log_record.get("level")
        log_record["level"] = level.upper() if level else record.levelname

        span = get_current_span()
        if span and span.trace_id:
            log_record["sentry_trace_id"] = span.trace_id
