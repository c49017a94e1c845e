import json
import logging
import sys
import traceback
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

CONSOLE_FORMAT = '%(asctime)s [%(threadName)s] %(message)s'
CONSOLE_DATEFMT = '%Y-%m-%d %H:%M:%S'


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs structured JSON logs.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_data'):
            log_entry['data'] = record.extra_data

        return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def setup_logging(level: str = 'INFO', log_format: str = 'text') -> None:
    """Configure the root logger once at startup."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    logging.getLogger('httpx').setLevel(logging.WARNING)

    console_handler = logging.StreamHandler(sys.stdout)
    if log_format.lower() == 'json':
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    root_logger.addHandler(console_handler)


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class EventType(Enum):
    API_CALL = "api_call"
    USER_REQUEST = "user_request"


@dataclass
class LogEvent:
    event_type: EventType
    level: LogLevel
    message: str
    timestamp: datetime
    duration_ms: float | None = None
    user_context: dict[str, Any] | None = None
    api_context: dict[str, Any] | None = None
    error_context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        data['event_type'] = self.event_type.value
        data['level'] = self.level.value
        return data


class RequestLogger:
    """Emits request lifecycle and upstream call events with the correlation id attached."""

    def __init__(self):
        self.system_logger = logging.getLogger('gateway')
        self.api_logger = logging.getLogger('gateway.upstream')

    def log_event(self, event: LogEvent):
        logger = self.api_logger if event.event_type == EventType.API_CALL else self.system_logger

        extra = {"extra_data": event.to_dict()}

        level_map = {
            LogLevel.DEBUG: logger.debug,
            LogLevel.INFO: logger.info,
            LogLevel.WARNING: logger.warning,
            LogLevel.ERROR: logger.error,
        }

        log_func = level_map.get(event.level, logger.info)
        log_func(event.message, extra=extra)

    def log_request_received(self, request_id: str, remote_address: str, params: dict[str, str]):
        self.log_event(LogEvent(
            event_type=EventType.USER_REQUEST,
            level=LogLevel.INFO,
            message=f"Request {request_id} received from {remote_address}",
            timestamp=datetime.now(),
            user_context={
                "request_id": request_id,
                "remote_address": remote_address,
                "params": params,
            },
        ))

    def log_request_completed(self, request_id: str, remote_address: str, duration_ms: float):
        self.log_event(LogEvent(
            event_type=EventType.USER_REQUEST,
            level=LogLevel.INFO,
            message=f"Request {request_id} completed",
            timestamp=datetime.now(),
            duration_ms=duration_ms,
            user_context={"request_id": request_id, "remote_address": remote_address},
        ))

    def log_request_failed(self, request_id: str, remote_address: str, status_code: int,
                           duration_ms: float | None = None, error_message: str | None = None):
        self.log_event(LogEvent(
            event_type=EventType.USER_REQUEST,
            level=LogLevel.ERROR,
            message=f"Request {request_id} failed with code {status_code}",
            timestamp=datetime.now(),
            duration_ms=duration_ms,
            user_context={"request_id": request_id, "remote_address": remote_address},
            error_context={"error_message": error_message} if error_message else None,
        ))

    def log_api_call(self, provider_name: str, symbol: str, success: bool, response_time_ms: float,
                     error_message: str | None = None):
        self.log_event(LogEvent(
            event_type=EventType.API_CALL,
            level=LogLevel.INFO if success else LogLevel.ERROR,
            message=f"API call to {provider_name} for {symbol}: {'SUCCESS' if success else 'FAILED'}",
            timestamp=datetime.now(),
            duration_ms=response_time_ms,
            api_context={
                "provider": provider_name,
                "symbol": symbol,
                "success": success,
                "response_time_ms": response_time_ms,
            },
            error_context={"error_message": error_message} if error_message else None,
        ))


request_logger: RequestLogger | None = None


def get_request_logger() -> RequestLogger:
    global request_logger
    if request_logger is None:
        request_logger = RequestLogger()
    return request_logger
