from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = frozenset({'password', 'token', 'secret_key', 'authorization', 'cookie'})

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)

# Below INFO these only repeat SQL statements, multipart parser state and socket chatter
QUIET_BELOW_INFO = ('aiosqlite', 'sqlalchemy.engine', 'python_multipart', 'httpcore', 'asyncio')

_ACCESS_LINE = re.compile(r' HTTP/[0-9.]+" - (?P<status>[1-5][0-9]{2}) - ')


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


def access_log_level(message: str) -> str | None:
    """
    Level for a granian access line, picked from its response status.

    '127.0.0.1 - "POST /api/venue HTTP/1.1" - 201 - 14ms'

    Any other message returns None and keeps the stdlib level.
    """
    match = _ACCESS_LINE.search(message)
    if match is None:
        return None
    status = int(match.group('status'))
    if status >= 500:
        return 'ERROR'
    if status >= 400:
        return 'WARNING'
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Forward stdlib records (granian, sqlalchemy, alembic) to the loguru sinks."""

    def __init__(self, bound: 'LoguruLogger') -> None:
        super().__init__()
        self._bound = bound

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.INFO and record.name.startswith(QUIET_BELOW_INFO):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Skip logging's own frames so file::function points at the caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._bound.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def log_file_path(now: datetime | None = None) -> Path:
    now = now or datetime.now(timezone.utc)
    return Path(settings.LOG_DIR) / f'{settings.LOG_FILE_PREFIX}{now:%Y-%m-%d_%H}.log'


def configure_logging() -> 'LoguruLogger':
    """
    Install the catalog sinks and return the bound logger used by `Logger`.

    stdout always; an hourly rotated file as well when DEBUG is on.
    Production ships stdout to the collector, so it gets no file sink.
    """
    loguru_logger.remove()
    bound = loguru_logger.bind(**_default_extra())
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    bound.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    if settings.DEBUG:
        bound.add(
            str(log_file_path()),
            format=io_log_format,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            compression='gz',
            enqueue=True,
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler(bound)], level=0, force=True)
    return bound


custom_logger = configure_logging()
