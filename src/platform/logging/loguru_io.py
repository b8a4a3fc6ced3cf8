from collections.abc import Awaitable, Iterator
from contextlib import contextmanager
from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, call_depth_var, custom_logger
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

# Frames to skip so file::function names the decorated function's caller:
# the contextmanager hook, _run_*, the wrapper (and _traced itself when inside it)
_REPORT_DEPTH = 3
_TRACE_DEPTH = 4


class LoguruIO:
    """
    Decorator that traces a call: masked arguments and return value at DEBUG,
    and the first exception raised along a decorated call chain.

    Domain errors (CustomBaseError) are expected outcomes and are logged without
    a traceback; anything else gets the full traceback.
    """

    def __init__(
        self, bound: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._bound = bound
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _emit(self, depth: int = _REPORT_DEPTH) -> 'LoguruLogger':
        return self._bound.bind(**self.extra).opt(depth=depth)

    def scrub(self, data: Any) -> Any:
        if isinstance(data, dict):
            cleaned: Any = {
                key: self.scrub(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            cleaned = type(data)(self.scrub(item) for item in data)
        else:
            cleaned = mask_sensitive(data)
        return truncate_content(cleaned) if self.truncate_content else cleaned

    def _report(self, exc: Exception) -> None:
        if getattr(exc, '_has_logged', False):
            return
        exc._has_logged = True  # type: ignore[attr-defined]
        message = f'{type(exc).__name__}: {exc}'
        if isinstance(exc, CustomBaseError):
            self._emit().error(message)
        else:
            self._emit().exception(message)

    @contextmanager
    def _traced(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Iterator[list[Any]]:
        """Yields a one-slot list the wrapper fills with the return value."""
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._emit(_TRACE_DEPTH).debug(
                f'args: {self.scrub(args)}, kwargs: {self.scrub(kwargs)}'
            )
        outcome: list[Any] = []
        try:
            yield outcome
            if settings.DEBUG and outcome:
                self._emit(_TRACE_DEPTH).debug(f'return: {self.scrub(outcome[0])}')
        finally:
            reset_call_depth()

    def _run_sync(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            with self._traced(args, kwargs) as outcome:
                outcome.append(func(*args, **kwargs))
            return outcome[0]
        except Exception as exc:
            self._report(exc)
            if self.reraise:
                raise
            return None

    async def _run_async(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            with self._traced(args, kwargs) as outcome:
                outcome.append(await cast(Awaitable[Any], func(*args, **kwargs)))
            return outcome[0]
        except Exception as exc:
            self._report(exc)
            if self.reraise:
                raise
            return None

    def _hide_from_traceback(self, wrapper: Callable[..., Any]) -> Callable[..., Any]:
        # Present the wrapper as a loguru frame so tracebacks start at user code
        wrapper.__code__ = wrapper.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._bound.catch).__code__.co_filename
        )
        return wrapper

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await self._run_async(func, *args, **kwargs)

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            return self._run_sync(func, *args, **kwargs)

        return cast(_F, self._hide_from_traceback(sync_wrapper))


class Logger:
    """`Logger.base` for plain log lines, `Logger.io` to trace a function's calls."""

    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
