"""
Error reporting entry point.

``ErrorReporter.notice_error`` accepts any error value, probes it for the
optional capabilities (stack trace, class, attributes), applies the
collector's security settings and stores the resulting ``ErrorData`` until
the host application harvests it.

Refusals raise :class:`ReportingError` with a :class:`ReportErrorCode`; every
outcome is counted and logged as a structured event.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, NoReturn, Optional

from pydantic import ValidationError

from ...config import ErrorCollectorConfig, get_collector_config
from ...config.defaults import HIGH_SECURITY_ERROR_MESSAGE, SECURITY_POLICY_ERROR_MESSAGE
from ..dto import ErrorData, StackFrame
from ..errors import ReportErrorCode, ReportingError
from ..interfaces import AttributeValue
from ..logging import LogContext, get_logger, log_event
from ..metrics import ErrorCounters
from ..probing import (
    DEFAULT_POLICIES,
    ErrorDetails,
    ProbePolicies,
    apply_attribute_filter,
    probe_error,
    traceback_frames,
)
from .collector import ErrorCollector


class ErrorReporter:
    """Notices errors and buffers them for harvest.

    Parameters
    ----------
    config:
        Collector settings. Resolved with :func:`get_collector_config` when
        omitted.
    collector:
        Buffer to store records in. A new ``ErrorCollector`` sized by
        ``config.max_errors`` when omitted.
    counters:
        Outcome counters; a fresh ``ErrorCounters`` when omitted.
    policies:
        Default class naming and attribute filtering used while probing.
    logger:
        Logger for structured events; ``apm_errors.reporter`` when omitted.
    """

    def __init__(
        self,
        config: Optional[ErrorCollectorConfig] = None,
        *,
        collector: Optional[ErrorCollector] = None,
        counters: Optional[ErrorCounters] = None,
        policies: Optional[ProbePolicies] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config if config is not None else get_collector_config()
        self._collector = collector if collector is not None else ErrorCollector(self._config.max_errors)
        self._counters = counters if counters is not None else ErrorCounters()
        self._policies = policies or DEFAULT_POLICIES
        self._logger = logger or get_logger("apm_errors.reporter")
        self._ignored = frozenset(self._config.ignore_classes)

    @property
    def config(self) -> ErrorCollectorConfig:
        return self._config

    @property
    def counters(self) -> ErrorCounters:
        return self._counters

    @property
    def collector(self) -> ErrorCollector:
        return self._collector

    # ------------------------------------------------------------------ #
    def notice_error(
        self,
        err: object,
        *,
        extra_attributes: Optional[Mapping[str, AttributeValue]] = None,
    ) -> ErrorData:
        """Record ``err`` and return the stored record.

        Args:
            err: Any value rendering a message via ``str()``. Exceptions
                implementing ``StackTracer``, ``ErrorClasser`` or
                ``ErrorAttributer`` control those parts of the record.
            extra_attributes: Caller-supplied context merged over the error's
                own attributes.

        Raises:
            ReportingError: ``NIL_ERROR`` for ``None``, ``DISABLED`` when the
                collector is off, ``IGNORED`` for a class listed in
                ``ignore_classes``, ``INVALID_ATTRIBUTES`` when a key is not a
                string or a value is not JSON-compatible, and
                ``LIMIT_REACHED`` when the collector is full.
        """
        if err is None:
            self._drop(ReportErrorCode.NIL_ERROR, "nil error")
        if not self._config.enabled:
            self._drop(ReportErrorCode.DISABLED, "error collector disabled")

        details = probe_error(err, policies=self._policies)
        klass = details.error_class
        if klass in self._ignored:
            self._drop(ReportErrorCode.IGNORED, f"error class {klass!r} is ignored", klass)

        try:
            data = ErrorData(
                message=self._message_for(details),
                error_class=klass,
                stack=[StackFrame.from_frame(f) for f in self._stack_for(err, details)],
                attributes=self._attributes_for(details, extra_attributes),
                app_name=self._config.app_name,
            )
        except ValidationError as exc:
            self._drop(
                ReportErrorCode.INVALID_ATTRIBUTES,
                f"attributes rejected: {exc.error_count()} invalid key or value",
                klass,
            )
        if not self._collector.add(data):
            self._drop(
                ReportErrorCode.LIMIT_REACHED,
                f"collector already holds {self._collector.max_errors} errors",
                klass,
                level=logging.WARNING,
            )

        self._counters.record_noticed(klass)
        log_event(
            self._logger,
            "error.noticed",
            self._context(klass),
            level=logging.DEBUG,
            custom_class=details.has_custom_class,
            attribute_count=len(data.attributes),
            stack_depth=len(data.stack),
        )
        return data

    def harvest(self) -> List[ErrorData]:
        """Drain the collector and return the records noticed since the last harvest."""
        items = self._collector.harvest()
        log_event(self._logger, "error.harvest", self._context(), level=logging.DEBUG, count=len(items))
        return items

    # ------------------------------------------------------------------ #
    def _message_for(self, details: ErrorDetails) -> str:
        if self._config.high_security:
            return HIGH_SECURITY_ERROR_MESSAGE
        if not self._config.allow_raw_exception_messages:
            return SECURITY_POLICY_ERROR_MESSAGE
        return details.message

    @staticmethod
    def _stack_for(err: object, details: ErrorDetails):
        if details.has_stack_trace:
            return details.stack
        return traceback_frames(err)

    def _attributes_for(
        self,
        details: ErrorDetails,
        extra: Optional[Mapping[str, AttributeValue]],
    ) -> dict:
        if self._config.high_security:
            return {}
        merged: dict = dict(details.attributes)
        if extra:
            merged.update(apply_attribute_filter(extra, self._policies))
        return merged

    def _context(self, error_class: Optional[str] = None, **extra: Any) -> LogContext:
        return LogContext(app_name=self._config.app_name, error_class=error_class, extra=extra)

    def _drop(
        self,
        code: ReportErrorCode,
        message: str,
        error_class: Optional[str] = None,
        *,
        level: int = logging.DEBUG,
    ) -> NoReturn:
        self._counters.record_dropped(code.value)
        log_event(
            self._logger,
            "error.dropped",
            self._context(error_class, reason=code.value, detail=message),
            level=level,
        )
        raise ReportingError(code=code, message=message, error_class=error_class)


__all__ = ["ErrorReporter"]
