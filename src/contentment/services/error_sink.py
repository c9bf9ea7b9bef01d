"""Error sink implementations used at provider boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from ..domain.models import ErrorEvent


@dataclass(slots=True)
class LoggingErrorSink:
    """Log every reported provider failure through structlog."""

    logger_name: str = "contentment.providers"
    log: structlog.stdlib.BoundLogger = field(init=False)

    def __post_init__(self) -> None:
        self.log = structlog.get_logger(self.logger_name)

    def report(self, event: ErrorEvent) -> None:
        self.log.error(
            "datalist.provider.failed",
            source=event.source,
            error_type=type(event.error).__name__,
            exc_info=event.error,
        )


__all__ = ["LoggingErrorSink"]
