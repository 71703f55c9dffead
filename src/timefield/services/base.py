"""BaseService — shared foundation for timefield services.

Every service receives the :class:`Scheduler` at construction time. The
scheduler provides the task store, the working interval, and the settings
(string table, display options). Clock values may be pinned for tests;
otherwise each call reads the wall clock.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from timefield.domain.errors import InvalidInterval
from timefield.domain.formatting import format_interval
from timefield.domain.intervals import Interval, parse_interval
from timefield.services.result import ServiceResult

if TYPE_CHECKING:
    from timefield.config.settings import TimefieldSettings
    from timefield.infrastructure.scheduler import Scheduler

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TaskService(BaseService):
            def delete_task(self, index: int) -> ServiceResult:
                ...
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        today: date | None = None,
        now: datetime | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._today = today
        self._now = now

    @property
    def _settings(self) -> TimefieldSettings:
        return self._scheduler.settings

    def display(self, interval: Interval) -> str:
        """Format *interval* with the configured month style."""
        return format_interval(interval, month_style=self._settings.display.month_style)

    def interval_data(self, interval: Interval) -> dict[str, Any]:
        return {
            "begin": interval.begin.isoformat(),
            "end": interval.end.isoformat(),
            "display": self.display(interval),
        }

    def _parse_interval(self, text: str) -> Interval:
        """Parse *text* against the current working interval.

        Raises:
            InvalidInterval: Propagated from the parser.
        """
        return parse_interval(
            text,
            self._scheduler.working_interval,
            words=self._settings.strings.shortcut_words(),
            today=self._today,
            now=self._now,
        )

    def _interval_failure(self, op: str, text: str, exc: InvalidInterval) -> ServiceResult:
        cause = exc.__cause__
        detail: dict[str, Any] = {"input": text}
        if cause is not None and hasattr(cause, "code"):
            detail["cause"] = cause.code
        logger.debug("Rejected interval %r: %s", text, exc)
        return ServiceResult.failure(op, exc.code, str(exc), **detail)
