"""IntervalService — parse, display, and change the working interval."""

from __future__ import annotations

import logging

from timefield.domain.errors import InvalidInterval
from timefield.services.base import BaseService
from timefield.services.result import ServiceResult

logger = logging.getLogger(__name__)


class IntervalService(BaseService):
    """Working-interval operations."""

    def current(self) -> ServiceResult:
        """Report the current working interval."""
        interval = self._scheduler.working_interval
        return ServiceResult(ok=True, op="working_interval", data=self.interval_data(interval))

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* relative to the working interval without changing it."""
        op = "parse_interval"
        try:
            interval = self._parse_interval(text)
        except InvalidInterval as exc:
            return self._interval_failure(op, text, exc)
        return ServiceResult(ok=True, op=op, data=self.interval_data(interval))

    def change(self, text: str) -> ServiceResult:
        """Replace the working interval; a failed parse leaves it untouched."""
        op = "change_interval"
        try:
            interval = self._parse_interval(text)
        except InvalidInterval as exc:
            return self._interval_failure(op, text, exc)

        previous = self._scheduler.working_interval
        self._scheduler.working_interval = interval
        logger.debug("Working interval %s -> %s", self.display(previous), self.display(interval))

        data = self.interval_data(interval)
        data["previous"] = self.display(previous)
        return ServiceResult(ok=True, op=op, data=data)
