"""Coordinates a sales repository and a formatter, nothing else."""
from __future__ import annotations
from datetime import datetime

from solid_examples.core.logger import get_logger
from solid_examples.domain.sales.output import SalesOutput
from solid_examples.persistence.interfaces.sales_repository import SalesRepository

logger = get_logger(__name__)


class SalesReporter:
    """
    Produces a formatted sales total for a date range.

    The reporter does not know how sales are stored or how they are rendered,
    and it performs no authentication: callers are expected to have checked
    access before asking for a report.
    """

    def __init__(self, repo: SalesRepository, formatter: SalesOutput):
        self._repo = repo
        self._formatter = formatter

    def report_between(self, start: datetime, end: datetime) -> str:
        sales = self._repo.between(start, end)
        logger.debug("sales_total_computed", start=start.isoformat(), end=end.isoformat(), total=sales)
        return self._formatter.output(sales)
