"""Application service — orchestrates validate → report → format for sales."""
from __future__ import annotations

from solid_examples.core.logger import get_logger
from solid_examples.domain.common.result import Result
from solid_examples.domain.sales.output import output_for
from solid_examples.domain.sales.reporter import SalesReporter
from solid_examples.domain.sales.rules import parse_report_date, validate_date_range
from solid_examples.persistence.interfaces.sales_repository import SalesRepository

logger = get_logger(__name__)


class SalesAppService:
    def __init__(self, repo: SalesRepository, default_format: str = "html"):
        self._repo = repo
        self._default_format = default_format

    @property
    def default_format(self) -> str:
        return self._default_format

    def report_between(self, start: str, end: str, fmt: str = "") -> Result[str]:
        start_result = parse_report_date(start, "start")
        if not start_result.is_success:
            return Result.fail(start_result.error)
        end_result = parse_report_date(end, "end")
        if not end_result.is_success:
            return Result.fail(end_result.error)

        range_result = validate_date_range(start_result.value, end_result.value)
        if not range_result.is_success:
            return Result.fail(range_result.error)

        try:
            formatter = output_for(fmt or self._default_format)
        except ValueError as e:
            return Result.fail(str(e))

        reporter = SalesReporter(self._repo, formatter)
        report = reporter.report_between(*range_result.value)
        logger.info("sales_report_generated", format=fmt or self._default_format)
        return Result.ok(report)
