from datetime import datetime

import pytest

from solid_examples.application.sales_app_service import SalesAppService
from solid_examples.domain.sales.models import Sale
from solid_examples.domain.sales.output import CSVOutput, HTMLOutput, JSONOutput, SalesOutput, output_for
from solid_examples.domain.sales.reporter import SalesReporter
from solid_examples.persistence.repositories.memory.memory_sales_repository import InMemorySalesRepository

JANUARY = (datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59, 59))


# ------------------------------------------------------------------
# Formatters
# ------------------------------------------------------------------
def test_html_output():
    assert HTMLOutput().output(556.0) == "<h1>Sales: 556</h1>"


def test_json_output():
    assert JSONOutput().output(556.0) == '{"sales":556}'


def test_csv_output():
    assert CSVOutput().output(556.0).split("\n") == ["Sales", "556"]


def test_fractional_amount_keeps_decimals():
    assert HTMLOutput().output(211.5) == "<h1>Sales: 211.5</h1>"
    assert JSONOutput().output(0.25) == '{"sales":0.25}'


def test_output_for_is_case_insensitive():
    assert isinstance(output_for("JSON"), JSONOutput)


def test_output_for_unknown_format():
    with pytest.raises(ValueError, match="Unknown sales format"):
        output_for("xml")


# ------------------------------------------------------------------
# Repository
# ------------------------------------------------------------------
def test_repository_sums_whole_month_in_units():
    assert InMemorySalesRepository().between(*JANUARY) == 666.0


def test_repository_range_is_inclusive():
    repo = InMemorySalesRepository()
    assert repo.between(datetime(2024, 1, 15, 14, 43, 40), datetime(2024, 1, 20, 9, 30, 0)) == 361.0


def test_repository_empty_range():
    assert InMemorySalesRepository().between(datetime(2023, 1, 1), datetime(2023, 12, 31)) == 0


def test_repository_custom_sales():
    repo = InMemorySalesRepository([Sale(created_at=datetime(2024, 3, 1), charge=55600)])
    assert repo.between(datetime(2024, 3, 1), datetime(2024, 3, 2)) == 556.0


# ------------------------------------------------------------------
# Reporter: same control flow for every formatter
# ------------------------------------------------------------------
@pytest.mark.parametrize(
    "formatter, expected",
    [
        (HTMLOutput(), "<h1>Sales: 666</h1>"),
        (JSONOutput(), '{"sales":666}'),
        (CSVOutput(), "Sales\n666"),
    ],
)
def test_reporter_with_each_formatter(formatter, expected):
    reporter = SalesReporter(InMemorySalesRepository(), formatter)
    assert reporter.report_between(*JANUARY) == expected


def test_reporter_uses_injected_collaborators():
    class FixedRepo(InMemorySalesRepository):
        def between(self, start, end):
            return 42.0

    class Upper(SalesOutput):
        def output(self, sales):
            return f"SALES={sales}"

    assert SalesReporter(FixedRepo(), Upper()).report_between(*JANUARY) == "SALES=42.0"


# ------------------------------------------------------------------
# Application service
# ------------------------------------------------------------------
@pytest.fixture
def svc():
    return SalesAppService(InMemorySalesRepository(), default_format="html")


def test_service_default_format(svc):
    result = svc.report_between("2024-01-01", "2024-01-31T23:59:59")
    assert result.is_success
    assert result.value == "<h1>Sales: 666</h1>"


def test_service_explicit_format(svc):
    result = svc.report_between("2024-01-01", "2024-01-16", "csv")
    assert result.value == "Sales\n211"


def test_service_bare_end_date_means_midnight(svc):
    # the 2024-01-25 16:22 sale falls after midnight of the 25th
    result = svc.report_between("2024-01-01", "2024-01-25", "json")
    assert result.value == '{"sales":361}'


def test_service_rejects_bad_date(svc):
    result = svc.report_between("not-a-date", "2024-01-31")
    assert not result.is_success
    assert "'start'" in result.error


def test_service_rejects_reversed_range(svc):
    result = svc.report_between("2024-02-01", "2024-01-01")
    assert not result.is_success
    assert "Invalid range" in result.error


def test_service_rejects_unknown_format(svc):
    result = svc.report_between("2024-01-01", "2024-01-31", "xml")
    assert not result.is_success
    assert "Unknown sales format" in result.error


def test_service_accepts_timezone_aware_dates(svc):
    result = svc.report_between("2024-01-01T00:00:00+00:00", "2024-02-01T00:00:00+00:00", "json")
    assert result.value == '{"sales":666}'


def test_service_accepts_zulu_suffix(svc):
    result = svc.report_between("2024-01-01T00:00:00Z", "2024-01-16T00:00:00Z", "json")
    assert result.value == '{"sales":211}'
