"""Sales output formatters. Each one renders a sales total in a single format."""
from __future__ import annotations
import json
from abc import ABC, abstractmethod
from typing import Dict, Type, Union


def _display_amount(sales: float) -> Union[int, float]:
    # 556.0 renders as 556, 211.5 stays 211.5
    if float(sales).is_integer():
        return int(sales)
    return sales


class SalesOutput(ABC):

    @abstractmethod
    def output(self, sales: float) -> str:
        """Render a sales total as text."""
        ...


class HTMLOutput(SalesOutput):
    def output(self, sales: float) -> str:
        return f"<h1>Sales: {_display_amount(sales)}</h1>"


class JSONOutput(SalesOutput):
    def output(self, sales: float) -> str:
        return json.dumps({"sales": _display_amount(sales)}, separators=(",", ":"))


class CSVOutput(SalesOutput):
    def output(self, sales: float) -> str:
        return f"Sales\n{_display_amount(sales)}"


OUTPUT_FORMATS: Dict[str, Type[SalesOutput]] = {
    "html": HTMLOutput,
    "json": JSONOutput,
    "csv": CSVOutput,
}


def output_for(fmt: str) -> SalesOutput:
    """Build the formatter registered under ``fmt`` (case-insensitive)."""
    try:
        return OUTPUT_FORMATS[fmt.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown sales format '{fmt}'. Must be one of {sorted(OUTPUT_FORMATS)}."
        ) from None
