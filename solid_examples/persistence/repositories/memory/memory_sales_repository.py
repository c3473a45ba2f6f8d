"""In-memory implementation of SalesRepository backed by a fixed set of sales."""
from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional, Tuple

from solid_examples.domain.sales.models import Sale
from solid_examples.persistence.interfaces.sales_repository import SalesRepository

DEFAULT_SALES: Tuple[Sale, ...] = (
    Sale(created_at=datetime(2024, 1, 15, 14, 43, 40), charge=21100),
    Sale(created_at=datetime(2024, 1, 20, 9, 30, 0), charge=15000),
    Sale(created_at=datetime(2024, 1, 25, 16, 22, 15), charge=30500),
)


class InMemorySalesRepository(SalesRepository):

    def __init__(self, sales: Optional[Iterable[Sale]] = None):
        self._sales: Tuple[Sale, ...] = tuple(sales) if sales is not None else DEFAULT_SALES

    def between(self, start: datetime, end: datetime) -> float:
        cents = sum(s.charge for s in self._sales if start <= s.created_at <= end)
        return cents / 100
