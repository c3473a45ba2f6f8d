"""Abstract repository interface for sales totals."""
from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime


class SalesRepository(ABC):

    @abstractmethod
    def between(self, start: datetime, end: datetime) -> float:
        """Return the total of sales recorded in [start, end], in currency units (not cents)."""
        ...
