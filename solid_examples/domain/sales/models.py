"""Sales domain models — pure Python, no DB or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Sale:
    created_at: datetime
    charge: int  # in cents
