from __future__ import annotations
from typing import Iterable

from solid_examples.domain.shapes.models import Shape


class AreaCalculator:
    """Sums areas without knowing which shapes exist. New shapes need no change here."""

    def calculate(self, shapes: Iterable[Shape]) -> float:
        area = 0.0
        for shape in shapes:
            area += shape.area()
        return area
