"""Shapes. Each one knows how to compute its own area."""
from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields


class Shape(ABC):

    @abstractmethod
    def area(self) -> float:
        ...


def _check_dimensions(shape: "Shape") -> None:
    for f in fields(shape):
        value = getattr(shape, f.name)
        if value < 0:
            raise ValueError(f"{type(shape).__name__}.{f.name} cannot be negative, got {value}.")


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def __post_init__(self):
        _check_dimensions(self)

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def __post_init__(self):
        _check_dimensions(self)

    def area(self) -> float:
        return self.side * self.side


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def __post_init__(self):
        _check_dimensions(self)

    def area(self) -> float:
        return self.radius * self.radius * math.pi


@dataclass(frozen=True)
class Triangle(Shape):
    base: float
    height: float

    def __post_init__(self):
        _check_dimensions(self)

    def area(self) -> float:
        return 0.5 * self.base * self.height
