"""Area endpoint. Tagged shape payloads are turned into Shape objects once, here."""
from __future__ import annotations
import math
from typing import Annotated, List, Literal, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from solid_examples.container import get_area_calculator
from solid_examples.domain.shapes.calculator import AreaCalculator
from solid_examples.domain.shapes.models import Circle, Rectangle, Shape, Square, Triangle

router = APIRouter(prefix="/shapes", tags=["shapes"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class RectangleBody(BaseModel):
    kind: Literal["rectangle"]
    width: float = Field(ge=0, allow_inf_nan=False)
    height: float = Field(ge=0, allow_inf_nan=False)

    def to_shape(self) -> Shape:
        return Rectangle(self.width, self.height)


class SquareBody(BaseModel):
    kind: Literal["square"]
    side: float = Field(ge=0, allow_inf_nan=False)

    def to_shape(self) -> Shape:
        return Square(self.side)


class CircleBody(BaseModel):
    kind: Literal["circle"]
    radius: float = Field(ge=0, allow_inf_nan=False)

    def to_shape(self) -> Shape:
        return Circle(self.radius)


class TriangleBody(BaseModel):
    kind: Literal["triangle"]
    base: float = Field(ge=0, allow_inf_nan=False)
    height: float = Field(ge=0, allow_inf_nan=False)

    def to_shape(self) -> Shape:
        return Triangle(self.base, self.height)


ShapeBody = Annotated[
    Union[RectangleBody, SquareBody, CircleBody, TriangleBody],
    Field(discriminator="kind"),
]


class AreaRequest(BaseModel):
    shapes: List[ShapeBody] = []


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------
@router.post("/area")
def total_area(
    body: AreaRequest,
    calculator: AreaCalculator = Depends(get_area_calculator),
):
    shapes = [s.to_shape() for s in body.shapes]
    areas = [shape.area() for shape in shapes]
    total = calculator.calculate(shapes)
    if not all(math.isfinite(a) for a in areas) or not math.isfinite(total):
        raise HTTPException(status_code=400, detail="Area is too large to represent.")
    return {"total_area": total, "areas": areas}
