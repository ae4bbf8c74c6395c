"""Two-dimensional points on the X and Y axes."""

from __future__ import annotations

from dataclasses import dataclass

from machkit.mathutil import mul_by_10
from machkit.paramlist import ParamsList
from machkit.point import Point

__all__ = ["XY", "XYFloat"]


def _param_value(params: ParamsList, acronym: str) -> int:
    return params.value(acronym) if acronym in params else 0


def _param_unit(params: ParamsList, acronym: str) -> int:
    return params.get(acronym).unit if acronym in params else 0


def _point_value(point: Point, acronym: str) -> int:
    return point.value(acronym) if acronym in point else 0


@dataclass(frozen=True)
class XY:
    """An integer point in fixed-point units."""

    x: int = 0
    y: int = 0

    def __add__(self, other: XY) -> XY:
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: XY) -> XY:
        return XY(self.x - other.x, self.y - other.y)

    @classmethod
    def from_params(cls, params: ParamsList) -> XY:
        """Take the raw values of parameters X and Y; a missing one counts as 0."""
        return cls(_param_value(params, "X"), _param_value(params, "Y"))

    @classmethod
    def from_point(cls, point: Point) -> XY:
        """Take the values of axes X and Y; a missing one counts as 0."""
        return cls(_point_value(point, "X"), _point_value(point, "Y"))


@dataclass(frozen=True)
class XYFloat:
    """A point with floating-point coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: XYFloat) -> XYFloat:
        return XYFloat(self.x + other.x, self.y + other.y)

    def __sub__(self, other: XYFloat) -> XYFloat:
        return XYFloat(self.x - other.x, self.y - other.y)

    def close_to(
        self, other: XYFloat, precision_x: float, precision_y: float
    ) -> bool:
        """Tell whether both coordinates differ by strictly less than the precisions."""
        return (
            abs(self.x - other.x) < precision_x
            and abs(self.y - other.y) < precision_y
        )

    @classmethod
    def from_params(cls, params: ParamsList) -> XYFloat:
        """Take X and Y scaled down by their units, truncated to whole units.

        A missing parameter counts as 0.
        """
        x = mul_by_10(_param_value(params, "X"), -_param_unit(params, "X"))
        y = mul_by_10(_param_value(params, "Y"), -_param_unit(params, "Y"))
        return cls(float(x), float(y))

    @classmethod
    def from_point(cls, point: Point) -> XYFloat:
        """Take the values of axes X and Y as floats; a missing one counts as 0."""
        return cls(float(_point_value(point, "X")), float(_point_value(point, "Y")))