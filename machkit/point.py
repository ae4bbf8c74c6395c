"""A bounded, ordered set of axis values keyed by acronym."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator

from machkit.param import AxisValue

__all__ = ["PointFull", "Point"]


class PointFull(Exception):
    """Raised when an axis does not fit in the point."""


class Point:
    """Axis values in insertion order, holding at most ``max_size`` axes.

    Values are integers in fixed-point units; :meth:`to_float` gives a copy
    holding floats.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must be non-negative")
        self.max_size = max_size
        self._axes: list[AxisValue] = []

    def __len__(self) -> int:
        return len(self._axes)

    def __iter__(self) -> Iterator[AxisValue]:
        return iter(self._axes)

    def __contains__(self, acronym: object) -> bool:
        return self._find(acronym) is not None

    def __repr__(self) -> str:
        inner = ", ".join(f"{a.acronym}={a.value}" for a in self._axes)
        return f"Point({inner})"

    def _find(self, acronym: object) -> AxisValue | None:
        return next((a for a in self._axes if a.acronym == acronym), None)

    def _require(self, acronym: str) -> AxisValue:
        axis = self._find(acronym)
        if axis is None:
            raise KeyError(acronym)
        return axis

    def _fill(self, axes: Iterable[AxisValue]) -> None:
        self._axes.clear()
        for axis in axes:
            if len(self._axes) >= self.max_size:
                break
            self._axes.append(dataclasses.replace(axis))

    def insert(self, axis: AxisValue) -> None:
        """Append a copy of ``axis``."""
        if len(self._axes) >= self.max_size:
            raise PointFull(f"point holds at most {self.max_size} axes")
        self._axes.append(dataclasses.replace(axis))

    def clear(self) -> None:
        """Remove every axis."""
        self._axes.clear()

    def erase(self, pos: int, length: int) -> None:
        """Remove ``length`` axes starting at ``pos``; an out-of-range ``pos`` does nothing."""
        if length < 0:
            raise ValueError("length must be non-negative")
        if 0 <= pos < len(self._axes):
            del self._axes[pos:pos + length]

    def get(self, acronym: str) -> AxisValue:
        """Return the stored axis with ``acronym``."""
        return self._require(acronym)

    def value(self, acronym: str) -> int:
        """Return the value of the axis with ``acronym``."""
        return self._require(acronym).value

    def largest_abs_axis(self) -> AxisValue:
        """Return the axis whose value has the largest magnitude.

        Ties keep the earliest axis. When the first axis wins, its value is
        reported as an absolute value.
        """
        if not self._axes:
            raise ValueError("point has no axes")
        first = self._axes[0]
        best = AxisValue(first.acronym, abs(first.value))
        for axis in self._axes:
            if abs(axis.value) > abs(best.value):
                best = dataclasses.replace(axis)
        return best

    def assign(self, other: Iterable[AxisValue]) -> None:
        """Replace the contents with copies of the axes of ``other``, up to capacity."""
        self._fill(list(other))

    def assign_values(self, values: Iterable[AxisValue]) -> None:
        """Replace the contents with the entries of ``values`` that have an acronym."""
        self._fill([v for v in values if v.acronym])

    def to_float(self) -> Point:
        """Return a copy of the point whose values are floats."""
        result = Point(self.max_size)
        result._axes = [AxisValue(a.acronym, float(a.value)) for a in self._axes]
        return result

    def exact_equals(self, other: Point) -> bool:
        """Tell whether both points hold the same acronyms with the same values."""
        return len(self) == len(other) and self.equals_values(other)

    def equals_values(self, values: Iterable[AxisValue]) -> bool:
        """Tell whether every axis here has the same value in ``values``.

        ``values`` may hold more entries; the first entry of each acronym counts.
        """
        lookup: dict[str, object] = {}
        for item in values:
            lookup.setdefault(item.acronym, item.value)
        return all(
            a.acronym in lookup and lookup[a.acronym] == a.value for a in self._axes
        )

    def exact_equals_values(self, values: Iterable[AxisValue]) -> bool:
        """Like :meth:`equals_values`, but the leading entries with an acronym must
        be exactly as many as the axes here."""
        items = list(values)
        count = 0
        for item in items:
            if not item.acronym:
                break
            count += 1
        return count == len(self) and self.equals_values(items)

    def add(self, other: Point) -> None:
        """Add the values of matching axes of ``other``."""
        for axis in self._axes:
            source = other._find(axis.acronym)
            if source is not None:
                axis.value += source.value

    def subtract(self, other: Point) -> None:
        """Subtract the values of matching axes of ``other``."""
        for axis in self._axes:
            source = other._find(axis.acronym)
            if source is not None:
                axis.value -= source.value

    def set_axis(self, axis: AxisValue) -> None:
        """Set the value of the stored axis with the acronym of ``axis``."""
        self._require(axis.acronym).value = axis.value

    def set_value(self, acronym: str, value: int) -> None:
        """Set the value of the axis with ``acronym``."""
        self._require(acronym).value = value

    def zero(self) -> None:
        """Set every value to zero, keeping its type."""
        for axis in self._axes:
            axis.value = 0.0 if isinstance(axis.value, float) else 0