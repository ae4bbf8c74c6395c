"""Records describing machine parameters and axis values."""

from __future__ import annotations

from dataclasses import dataclass

from machkit.mathutil import trim_acc

__all__ = ["Param", "AxisValue", "UnionParam"]


@dataclass
class Param:
    """A fixed-point parameter with limits, precision and a decimal unit."""

    acronym: str = ""
    value: int = 0
    lower_limit: int = 0
    upper_limit: int = 0
    precision: int = 1
    unit: int = 0
    default_value: int = 0
    unit_str: str = ""
    name: str = ""

    def correct(self, data: int) -> int:
        """Return ``data`` clamped to the limits and rounded to the precision."""
        return trim_acc(data, self.upper_limit, self.lower_limit, self.precision)

    def can_increment(self) -> bool:
        """Tell whether one precision step up stays within the upper limit."""
        return self.value + self.precision <= self.upper_limit

    def can_decrement(self) -> bool:
        """Tell whether one precision step down stays within the lower limit."""
        return self.value - self.precision >= self.lower_limit

    def increment(self) -> bool:
        """Step the value up by the precision if allowed; report whether it changed."""
        if not self.can_increment():
            return False
        self.value += self.precision
        return True

    def decrement(self) -> bool:
        """Step the value down by the precision if allowed; report whether it changed."""
        if not self.can_decrement():
            return False
        self.value -= self.precision
        return True

    def increment_by(self, value: int) -> bool:
        """Add ``value`` if the result stays within the upper limit."""
        if self.value + value > self.upper_limit:
            return False
        self.value += value
        return True

    def decrement_by(self, value: int) -> bool:
        """Subtract ``value`` if the result stays within the lower limit."""
        if self.value - value < self.lower_limit:
            return False
        self.value -= value
        return True


@dataclass
class AxisValue:
    """A value tagged with the acronym of its axis or parameter."""

    acronym: str = ""
    value: int = 0


@dataclass(frozen=True)
class UnionParam:
    """Links a parameter to another one that follows its value."""

    acronym: str
    union_acronym: str