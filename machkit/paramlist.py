"""A bounded, ordered collection of machine parameters keyed by acronym."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator

from machkit.mathutil import trim
from machkit.param import AxisValue, Param, UnionParam

__all__ = ["ParamsListFull", "ParamsList", "MAX_UNION_PARAMS"]

MAX_UNION_PARAMS = 10


class ParamsListFull(Exception):
    """Raised when a parameter or a union does not fit in the list."""


class ParamsList:
    """Parameters in insertion order, with unions that mirror value changes.

    A union links a parameter to another one: setting the value of the first
    also sets the value of the second, corrected to the second's own limits.
    """

    def __init__(self, max_size: int, max_unions: int = MAX_UNION_PARAMS) -> None:
        if max_size < 0 or max_unions < 0:
            raise ValueError("sizes must be non-negative")
        self.max_size = max_size
        self.max_unions = max_unions
        self._params: list[Param] = []
        self._unions: list[UnionParam] = []

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params)

    def __contains__(self, acronym: object) -> bool:
        return self._find(acronym) is not None

    @property
    def unions(self) -> list[UnionParam]:
        """The registered unions, in insertion order."""
        return list(self._unions)

    def _find(self, acronym: object) -> Param | None:
        return next((p for p in self._params if p.acronym == acronym), None)

    def _require(self, acronym: str) -> Param:
        param = self._find(acronym)
        if param is None:
            raise KeyError(acronym)
        return param

    def _union_targets(self, acronym: str) -> Iterator[Param]:
        for union in self._unions:
            if union.acronym == acronym:
                target = self._find(union.union_acronym)
                if target is not None:
                    yield target

    def insert(self, param: Param) -> None:
        """Append a copy of ``param`` with its value and default corrected."""
        if len(self._params) >= self.max_size:
            raise ParamsListFull(f"list holds at most {self.max_size} parameters")
        stored = dataclasses.replace(param)
        stored.value = stored.correct(stored.value)
        stored.default_value = stored.correct(stored.default_value)
        self._params.append(stored)

    def clear(self) -> None:
        """Remove every parameter and every union."""
        self._params.clear()
        self.clear_unions()

    def add_union(self, acronym: str, union_acronym: str) -> None:
        """Make ``union_acronym`` follow value changes of ``acronym``."""
        if acronym == union_acronym:
            raise ValueError("a parameter cannot be united with itself")
        if len(self._unions) >= self.max_unions:
            raise ParamsListFull(f"list holds at most {self.max_unions} unions")
        self._unions.append(UnionParam(acronym, union_acronym))

    def clear_unions(self) -> None:
        """Remove every union."""
        self._unions.clear()

    def copy_from(self, other: ParamsList) -> None:
        """Replace the contents with copies of the parameters of ``other``.

        Unions are dropped; parameters beyond this list's capacity are left out.
        """
        self.clear()
        for param in other:
            if len(self._params) >= self.max_size:
                break
            self.insert(param)

    def get(self, acronym: str) -> Param:
        """Return the stored parameter with ``acronym``."""
        return self._require(acronym)

    def value(self, acronym: str) -> int:
        """Return the raw fixed-point value of a parameter."""
        return self._require(acronym).value

    def real_value(self, acronym: str) -> float:
        """Return the value of a parameter scaled down by its unit."""
        param = self._require(acronym)
        return param.value / 10 ** param.unit

    def values(self) -> list[AxisValue]:
        """Return acronym/value pairs of all parameters, in order."""
        return [AxisValue(p.acronym, p.value) for p in self._params]

    def acronyms(self) -> str:
        """Return the acronyms of all parameters joined into one string."""
        return "".join(p.acronym for p in self._params)

    def replace(self, param: Param) -> None:
        """Overwrite the stored parameter of the same acronym with a copy of ``param``."""
        for index, stored in enumerate(self._params):
            if stored.acronym == param.acronym:
                self._params[index] = dataclasses.replace(param)
                return
        raise KeyError(param.acronym)

    def set_value(self, acronym: str, value: int) -> None:
        """Set a corrected value, and the same value on every united parameter."""
        param = self._require(acronym)
        param.value = param.correct(value)
        for target in self._union_targets(acronym):
            target.value = target.correct(value)

    def set_real_value(self, acronym: str, value: float) -> None:
        """Set a value given in real units, scaling it by each parameter's unit.

        United parameters receive the whole-number part of ``value`` scaled by
        their own unit.
        """
        param = self._require(acronym)
        param.value = param.correct(int(value * 10 ** param.unit))
        whole = int(value)
        for target in self._union_targets(acronym):
            target.value = target.correct(whole * 10 ** target.unit)

    def set_lower_limit(self, acronym: str, value: int) -> None:
        """Change the lower limit and clamp the value and default to it."""
        param = self._require(acronym)
        param.lower_limit = value
        self._clamp(param)

    def set_upper_limit(self, acronym: str, value: int) -> None:
        """Change the upper limit and clamp the value and default to it."""
        param = self._require(acronym)
        param.upper_limit = value
        self._clamp(param)

    def set_default_value(self, acronym: str, value: int) -> None:
        """Set the corrected default value."""
        param = self._require(acronym)
        param.default_value = param.correct(value)

    def set_precision(self, acronym: str, value: int) -> None:
        """Change the precision and correct the value and default to it."""
        param = self._require(acronym)
        param.precision = value
        param.value = param.correct(param.value)
        param.default_value = param.correct(param.default_value)

    def set_real_lower_limit(self, acronym: str, value: float) -> None:
        """Change the lower limit given in real units and clamp to it."""
        param = self._require(acronym)
        param.lower_limit = int(value * 10 ** param.unit)
        self._clamp(param)

    def set_name(self, acronym: str, name: str) -> None:
        """Rename a parameter."""
        self._require(acronym).name = name

    @staticmethod
    def _clamp(param: Param) -> None:
        param.value = trim(param.value, param.upper_limit, param.lower_limit)
        param.default_value = trim(
            param.default_value, param.upper_limit, param.lower_limit
        )

    def reset_to_defaults(self) -> None:
        """Set every parameter to its default value, following unions."""
        for param in list(self._params):
            self.set_value(param.acronym, param.default_value)

    def set_all_values(self, value: int) -> None:
        """Set every parameter to ``value``, each corrected to its own limits."""
        for param in list(self._params):
            self.set_value(param.acronym, value)

    def copy_values_from(self, other: ParamsList) -> None:
        """Take over, unchanged, the values of parameters that ``other`` also has."""
        for param in self._params:
            source = other._find(param.acronym)
            if source is not None:
                param.value = source.value

    def set_all_default_values(self, value: int) -> None:
        """Set every default value to ``value``, each corrected to its own limits."""
        for param in self._params:
            param.default_value = param.correct(value)

    def set_all_real_lower_limits(self, value: float) -> None:
        """Set every lower limit from a value in real units."""
        for param in list(self._params):
            self.set_lower_limit(param.acronym, int(value * 10 ** param.unit))

    def set_values_from(self, values: Iterable[AxisValue]) -> None:
        """Set values from acronym/value pairs; unknown acronyms are ignored."""
        for item in values:
            if item.acronym in self:
                self.set_value(item.acronym, item.value)

    def same_values(self, other: ParamsList) -> bool:
        """Tell whether both lists hold the same acronyms with the same values."""
        if len(self) != len(other):
            return False
        for param in self._params:
            match = other._find(param.acronym)
            if match is None or match.value != param.value:
                return False
        return True

    def add_values_from(self, other: ParamsList) -> None:
        """Add the values of matching parameters of ``other``, correcting the sums."""
        for param in self._params:
            source = other._find(param.acronym)
            if source is not None:
                param.value = param.correct(param.value + source.value)

    def add_value_from(self, other: ParamsList, acronym: str) -> None:
        """Add the value of one parameter of ``other`` to the same one here."""
        param = self._require(acronym)
        source = other._require(acronym)
        param.value = param.correct(param.value + source.value)

    def add_value(self, acronym: str, value: int) -> None:
        """Add ``value`` to a parameter, correcting the sum."""
        param = self._require(acronym)
        param.value = param.correct(param.value + value)