from __future__ import annotations
import numbers
import typing
import numpy as np
from functools import cmp_to_key
from ..types import *
from ..optional import OptionalValue

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        if selector: return self._enumerable.select(selector).to.list()
        data = self._enumerable.to.list()
        if data and not all(isinstance(x, numbers.Number) for x in data):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return data

    @staticmethod
    def _ordering_key(selector: Optional[Selector[T, Any]],
                      comparer: Optional[Comparer[Any]]) -> Optional[Callable[[T], Any]]:
        """combine a key selector and/or a three-way comparer into a single sort key"""
        if comparer is None:
            return selector
        to_key = cmp_to_key(comparer)
        if selector is None:
            return to_key
        return lambda item: to_key(selector(item))

    @staticmethod
    def _total(values: List[Number]) -> Number:
        if not values:
            return 0
        if (any(isinstance(x, float) for x in values)
                and all(isinstance(x, (int, float)) for x in values)):
            # numpy's pairwise summation loses less precision on floats
            return np.sum(np.asarray(values, dtype=float)).item()
        # python ints never overflow, numpy's int64 would; Decimal and Fraction stay exact
        total = sum(values)
        return total.item() if isinstance(total, np.generic) else total

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum, 0 for an empty sequence"""
        return self._total(self._get_values(selector))

    def average(self, selector: Optional[Selector[T, Number]] = None) -> OptionalValue[float]:
        """arithmetic mean, absent for an empty sequence"""
        values = self._get_values(selector)
        if not values: return OptionalValue.empty()
        return OptionalValue.of(self._total(values) / len(values))

    def min(self, selector: Optional[Selector[T, Any]] = None,
            comparer: Optional[Comparer[Any]] = None) -> OptionalValue[T]:
        """smallest element (first one on ties), absent for an empty sequence"""
        data = self._enumerable._get_data()
        if not data: return OptionalValue.empty()
        return OptionalValue.of(min(data, key=self._ordering_key(selector, comparer)))

    def max(self, selector: Optional[Selector[T, Any]] = None,
            comparer: Optional[Comparer[Any]] = None) -> OptionalValue[T]:
        """largest element (first one on ties), absent for an empty sequence"""
        data = self._enumerable._get_data()
        if not data: return OptionalValue.empty()
        return OptionalValue.of(max(data, key=self._ordering_key(selector, comparer)))

    def summary(self, selector: Optional[Selector[T, Number]] = None) -> SummaryStatistics:
        """count, sum, min, max and average in one call"""
        values = self._get_values(selector)
        if not values:
            return SummaryStatistics(0, 0, None, None)
        return SummaryStatistics(len(values), self._total(values), min(values), max(values))
