from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _unique_in_order(data: List[T], key_selector: Optional[KeySelector[T, K]] = None) -> List[T]:
    """first occurrence of each element (or key), by value equality"""
    keyed = [(key_selector(item) if key_selector else item, item) for item in data]
    try:
        seen = set()
        # 'and not seen.add(key)' records the key inside the comprehension
        return [item for key, item in keyed if key not in seen and not seen.add(key)]
    except TypeError:
        # unhashable keys fall back to an equality scan
        seen_keys, result = [], []
        for key, item in keyed:
            if key not in seen_keys:
                seen_keys.append(key)
                result.append(item)
        return result


class SetAccessor(Generic[T]):
    """
    set-style operations that keep the order of first appearance.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: _unique_in_order(self._enumerable._get_data(), key_selector))

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: _unique_in_order(list(chain(self._enumerable._get_data(), other))))

    def intersect(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving intersection of two sequences."""
        from ..enumerable import Enumerable
        def intersect_data():
            other_items = list(other)
            return _unique_in_order([x for x in self._enumerable._get_data() if x in other_items])
        return Enumerable(intersect_data)

    def except_(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        def except_data():
            other_items = list(other)
            return [x for x in self._enumerable._get_data() if x not in other_items]
        return Enumerable(except_data)

    def concat(self, other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._enumerable._get_data() + list(other))
