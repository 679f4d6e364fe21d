from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..errors import require_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 downstream: Optional[Callable[[List[T]], V]] = None) -> Dict[K, Any]:
        """
        group elements by a key. keys keep first-occurrence order, buckets keep input order.
        downstream, if given, reduces each bucket (e.g. len to count members).
        """
        require_callable(key_selector, "key_selector")
        groups = defaultdict(list)
        for item in self._enumerable._get_data():
            groups[key_selector(item)].append(item)
        if downstream is None:
            return dict(groups)
        return {key: downstream(items) for key, items in groups.items()}

    def counting_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """number of elements per key"""
        return self.group_by(key_selector, len)

    def mapping(self, selector: Selector[T, U],
                downstream: Callable[[List[U]], V] = list) -> V:
        """project every element, then hand the projected list to downstream"""
        require_callable(selector, "selector")
        return downstream([selector(item) for item in self._enumerable._get_data()])

    def partition(self, predicate: Predicate[T]) -> PartitionResult[T]:
        """split elements into true/false buckets in a single pass"""
        require_callable(predicate, "predicate")
        true_items, false_items = [], []
        for item in self._enumerable._get_data():
            (true_items if predicate(item) else false_items).append(item)
        return PartitionResult(true_items, false_items)
