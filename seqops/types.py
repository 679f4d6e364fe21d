from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Supplier = Callable[[], T]
Consumer = Callable[[T], Any]

# key -> bucket of values, keys in first-occurrence order
GroupingResult = Dict[K, List[V]]


class PartitionResult(Generic[T]):
    """two buckets split by a predicate, input order kept in each"""

    def __init__(self, matched: List[T], unmatched: List[T]):
        self.matched = matched
        self.unmatched = unmatched

    def __getitem__(self, key: bool) -> List[T]:
        # equality rather than identity so numpy bools index too
        if key == True: return self.matched
        if key == False: return self.unmatched
        raise KeyError(key)

    def __iter__(self) -> Iterator[List[T]]:
        # allows `matched, unmatched = result`
        yield self.matched
        yield self.unmatched

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PartitionResult):
            return NotImplemented
        return self.matched == other.matched and self.unmatched == other.unmatched

    def __repr__(self) -> str:
        return f"PartitionResult(true={self.matched}, false={self.unmatched})"


class SummaryStatistics:
    """count, sum, min, max and average of a numeric sequence"""

    def __init__(self, count: int, total: Union[int, float],
                 minimum: Optional[Union[int, float]], maximum: Optional[Union[int, float]]):
        self.count = count
        self.sum = total
        self.min = minimum
        self.max = maximum

    @property
    def average(self) -> float:
        return self.sum / self.count if self.count else 0.0

    def __repr__(self) -> str:
        return (f"SummaryStatistics(count={self.count}, sum={self.sum}, min={self.min}, "
                f"average={self.average}, max={self.max})")
