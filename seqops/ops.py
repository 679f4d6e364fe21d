"""
plain-function forms of the pipeline operations.
each takes a sequence first and returns a new list, a scalar, or an OptionalValue;
inputs are never mutated. names mirror stream terminology, so `map`, `filter`,
`min`, `max` and `sum` shadow the builtins inside this module.
"""

from .types import *
from .factories import from_iterable
from .optional import OptionalValue

__all__ = [
    "map", "filter", "reduce", "reduce_with_initial", "distinct", "limit", "skip",
    "group_by", "partition_by", "flat_map", "count", "min", "max", "sum", "join",
]


def map(seq: Iterable[T], transform: Selector[T, U]) -> List[U]:
    return from_iterable(seq).select(transform).to.list()


def filter(seq: Iterable[T], predicate: Predicate[T]) -> List[T]:
    return from_iterable(seq).where(predicate).to.list()


def reduce(seq: Iterable[T], combine: Accumulator[T, T]) -> OptionalValue[T]:
    """left fold; absent if seq is empty"""
    return from_iterable(seq).to.reduce(combine)


def reduce_with_initial(seq: Iterable[T], initial: U, combine: Accumulator[U, T]) -> U:
    """left fold seeded with initial, always a plain value"""
    return from_iterable(seq).to.fold(initial, combine)


def distinct(seq: Iterable[T]) -> List[T]:
    return from_iterable(seq).set.distinct().to.list()


def limit(seq: Iterable[T], n: int) -> List[T]:
    """at most the first n elements; InvalidArgumentError if n < 0"""
    return from_iterable(seq).take(n).to.list()


def skip(seq: Iterable[T], n: int) -> List[T]:
    return from_iterable(seq).skip(n).to.list()


def group_by(seq: Iterable[T], key_fn: KeySelector[T, K]) -> GroupingResult:
    return from_iterable(seq).group.group_by(key_fn)


def partition_by(seq: Iterable[T], predicate: Predicate[T]) -> PartitionResult[T]:
    return from_iterable(seq).group.partition(predicate)


def flat_map(seq: Iterable[T], expand_fn: Selector[T, Iterable[U]]) -> List[U]:
    return from_iterable(seq).select_many(expand_fn).to.list()


def count(seq: Iterable[T]) -> int:
    return from_iterable(seq).to.count()


def min(seq: Iterable[T], comparer: Optional[Comparer[T]] = None) -> OptionalValue[T]:
    return from_iterable(seq).stats.min(comparer=comparer)


def max(seq: Iterable[T], comparer: Optional[Comparer[T]] = None) -> OptionalValue[T]:
    return from_iterable(seq).stats.max(comparer=comparer)


def sum(seq: Iterable[Union[int, float]]) -> Union[int, float]:
    return from_iterable(seq).stats.sum()


def join(seq: Iterable[Any], delimiter: Optional[str] = None, prefix: str = "", suffix: str = "") -> str:
    return from_iterable(seq).to.join(delimiter, prefix, suffix)
