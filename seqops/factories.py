import typing
from .types import *
from .errors import require_callable, require_non_negative, require_not_none

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable, copied on first evaluation"""
    from .enumerable import Enumerable
    require_not_none(data, "data")
    return Enumerable(lambda: list(data))

def of(*items: T) -> 'Enumerable[T]':
    """create enumerable from the given arguments"""
    return from_iterable(items)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable of 'count' consecutive ints beginning at start"""
    from .enumerable import Enumerable
    require_non_negative(count, "count")
    return Enumerable(lambda: list(range(start, start + count)))

def range_closed(start: int, end: int) -> 'Enumerable[int]':
    """create enumerable from start to end, both inclusive; empty if end < start"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(range(start, end + 1)))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    require_non_negative(count, "count")
    return Enumerable(lambda: [item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

def generate(generator_func: Supplier[T], count: int) -> 'Enumerable[T]':
    """generate sequence by calling a supplier 'count' times"""
    from .enumerable import Enumerable
    require_callable(generator_func, "generator_func")
    require_non_negative(count, "count")
    return Enumerable(lambda: [generator_func() for _ in range(count)])

def iterate(seed: T, step: Callable[[T], T], count: int) -> 'Enumerable[T]':
    """seed, step(seed), step(step(seed)), ... limited to 'count' items"""
    from .enumerable import Enumerable
    require_callable(step, "step")
    require_non_negative(count, "count")
    def iterate_data():
        result, current = [], seed
        for index in range(count):
            # step runs count - 1 times, never past the last item
            if index: current = step(current)
            result.append(current)
        return result
    return Enumerable(iterate_data)

# --- aliases ---
P = from_iterable
