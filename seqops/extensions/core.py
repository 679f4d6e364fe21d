from __future__ import annotations
import typing
from functools import cmp_to_key
from itertools import chain, takewhile, dropwhile
from ..types import *
from ..errors import require_callable, require_non_negative

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        # always return a base enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        def flat_map_data():
            return [item for element in self._get_data() for item in selector(element)]
        return Enumerable(flat_map_data)

    def peek(self: 'Enumerable[T]', action: Consumer[T]) -> 'Enumerable[T]':
        """run action on every element as it passes through, elements are unchanged"""
        from ..enumerable import Enumerable
        require_callable(action, "action")
        def peek_data():
            data = self._get_data()
            for item in data:
                action(item)
            return data
        return Enumerable(peek_data)

    def order_by(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        require_callable(key_selector, "key_selector")
        return OrderedEnumerable(self._get_data, [(key_selector, True)])

    def sorted_by(self: 'Enumerable[T]', comparer: Comparer[T]) -> 'Enumerable[T]':
        """stable sort with a three-way comparer returning <0, 0 or >0"""
        from ..enumerable import Enumerable
        require_callable(comparer, "comparer")
        return Enumerable(lambda: sorted(self._get_data(), key=cmp_to_key(comparer)))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        require_non_negative(count, "count")
        return Enumerable(lambda: self._get_data()[:count])

    # stream-style name for take
    limit = take

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        require_non_negative(count, "count")
        return Enumerable(lambda: self._get_data()[count:])

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: list(takewhile(predicate, self._get_data())))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        require_callable(predicate, "predicate")
        return Enumerable(lambda: list(dropwhile(predicate, self._get_data())))

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        require_callable(selector, "selector")
        def map_with_index_data():
            return [selector(item, index) for index, item in enumerate(self._get_data())]
        return Enumerable(map_with_index_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(reversed(self._get_data())))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(chain(self._get_data(), [element])))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(chain([element], self._get_data())))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        def default_data():
            data = self._get_data()
            return data if data else [default_value]
        return Enumerable(default_data)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))
