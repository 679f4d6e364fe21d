from __future__ import annotations
import typing
from ..types import *
from ..errors import require_callable

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Consumer[T]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        require_callable(action, "action")
        for item in self._enumerable._get_data():
            action(item)
        return self._enumerable

    def for_each_indexed(self, action: Callable[[int, T], Any]) -> 'Enumerable[T]':
        """eager like for_each, action gets (index, element)"""
        require_callable(action, "action")
        for index, item in enumerate(self._enumerable._get_data()):
            action(index, item)
        return self._enumerable
