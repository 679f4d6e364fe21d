from __future__ import annotations

from .types import *
from .errors import AbsentValueError, NullArgumentError, require_callable

# marks the absent state, distinct from any value a caller could hold
_ABSENT = object()


class OptionalValue(Generic[T]):
    """
    a value that is either present or absent, never both.
    None counts as "no value": a present optional never holds None.
    every operation returns a new instance, nothing is mutated.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any = _ABSENT):
        if value is None:
            raise NullArgumentError("OptionalValue cannot hold None, use empty() for an absent value")
        self._value = value

    # --- construction ---

    @classmethod
    def of(cls, value: T) -> 'OptionalValue[T]':
        """present optional, raises NullArgumentError for None"""
        if value is None:
            raise NullArgumentError("OptionalValue.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> 'OptionalValue[T]':
        """present for anything but None, absent for None"""
        return cls() if value is None else cls(value)

    @classmethod
    def empty(cls) -> 'OptionalValue[Any]':
        return cls()

    # --- state ---

    def is_present(self) -> bool:
        return self._value is not _ABSENT

    def is_empty(self) -> bool:
        return self._value is _ABSENT

    def __bool__(self) -> bool:
        return self.is_present()

    # --- extraction ---

    def get(self) -> T:
        if self.is_empty(): raise AbsentValueError()
        return self._value

    def or_else(self, default: T) -> T:
        """the value, or default. default is an ordinary argument, so it is always evaluated"""
        return self._value if self.is_present() else default

    def or_else_get(self, supplier: Supplier[T]) -> T:
        """the value, or supplier() which only runs when absent"""
        require_callable(supplier, "supplier")
        return self._value if self.is_present() else supplier()

    def or_else_throw(self, error_factory: Optional[Callable[[], BaseException]] = None) -> T:
        """the value, or raise the error built by error_factory (AbsentValueError without one)"""
        if self.is_present():
            return self._value
        if error_factory is None:
            raise AbsentValueError()
        raise error_factory()

    # --- side effects ---

    def if_present(self, consumer: Consumer[T]) -> None:
        require_callable(consumer, "consumer")
        if self.is_present(): consumer(self._value)

    def if_present_or_else(self, consumer: Consumer[T], empty_action: Callable[[], Any]) -> None:
        require_callable(consumer, "consumer")
        require_callable(empty_action, "empty_action")
        if self.is_present():
            consumer(self._value)
        else:
            empty_action()

    # --- transformation ---

    def map(self, selector: Selector[T, U]) -> 'OptionalValue[U]':
        """apply selector to the value; a None result becomes absent"""
        require_callable(selector, "selector")
        if self.is_empty(): return OptionalValue()
        return OptionalValue.of_nullable(selector(self._value))

    def flat_map(self, selector: Callable[[T], 'OptionalValue[U]']) -> 'OptionalValue[U]':
        require_callable(selector, "selector")
        if self.is_empty(): return OptionalValue()
        result = selector(self._value)
        if not isinstance(result, OptionalValue):
            raise TypeError(f"flat_map selector must return an OptionalValue, got {type(result).__name__}")
        return result

    def filter(self, predicate: Predicate[T]) -> 'OptionalValue[T]':
        require_callable(predicate, "predicate")
        if self.is_present() and predicate(self._value):
            return OptionalValue(self._value)
        return OptionalValue()

    def or_(self, supplier: Callable[[], 'OptionalValue[T]']) -> 'OptionalValue[T]':
        """this optional if present, otherwise the optional supplier() returns"""
        require_callable(supplier, "supplier")
        if self.is_present(): return OptionalValue(self._value)
        return supplier()

    def to_list(self) -> List[T]:
        return [self._value] if self.is_present() else []

    # --- dunder ---

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(None) if self.is_empty() else hash(self._value)

    def __repr__(self) -> str:
        return f"OptionalValue({self._value!r})" if self.is_present() else "OptionalValue.empty"
