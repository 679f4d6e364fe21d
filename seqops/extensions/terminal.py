from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..config import get_settings
from ..errors import require_callable
from ..optional import OptionalValue

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later duplicates overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable._get_data())

    def none(self, predicate: Predicate[T]) -> bool:
        """check that no element satisfies condition"""
        return not self.any(predicate)

    def first(self, predicate: Optional[Predicate[T]] = None) -> OptionalValue[T]:
        """first element (matching predicate, if given), absent when there is none"""
        for item in self._enumerable._get_data():
            if predicate is None or predicate(item):
                return OptionalValue.of(item)
        return OptionalValue.empty()

    find_first = first

    def reduce(self, accumulator: Accumulator[T, T]) -> OptionalValue[T]:
        """fold left to right without a seed; absent for an empty sequence"""
        require_callable(accumulator, "accumulator")
        data = self._enumerable._get_data()
        if not data: return OptionalValue.empty()
        return OptionalValue.of(reduce(accumulator, data))

    def fold(self, seed: U, accumulator: Accumulator[U, T]) -> U:
        """fold left to right starting from seed; returns seed for an empty sequence"""
        require_callable(accumulator, "accumulator")
        return reduce(accumulator, self._enumerable._get_data(), seed)

    def join(self, delimiter: Optional[str] = None, prefix: str = "", suffix: str = "") -> str:
        """
        join the string form of every element.
        delimiter defaults to settings.join_delimiter; an empty sequence gives prefix + suffix.
        """
        if delimiter is None:
            delimiter = get_settings().join_delimiter
        return prefix + delimiter.join(str(item) for item in self._enumerable._get_data()) + suffix

    def lines(self) -> str:
        """every element on its own line, each ending with settings.line_terminator"""
        terminator = get_settings().line_terminator
        return "".join(f"{item}{terminator}" for item in self._enumerable._get_data())
