"""
small combinators for building callables to pass into pipelines.
comparers follow the three-way convention: negative, zero or positive.
"""

from functools import reduce
from .types import *
from .errors import require_callable


def identity(x: T) -> T:
    return x


def natural_order(a: Any, b: Any) -> int:
    """three-way compare using < and >"""
    return (a > b) - (a < b)


def compose(*funcs: Callable) -> Callable:
    """combine functions right to left: compose(f, g)(x) == f(g(x))"""
    for func in funcs:
        require_callable(func, "func")
    return reduce(lambda f, g: lambda x: f(g(x)), funcs, identity)


def and_then(first: Callable[..., U], then: Selector[U, V]) -> Callable[..., V]:
    """
    run first with whatever arguments it takes, then feed its result to then.
    and_then(pow, str)(2, 4) == "16"
    """
    require_callable(first, "first")
    require_callable(then, "then")
    def chained(*args, **kwargs):
        return then(first(*args, **kwargs))
    return chained


def negate(predicate: Callable[..., bool]) -> Callable[..., bool]:
    require_callable(predicate, "predicate")
    return lambda *args: not predicate(*args)


def all_of(*predicates: Callable[..., bool]) -> Callable[..., bool]:
    """true when every predicate holds, short-circuiting left to right"""
    for predicate in predicates:
        require_callable(predicate, "predicate")
    return lambda *args: all(p(*args) for p in predicates)


def any_of(*predicates: Callable[..., bool]) -> Callable[..., bool]:
    """true when at least one predicate holds, short-circuiting left to right"""
    for predicate in predicates:
        require_callable(predicate, "predicate")
    return lambda *args: any(p(*args) for p in predicates)


def comparing(key_selector: KeySelector[T, K], comparer: Comparer[K] = natural_order) -> Comparer[T]:
    """comparer that orders elements by the key key_selector extracts"""
    require_callable(key_selector, "key_selector")
    return lambda a, b: comparer(key_selector(a), key_selector(b))


def reversed_order(comparer: Comparer[T] = natural_order) -> Comparer[T]:
    require_callable(comparer, "comparer")
    return lambda a, b: comparer(b, a)
