"""
seqops: deferred, chainable sequence pipelines and an optional-value type.

    >>> from seqops import P
    >>> P(["Apple", "Banana", "Date"]).where(lambda s: len(s) > 4).to.join()
    'Apple, Banana'
"""

import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable
from .optional import OptionalValue

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_range,
    range_closed,
    repeat,
    empty,
    generate,
    iterate,
    P,
)

# expose supporting data classes and errors
from .types import PartitionResult, SummaryStatistics
from .errors import (
    SeqOpsError,
    InvalidArgumentError,
    NullArgumentError,
    AbsentValueError,
)
from .config import Settings, configure, get_settings
from .logger import setup_logger

# the function-style api lives in its own namespace since it shadows builtins
from . import functions, ops

# library logging stays silent until the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "OptionalValue",
    "from_iterable",
    "of",
    "from_range",
    "range_closed",
    "repeat",
    "empty",
    "generate",
    "iterate",
    "P",
    "PartitionResult",
    "SummaryStatistics",
    "SeqOpsError",
    "InvalidArgumentError",
    "NullArgumentError",
    "AbsentValueError",
    "Settings",
    "configure",
    "get_settings",
    "setup_logger",
    "functions",
    "ops",
]
