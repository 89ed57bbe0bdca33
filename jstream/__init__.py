r"""
       _       _
      (_)___  | |_ _ __ ___  __ _ _ __ ___
      | / __| | __| '__/ _ \/ _` | '_ ` _ \
      | \__ \ | |_| | |  __/ (_| | | | | | |
     _/ |___/  \__|_|  \___|\__,_|_| |_| |_|
    |__/
"""
import logging

# expose the main classes
from .stream import Stream
from .comparator import Comparator, CASE_INSENSITIVE_ORDER
from .optional import Optional
from .collectors import Collector
from . import collectors

# expose the comparator factories
from .comparator import (
    natural_order,
    reverse_order,
    comparing,
    null_first,
    null_last
)

# expose the stream factory functions
from .factories import (
    of,
    of_array,
    of_nullable,
    empty,
    concat,
    generate,
    iterate,
    from_range,
    stream,
    S
)

# expose the error types
from .exceptions import (
    JStreamError,
    NullPointerException,
    NoSuchElementException,
    TypeMismatchError,
    IncomparableError,
    IllegalStateException
)

# expose supporting types and helpers
from .types import Comparable, SummaryStatistics
from .equality import is_equal
from .sources import PullSource

# the library logs, the application decides where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Stream",
    "Comparator",
    "CASE_INSENSITIVE_ORDER",
    "Optional",
    "Collector",
    "collectors",
    "natural_order",
    "reverse_order",
    "comparing",
    "null_first",
    "null_last",
    "of",
    "of_array",
    "of_nullable",
    "empty",
    "concat",
    "generate",
    "iterate",
    "from_range",
    "stream",
    "S",
    "JStreamError",
    "NullPointerException",
    "NoSuchElementException",
    "TypeMismatchError",
    "IncomparableError",
    "IllegalStateException",
    "Comparable",
    "SummaryStatistics",
    "is_equal",
    "PullSource"
]
