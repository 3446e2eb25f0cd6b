"""Set of constructs to aid the rest of the package: type aliases shared between modules, and the exception classes the package raises."""

from collections.abc import Callable, Iterable
from typing import TypeAlias

CP: TypeAlias = str # [Unicode] code points are strings of length 1; the empty string is also admitted, signifying the end-of-input condition (no code point), which every predicate in the package rejects

Predicate: TypeAlias = Callable[[CP], bool] # The type of the "while <condition>" part of "collect a sequence of code points", see `scanning.collect_code_points`

def join(iterable: Iterable[str]) -> str:
    """Join a sequence into a string."""
    return ''.join(iterable)

class InfraError(RuntimeError):
    """A [catch-all] class of errors raised by the package.

    None of the algorithms of the Infra Standard implemented with this package are defined to fail on any string input, so errors of this class only ever signify misuse of a construct of our own, like a scan cursor (see `scanning.Position`).
    """
    pass

class InvalidPositionError(InfraError, ValueError):
    """Class of errors raised when a scan cursor is given an offset it cannot hold.

    A "position variable" (see http://infra.spec.whatwg.org/#string-position-variable) denotes a boundary between code points, so its value is a non-negative integer. Since Python strings are indexed by code point, every such integer is a valid boundary -- offsets past the end of a string are admitted and simply denote the end.
    """
    pass

class InvalidDelimiterError(InfraError, ValueError):
    """Class of errors raised when a procedure splitting on a delimiter code point is given something other than a single code point for the delimiter."""
    pass
