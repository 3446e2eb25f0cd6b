"""Scanning of strings with a position variable, per http://infra.spec.whatwg.org/#string-position-variable and the algorithms defined around it.

Parsers described by WHATWG standards (URL, MIME type, HTML microsyntaxes etc) routinely process their input with a "position variable" pointing into it, advancing the latter as they "collect a sequence of code points" matching some condition. This module provides the position variable -- `Position` -- and the collection procedure, which together allow said parsers to be written down close to the letter of their respective specification, e.g.:

    position = Position()
    digits = collect_code_points(input, position, is_ascii_digit)
    unit = collect_code_points(input, position, is_ascii_alpha)

Python strings are sequences of code points, not of storage units, so a position is an offset counted in code points and every non-negative offset denotes a valid boundary between code points -- a supplementary-plane character occupies exactly one index and cannot be "split" by advancing a position. This is in contrast to byte-oriented representations, where the same procedure would need to account for multi-unit encoded characters.
"""

from .code_points import is_ascii_whitespace
from .utils import InvalidPositionError, Predicate

from operator import index
from typing import SupportsIndex

class Position:
    """Class of position variables, mutable cursors into a string.

    A position is owned by the caller and passed to procedures like `collect_code_points` which advance it as a side effect, allowing successive calls to continue where the preceding call left off. A single position must not be advanced by concurrent scans; it carries no lock.

    Positions also support marking the current offset and later returning to it (akin to how a token stream is marked during parsing, see http://drafts.csswg.org/css-syntax/#token-stream-mark), for parsers that need to backtrack.

    The value of a position is never negative, but it is not bound to any particular string -- a position past the end of a string is equivalent to a position at its end.
    """
    _value: int
    _marked_values: list[int]
    def __init__(self, value: SupportsIndex = 0):
        """Initialize the position.

        :param value: The initial offset, in code points
        :raises InvalidPositionError: If `value` is negative or isn't an integer
        """
        self._marked_values = []
        self.value = value # type: ignore # The setter accepts a wider type than the getter returns
    @property
    def value(self) -> int:
        """The offset of the position, in code points, from the start of the string."""
        return self._value
    @value.setter
    def value(self, value: SupportsIndex) -> None:
        try:
            offset = index(value)
        except TypeError as error:
            raise InvalidPositionError(f"Position must be an integer, got {value!r}") from error
        if offset < 0:
            raise InvalidPositionError(f"Position must not be negative, got {offset}")
        self._value = offset
    def __index__(self) -> int:
        return self._value
    def __int__(self) -> int:
        return self._value
    def __eq__(self, other: object) -> bool:
        match other:
            case Position():
                return self._value == other._value
            case bool():
                return NotImplemented
            case int():
                return self._value == other
            case _:
                return NotImplemented
    __hash__ = None # type: ignore # Positions are mutable
    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value})'
    def advance(self, n: int = 1) -> None:
        """Advance the position by `n` code points ("advance position by n" in the lingo of WHATWG standards)."""
        self.value = self._value + n
    def is_past_end(self, input: str) -> bool:
        """Determine if the position doesn't point to any code point of `input`.

        See "past the end" at http://infra.spec.whatwg.org/#string-position-variable.
        """
        return self._value >= len(input)
    def mark(self) -> None:
        """Remember the current offset, for a later `restore_mark` or `discard_mark`."""
        self._marked_values.append(self._value)
    def restore_mark(self) -> None:
        """Return to the most recently marked offset, forgetting the mark."""
        if not self._marked_values:
            raise InvalidPositionError("No mark to restore")
        self._value = self._marked_values.pop()
    def discard_mark(self) -> None:
        """Forget the most recently marked offset, staying where the position currently is."""
        if not self._marked_values:
            raise InvalidPositionError("No mark to discard")
        self._marked_values.pop()

def collect_code_points(input: str, position: Position | SupportsIndex, predicate: Predicate) -> str:
    """Collect a sequence of code points meeting a condition, advancing a position past them.

    Starting at the code point `position` points to, `predicate` is called for every code point in turn, and the position is advanced past it for as long as the predicate returns a true value. Scanning stops at the first code point the predicate rejects, or at the end of `input`, whichever comes first.

    An empty `input`, or a position already at or past its end, is not an error -- the result is then an empty string and `position` is left as is. Exceptions raised by `predicate` propagate to the caller, leaving `position` at the boundary reached up to that point.

    `position` may also be a plain integer, in which case the advanced position is not observable by the caller; see `collect_code_points_at` for threading an integer position through successive calls.

    Implements http://infra.spec.whatwg.org/#collect-a-sequence-of-code-points.

    :param input: The string to scan
    :param position: The position variable to start scanning at, which is advanced as a side effect
    :param predicate: The condition that collected code points must meet
    :returns: The code points the position was advanced past, i.e. `input[start:position]` where `start` is the value `position` had on entry
    :raises InvalidPositionError: If `position` is given as a negative integer, or neither a `Position` nor an integer
    """
    if not isinstance(position, Position):
        position = Position(position)
    start = end = position.value
    try:
        while end < len(input) and predicate(input[end]):
            end += 1
    finally:
        if end != start:
            position.value = end
    assert start <= position.value <= max(start, len(input))
    return input[start:end]

def collect_code_points_at(input: str, position: int, predicate: Predicate) -> tuple[str, int]:
    """Variant of `collect_code_points` for callers that keep their position in a plain integer.

    Integers being immutable, the advanced position is returned alongside the collected code points rather than updated in place, for the caller to thread into their next call.

    :returns: A 2-tuple with the collected code points and the advanced position, for first and second items, respectively
    :raises InvalidPositionError: If `position` is negative
    """
    cursor = Position(position)
    return collect_code_points(input, cursor, predicate), cursor.value

def skip_ascii_whitespace(input: str, position: Position) -> None:
    """See http://infra.spec.whatwg.org/#skip-ascii-whitespace."""
    collect_code_points(input, position, is_ascii_whitespace)

collect_codepoints = collect_code_points # Alias, for callers accustomed to the shorter name
