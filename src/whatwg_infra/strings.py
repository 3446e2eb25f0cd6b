"""Operations on strings per the ["Strings"](http://infra.spec.whatwg.org/#strings) section of the Infra Standard.

All of the procedures here are pure and total -- they return a new string (or list of strings) for any string input and never raise, save for `strictly_split` being given a delimiter that isn't a single code point.

The splitting procedures are written in terms of `scanning.collect_code_points`, following the Standard step by step, which is also how parsers building on this package are expected to use the latter.
"""

from .code_points import is_ascii_whitespace
from .scanning import collect_code_points, Position, skip_ascii_whitespace
from .utils import CP, InvalidDelimiterError, join

import re

ascii_whitespace = '\t\n\f\r ' # See http://infra.spec.whatwg.org/#ascii-whitespace; `str.strip` et al must be given these explicitly since by default they strip a much wider set of white-space

ascii_upper_alpha = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
ascii_lower_alpha = 'abcdefghijklmnopqrstuvwxyz'

_lowercase_table = str.maketrans(ascii_upper_alpha, ascii_lower_alpha)
_uppercase_table = str.maketrans(ascii_lower_alpha, ascii_upper_alpha)

_ascii_whitespace_run = re.compile(f'[{re.escape(ascii_whitespace)}]+')

def normalize_newlines(s: str) -> str:
    """Replace every U+000D CR U+000A LF pair with a single U+000A LF, then every remaining U+000D CR with U+000A LF.

    The order of the two replacements is significant -- replacing lone CRs first would turn every CR LF pair into _two_ line feeds.

    See http://infra.spec.whatwg.org/#normalize-newlines.
    """
    return s.replace('\r\n', '\n').replace('\r', '\n')

def strip_newlines(s: str) -> str:
    """Remove all U+000A LF and U+000D CR code points from a string.

    See http://infra.spec.whatwg.org/#strip-newlines.
    """
    return join(cp for cp in s if cp not in ('\n', '\r'))

def strip_leading_and_trailing_ascii_whitespace(s: str) -> str:
    """Remove ASCII whitespace from the start and the end of a string.

    Other white-space, e.g. U+000B LINE TABULATION or U+00A0 NO-BREAK SPACE, is retained.

    See http://infra.spec.whatwg.org/#strip-leading-and-trailing-ascii-whitespace.
    """
    return s.strip(ascii_whitespace)

trim_ascii_whitespace = strip_leading_and_trailing_ascii_whitespace # Alias, for callers accustomed to the shorter name

def strip_and_collapse_ascii_whitespace(s: str) -> str:
    """Replace every run of one or more ASCII whitespace code points with a single U+0020 SPACE, then strip leading and trailing ASCII whitespace.

    See http://infra.spec.whatwg.org/#strip-and-collapse-ascii-whitespace.
    """
    return strip_leading_and_trailing_ascii_whitespace(_ascii_whitespace_run.sub(' ', s))

def ascii_lowercase(s: str) -> str:
    """See http://infra.spec.whatwg.org/#ascii-lowercase.

    Unlike `str.lower`, only ASCII upper alphas are affected, e.g. `ascii_lowercase('ÀB')` is `'Àb'`.
    """
    return s.translate(_lowercase_table)

def ascii_uppercase(s: str) -> str:
    """See http://infra.spec.whatwg.org/#ascii-uppercase."""
    return s.translate(_uppercase_table)

def is_ascii_case_insensitive_match(a: str, b: str) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-case-insensitive."""
    return ascii_lowercase(a) == ascii_lowercase(b)

def is_ascii_string(s: str) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-string."""
    return s.isascii() # `str.isascii` is defined in terms of exactly U+0000 to U+007F, same as the Standard's ASCII code point

def split_on_ascii_whitespace(s: str) -> list[str]:
    """Split a string into the non-empty sequences of code points separated by ASCII whitespace.

    See http://infra.spec.whatwg.org/#split-on-ascii-whitespace.
    """
    position = Position()
    tokens: list[str] = []
    skip_ascii_whitespace(s, position)
    while not position.is_past_end(s):
        tokens.append(collect_code_points(s, position, lambda cp: not is_ascii_whitespace(cp)))
        skip_ascii_whitespace(s, position)
    return tokens

def strictly_split(s: str, delimiter: CP) -> list[str]:
    """Split a string on a delimiter code point, retaining empty sequences between consecutive delimiters (and at either end of the string).

    An empty string is split into a list with a single empty string.

    See http://infra.spec.whatwg.org/#strictly-split.

    :raises InvalidDelimiterError: If `delimiter` isn't exactly one code point
    """
    if len(delimiter) != 1:
        raise InvalidDelimiterError(f"Delimiter must be a single code point, got {delimiter!r}")
    position = Position()
    tokens = [ collect_code_points(s, position, lambda cp: cp != delimiter) ]
    while not position.is_past_end(s):
        assert s[position.value] == delimiter
        position.advance()
        tokens.append(collect_code_points(s, position, lambda cp: cp != delimiter))
    return tokens

def split_on_commas(s: str) -> list[str]:
    """Split a string on U+002C (`,`), stripping ASCII whitespace around every resulting token.

    A trailing comma does not produce an empty token, while an empty string produces no tokens at all.

    See http://infra.spec.whatwg.org/#split-on-commas.
    """
    position = Position()
    tokens: list[str] = []
    while not position.is_past_end(s):
        token = collect_code_points(s, position, lambda cp: cp != ',')
        tokens.append(strip_leading_and_trailing_ascii_whitespace(token))
        if not position.is_past_end(s):
            assert s[position.value] == ','
            position.advance()
    return tokens
