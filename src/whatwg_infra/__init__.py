"""Primitives of the [WHATWG Infra Standard](http://infra.spec.whatwg.org) -- classification of code points, operations on strings, and scanning of strings with a position variable -- for parsers written against WHATWG standards.

The procedures are aligned with the Standard to the code point, which is what parsers built on them (URL, MIME type, HTML microsyntaxes etc) depend on. See the `code_points`, `strings` and `scanning` modules, respectively; everything public is also importable from the package directly.
"""

from .code_points import is_ascii_alpha, is_ascii_alphanumeric, is_ascii_code_point, is_ascii_digit, is_ascii_hex_digit, is_ascii_lower_alpha, is_ascii_lower_hex_digit, is_ascii_tab_newline, is_ascii_tab_or_newline, is_ascii_upper_alpha, is_ascii_upper_hex_digit, is_ascii_whitespace, is_c0_control, is_c0_control_or_space, is_c0_control_space, is_control, is_leading_surrogate, is_noncharacter, is_noncharacter_ordinal, is_scalar_value, is_surrogate, is_surrogate_ordinal, is_trailing_surrogate
from .scanning import collect_code_points, collect_code_points_at, collect_codepoints, Position, skip_ascii_whitespace
from .strings import ascii_lowercase, ascii_uppercase, is_ascii_case_insensitive_match, is_ascii_string, normalize_newlines, split_on_ascii_whitespace, split_on_commas, strictly_split, strip_and_collapse_ascii_whitespace, strip_leading_and_trailing_ascii_whitespace, strip_newlines, trim_ascii_whitespace
from .utils import CP, InfraError, InvalidDelimiterError, InvalidPositionError, Predicate
