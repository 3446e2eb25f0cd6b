"""Classification of code points per the ["Code points"](http://infra.spec.whatwg.org/#code-points) section of the Infra Standard.

Every predicate here accepts a code point in the form of a Python string of length 1 (see `CP`), and is total: the empty string, which callers use to signify the end of input, is classified `False` by all of them. Said convention lets the predicates be passed as is to `scanning.collect_code_points` and to peek-ahead style comparisons like `is_ascii_digit(s[i:i+1])`.

NOTE: A number of these definitions deliberately differ from similarly named facilities of Python's own `str` type. E.g. `str.isspace` and `str.strip` consider U+000B and U+00A0 (among many others) to be white-space, while ASCII whitespace per the Standard is exactly five code points; `str.isdigit` accepts superscript and non-Latin digits, while `is_ascii_digit` accepts exactly ten. Parsers built on top of this module depend on the narrower definitions, so `str` methods must not be substituted for the predicates.
"""

from .utils import CP

def is_surrogate_ordinal(o: int) -> bool:
    """See `is_surrogate`."""
    return 0xd800 <= o <= 0xdfff

def is_leading_surrogate(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#leading-surrogate."""
    return '\ud800' <= cp <= '\udbff'

def is_trailing_surrogate(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#trailing-surrogate."""
    return '\udc00' <= cp <= '\udfff'

def is_surrogate(cp: CP) -> bool:
    """Determine if a code point is a so-called surrogate code point.

    Python strings may contain surrogates that are not part of a surrogate pair (e.g. as produced by decoding with the `surrogateescape` error handler), and this is how they can be told apart from scalar values.

    See http://infra.spec.whatwg.org/#surrogate.
    """
    return len(cp) == 1 and is_surrogate_ordinal(ord(cp))

def is_scalar_value(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#scalar-value."""
    return len(cp) == 1 and not is_surrogate(cp)

plane_end_noncharacter_ordinals = frozenset(plane + offset for plane in range(0, 0x110000, 0x10000) for offset in (0xfffe, 0xffff)) # The last two code points of each of the 17 planes
assert len(plane_end_noncharacter_ordinals) == 34

def is_noncharacter_ordinal(o: int) -> bool:
    """See `is_noncharacter`."""
    return (0xfdd0 <= o <= 0xfdef) or o in plane_end_noncharacter_ordinals

def is_noncharacter(cp: CP) -> bool:
    """Determine if a code point is a noncharacter.

    A noncharacter is a code point in the range U+FDD0 to U+FDEF, inclusive, or one of the following 34 code points: U+FFFE, U+FFFF, U+1FFFE, U+1FFFF, U+2FFFE, U+2FFFF, U+3FFFE, U+3FFFF, U+4FFFE, U+4FFFF, U+5FFFE, U+5FFFF, U+6FFFE, U+6FFFF, U+7FFFE, U+7FFFF, U+8FFFE, U+8FFFF, U+9FFFE, U+9FFFF, U+AFFFE, U+AFFFF, U+BFFFE, U+BFFFF, U+CFFFE, U+CFFFF, U+DFFFE, U+DFFFF, U+EFFFE, U+EFFFF, U+FFFFE, U+FFFFF, U+10FFFE, or U+10FFFF.

    See http://infra.spec.whatwg.org/#noncharacter.
    """
    return len(cp) == 1 and is_noncharacter_ordinal(ord(cp))

def is_ascii_code_point(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-code-point."""
    return '\u0000' <= cp <= '\u007f'

def is_ascii_tab_or_newline(cp: CP) -> bool:
    """Determine if a code point is one of U+0009 TAB, U+000A LF or U+000D CR.

    See http://infra.spec.whatwg.org/#ascii-tab-or-newline.
    """
    return cp in ('\t', '\n', '\r')

def is_ascii_whitespace(cp: CP) -> bool:
    """Determine if a code point is one of U+0009 TAB, U+000A LF, U+000C FF, U+000D CR or U+0020 SPACE.

    See http://infra.spec.whatwg.org/#ascii-whitespace.
    """
    return cp in ('\t', '\n', '\f', '\r', ' ')

def is_c0_control(cp: CP) -> bool:
    """Determine if a code point is a C0 control, i.e. in the range U+0000 NULL to U+001F INFORMATION SEPARATOR ONE, inclusive.

    Unlike what is commonly understood as "ASCII control" (e.g. C's `iscntrl`), U+007F DELETE is _not_ a C0 control; see `is_control` for the wider class.

    See http://infra.spec.whatwg.org/#c0-control.
    """
    return '\u0000' <= cp <= '\u001f'

def is_c0_control_or_space(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#c0-control-or-space."""
    return is_c0_control(cp) or cp == ' '

def is_control(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#control."""
    return is_c0_control(cp) or '\u007f' <= cp <= '\u009f'

def is_ascii_digit(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-digit."""
    return '0' <= cp <= '9'

def is_ascii_upper_hex_digit(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-upper-hex-digit."""
    return is_ascii_digit(cp) or ('A' <= cp <= 'F')

def is_ascii_lower_hex_digit(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-lower-hex-digit."""
    return is_ascii_digit(cp) or ('a' <= cp <= 'f')

def is_ascii_hex_digit(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-hex-digit."""
    return is_ascii_upper_hex_digit(cp) or is_ascii_lower_hex_digit(cp)

def is_ascii_upper_alpha(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-upper-alpha."""
    return 'A' <= cp <= 'Z'

def is_ascii_lower_alpha(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-lower-alpha."""
    return 'a' <= cp <= 'z'

def is_ascii_alpha(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-alpha."""
    return is_ascii_upper_alpha(cp) or is_ascii_lower_alpha(cp)

def is_ascii_alphanumeric(cp: CP) -> bool:
    """See http://infra.spec.whatwg.org/#ascii-alphanumeric."""
    return is_ascii_digit(cp) or is_ascii_alpha(cp)

# Aliases, for callers accustomed to the shorter names
is_c0_control_space = is_c0_control_or_space
is_ascii_tab_newline = is_ascii_tab_or_newline
