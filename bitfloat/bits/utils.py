"""General utilities, such as exception classes and bit vector helpers."""

import typing

# bitfloat-specific exceptions

class BitfloatError(Exception):
    """Base bitfloat error."""

class ParseError(BitfloatError, ValueError):
    """Unable to parse a string of binary digits."""

class EmptyInputError(ParseError):
    """No digits left after removing spaces."""

    def __init__(self):
        super().__init__('Empty string cannot be parsed')

class WrongLengthError(ParseError):
    """The number of digits does not match the width of the format."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__('Number must have {:d} digits but has {:d}'.format(expected, actual))

class InvalidDigitError(ParseError):
    """A character other than 0 or 1, or the end of the input, where a digit was expected.
    char is None if the input ran out.
    """

    def __init__(self, char: typing.Optional[str], position: int):
        self.char = char
        self.position = position
        super().__init__('Neither 0 nor 1: {}'.format(repr(char)))

class TrailingInputError(ParseError):
    """Digits left over after reading every field."""

    def __init__(self):
        super().__init__('Too many bits')


# Useful things

def bitmask(n: int) -> int:
    """Produces a bitmask of n 1s if n is positive, or n 0s if n is negative."""
    if n >= 0:
        return (1 << n) - 1
    else:
        return -1 << -n

def pow2(n: int) -> int:
    """2**n, for nonnegative n."""
    if n < 0:
        raise ValueError('pow2 expects a nonnegative exponent, got {}'.format(repr(n)))
    return 1 << n

def bits_to_int(bits: typing.Sequence[bool]) -> int:
    """Unsigned integer value of a sequence of bits, most significant first."""
    i = 0
    for b in bits:
        i = (i << 1) | (1 if b else 0)
    return i

def int_to_bits(i: int, width: int) -> typing.Tuple[bool, ...]:
    """The low width bits of i, most significant first.
    Any higher bits are dropped.
    """
    return tuple((i >> k) & 1 == 1 for k in reversed(range(width)))
