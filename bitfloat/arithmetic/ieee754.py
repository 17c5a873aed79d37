"""Decoding of IEEE 754-like bit patterns with arbitrary field widths.
"""

import numpy
import gmpy2 as gmp

from ..bits import utils
from ..bits.utils import bitmask, pow2, bits_to_int, int_to_bits
from ..bits import ops
from .formatctx import FloatFormat, float_format, lookup_format
from . import formatctx
from . import value


class Float(object):
    """A bit pattern of a format with w exponent bits and p mantissa bits:
    one sign bit, then the exponent field, then the mantissa field,
    each stored most significant bit first.
    """

    _ctx : FloatFormat = formatctx.small

    _sign : bool = False
    _exponent : tuple = (False,) * 3
    _mantissa : tuple = (False,) * 3

    @property
    def ctx(self):
        """The format this bit pattern belongs to."""
        return self._ctx

    @property
    def sign(self):
        """The sign bit - True is negative."""
        return self._sign

    negative = sign

    @property
    def exponent(self):
        """Exponent field, most significant bit first."""
        return self._exponent

    @property
    def mantissa(self):
        """Mantissa field, most significant bit first."""
        return self._mantissa

    @property
    def e(self):
        """Unsigned integer value of the exponent field (still biased)."""
        return bits_to_int(self._exponent)

    @property
    def c(self):
        """Unsigned integer value of the mantissa field."""
        return bits_to_int(self._mantissa)

    @property
    def bits(self):
        """The whole pattern as an unsigned integer, with the sign in the top bit."""
        return (int(self._sign) << (self._ctx.nbits - 1)) | (self.e << self._ctx.p) | self.c

    def __init__(self, sign=False, exponent=None, mantissa=None, ctx=None):
        if ctx is None:
            ctx = type(self)._ctx
        else:
            ctx = lookup_format(ctx)

        if exponent is None:
            exponent = (False,) * ctx.w
        if mantissa is None:
            mantissa = (False,) * ctx.p

        exponent = tuple(bool(b) for b in exponent)
        mantissa = tuple(bool(b) for b in mantissa)
        if len(exponent) != ctx.w:
            raise ValueError('exponent must have {:d} bits for {}, got {:d}'
                             .format(ctx.w, repr(ctx), len(exponent)))
        if len(mantissa) != ctx.p:
            raise ValueError('mantissa must have {:d} bits for {}, got {:d}'
                             .format(ctx.p, repr(ctx), len(mantissa)))

        self._sign = bool(sign)
        self._exponent = exponent
        self._mantissa = mantissa
        self._ctx = float_format(ctx.w, ctx.p)

    @classmethod
    def from_bits(cls, i, ctx=None):
        """Unpack an unsigned integer into sign, exponent and mantissa.
        Bits above the width of the format are dropped.
        """
        if ctx is None:
            ctx = cls._ctx
        else:
            ctx = lookup_format(ctx)

        S = (i >> (ctx.w + ctx.p)) & bitmask(1)
        E = (i >> ctx.p) & bitmask(ctx.w)
        C = i & bitmask(ctx.p)
        return cls(S == 1, int_to_bits(E, ctx.w), int_to_bits(C, ctx.p), ctx=ctx)

    @classmethod
    def parse(cls, s, ctx=None):
        """Read a float from a string of 0s and 1s: the sign digit, then the
        exponent, then the mantissa. Spaces are ignored wherever they appear.
        """
        if ctx is None:
            ctx = cls._ctx
        else:
            ctx = lookup_format(ctx)

        digits = s.replace(' ', '')

        if len(digits) == 0:
            raise utils.EmptyInputError()
        if len(digits) != ctx.digits:
            raise utils.WrongLengthError(ctx.digits, len(digits))

        chars = iter(digits)
        position = 0

        def read_field(width):
            nonlocal position
            field = []
            for _ in range(width):
                char = next(chars, None)
                if char == '0':
                    field.append(False)
                elif char == '1':
                    field.append(True)
                else:
                    raise utils.InvalidDigitError(char, position)
                position += 1
            return tuple(field)

        sign, = read_field(1)
        exponent = read_field(ctx.w)
        mantissa = read_field(ctx.p)

        if next(chars, None) is not None:
            raise utils.TrailingInputError()

        return cls(sign, exponent, mantissa, ctx=ctx)

    def __repr__(self):
        return '{}(sign={}, exponent={}, mantissa={}, ctx={})'.format(
            type(self).__name__, repr(self._sign), repr(self._exponent), repr(self._mantissa), repr(self._ctx)
        )

    def __str__(self):
        return ''.join('1' if b else '0' for b in (self._sign, *self._exponent, *self._mantissa))

    def __eq__(self, other):
        if isinstance(other, Float):
            return (
                self._ctx == other._ctx
                and self._sign == other._sign
                and self._exponent == other._exponent
                and self._mantissa == other._mantissa
            )
        else:
            return NotImplemented

    def __hash__(self):
        return hash((self._ctx, self._sign, self._exponent, self._mantissa))

    # numeric reconstruction, in float32 arithmetic

    def _sign_f32(self):
        if self._sign:
            return numpy.float32(-1.0)
        else:
            return numpy.float32(1.0)

    def raw_value(self):
        """sign * (1 + c / 2**p) * 2**(e - bias), ignoring special cases."""
        with numpy.errstate(over='ignore', under='ignore', invalid='ignore'):
            f = numpy.float32(1.0) + _fraction_f32(self.c, self._ctx.p)
            return self._sign_f32() * f * _exp2_f32(self.e - self._ctx.bias)

    def denormalized_value(self):
        """sign * (c / 2**p) * 2**(1 - bias), with no implicit leading 1."""
        with numpy.errstate(over='ignore', under='ignore', invalid='ignore'):
            f = _fraction_f32(self.c, self._ctx.p)
            return self._sign_f32() * f * _exp2_f32(1 - self._ctx.bias)

    # classification; the order of the tests matters

    def evaluate(self):
        """Classify this pattern and reconstruct its value."""
        e = self.e
        c = self.c
        max_exponent = self._ctx.max_exponent

        if e == 0 and c == 0:
            if self._sign:
                return value.NegativeZero
            else:
                return value.PositiveZero
        elif e == max_exponent and c == 0:
            if self._sign:
                return value.NegativeInfinity
            else:
                return value.PositiveInfinity
        elif e == max_exponent:
            return value.NaN
        elif e == 0:
            return value.FloatValue.number(self.denormalized_value(), denormalized=True)
        else:
            return value.FloatValue.number(self.raw_value(), denormalized=False)

    def classify(self):
        """IEEE 754 class name: zero, inf, nan, subnormal or normal."""
        e = self.e
        c = self.c
        max_exponent = self._ctx.max_exponent

        if e == 0 and c == 0:
            return ops.ZERO
        elif e == max_exponent and c == 0:
            return ops.INF
        elif e == max_exponent:
            return ops.NAN
        elif e == 0:
            return ops.SUBNORMAL
        else:
            return ops.NORMAL

    def exact_value(self):
        """The exact value of this pattern as an MPFR, with special cases.
        The result has enough precision for every bit of the mantissa,
        regardless of how wide the format is.
        """
        cls = self.classify()
        pbits = self._ctx.p

        if cls == ops.NAN:
            return gmp.nan()
        elif cls == ops.INF:
            if self._sign:
                return -gmp.inf()
            else:
                return gmp.inf()
        elif cls == ops.ZERO:
            c = 0
            exp = 0
        elif cls == ops.SUBNORMAL:
            c = self.c
            exp = 1 - self._ctx.bias - pbits
        else:
            return self.exact_raw_value()

        return _exact_to_mpfr(self._sign, c, exp)

    def exact_raw_value(self):
        """Exact counterpart of raw_value(), as an MPFR."""
        pbits = self._ctx.p
        return _exact_to_mpfr(self._sign, self.c | (1 << pbits), self.e - self._ctx.bias - pbits)


# float32 holds integers below 2**128; past that, c and 2**p would both be infinite
f32_max_pbits = 127

# 2**x is already 0 or infinite in float32 well inside these bounds
f32_exp_clamp = 512


def _fraction_f32(c, p):
    """c / 2**p as a float32, for 0 <= c < 2**p."""
    if p <= f32_max_pbits:
        return numpy.float32(c) / numpy.float32(pow2(p))
    else:
        # int / int is correctly rounded and never overflows for a result below 1
        return numpy.float32(c / pow2(p))


def _exp2_f32(x):
    """2**x as a float32, for any integer x."""
    x = max(-f32_exp_clamp, min(f32_exp_clamp, x))
    return numpy.power(numpy.float32(2.0), numpy.float32(x))


def _exact_to_mpfr(negative, c, exp):
    """Convert (-1)**negative * c * 2**exp to an MPFR without rounding."""
    if c == 0:
        if negative:
            return gmp.zero(-1)
        else:
            return gmp.zero()

    with gmp.context(
            precision=max(2, c.bit_length()),
            emin=gmp.get_emin_min(),
            emax=gmp.get_emax_max(),
            trap_underflow=True,
            trap_overflow=True,
            trap_inexact=True,
    ):
        x = gmp.mul_2exp(gmp.mpfr(c), exp)
        if negative:
            return -x
        else:
            return x


def mpfr_to_decimal(x):
    """Exact positional decimal expansion of an MPFR.
    Every binary fraction has a finite decimal expansion, so no digits are lost;
    str() on an MPFR only prints enough digits to read back at its own precision.
    """
    if gmp.is_nan(x):
        return 'NaN'
    elif gmp.is_infinite(x):
        if gmp.is_signed(x):
            return '-inf'
        else:
            return 'inf'
    elif gmp.is_zero(x):
        if gmp.is_signed(x):
            return '-0'
        else:
            return '0'

    num, den = x.as_integer_ratio()
    if num < 0:
        sign = '-'
        num = -num
    else:
        sign = ''

    # den is a power of 2, so num / den == (num * 5**k) / 10**k
    k = int(den).bit_length() - 1
    digits = str(gmp.mpz(num) * (gmp.mpz(5) ** k))
    if k == 0:
        return sign + digits

    digits = digits.rjust(k + 1, '0')
    whole, frac = digits[:-k], digits[-k:].rstrip('0')
    if frac:
        return sign + whole + '.' + frac
    else:
        return sign + whole


def iter_all(ctx=None):
    """Every bit pattern of a format: sign False then True, exponent ascending,
    then mantissa ascending innermost.
    """
    if ctx is None:
        ctx = Float._ctx
    else:
        ctx = lookup_format(ctx)

    for sign in (False, True):
        for e in range(pow2(ctx.w)):
            exponent = int_to_bits(e, ctx.w)
            for c in range(pow2(ctx.p)):
                yield Float(sign, exponent, int_to_bits(c, ctx.p), ctx=ctx)


def generate_all(ctx=None):
    """All 2**nbits patterns of a format, as a list, in the order of iter_all."""
    return list(iter_all(ctx))


def show_bitpattern(x, ctx=None):
    """Fields of a pattern separated by spaces, with the implicit bit in parentheses."""
    if isinstance(x, int):
        f = Float.from_bits(x, ctx=ctx)
    elif isinstance(x, str):
        f = Float.parse(x, ctx=ctx)
    else:
        f = x
    ctx = f.ctx

    if f.e == 0 or f.e == ctx.max_exponent:
        hidden = 0
    else:
        hidden = 1

    return 'float{:d}({:d},{:d}): {:01b} {} ({:01b}) {}'.format(
        ctx.nbits, ctx.w, ctx.p,
        int(f.sign),
        str(f)[1:1 + ctx.w],
        hidden,
        str(f)[1 + ctx.w:],
    )
