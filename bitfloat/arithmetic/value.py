"""Decoded values of IEEE 754-like bit patterns."""

import numpy

from ..bits.ops import VK


def format_f32(x):
    """Shortest positional decimal that reads back as the same float32."""
    x = numpy.float32(x)
    if numpy.isnan(x):
        return 'NaN'
    return numpy.format_float_positional(x, unique=True, trim='-')


class FloatValue(object):
    """Meaning of a bit pattern: a signed zero, a signed infinity, NaN,
    or a number with its float32 magnitude.
    """

    _kind : VK = VK.NAN
    _magnitude = None
    _denormalized : bool = False

    @property
    def kind(self):
        return self._kind

    @property
    def magnitude(self):
        """Signed float32 value, or None unless this is a number."""
        return self._magnitude

    @property
    def denormalized(self):
        """Was the number reconstructed without the implicit leading 1?"""
        return self._denormalized

    def __init__(self, kind, magnitude=None, denormalized=False):
        if kind == VK.NUMBER:
            if magnitude is None:
                raise ValueError('a number needs a magnitude')
            self._magnitude = numpy.float32(magnitude)
            self._denormalized = bool(denormalized)
        elif magnitude is not None or denormalized:
            raise ValueError('only numbers carry a magnitude, not {}'.format(VK(kind).name))
        self._kind = VK(kind)

    @classmethod
    def number(cls, magnitude, denormalized=False):
        return cls(VK.NUMBER, magnitude=magnitude, denormalized=denormalized)

    def is_nan(self):
        return self._kind == VK.NAN

    def is_zero(self):
        return self._kind == VK.NEGATIVE_ZERO or self._kind == VK.POSITIVE_ZERO

    def is_inf(self):
        return self._kind == VK.NEGATIVE_INFINITY or self._kind == VK.POSITIVE_INFINITY

    def is_number(self):
        return self._kind == VK.NUMBER

    def is_denormalized(self):
        return self._kind == VK.NUMBER and self._denormalized

    def __eq__(self, other):
        if not isinstance(other, FloatValue):
            return NotImplemented
        if self._kind != other._kind:
            return False
        if self._kind == VK.NUMBER:
            # compare bit patterns, so that NaN magnitudes from raw mode are equal to themselves
            return (self._magnitude.tobytes() == other._magnitude.tobytes()
                    and self._denormalized == other._denormalized)
        return True

    def __hash__(self):
        if self._kind == VK.NUMBER:
            return hash((self._kind, self._magnitude.tobytes(), self._denormalized))
        return hash(self._kind)

    def __repr__(self):
        if self._kind == VK.NUMBER:
            return '{}({}, magnitude={}, denormalized={})'.format(
                type(self).__name__, self._kind.name, format_f32(self._magnitude), repr(self._denormalized)
            )
        else:
            return '{}({})'.format(type(self).__name__, self._kind.name)

    def __str__(self):
        return self.describe()

    def describe(self, number=None):
        """Render for display. If number is given, it is shown in place of
        the float32 magnitude.
        """
        if self._kind == VK.NAN:
            return 'NaN'
        elif self._kind == VK.NEGATIVE_ZERO:
            return '-0'
        elif self._kind == VK.POSITIVE_ZERO:
            return '0'
        elif self._kind == VK.NEGATIVE_INFINITY:
            return '-Infinity'
        elif self._kind == VK.POSITIVE_INFINITY:
            return 'Infinity'

        if number is None:
            s = format_f32(self._magnitude)
        else:
            s = str(number)
        if self._denormalized:
            s += ' (denorm)'
        return s


NaN = FloatValue(VK.NAN)
NegativeZero = FloatValue(VK.NEGATIVE_ZERO)
PositiveZero = FloatValue(VK.POSITIVE_ZERO)
NegativeInfinity = FloatValue(VK.NEGATIVE_INFINITY)
PositiveInfinity = FloatValue(VK.POSITIVE_INFINITY)
