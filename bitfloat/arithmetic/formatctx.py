"""Format contexts: the field widths of an IEEE 754-like bit pattern."""

import re


small_synonyms = {'small', 'minifloat', 'float7'}
binary16_synonyms = {'binary16', 'float16', 'half'}
binary32_synonyms = {'binary32', 'float32', 'single', 'float'}
binary64_synonyms = {'binary64', 'float64', 'double'}
binary128_synonyms = {'binary128', 'float128', 'quadruple', 'quad'}

IEEE_wp = {}
IEEE_wp.update((k, (3, 3)) for k in small_synonyms)
IEEE_wp.update((k, (5, 10)) for k in binary16_synonyms)
IEEE_wp.update((k, (8, 23)) for k in binary32_synonyms)
IEEE_wp.update((k, (11, 52)) for k in binary64_synonyms)
IEEE_wp.update((k, (15, 112)) for k in binary128_synonyms)

# canonical preset names, in the order they are listed by the CLI
presets = ['small', 'half', 'single', 'double', 'quadruple']


class FloatFormat(object):
    """Field widths of an IEEE 754-like format.
    w is the number of exponent bits, p the number of stored mantissa bits
    (there is no implicit bit in p).
    """

    w = 3
    p = 3

    nbits = 1 + w + p
    bias = (1 << (w - 1)) - 1
    max_exponent = (1 << w) - 1

    def __init__(self, w=None, p=None):
        if w is not None:
            self.w = w
        if p is not None:
            self.p = p

        if not isinstance(self.w, int) or self.w < 1:
            raise ValueError('exponent width must be a positive integer, got {}'.format(repr(self.w)))
        if not isinstance(self.p, int) or self.p < 0:
            raise ValueError('mantissa width must be a nonnegative integer, got {}'.format(repr(self.p)))

        self.nbits = 1 + self.w + self.p
        self.bias = (1 << (self.w - 1)) - 1
        self.max_exponent = (1 << self.w) - 1

    @property
    def digits(self):
        """Number of binary digits in the text of a number in this format."""
        return self.nbits

    @property
    def name(self):
        for k in presets:
            if IEEE_wp[k] == (self.w, self.p):
                return k
        return 'float({:d},{:d})'.format(self.w, self.p)

    def __repr__(self):
        return '{}(w={}, p={})'.format(type(self).__name__, repr(self.w), repr(self.p))

    def __str__(self):
        return self.name

    def __eq__(self, other):
        if isinstance(other, FloatFormat):
            return self.w == other.w and self.p == other.p
        else:
            return NotImplemented

    def __hash__(self):
        return hash((self.w, self.p))


used_formats = {}
def float_format(w, p):
    try:
        return used_formats[(w, p)]
    except KeyError:
        ctx = FloatFormat(w=w, p=p)
        used_formats[(w, p)] = ctx
        return ctx


small = float_format(3, 3)
half = float_format(5, 10)
single = float_format(8, 23)
double = float_format(11, 52)
quadruple = float_format(15, 112)


_custom_re = re.compile(r'\s*(?:float\s*)?\(?\s*(\d+)\s*,\s*(\d+)\s*\)?\s*')

def lookup_format(name):
    """Find the format for a preset name, a synonym, or an explicit "w,p" pair."""
    if isinstance(name, FloatFormat):
        return name

    s = str(name).strip().lower()
    if s in IEEE_wp:
        return float_format(*IEEE_wp[s])

    # try to decipher custom type
    m = _custom_re.fullmatch(s)
    if m:
        return float_format(int(m.group(1)), int(m.group(2)))
    else:
        raise ValueError('unsupported float format {}'.format(repr(name)))
