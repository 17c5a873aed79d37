"""Standard classification codes, shared by the decoder and its consumers."""

from enum import IntEnum, unique

@unique
class VK(IntEnum):
    """Kind of value a bit pattern decodes to."""
    NAN = 0
    NEGATIVE_ZERO = 1
    POSITIVE_ZERO = 2
    NUMBER = 3
    NEGATIVE_INFINITY = 4
    POSITIVE_INFINITY = 5

# IEEE 754 class names, as reported by Float.classify()
ZERO = 'zero'
INF = 'inf'
NAN = 'nan'
SUBNORMAL = 'subnormal'
NORMAL = 'normal'
