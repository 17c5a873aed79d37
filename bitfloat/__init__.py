from .bits import utils, ops
from .arithmetic import formatctx, value, ieee754

Float = ieee754.Float
FloatFormat = formatctx.FloatFormat
FloatValue = value.FloatValue

float_format = formatctx.float_format
lookup_format = formatctx.lookup_format
generate_all = ieee754.generate_all
iter_all = ieee754.iter_all

SmallFloat = formatctx.small
SingleFloat = formatctx.single
DoubleFloat = formatctx.double
QuadrupleFloat = formatctx.quadruple

BitfloatError = utils.BitfloatError
ParseError = utils.ParseError
