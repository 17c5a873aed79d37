"""Command line front end: evaluate one bit pattern, or list / plot all of them."""

import sys
import argparse

from ..bits import utils
from ..arithmetic import ieee754, value, formatctx

# enumerating more than this many bits is not useful on a terminal or in a plot
max_enumerate_bits = 16


def output_float(f, raw=False, exact=False, file=None):
    if file is None:
        file = sys.stdout

    if raw:
        val = value.FloatValue.number(f.raw_value(), denormalized=False)
    else:
        val = f.evaluate()

    if exact and val.is_number():
        if raw:
            number = f.exact_raw_value()
        else:
            number = f.exact_value()
        s = val.describe(number=ieee754.mpfr_to_decimal(number))
    else:
        s = str(val)

    print('{} => {}'.format(str(f), s), file=file)


def evaluate(binary, ctx, raw=False, exact=False):
    f = ieee754.Float.parse(binary, ctx=ctx)
    output_float(f, raw=raw, exact=exact)


def list_all(ctx, plot=None):
    if plot is not None:
        # matplotlib is only needed for plotting
        from . import plot as plotting
        plotting.plot(plot, ctx=ctx)
    else:
        for f in ieee754.iter_all(ctx):
            output_float(f)


def make_parser():
    parser = argparse.ArgumentParser(
        prog='bitfloat',
        description='decode IEEE 754-like floating point bit patterns',
    )
    parser.add_argument('-f', '--format', type=str, default='small',
                        help='the float format: one of {}, a synonym such as binary32, or W,P for W exponent and P mantissa bits'
                        .format(', '.join(formatctx.presets)))

    subparsers = parser.add_subparsers(dest='cmd', metavar='COMMAND')
    subparsers.required = True

    evaluate_parser = subparsers.add_parser('evaluate', aliases=['eval'],
                                            help='evaluate a single binary float number')
    evaluate_parser.add_argument('binary', type=str,
                                 help='the float number as a sequence of 0s and 1s')
    evaluate_parser.add_argument('-r', '--raw', action='store_true',
                                 help="don't check for special cases like infinity or NaN")
    evaluate_parser.add_argument('--exact', action='store_true',
                                 help='print the exact value instead of the nearest 32-bit float')

    all_parser = subparsers.add_parser('all',
                                       help='show the distribution of all float values (formats of at most {:d} bits)'
                                       .format(max_enumerate_bits))
    all_parser.add_argument('--plot', type=str, default=None,
                            help='plot the distribution to an image')

    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    try:
        ctx = formatctx.lookup_format(args.format)
    except ValueError as e:
        print('Error: {}'.format(str(e)), file=sys.stderr, flush=True)
        return 1

    if args.cmd in ('evaluate', 'eval'):
        try:
            evaluate(args.binary, ctx, raw=args.raw, exact=args.exact)
        except utils.ParseError as e:
            print('Error: {}'.format(str(e)), file=sys.stderr, flush=True)
            return 1

    elif args.cmd == 'all':
        if ctx.nbits > max_enumerate_bits:
            print('Format {} not supported for subcommand `all`'.format(ctx.name.capitalize()),
                  file=sys.stderr, flush=True)
            return 1
        list_all(ctx, plot=args.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
