#!/usr/bin/env python3

import sys
import argparse

from .lexer import tokenize
from .parser import parse
from .expr import draw_tree
from .integral import DiscreteIntegral
from .common import TRACE, ExprError
from . import chart


FUNCTION = "x / (1 + (x^2))"
INTERVALS = 1000
INITIAL_X = -5.0
END_X = 5.0
OUTPUT = "output.png"


def _main(args):
    if args.tokens:
        print(tokenize(args.function))

    if args.ast:
        draw_tree(parse(args.function), "ast")

    if args.at:
        expr = parse(args.function)
        for x in args.at:
            print(x, expr.eval(x))
        return

    di = DiscreteIntegral(args.function, args.initial_x, args.end_x, args.intervals)
    result = di.calculate()

    if args.samples:
        for x, y in di.samples:
            print(x, y)

    print(result)

    if not args.no_chart:
        chart.render(di, args.output)


def main(argv=None):
    argp = argparse.ArgumentParser(prog='intcalc')
    argp.add_argument('function', nargs='?', default=FUNCTION)
    argp.add_argument('-n', '--intervals', type=int, default=INTERVALS)
    argp.add_argument('-a', '--from', dest='initial_x', type=float, default=INITIAL_X)
    argp.add_argument('-b', '--to', dest='end_x', type=float, default=END_X)
    argp.add_argument('-o', '--output', type=str, default=OUTPUT)
    argp.add_argument('--no-chart', action='store_true')
    argp.add_argument('--samples', action='store_true')
    argp.add_argument('--tokens', action='store_true')
    argp.add_argument('--ast', action='store_true')
    argp.add_argument('--at', type=float, nargs='+', metavar='X')
    args = argp.parse_args(argv)

    try:
        _main(args)
        return 0
    except ExprError as e:
        if TRACE:
            import traceback

            traceback.print_exception(e)
        else:
            print(f'Error: {e}')
        return 1


if __name__ == "__main__":
    sys.exit(main())
