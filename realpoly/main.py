#!/usr/bin/env python

"""
Main entry point for the realpoly tool. Run with --help for options.
"""

import sys
import argparse
import datetime

from realpoly import common
from realpoly import opts
from realpoly import parse
from realpoly import roots
from realpoly.logging import dump_profile
from realpoly.timeouts import TimeoutException

profile_path = opts.Option("profile", str, "", description="Write task timings to this file", metavar="PATH")

def report(p, args):
    """Yield the output lines requested by `args` for the polynomial p."""
    yield "p(x) = {}".format(p)
    yield "degree = {}".format(p.degree)
    if args.derivative:
        yield "p'(x) = {}".format(p.derivative())
    if args.power is not None:
        yield "p(x)^{} = {}".format(args.power, p.pow(args.power))
    for x in args.at:
        yield "p({}) = {}".format(x, p.value_at(x))
    if args.divide is not None:
        divisor = parse.parse_polynomial(args.divide)
        yield "p(x) / ({}) = {}".format(divisor, p.divide(divisor))
    if args.roots:
        rs = roots.real_roots(p, timeout=args.timeout)
        yield "roots = [{}]".format(", ".join(repr(r) for r in rs))

def run(argv=None):
    """Entry point for the realpoly executable.

    This procedure reads argv (default: sys.argv) and executes the requested
    tasks.  Returns the process exit status.
    """

    parser = argparse.ArgumentParser(description='Polynomial arithmetic and real root finding.')
    parser.add_argument("expression", nargs="?", default=None, help="Polynomial, e.g. \"x^2 - 5x + 6\" (omit to read stdin)")
    parser.add_argument("-d", "--derivative", action="store_true", help="Print the derivative")
    parser.add_argument("-r", "--roots", action="store_true", help="Print the approximate real roots")
    parser.add_argument("--divide", metavar="DIVISOR", default=None, help="Divide by another polynomial")
    parser.add_argument("--power", metavar="N", type=int, default=None, help="Raise to the N-th power")
    parser.add_argument("--at", metavar="X", type=float, action="append", default=[], help="Evaluate at X (may be repeated)")
    parser.add_argument("-t", "--timeout", metavar="SECONDS", type=float, default=None, help="Give up on root finding after this many seconds")
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout")

    internal_opts = parser.add_argument_group("Tuning parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)
    if args.timeout is not None:
        args.timeout = datetime.timedelta(seconds=args.timeout)

    if args.expression is None:
        with common.open_maybe_stdin("-") as f:
            args.expression = f.read()

    try:
        p = parse.parse_polynomial(args.expression)
        lines = list(report(p, args))
    except (ValueError, ArithmeticError, TimeoutException) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    finally:
        if profile_path.value:
            dump_profile(profile_path.value)

    with common.open_maybe_stdout(args.output) as out:
        for line in lines:
            out.write(line + "\n")
    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
