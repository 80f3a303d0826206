"""Approximate real root finding for Polynomials.

The algorithm finds one root at a time with Newton's method and then deflates
the polynomial: by the factor theorem, a root r of p means (x - r) divides p,
so the remaining roots are the roots of p / (x - r).  Recursion stops at a
linear polynomial, whose root is given by formula.

Only one root is found per degree, so repeated or closely spaced roots may be
missed or duplicated, and for polynomials with fewer real roots than their
degree the extra "roots" are whatever the last Newton iterate was.

The tuning constants are Options (see realpoly.opts) and can also be passed
to `real_roots` directly.
"""

import datetime
import math

from realpoly.common import InvalidArgument, is_close, round_half_away
from realpoly.logging import task, event
from realpoly.opts import Option
from realpoly.polynomials import Polynomial
from realpoly.terms import Term, EPSILON
from realpoly.timeouts import Timeout

convergence_tolerance = Option("epsilon", float, EPSILON,
    description="Newton's method stops once |p(x)| is below this value",
    metavar="E")
integer_rounding_threshold = Option("rounding-threshold", float, 1e-5,
    description="Roots this close to an integer are rounded to it",
    metavar="E")
iteration_limit = Option("max-iter", int, 1000,
    description="Maximum number of Newton iterations per root",
    metavar="N")
strict_convergence = Option("strict-convergence", bool, False,
    description="Raise an error instead of returning an unconverged root")

class ConvergenceFailure(ArithmeticError):
    """Newton's method did not reach the requested tolerance."""
    def __init__(self, poly, x, iterations):
        super().__init__("no convergence for {} after {} iterations (last iterate {!r})".format(
            poly, iterations, x))
        self.poly = poly
        self.x = x
        self.iterations = iterations

def initial_guess(derivative):
    """The first of 0, 1, 2, ... where the derivative does not vanish."""
    guess = 0.0
    while derivative.value_at(guess) == 0:
        guess += 1
    return guess

def newton(poly, guess, epsilon, max_iter, strict=False, timeout=None):
    """Run Newton's method on `poly` starting at `guess`.

    Returns the last iterate.  If it is not within `epsilon` of a root when
    iteration stops, this either raises ConvergenceFailure (strict) or
    returns the iterate anyway.
    """
    dp = poly.derivative()
    x = guess
    for i in range(max_iter):
        if timeout is not None:
            timeout.check()
        slope = dp.value_at(x)
        if slope == 0:
            event("derivative vanishes at x={!r}".format(x))
            break
        x = x - poly.value_at(x) / slope
        if not math.isfinite(x):
            event("iterate left the reals: x={!r}".format(x))
            break
        if is_close(poly.value_at(x), 0, epsilon):
            event("converged to x={!r} after {} iterations".format(x, i + 1))
            return x
    else:
        i = max_iter
    if strict:
        raise ConvergenceFailure(poly, x, i)
    event("no convergence; keeping x={!r}".format(x))
    return x

def snap_to_integer(x, threshold):
    if not math.isfinite(x):
        return x
    r = round_half_away(x)
    if is_close(x, r, threshold):
        return float(r)
    return x

def linear_root(poly):
    """The root of a*x + b."""
    return -poly.coefficient(0) / poly.leading_coefficient

def _real_roots(poly, epsilon, rounding_threshold, max_iter, strict, timeout):
    with task("real_roots", degree=poly.degree):
        if poly.degree == 0:
            if poly.is_zero():
                raise InvalidArgument("every real number is a root of the zero polynomial")
            return []
        if poly.degree == 1:
            return [linear_root(poly)]

        guess = initial_guess(poly.derivative())
        event("starting from x={!r}".format(guess))
        x = newton(poly, guess, epsilon, max_iter, strict=strict, timeout=timeout)
        snapped = snap_to_integer(x, rounding_threshold)
        if snapped != x:
            event("rounded {!r} to {!r}".format(x, snapped))
        x = snapped

        factor = Polynomial(Term(1, 1), Term(-x, 0))
        quotient = poly.divide(factor).quotient
        return [x] + _real_roots(quotient, epsilon, rounding_threshold, max_iter, strict, timeout)

def real_roots(poly, epsilon=None, rounding_threshold=None, max_iter=None, strict=None, timeout=None):
    """Approximate the real roots of `poly`, in ascending order.

    An unconverged search may leave an infinite or NaN "root"; NaNs come last.

    Arguments left as None take their value from the corresponding Option.
    `timeout` may be a datetime.timedelta or a Timeout; when it expires a
    realpoly.timeouts.TimeoutException is raised.
    """
    if isinstance(timeout, datetime.timedelta):
        timeout = Timeout(timeout)
    roots = _real_roots(
        poly,
        epsilon            = convergence_tolerance.value if epsilon is None else epsilon,
        rounding_threshold = integer_rounding_threshold.value if rounding_threshold is None else rounding_threshold,
        max_iter           = iteration_limit.value if max_iter is None else max_iter,
        strict             = strict_convergence.value if strict is None else strict,
        timeout            = timeout)
    # NaN sorts last
    return sorted(roots, key=lambda r: (math.isnan(r), r))
