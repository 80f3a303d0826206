"""Class for representing polynomials of one variable with real coefficients.

A Polynomial is an ordered collection of Terms that is always kept in
standard form:
 - terms are sorted by strictly descending degree,
 - there is at most one term per degree,
 - no term has a zero coefficient, except for the zero polynomial, which is
   represented by the single term 0*x^0.

Every constructor canonicalizes its input, and every operation returns a new
Polynomial built from raw terms.  Polynomials are never modified in place.

Important functions:
 - combine_like_terms: merge terms of equal degree
 - Polynomial.divide: long division, producing a PolyQuotientRemainder
 - Polynomial.real_roots: see realpoly.roots
"""

from collections import namedtuple
from functools import reduce
from itertools import groupby
import numbers

from realpoly.common import InvalidArgument, FrozenDict, is_close
from realpoly.terms import Term, EPSILON

def to_standard_form(terms):
    """Sort terms by descending degree."""
    return sorted(terms, key=lambda t: t.degree, reverse=True)

def combine_like_terms(terms):
    """Replace each run of same-degree terms with their sum.

    The input must already be in standard form; any number of terms may
    share a degree.
    """
    return [reduce(Term.add, group) for _, group in groupby(terms, key=lambda t: t.degree)]

def prune_zero_terms(terms):
    """Drop terms whose coefficient is exactly zero.

    Exact cancellation (e.g. 3 + -3) is common after combining like terms;
    near-zero coefficients are kept.  Returns [Term.ZERO] if nothing is left.
    """
    res = [t for t in terms if t.coefficient != 0]
    return res or [Term.ZERO]

def canonicalize(terms):
    return tuple(prune_zero_terms(combine_like_terms(to_standard_form(terms))))

class PolyQuotientRemainder(namedtuple("PolyQuotientRemainder", ["quotient", "remainder"])):
    """The result of Polynomial.divide."""
    __slots__ = ()
    def __str__(self):
        return "Q: {} R: {}".format(self.quotient, self.remainder)

class Polynomial(object):
    __slots__ = ("_terms", "_degree", "_leading_coefficient", "_leading_term")

    def __init__(self, *terms):
        """Build a polynomial from one or more Terms.

        Usage:
            Polynomial(Term(1, 2), Term(-4, 0))
            Polynomial([Term(1, 2), Term(-4, 0)])

        or from a leading coefficient and real roots (see from_roots):
            Polynomial(1.0, 2.0, 3.0)
        """
        if terms and isinstance(terms[0], numbers.Real):
            terms = Polynomial.from_roots(*terms).terms
        if len(terms) == 1 and not isinstance(terms[0], Term):
            try:
                terms = tuple(terms[0])
            except TypeError:
                raise InvalidArgument("expected terms, got {!r}".format(terms[0]))
        if not terms:
            raise InvalidArgument("a polynomial must have at least 1 term")
        for t in terms:
            if not isinstance(t, Term):
                raise InvalidArgument("not a term: {!r}".format(t))
        self._terms = canonicalize(terms)
        self._leading_term = self._terms[0]
        self._degree = self._leading_term.degree
        self._leading_coefficient = self._leading_term.coefficient

    @classmethod
    def from_roots(cls, leading_coefficient, *roots):
        """Build leading_coefficient * (x - r1) * (x - r2) * ..."""
        output = cls(Term(leading_coefficient, 0))
        for root in roots:
            output = output.multiply(cls(Term(1, 1), Term(-root, 0)))
        return output

    @classmethod
    def constant(cls, c):
        return cls(Term(c, 0))

    @property
    def terms(self):
        return self._terms

    @property
    def degree(self):
        return self._degree

    @property
    def leading_coefficient(self):
        return self._leading_coefficient

    @property
    def leading_term(self):
        return self._leading_term

    def term(self, index):
        return self._terms[index]

    def coefficient(self, degree):
        """The coefficient of x^degree (0.0 if there is no such term)."""
        for t in self._terms:
            if t.degree == degree:
                return t.coefficient
        return 0.0

    def coefficients(self):
        """A FrozenDict mapping each degree present to its coefficient."""
        return FrozenDict([(t.degree, t.coefficient) for t in self._terms])

    def is_zero(self):
        return self._leading_coefficient == 0

    def add_term(self, term):
        """Return a new polynomial with `term` added in."""
        return Polynomial(self._terms + (term,))

    def remove_term(self, index):
        """Return a new polynomial without the term at position `index`."""
        terms = list(self._terms)
        del terms[index]
        return Polynomial(terms or [Term.ZERO])

    def value_at(self, x):
        return sum(t.value_at(x) for t in self._terms)

    def derivative(self):
        return Polynomial([t.derivative() for t in self._terms])

    def negation(self):
        return Polynomial([t.negation() for t in self._terms])

    def add(self, other):
        return Polynomial(self._terms + other.terms)

    def subtract(self, other):
        return Polynomial(self._terms + other.negation().terms)

    def multiply(self, other):
        return Polynomial([t1.multiply(t2) for t1 in self._terms for t2 in other.terms])

    def pow(self, n):
        """Raise to a non-negative integer power by repeated multiplication."""
        if n < 0:
            raise InvalidArgument("polynomials can only be raised to non-negative powers (got {})".format(n))
        if n == 0:
            return Polynomial.ONE
        result = self
        for i in range(1, n):
            result = result.multiply(self)
        return result

    def divide(self, divisor):
        """Polynomial long division.

        Returns a PolyQuotientRemainder (quotient, remainder) such that
        self = divisor * quotient + remainder, where the remainder is zero or
        has a lower degree than the divisor.
        """
        if divisor.is_zero():
            raise ZeroDivisionError("polynomial division by zero")
        quotient_terms = []
        dividend = self
        while not dividend.is_zero() and dividend.degree >= divisor.degree:
            factor = Term(
                dividend.leading_coefficient / divisor.leading_coefficient,
                dividend.degree - divisor.degree)
            quotient_terms.append(factor)
            difference = dividend.subtract(divisor.multiply(Polynomial(factor)))
            # The leading terms cancel by construction; rounding may leave
            # a residue at that degree, which must not survive.
            dividend = Polynomial([t for t in difference.terms if t.degree != dividend.degree] or [Term.ZERO])
        quotient = Polynomial(quotient_terms) if quotient_terms else Polynomial.ZERO
        return PolyQuotientRemainder(quotient, dividend)

    def equals(self, other):
        """Are the two polynomials equal, coefficient-wise within EPSILON?"""
        mine = self.coefficients()
        theirs = other.coefficients()
        if set(mine.keys()) != set(theirs.keys()):
            return False
        return all(is_close(c, theirs[d], EPSILON) for d, c in mine.items())

    def real_roots(self, **kwargs):
        """Approximate real roots in ascending order.

        Keyword arguments are passed on to realpoly.roots.real_roots.
        """
        from realpoly.roots import real_roots
        return real_roots(self, **kwargs)

    @staticmethod
    def _coerce(other):
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, numbers.Real):
            return Polynomial.constant(other)
        return None

    def __eq__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return not self.equals(other)

    # Equality is approximate, so polynomials cannot be hashed consistently.
    __hash__ = None

    def __add__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = Polynomial._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negation()

    def __pow__(self, n):
        return self.pow(n)

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other)

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other).quotient

    def __mod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other).remainder

    def __call__(self, x):
        return self.value_at(x)

    def __str__(self):
        return " + ".join(str(t) for t in self._terms)

    def __repr__(self):
        return "Polynomial({!r})".format(list(self._terms))

Polynomial.ZERO = Polynomial(Term.ZERO)
Polynomial.ONE  = Polynomial(Term.ONE)
Polynomial.X    = Polynomial(Term.X)
