"""Class for representing a single term c*x^d of a polynomial.

A Term is defined as a part of a Polynomial, such that the Polynomial is the
sum of its Terms.  The coefficient is a real number and the degree is a whole
number.  Terms are immutable: every operation produces a new Term.

Addition and subtraction are only defined between terms of the same degree.
Division is not offered, since the quotient of two terms is not always a
term; see Polynomial.divide.
"""

import math

from realpoly.common import InvalidArgument, is_close

# Absolute tolerance for comparing coefficients.
EPSILON = 1e-10

def power(base, n):
    """base ** n for a non-negative integer n.

    Float overflow gives a signed infinity instead of raising OverflowError.
    """
    try:
        return float(base) ** n
    except OverflowError:
        if base < 0 and n % 2 == 1:
            return -math.inf
        return math.inf

class Term(object):
    __slots__ = ("_coefficient", "_degree")

    def __init__(self, coefficient, degree):
        if isinstance(degree, bool) or not isinstance(degree, int):
            raise InvalidArgument("the degree of a term must be an integer, not {!r}".format(degree))
        if degree < 0:
            raise InvalidArgument("a term can only have a degree within the set of whole numbers (got {})".format(degree))
        self._coefficient = float(coefficient)
        self._degree = degree

    @property
    def coefficient(self):
        return self._coefficient

    @property
    def degree(self):
        return self._degree

    def value_at(self, x):
        """Evaluate the term at x."""
        return self._coefficient * power(x, self._degree)

    def derivative(self):
        if self._degree == 0:
            return Term.ZERO
        return Term(self._coefficient * self._degree, self._degree - 1)

    def negation(self):
        return Term(-self._coefficient, self._degree)

    def _check_like(self, other, what):
        if self._degree != other.degree:
            raise InvalidArgument("{} between terms is only defined for same-degree terms ({} vs {})".format(
                what, self._degree, other.degree))

    def add(self, other):
        self._check_like(other, "addition")
        return Term(self._coefficient + other.coefficient, self._degree)

    def subtract(self, other):
        self._check_like(other, "subtraction")
        return Term(self._coefficient - other.coefficient, self._degree)

    def multiply(self, other):
        return Term(self._coefficient * other.coefficient, self._degree + other.degree)

    def pow(self, n):
        return Term(power(self._coefficient, n), self._degree * n)

    def equals(self, other):
        """Degrees must match exactly; coefficients must agree within EPSILON."""
        return (self._degree == other.degree and
            is_close(self._coefficient, other.coefficient, EPSILON))

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return not self.equals(other)

    # Equality is approximate, so terms cannot be hashed consistently.
    __hash__ = None

    def __neg__(self):
        return self.negation()

    def __add__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.multiply(other)

    def __pow__(self, n):
        return self.pow(n)

    def __str__(self):
        if self._coefficient == 0:
            return "0"
        if self._degree == 0:
            return str(self._coefficient)
        return "({})x^{}".format(self._coefficient, self._degree)

    def __repr__(self):
        return "Term({!r}, {!r})".format(self._coefficient, self._degree)

Term.ZERO = Term(0, 0)
Term.ONE  = Term(1, 0)
Term.X    = Term(1, 1)
