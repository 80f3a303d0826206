import math
import unittest

from realpoly.common import InvalidArgument
from realpoly.terms import Term, EPSILON

class TestTerms(unittest.TestCase):

    def test_negative_degree(self):
        with self.assertRaises(InvalidArgument):
            Term(1, -1)

    def test_non_integer_degree(self):
        with self.assertRaises(InvalidArgument):
            Term(1, 1.5)
        with self.assertRaises(InvalidArgument):
            Term(1, True)

    def test_coefficient_is_float(self):
        t = Term(3, 2)
        self.assertIsInstance(t.coefficient, float)
        self.assertEqual(t.degree, 2)

    def test_immutable(self):
        t = Term(3, 2)
        with self.assertRaises(AttributeError):
            t.coefficient = 4
        with self.assertRaises(AttributeError):
            t.degree = 1

    def test_value_at(self):
        self.assertEqual(Term(3, 2).value_at(2), 12)
        self.assertEqual(Term(-1, 3).value_at(-2), 8)
        self.assertEqual(Term(5, 0).value_at(0), 5)

    def test_value_at_overflow(self):
        self.assertEqual(Term(1, 400).value_at(1e10), math.inf)
        self.assertEqual(Term(1, 401).value_at(-1e10), -math.inf)
        self.assertEqual(Term(-2, 400).value_at(-1e10), -math.inf)
        self.assertEqual(Term(3, 400).value_at(1e-10), 0.0)

    def test_derivative(self):
        self.assertEqual(Term(3, 2).derivative(), Term(6, 1))
        self.assertEqual(Term(7, 1).derivative(), Term(7, 0))
        self.assertEqual(Term(5, 0).derivative(), Term(0, 0))

    def test_negation(self):
        self.assertEqual(Term(3, 2).negation(), Term(-3, 2))
        self.assertEqual(-Term(-3, 2), Term(3, 2))

    def test_add_same_degree(self):
        self.assertEqual(Term(2, 3).add(Term(5, 3)), Term(7, 3))
        self.assertEqual(Term(2, 3) - Term(5, 3), Term(-3, 3))

    def test_add_different_degree(self):
        with self.assertRaises(InvalidArgument):
            Term(2, 3).add(Term(5, 2))
        with self.assertRaises(InvalidArgument):
            Term(2, 3).subtract(Term(5, 2))

    def test_multiply(self):
        self.assertEqual(Term(2, 3).multiply(Term(-4, 2)), Term(-8, 5))
        self.assertEqual(Term(2, 0) * Term(3, 0), Term(6, 0))

    def test_pow(self):
        self.assertEqual(Term(2, 3).pow(3), Term(8, 9))
        self.assertEqual(Term(-2, 1) ** 2, Term(4, 2))
        self.assertEqual(Term(5, 4).pow(0), Term(1, 0))

    def test_pow_overflow(self):
        self.assertEqual(Term(1e200, 1).pow(2).coefficient, math.inf)
        self.assertEqual(Term(-1e200, 1).pow(3).coefficient, -math.inf)

    def test_equality_tolerance(self):
        self.assertEqual(Term(1, 2), Term(1 + EPSILON / 10, 2))
        self.assertNotEqual(Term(1, 2), Term(1 + EPSILON * 10, 2))
        self.assertNotEqual(Term(1, 2), Term(1, 3))

    def test_equality_with_other_types(self):
        self.assertFalse(Term(1, 0) == 1)
        self.assertTrue(Term(1, 0) != "1")

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Term(1, 1))

    def test_str(self):
        self.assertEqual(str(Term(0, 5)), "0")
        self.assertEqual(str(Term(4, 0)), "4.0")
        self.assertEqual(str(Term(-2.5, 3)), "(-2.5)x^3")

    def test_repr(self):
        self.assertEqual(repr(Term(1, 2)), "Term(1.0, 2)")
