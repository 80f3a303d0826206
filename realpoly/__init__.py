"""Single-variable polynomials with real coefficients.

Important modules:
 - realpoly.terms: Term (coefficient * x^degree)
 - realpoly.polynomials: Polynomial, always kept in standard form
 - realpoly.roots: approximate real roots via Newton's method and deflation
 - realpoly.parse: reading polynomials from text
"""
