"""Parser for polynomial expressions.

Expressions are sums and differences of monomials of the form

    [coefficient][x[^degree]]

for example "3x^2 - x + 4" or "(1.0)x^2 + (-5.0)x^1 + 6.0" (the format that
`str(Polynomial)` produces).  An omitted coefficient means 1, "x" without an
exponent means degree 1, and a monomial without "x" is a constant.

The important functions are:
 - parse_term:       str -> Term
 - parse_terms:      str -> [Term]
 - parse_polynomial: str -> Polynomial
"""

# builtin
import re

# 3rd party
from ply import lex, yacc

# ours
from realpoly.logging import task, event
from realpoly.polynomials import Polynomial
from realpoly.terms import Term

class PolynomialSyntaxError(ValueError):
    pass

class NumericParseError(ValueError):
    pass

# Each operator has a name and a syntax.  Each becomes an OP_* token for the
# lexer.  So, e.g. ("PLUS", "+") matches "+" and the token will be named
# OP_PLUS.
_OPERATORS = [
    ("PLUS", "+"),
    ("MINUS", "-"),
    ("CARET", "^"),
    ("OPEN_PAREN", "("),
    ("CLOSE_PAREN", ")"),
    ]

# Lexer ########################################################################

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

# Enumerate token names
tokens = []
for opname, op in _OPERATORS:
    tokens.append(op_token_name(opname))
tokens += ["VAR", "NUM"]
tokens = tuple(tokens) # freeze tokens

def to_float(text):
    try:
        return float(text)
    except ValueError:
        raise NumericParseError("malformed coefficient {!r}".format(text))

def to_degree(text):
    if not re.fullmatch(r"\d+", text):
        raise NumericParseError("malformed degree {!r}".format(text))
    return int(text)

def make_lexer():

    # ply discovers token rules by looking at all in-scope variables (either
    # functions with regexes for docstring or plain old regex strings).
    t_OP_PLUS        = re.escape("+")
    t_OP_MINUS       = re.escape("-")
    t_OP_CARET       = re.escape("^")
    t_OP_OPEN_PAREN  = re.escape("(")
    t_OP_CLOSE_PAREN = re.escape(")")
    t_VAR            = r"[xX]"

    def t_NUM(t):
        r"[0-9.]+([eE][-+]?[0-9]+)?"
        # Kept as text: whether this is a coefficient or a degree depends on
        # where it appears.
        return t

    t_ignore = ' \t\r\n'

    def t_error(t):
        raise PolynomialSyntaxError("illegal character {!r} at position {}".format(t.value[0], t.lexpos))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def make_parser():
    start = "terms"

    def p_terms(p):
        """terms : term
                 | terms OP_PLUS term
                 | terms OP_MINUS term"""
        if len(p) == 2:
            p[0] = (p[1],)
        elif p[2] == "+":
            p[0] = p[1] + (p[3],)
        else:
            p[0] = p[1] + (p[3].negation(),)

    def p_term(p):
        """term : coefficient
                | coefficient power
                | power
                | OP_MINUS power
                | OP_PLUS power"""
        if len(p) == 2:
            if isinstance(p[1], float):
                p[0] = Term(p[1], 0)
            else:
                p[0] = Term(1, p[1])
        elif isinstance(p[1], float):
            p[0] = Term(p[1], p[2])
        else:
            p[0] = Term(-1 if p[1] == "-" else 1, p[2])

    def p_coefficient(p):
        """coefficient : number
                       | OP_OPEN_PAREN number OP_CLOSE_PAREN"""
        p[0] = p[1] if len(p) == 2 else p[2]

    def p_number(p):
        """number : NUM
                  | OP_MINUS NUM
                  | OP_PLUS NUM"""
        if len(p) == 2:
            p[0] = to_float(p[1])
        elif p[1] == "-":
            p[0] = -to_float(p[2])
        else:
            p[0] = to_float(p[2])

    def p_power(p):
        """power : VAR
                 | VAR OP_CARET NUM"""
        p[0] = 1 if len(p) == 2 else to_degree(p[3])

    def p_error(p):
        if p is None:
            raise PolynomialSyntaxError("unexpected end of input")
        raise PolynomialSyntaxError("unexpected {!r} at position {}".format(p.value, p.lexpos))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_terms(s : str) -> list:
    """Parse a string as a list of Terms, in the order they were written."""
    if not isinstance(s, str):
        raise TypeError("expected a string, not {}".format(type(s).__name__))
    with task("parse", text=s):
        terms = list(_parser.parse(s, lexer=_lexer.clone()))
        event("read {} terms".format(len(terms)))
        return terms

def parse_term(s : str) -> Term:
    """Parse a string holding exactly one monomial."""
    terms = parse_terms(s)
    if len(terms) != 1:
        raise PolynomialSyntaxError("expected a single term, found {} in {!r}".format(len(terms), s))
    return terms[0]

def parse_polynomial(s : str) -> Polynomial:
    """Parse a string as a (canonicalized) Polynomial."""
    return Polynomial(parse_terms(s))
