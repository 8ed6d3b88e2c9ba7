"""
Defines operators for arithmetic expressions, and their precedences.
"""

from lex import PLUS, MINUS, STAR, SLASH

## Precedence levels, loosest binding first.

NONE = 0
ASSIGNMENT = 1  # Unused by any operator; the floor for a whole expression.
TERM = 2        # + -
FACTOR = 3      # * /
UNARY = 4       # leading + -
PRIMARY = 5     # numbers and parenthesized groups

PRECEDENCE_NAMES = {
    NONE: 'NONE',
    ASSIGNMENT: 'ASSIGNMENT',
    TERM: 'TERM',
    FACTOR: 'FACTOR',
    UNARY: 'UNARY',
    PRIMARY: 'PRIMARY',
}

INFIX = 'INFIX'
PREFIX = 'PREFIX'


class Operator:
    """
    Information about an arithmetic operator.

    All infix operators associate to the left.  The parser gets that
    from comparing precedences with <=, so there is no associativity
    field.
    """
    def __init__(self, kind, fixity, prec):
        self.kind = kind
        self.fixity = fixity
        self.prec = prec

    def __str__(self):
        return 'Operator(%s, %s)' % (self.kind, self.fixity)

    def __repr__(self):
        return 'Operator(%r, %r, %s)' % (
            self.kind, self.fixity, PRECEDENCE_NAMES[self.prec])


OPERATORS = (
    Operator(PLUS, INFIX, TERM),
    Operator(MINUS, INFIX, TERM),

    Operator(STAR, INFIX, FACTOR),
    Operator(SLASH, INFIX, FACTOR),

    Operator(PLUS, PREFIX, UNARY),
    Operator(MINUS, PREFIX, UNARY),
)


def init():
    """
    Defines a scope for side-tables for operator functions.
    """
    by_key = {}
    for operator in OPERATORS:
        key = (operator.kind, operator.fixity)
        assert key not in by_key, key
        by_key[key] = operator

    def lookup_operator(kind, fixity):
        """
        The operator for the given token kind and fixity, or None.
        """
        return by_key.get((kind, fixity))

    def binary_precedence(token):
        """
        How tightly token binds as an infix operator, or NONE if it
        cannot continue an expression.
        """
        operator = by_key.get((token.kind, INFIX))
        return operator.prec if operator is not None else NONE

    return lookup_operator, binary_precedence

lookup_operator, binary_precedence = init()
