"""
A precedence climbing parser for arithmetic expressions.
"""

import logging

from lex import ExpressionError, Lexer, NUMBER, LPAREN, RPAREN, EOF
from ops import lookup_operator, binary_precedence, \
    NONE, ASSIGNMENT, PREFIX, PRECEDENCE_NAMES
from tree import Number, Unary, Binary

logger = logging.getLogger(__name__)


class ParseError(ExpressionError):
    """
    A well-formed token in a place the grammar does not allow it.
    """

    def __init__(self, msg, token):
        super().__init__(msg)
        self.token = token


class UnexpectedTokenError(ParseError):
    """
    A token that cannot start an expression: ')', '*', '/' or the end
    of input.
    """

    def __init__(self, token):
        super().__init__('Unexpected token: %s' % token, token)


class UnclosedGroupError(ParseError):
    """
    A '(' whose expression is not followed by ')'.
    """

    def __init__(self, open_token, token):
        super().__init__("Expected ')' but got %s" % token, token)
        self.open_token = open_token


class TrailingInputError(ParseError):
    """
    A complete expression followed by something other than end of input.
    """

    def __init__(self, token):
        super().__init__(
            'Unexpected token after expression: %s' % token, token)


class Parser:
    """
    Pulls tokens from a Lexer and builds an expression tree.
    """

    def __init__(self, lexer):
        assert isinstance(lexer, Lexer)
        self.lexer = lexer

    def parse(self):
        """
        Parses a whole expression and checks that nothing follows it.
        """
        root = self.parse_expression(ASSIGNMENT)
        token = self.lexer.next_token()
        if token.kind != EOF:
            raise TrailingInputError(token)
        return root

    def parse_expression(self, min_prec):
        """
        Parses the longest expression starting at the next token whose
        infix operators all bind more tightly than min_prec.

        An infix operator whose precedence equals min_prec is left for
        the caller, which is what makes a - b - c group as (a - b) - c.
        """
        lexer = self.lexer
        token = lexer.next_token()
        kind = token.kind

        if kind == NUMBER:
            left = Number(token)
        elif kind == LPAREN:
            left = self.parse_expression(ASSIGNMENT)
            close = lexer.next_token()
            if close.kind != RPAREN:
                raise UnclosedGroupError(token, close)
        else:
            operator = lookup_operator(kind, PREFIX)
            if operator is None:
                raise UnexpectedTokenError(token)
            left = Unary(token, self.parse_expression(operator.prec))

        while True:
            token = lexer.next_token()
            prec = binary_precedence(token)
            if prec == NONE or prec <= min_prec:
                logger.debug(
                    'stop at %r: binds at %s, need more than %s',
                    token, PRECEDENCE_NAMES[prec],
                    PRECEDENCE_NAMES[min_prec])
                lexer.unread(token)
                return left
            right = self.parse_expression(prec)
            left = Binary(token, left, right)
            logger.debug('folded %r', left)


def parse(source_text):
    """
    Given an expression's source text, returns the root of its tree.

    Raises LexError or a ParseError on the first problem found.
    """
    return Parser(Lexer(source_text)).parse()
