"""
Renders expression trees in fully parenthesized prefix form, and reads
that form back.

    1 + 2 * 3   ->   (+ 1 (* 2 3))
    -1          ->   (- 1)
"""

from lex import Lexer, EOF, NUMBER, LPAREN, RPAREN, PLUS, MINUS, STAR, SLASH
from parse import ParseError, UnexpectedTokenError, UnclosedGroupError, \
    TrailingInputError
from tree import Number, Unary, Binary

OPERATOR_KINDS = (PLUS, MINUS, STAR, SLASH)


class OperandCountError(ParseError):
    """
    An operator with a number of operands it does not take, as in
    (* 1) or (+).
    """

    def __init__(self, op, count):
        super().__init__(
            'Wrong number of operands for %s: %d' % (op, count), op)
        self.count = count


def to_prefix(node):
    """
    The prefix form of the tree rooted at node.
    """
    if isinstance(node, Number):
        return node.text
    if isinstance(node, Unary):
        return '(%s %s)' % (node.text, to_prefix(node.operand))
    if isinstance(node, Binary):
        return '(%s %s %s)' % (
            node.text, to_prefix(node.left), to_prefix(node.right))
    raise TypeError('not an expression node: %r' % (node,))


def read_prefix(prefix_text):
    """
    Given text produced by to_prefix, returns a tree equal to the one
    that was printed.

    A parenthesized operator with one operand reads as a Unary; with
    two it reads as a Binary.  Only + and - may have one operand.
    """
    lexer = Lexer(prefix_text)
    root = read_node(lexer)
    token = lexer.next_token()
    if token.kind != EOF:
        raise TrailingInputError(token)
    return root


def read_node(lexer):
    token = lexer.next_token()
    if token.kind == NUMBER:
        return Number(token)
    if token.kind != LPAREN:
        raise UnexpectedTokenError(token)

    op = lexer.next_token()
    if op.kind not in OPERATOR_KINDS:
        raise UnexpectedTokenError(op)

    operands = []
    while True:
        token = lexer.peek()
        if token.kind == RPAREN:
            lexer.next_token()
            break
        if token.kind not in (NUMBER, LPAREN) or len(operands) == 2:
            lexer.next_token()
            raise UnclosedGroupError(op, token)
        operands.append(read_node(lexer))

    if len(operands) == 2:
        return Binary(op, operands[0], operands[1])
    if len(operands) == 1 and op.kind in (PLUS, MINUS):
        return Unary(op, operands[0])
    raise OperandCountError(op, len(operands))
