"""
Expression tree nodes.

A tree owns its nodes outright: every node but the root has exactly one
parent, and nothing points back up.  Nodes are built bottom-up with
their children already in hand and are not changed afterwards.
"""

from lex import Token, NUMBER, PLUS, MINUS, STAR, SLASH


class Node:
    """
    Common base for expression tree nodes.

    Two trees are equal when they have the same shape, operators and
    literals.  Where tokens came from in the source text does not
    matter, so "1+2" and " 1 + 2 " parse to equal trees.
    """

    children = ()

    def __init__(self, token):
        assert isinstance(token, Token)
        self.token = token

    @property
    def text(self):
        return self.token.text

    def key(self):
        return (type(self).__name__, self.token.kind, self.token.text)

    def __eq__(self, other):
        if not isinstance(other, Node) or self.key() != other.key():
            return False
        return self.children == other.children

    def __hash__(self):
        return hash((self.key(), self.children))

    def depth(self):
        """
        Number of nodes on the longest path from this node to a leaf.
        """
        return 1 + max((child.depth() for child in self.children), default=0)

    def size(self):
        return 1 + sum(child.size() for child in self.children)


class Number(Node):
    """
    A number literal.  Leaf.
    """

    def __init__(self, token):
        super().__init__(token)
        assert token.kind == NUMBER

    def __repr__(self):
        return 'Number(%r)' % self.text


class Unary(Node):
    """
    A leading + or - applied to one operand.
    """

    def __init__(self, token, operand):
        super().__init__(token)
        assert token.kind in (PLUS, MINUS)
        assert isinstance(operand, Node)
        self.operand = operand
        self.children = (operand,)

    def __repr__(self):
        return 'Unary(%r, %r)' % (self.text, self.operand)


class Binary(Node):
    """
    An infix operator applied to a left and a right operand.
    """

    def __init__(self, token, left, right):
        super().__init__(token)
        assert token.kind in (PLUS, MINUS, STAR, SLASH)
        assert isinstance(left, Node) and isinstance(right, Node)
        self.left = left
        self.right = right
        self.children = (left, right)

    def __repr__(self):
        return 'Binary(%r, %r, %r)' % (self.text, self.left, self.right)
