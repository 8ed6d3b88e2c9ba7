"""
A lexer for arithmetic expressions.
"""

import re

## Token kinds

EOF = 'EOF'
NUMBER = 'NUMBER'
PLUS = 'PLUS'
MINUS = 'MINUS'
STAR = 'STAR'
SLASH = 'SLASH'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'

PUNCTUATORS = {
    '+': PLUS,
    '-': MINUS,
    '*': STAR,
    '/': SLASH,
    '(': LPAREN,
    ')': RPAREN,
}

WHITESPACE = ' \t\n\r'

# Only ASCII digits; str.isdigit() would accept things like '²'.
NUMBER_PATTERN = re.compile(r'[0-9]+')


class ExpressionError(Exception):
    """
    Base for everything that can go wrong turning text into a tree.
    """


class LexError(ExpressionError):
    """
    Raised on a character that starts no token.
    """

    def __init__(self, char, pos):
        super().__init__('Unexpected character: %s' % char)
        self.char = char
        self.pos = pos


class Token:
    """
    A source text token and metadata

    text is the lexeme, and left and right are offsets into the
    source text such that source_text[left:right] == text.
    """

    def __init__(self, kind, text, left, right):
        assert isinstance(kind, str)
        assert isinstance(text, str)
        assert isinstance(left, int) and isinstance(right, int)
        assert left <= right
        assert right - left == len(text)

        self.kind = kind
        self.text = text
        self.left = left
        self.right = right

    def __eq__(self, other):
        return (isinstance(other, Token)
                and self.kind == other.kind
                and self.text == other.text
                and self.left == other.left
                and self.right == other.right)

    def __hash__(self):
        return hash((self.kind, self.text, self.left, self.right))

    def __str__(self):
        return self.text if self.kind != EOF else 'end of input'

    def __repr__(self):
        return 'Token(%s, %r, %d, %d)' % (
            self.kind, self.text, self.left, self.right)


class Lexer:
    """
    Produces tokens on demand from a source text.

    The parser gets one token of lookahead by handing the last token it
    read back to unread().  The read position itself only ever moves
    forward.
    """

    def __init__(self, source_text):
        assert isinstance(source_text, str)
        self.source_text = source_text
        self.pos = 0
        self.pushed_back = None

    def skip_whitespace(self):
        source_text = self.source_text
        n = len(source_text)
        pos = self.pos
        while pos < n and source_text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def next_token(self):
        """
        The next token, skipping any leading whitespace.

        Returns an EOF token at the end of input, and keeps doing so
        however often it is asked.
        """
        if self.pushed_back is not None:
            token = self.pushed_back
            self.pushed_back = None
            return token

        self.skip_whitespace()
        source_text = self.source_text
        pos = self.pos

        if pos >= len(source_text):
            return Token(EOF, '', pos, pos)

        char = source_text[pos]
        kind = PUNCTUATORS.get(char)
        if kind is not None:
            token = Token(kind, char, pos, pos + 1)
        else:
            match = NUMBER_PATTERN.match(source_text, pos)
            if match is None:
                raise LexError(char, pos)
            token = Token(NUMBER, match.group(0), pos, match.end())

        self.pos = token.right
        return token

    def unread(self, token):
        """
        Puts back the token most recently returned by next_token so that
        the next call returns it again.
        """
        assert self.pushed_back is None, 'only one token of pushback'
        self.pushed_back = token

    def peek(self):
        token = self.next_token()
        self.unread(token)
        return token


def lex(source_text):
    """
    Tokenizes an expression.

    Yields every token in order, ending with exactly one EOF token.
    """
    lexer = Lexer(source_text)
    while True:
        token = lexer.next_token()
        yield token
        if token.kind == EOF:
            break
