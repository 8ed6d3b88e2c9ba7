import unittest
import json

from lex import Lexer, LexError, EOF, RPAREN, STAR, SLASH
from ops import ASSIGNMENT, TERM, FACTOR, UNARY
from parse import Parser, ParseError, UnexpectedTokenError, \
    UnclosedGroupError, TrailingInputError, parse
from printer import to_prefix
from tree import Node, Number, Unary, Binary

class ParseTreeEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, Node):
            if not o.children:
                return o.text
            return [o.text] + list(o.children)
        return json.JSONEncoder.default(self, o)


class ParseTest(unittest.TestCase):
    def assert_tree(self, source_text, want):
        parse_tree = parse(source_text)
        got = json.loads(json.dumps(parse_tree, cls=ParseTreeEncoder))
        self.assertEqual(got, want)

    def assert_prefix(self, source_text, want):
        self.assertEqual(want, to_prefix(parse(source_text)))

    def test_number(self):
        self.assert_tree('1', '1')
        self.assert_tree('  0042\n', '0042')

    def test_precedence(self):
        self.assert_tree('1 + 2 * 3', ['+', '1', ['*', '2', '3']])
        self.assert_tree('1 * 2 + 3', ['+', ['*', '1', '2'], '3'])
        self.assert_tree('(1 + 2) * 3', ['*', ['+', '1', '2'], '3'])
        self.assert_prefix(
            '1 + 2 * 3 - 4 / 5', '(- (+ 1 (* 2 3)) (/ 4 5))')

    def test_left_associative(self):
        self.assert_tree('1 - 2 - 3', ['-', ['-', '1', '2'], '3'])
        self.assert_tree('8 / 4 / 2', ['/', ['/', '8', '4'], '2'])
        self.assert_prefix('1 + 2 - 3 + 4', '(+ (- (+ 1 2) 3) 4)')
        self.assert_prefix('1 * 2 / 3 * 4', '(* (/ (* 1 2) 3) 4)')

    def test_parens_override_associativity(self):
        self.assert_tree('1 - (2 - 3)', ['-', '1', ['-', '2', '3']])

    def test_unary(self):
        self.assert_tree('-1 + 2', ['+', ['-', '1'], '2'])
        self.assert_tree('--1', ['-', ['-', '1']])
        self.assert_tree('+-+1', ['+', ['-', ['+', '1']]])
        self.assert_prefix('-2 * -3', '(* (- 2) (- 3))')
        self.assert_prefix('1 - -1', '(- 1 (- 1))')
        self.assert_prefix('-(1 + 2)', '(- (+ 1 2))')

    def test_redundant_parens(self):
        self.assert_tree('(((0)))', '0')
        self.assert_tree('((1) + (2))', ['+', '1', '2'])

    def test_whitespace_insensitive(self):
        self.assertEqual(parse('1+2'), parse(' 1 + 2 '))
        self.assertEqual(parse('(1+2)*3'), parse('\t( 1\n+ 2 )\r\n* 3'))
        self.assertNotEqual(parse('1+2'), parse('1-2'))
        self.assertNotEqual(parse('1+2'), parse('12'))

    def test_node_types(self):
        root = parse('-1 * 2')
        self.assertIsInstance(root, Binary)
        self.assertIsInstance(root.left, Unary)
        self.assertIsInstance(root.left.operand, Number)
        self.assertIsInstance(root.right, Number)
        self.assertEqual(3, root.depth())
        self.assertEqual(4, root.size())

    def test_tokens_keep_source_positions(self):
        root = parse('10 + 20')
        self.assertEqual((3, 4), (root.token.left, root.token.right))
        self.assertEqual((5, 7), (root.right.token.left, root.right.token.right))

    def test_reprinting_is_stable(self):
        root = parse('1 - -(2 * 3) / 4')
        first = to_prefix(root)
        self.assertEqual(first, to_prefix(root))
        self.assertEqual('(- 1 (/ (- (* 2 3)) 4))', first)

    def test_dangling_operator(self):
        with self.assertRaises(UnexpectedTokenError) as cm:
            parse('1 + ')
        self.assertEqual(EOF, cm.exception.token.kind)
        self.assertEqual('Unexpected token: end of input', str(cm.exception))

    def test_empty(self):
        with self.assertRaises(UnexpectedTokenError):
            parse('')
        with self.assertRaises(UnexpectedTokenError):
            parse('  ')

    def test_bad_leading_tokens(self):
        for inp, kind in (('*1', STAR), (')', RPAREN), ('1 + / 2', SLASH),
                          ('()', RPAREN)):
            with self.assertRaises(UnexpectedTokenError) as cm:
                parse(inp)
            self.assertEqual(kind, cm.exception.token.kind)

    def test_unclosed_group(self):
        with self.assertRaises(UnclosedGroupError) as cm:
            parse('(1 + 2')
        self.assertEqual(EOF, cm.exception.token.kind)
        self.assertEqual(0, cm.exception.open_token.left)
        self.assertEqual("Expected ')' but got end of input",
                         str(cm.exception))
        with self.assertRaises(UnclosedGroupError):
            parse('((1) 2)')

    def test_trailing_input(self):
        for inp in ('1 2', '1)', '(1))', '1 + 2 (3)'):
            with self.assertRaises(TrailingInputError):
                parse(inp)

    def test_errors_share_a_base(self):
        for inp in ('1 +', '(1', '1 1'):
            with self.assertRaises(ParseError):
                parse(inp)

    def test_lex_errors_propagate(self):
        with self.assertRaises(LexError):
            parse('1 + x')
        with self.assertRaises(LexError):
            parse('(1 + 2) % 3')


class ParseExpressionTest(unittest.TestCase):
    def parse_at(self, source_text, min_prec):
        lexer = Lexer(source_text)
        root = Parser(lexer).parse_expression(min_prec)
        return root, lexer.next_token()

    def test_stops_at_same_precedence(self):
        root, rest = self.parse_at('2 * 3 * 4', FACTOR)
        self.assertEqual('2', to_prefix(root))
        self.assertEqual('*', rest.text)

    def test_takes_tighter_operators(self):
        root, rest = self.parse_at('2 * 3 + 4', TERM)
        self.assertEqual('(* 2 3)', to_prefix(root))
        self.assertEqual('+', rest.text)

    def test_unary_level_takes_no_infix(self):
        root, rest = self.parse_at('-2 * 3', UNARY)
        self.assertEqual('(- 2)', to_prefix(root))
        self.assertEqual('*', rest.text)

    def test_leaves_trailing_tokens(self):
        root, rest = self.parse_at('1 + 2 )', ASSIGNMENT)
        self.assertEqual('(+ 1 2)', to_prefix(root))
        self.assertEqual(RPAREN, rest.kind)

if __name__ == '__main__':
    unittest.main()
