"""
Command line front end: reads an expression and prints its prefix form.

    $ echo '1 + 2 * 3' > expr.txt
    $ precparse expr.txt
    Input:
    1 + 2 * 3
    Parsed expression:
    (+ 1 (* 2 3))
"""

import argparse
import logging
import sys

from lex import ExpressionError, lex
from parse import parse
from printer import to_prefix

logger = logging.getLogger(__name__)


def make_arg_parser():
    ap = argparse.ArgumentParser(
        prog='precparse',
        description='Parse an arithmetic expression and print it in '
                    'fully parenthesized prefix form.')
    source = ap.add_mutually_exclusive_group()
    source.add_argument(
        'file', nargs='?', default=None,
        help="File holding the expression; '-' or nothing reads stdin")
    source.add_argument(
        '-e', '--expr', help='Parse the given expression text')
    ap.add_argument(
        '-t', '--tokens', action='store_true',
        help='Print the token stream before parsing')
    ap.add_argument(
        '-q', '--quiet', action='store_true',
        help='Print only the parsed expression')
    ap.add_argument(
        '-v', '--verbose', action='store_true',
        help='Log parser steps to stderr')
    return ap


def read_source(args, stdin):
    if args.expr is not None:
        return args.expr
    if args.file is None or args.file == '-':
        return stdin.read()
    with open(args.file, encoding='utf-8') as source_file:
        return source_file.read()


def main(argv=None, stdin=None, stdout=None, stderr=None):
    """
    Runs the command line tool, returning its exit status.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = make_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=stderr,
        force=True)

    try:
        source_text = read_source(args, stdin)
    except OSError as e:
        print('Failed to open file: %s' % e, file=stderr)
        return 1
    except UnicodeDecodeError as e:
        print('Failed to decode input: %s' % e, file=stderr)
        return 1
    logger.debug('read %d characters', len(source_text))

    if not args.quiet:
        print('Input:', file=stdout)
        print(source_text, file=stdout)

    try:
        if args.tokens:
            for token in lex(source_text):
                print('%s %r %d:%d' % (
                    token.kind, token.text, token.left, token.right),
                    file=stdout)
        root = parse(source_text)
    except ExpressionError as e:
        print('error: %s' % e, file=stderr)
        return 1

    if not args.quiet:
        print('Parsed expression:', file=stdout)
    print(to_prefix(root), file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
