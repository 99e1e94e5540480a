from monkeyc.lexer import Lexer, SourceCode
from monkeyc.errors import CompilerError
import argparse
import logging
import sys


lexer = argparse.ArgumentParser(
    description='Print the tokens of a source file, one per line',
    prog='python -m monkeyc.lexer'
)

lexer.add_argument(
    'input',
    help="the source file to tokenize ('-' for stdin)"
)

lexer.add_argument(
    '--trace', help='log each identifier as it is scanned',
    action='store_true'
)


def main(argv=None):
    args = lexer.parse_args(argv)
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if args.input == '-':
            source = SourceCode.from_string(sys.stdin.read(), '<stdin>')
        else:
            source = SourceCode.from_file(args.input)
    except OSError as err:
        lexer.error(str(err))

    try:
        for tok in Lexer(source):
            print(tok)
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
