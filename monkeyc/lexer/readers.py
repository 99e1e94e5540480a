import re
import logging
from monkeyc.lexer import tokens
from monkeyc.lexer.tokens import TokenKind

logger = logging.getLogger(__name__)


ignore = re.compile(r'[ \t\n\r]+')
def skip_whitespace(scan):
    scan.match(ignore)


def read_symbol_token(scan):
    if (kind := tokens.PUNCTUATION.get(scan.peek())) is not None:
        return tokens.make_token(kind, scan.advance())


# Letters only: digits and underscores end an identifier.
ident_pattern = re.compile(r'[a-zA-Z]+')
def read_ident_or_keyword_token(scan):
    if ident := scan.match(ident_pattern):
        logger.debug('ident: %r', ident)
        kind = tokens.lookup_keyword(ident) or TokenKind.IDENTIFIER
        return tokens.make_token(kind, ident)


# The literal stays as text, so there is no overflow to worry about.
dec_literal = re.compile(r'[0-9]+')
def read_int_token(scan):
    if lit := scan.match(dec_literal):
        return tokens.make_token(TokenKind.INTEGER_LITERAL, lit)
