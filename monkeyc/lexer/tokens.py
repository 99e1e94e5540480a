import enum
import dataclasses as dc


class TokenKind(enum.Enum):
    ILLEGAL = 'Illegal'
    END_OF_INPUT = 'EndOfInput'

    IDENTIFIER = 'Identifier'
    INTEGER_LITERAL = 'IntegerLiteral'

    ASSIGN = 'Assign'
    PLUS = 'Plus'
    # EQUAL and NOT_EQUAL need two characters of lookahead, which the
    # lexer doesn't do yet.  Nothing produces them (or ILLEGAL) for now.
    EQUAL = 'Equal'
    NOT_EQUAL = 'NotEqual'

    COMMA = 'Comma'
    SEMICOLON = 'Semicolon'
    LPAREN = 'LParen'
    RPAREN = 'RParen'
    LBRACE = 'LBrace'
    RBRACE = 'RBrace'

    FUNCTION = 'Function'
    LET = 'Let'

    def __str__(self):
        return self.value


@dc.dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str

    def __str__(self):
        return f'{self.kind}({self.literal!r})'


def make_token(kind, text):
    return Token(kind, str(text))


EOF = make_token(TokenKind.END_OF_INPUT, '')


KEYWORDS = {
    'fn': TokenKind.FUNCTION,
    'let': TokenKind.LET,
}

def lookup_keyword(ident):
    """Keyword kind for an identifier spelling, or None.  Case-sensitive."""
    return KEYWORDS.get(ident)


PUNCTUATION = {
    '=': TokenKind.ASSIGN,
    ';': TokenKind.SEMICOLON,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ',': TokenKind.COMMA,
    '+': TokenKind.PLUS,
    '{': TokenKind.LBRACE,
    '}': TokenKind.RBRACE,
}
