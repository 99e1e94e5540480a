from . import tokens
from . import readers
from .tokens import Token, TokenKind, EOF
from monkeyc.utils.scanner import Scanner, Cursor, SourceCode
from monkeyc.errors import UnclassifiableCharacter


class Lexer:
    tok_readers = [
        readers.read_symbol_token, readers.read_ident_or_keyword_token,
        readers.read_int_token
    ]

    def __init__(self, source):
        if isinstance(source, str):
            source = SourceCode.from_string(source)
        self.source = source
        self.scan = Scanner(source)

    def next_token(self):
        readers.skip_whitespace(self.scan)

        if not self.scan:
            return EOF

        for reader in self.tok_readers:
            tok = reader(self.scan)
            if tok is not None:
                return tok

        # The offending character is left unconsumed, so calling again
        # raises again rather than skipping ahead.
        raise UnclassifiableCharacter.at(self.scan)

    def __iter__(self):
        # Yields the EndOfInput token too, then stops.
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.END_OF_INPUT:
                return

    def __repr__(self):
        return f'<Lexer {self.scan!r}>'


def lex(source):
    return iter(Lexer(source))
