from monkeyc.lexer.tokens import *


def test_make_token():
    assert make_token(TokenKind.PLUS, '+') == Token(TokenKind.PLUS, '+')
    assert make_token(TokenKind.IDENTIFIER, 'five').literal == 'five'
    # Anything with a string form works as the text
    assert make_token(TokenKind.INTEGER_LITERAL, 5).literal == '5'
    assert EOF == make_token(TokenKind.END_OF_INPUT, '')

def test_lookup_keyword():
    assert lookup_keyword('fn') is TokenKind.FUNCTION
    assert lookup_keyword('let') is TokenKind.LET

    for ident in ['Let', 'LET', 'FN', 'Fn', 'lets', 'fnx', 'x', '']:
        assert lookup_keyword(ident) is None

def test_keyword_table():
    assert KEYWORDS == {'fn': TokenKind.FUNCTION, 'let': TokenKind.LET}

def test_punctuation_table():
    assert ''.join(PUNCTUATION) == '=;(),+{}'
    assert all(len(char) == 1 for char in PUNCTUATION)

def test_hash_eq():
    assert Token(TokenKind.LET, 'let') == Token(TokenKind.LET, 'let')
    assert Token(TokenKind.LET, 'let') != Token(TokenKind.IDENTIFIER, 'let')
    assert len({Token(TokenKind.COMMA, ','), Token(TokenKind.COMMA, ',')}) == 1

def test_str():
    assert str(TokenKind.END_OF_INPUT) == 'EndOfInput'
    assert str(Token(TokenKind.IDENTIFIER, 'five')) == "Identifier('five')"
    assert str(EOF) == "EndOfInput('')"

def test_enum_sanity():
    assert len(TokenKind) == 16
    assert TokenKind('Let') is TokenKind.LET
    assert TokenKind.LET != 'Let'
