from dataclasses import dataclass


@dataclass(frozen=True)
class SourceCode:
    filename: str
    text: str

    @classmethod
    def from_file(cls, filename):
        with open(filename) as file:
            return cls(filename, file.read())

    @classmethod
    def from_string(cls, string, filename='<string>'):
        return cls(filename, string)

    @property
    def lines(self):
        return self.text.split('\n')

    def __len__(self):
        return len(self.text)

    def __repr__(self):
        return f'SourceCode.from_file({self.filename!r})'


@dataclass
class Scanner:
    source: SourceCode
    offset: int = 0

    def peek(self):
        if self:
            return self.source.text[self.offset]
        return None

    def advance(self):
        char = self.peek()
        if char is not None:
            self.offset += 1
        return char

    def match(self, pat):
        mo = pat.match(self.source.text, self.offset)
        if mo is not None:
            self.offset = mo.end()
            return mo.group()
        return None

    @property
    def cursor(self):
        # Only computed for diagnostics; tokens carry no position.
        consumed = self.source.text[:self.offset]
        line = consumed.count('\n')
        return Cursor(line, self.offset - (consumed.rfind('\n') + 1))

    def __bool__(self):
        # Is there any more to read?
        return self.offset < len(self.source)

    def __repr__(self):
        return f'<Scanner @{self.offset} {self.source.text[self.offset:]!r}>'


@dataclass(frozen=True, order=True)
class Cursor:
    line: int
    col: int

    def __str__(self):
        return f'{self.line + 1}:{self.col + 1}'
