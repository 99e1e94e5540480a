def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class CompilerError(Exception):
    def __init__(self, message, context):
        super().__init__(message)
        self.context = context

    def get_info(self, source):
        # Mimic gcc error messages
        line = self.context.line
        message = f'{source.filename}:{self.context}: {self}'
        message += f'\n{line + 1:5} | {source.lines[line]}'
        message += f'\n      | ' + (' ' * self.context.col) + '^'
        return message


class LexerError(CompilerError):
    pass

class UnclassifiableCharacter(LexerError):
    unhelpful = _message('Unclassifiable character: {char!r}')

    def __init__(self, message, context, char):
        super().__init__(message, context)
        self.char = char

    @classmethod
    def at(cls, scan):
        return cls.unhelpful(scan.cursor, scan.peek(), char=scan.peek())
