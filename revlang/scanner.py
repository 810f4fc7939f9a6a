"""
Implementation of a look-ahead-by-1 Scanner

Given a sequence of characters produce a sequence of tokens.

Characters are collected into an accumulator until a separator is seen.
A separator is either whitespace, which is discarded, or an operator,
which becomes a token of its own. Two character operators are matched
before single character operators, so that '+=' is never split into
'+' and '='.

When the accumulator is flushed the text is classified by its first
character:
    Constant:   text that starts with a decimal digit (or a quote)
    Keyword:    text that exactly matches a reserved word
    Identifier: anything else

"""
import logging

from .token import Token, keywords, operators1, operators2
from .exception import ScanError
from .util import char_reader

log = logging.getLogger("revlang.scanner")

# characters that separate tokens and are never part of one
chset_whitespace = " \t\n\r"
# the first character of a literal. quotes are accepted here
# but no quoted literal exists, so such a buffer fails as an integer
chset_literal = "\"'0123456789"
chset_digits = "0123456789"

# constants are signed 32 bit integers
CONSTANT_MAX = 2 ** 31 - 1

class ScannerBase(object):
    """
    base class for a look-ahead-by-N scanner with an accumulator
    """
    def __init__(self):
        super(ScannerBase, self).__init__()

    def _init(self, seq):

        # position of the most recently consumed character
        self._line = 1
        self._index = -1

        # position of the most recently read character, which
        # may still be waiting in the peek buffer
        self._read_line = 1
        self._read_index = -1
        self._read_prev = None

        # the text of the current token
        self._tok = ""
        # the position where the current token began
        self._initial_line = -1
        self._initial_index = -1
        # (char, line, index) read from the input, but not consumed
        self._peek_char = []

        if hasattr(seq, 'read'):
            self.g = char_reader(seq)
        else:
            self.g = iter(seq)

        self.tokens = []

    def _getch_impl(self):
        """ read one character and its position from the input stream """
        c = next(self.g)

        if self._read_prev == '\n':
            self._read_line += 1
            self._read_index = 0
        else:
            self._read_index += 1
        self._read_prev = c

        return c, self._read_line, self._read_index

    def _getch(self):
        """ return the next character """
        if self._peek_char:
            c, line, index = self._peek_char.pop(0)
        else:
            c, line, index = self._getch_impl()
        self._line = line
        self._index = index
        return c

    def _peekch(self):
        """ return the next character, or None at the end of the input """
        if not self._peek_char:
            try:
                self._peek_char.append(self._getch_impl())
            except StopIteration:
                return None
        return self._peek_char[0][0]

    def _putch(self, c):
        """ append a character to the current token """

        if self._initial_line < 0:
            self._initial_line = self._line
            self._initial_index = self._index
        self._tok += c

    def _push(self, type, value):
        """ push a new token built from the current text """

        self.tokens.append(Token(
            type,
            self._initial_line,
            self._initial_index,
            value)
        )
        self._initial_line = -1
        self._initial_index = -1
        self._tok = ""

    def _error(self, message):

        token = Token(Token.T_CONSTANT,
            self._initial_line, self._initial_index, self._tok)
        return ScanError(token, message)

class Scanner(ScannerBase):
    """
    read tokens from a string, an iterable of characters or a file
    """
    def __init__(self):
        super(Scanner, self).__init__()

    def scan(self, seq):

        self._init(seq)
        self._scan()

        log.debug("scanned %d tokens", len(self.tokens))

        return self.tokens

    def _scan(self):

        while True:

            try:
                c = self._getch()
            except StopIteration:
                break

            if c in chset_whitespace:
                self._maybe_push()
                continue

            nc = self._peekch()

            if nc is not None and (c + nc) in operators2:
                self._maybe_push()
                self._putch(c)
                self._putch(self._getch())
                self._push(operators2[self._tok], self._tok)

            elif c in operators1:
                self._maybe_push()
                self._putch(c)
                self._push(operators1[c], c)

            else:
                self._putch(c)

        self._maybe_push()

    def _maybe_push(self):
        """ classify and push the accumulated text, if there is any """

        text = self._tok
        if not text:
            return

        if text[0] in chset_literal:
            self._push(Token.T_CONSTANT, self._parse_constant(text))
        elif text in keywords:
            self._push(keywords[text], text)
        else:
            self._push(Token.T_IDENTIFIER, text)

    def _parse_constant(self, text):

        if not all(c in chset_digits for c in text):
            raise self._error("invalid integer literal %r" % text)

        value = int(text)
        if value > CONSTANT_MAX:
            raise self._error("integer literal %r out of range" % text)

        return value

def scan(seq):
    return Scanner().scan(seq)

def main():  # pragma: no cover
    import sys
    from .exception import TokenError

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) != 2:
        print("usage: %s path" % sys.argv[0])
        sys.exit(1)

    path = sys.argv[1]
    if path == '-':
        text = sys.stdin.read()
    else:
        with open(path, "r") as src:
            text = src.read()

    scanner = Scanner()
    try:
        for tok in scanner.scan(text):
            print(tok.toString())

    except TokenError as e:
        for tok in scanner.tokens:
            print(tok.toString())
        e.format(path, text)

if __name__ == '__main__': # pragma: no cover
    main()
