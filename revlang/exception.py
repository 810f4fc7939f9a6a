import os
import sys

def format_generic(exc_type, exc_obj, exc_tb):

    tb = exc_tb
    while tb is not None:

        fpath = tb.tb_frame.f_code.co_filename
        lineno = tb.tb_lineno

        current_line = ""
        if os.path.exists(fpath) and fpath.endswith(".py"):
            with open(fpath, "r") as rf:
                for index, line in enumerate(rf):
                    if index + 1 == lineno:
                        current_line = line.rstrip("\n")
                        break

        sys.stderr.write("\n%s: %d\n" % (os.path.relpath(fpath), lineno))
        sys.stderr.write("%s\n" % current_line)

        tb = tb.tb_next

    sys.stderr.write("\nUnhandled Exception\n%s: %s\n" % (
        exc_type.__name__, exc_obj))

class TokenError(Exception):
    """ an error located at a token of the source text

    token may be None when the source ended before anything
    could be pointed at
    """

    def __init__(self, token, message=None):
        super(TokenError, self).__init__(message)
        self.token = token

    def format(self, path, text, stream=None):
        stream = stream or sys.stderr

        if self.token is None or text is None:
            stream.write("Syntax Error in File %s\n" % path)
            stream.write(" %s\n" % self)
            return

        lines = text.split("\n")
        l1 = max(0, self.token.line - 2)
        l2 = min(len(lines), self.token.line + 2)
        stream.write("Syntax Error in File %s at line %d column %d\n" % (
            path, self.token.line, self.token.index))
        stream.write(" %s\n" % self)
        for n, line in zip(range(l1, l2), lines[l1:l2]):

            stream.write(" %4d: %s\n" % (n + 1, line))
            if n + 1 == self.token.line:
                indicator = " " * self.token.index
                stream.write("       %s^\n" % indicator)

class ScanError(TokenError):
    pass

class ParseError(TokenError):
    pass
