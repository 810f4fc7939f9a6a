
import logging

from .scanner import Scanner
from .parser import Parser
from .util import read_text

log = logging.getLogger("revlang.frontend")

class FrontEnd(object):
    """ run the scanner and the parser over one source text

    the scanner and parser used by the most recent build are kept,
    so that a caller can inspect their state after an error
    """
    def __init__(self):
        super(FrontEnd, self).__init__()

        self.diag = False
        self.scanner = None
        self.parser = None

    def scan(self, text):
        self.scanner = Scanner()
        tokens = self.scanner.scan(text)

        if self.diag:
            for tok in tokens:
                print(tok.toString())

        return tokens

    def build(self, path):

        text = read_text(path)

        return self.build_text(path, text)

    def build_text(self, path, text):
        tokens = self.scan(text)

        log.info("%s: %d tokens", path, len(tokens))

        self.parser = Parser()
        tree = self.parser.parse(tokens)

        if self.diag:
            print(tree.toString(True))

        return tree

    def dump(self, tree, path):
        with open(path, "w") as wf:
            wf.write(tree.toString(True))
