class Token(object):

    # keywords
    K_INT = "K_INT"
    K_STACK = "K_STACK"
    K_PROCEDURE = "K_PROCEDURE"
    K_IF = "K_IF"
    K_THEN = "K_THEN"
    K_ELSE = "K_ELSE"
    K_FI = "K_FI"
    K_FROM = "K_FROM"
    K_DO = "K_DO"
    K_LOOP = "K_LOOP"
    K_UNTIL = "K_UNTIL"
    K_PUSH = "K_PUSH"
    K_POP = "K_POP"
    K_LOCAL = "K_LOCAL"
    K_DELOCAL = "K_DELOCAL"
    K_CALL = "K_CALL"
    K_UNCALL = "K_UNCALL"
    K_SKIP = "K_SKIP"
    K_EMPTY = "K_EMPTY"
    K_TOP = "K_TOP"
    K_NIL = "K_NIL"

    # operators and punctuation
    P_PLUS = "P_PLUS"
    P_MINUS = "P_MINUS"
    P_CARET = "P_CARET"
    P_ASTERISK = "P_ASTERISK"
    P_SLASH = "P_SLASH"
    P_PERCENT = "P_PERCENT"
    P_AMPERSAND = "P_AMPERSAND"
    P_BAR = "P_BAR"
    P_AMPERSAND2 = "P_AMPERSAND2"
    P_BAR2 = "P_BAR2"
    P_LESS = "P_LESS"
    P_GREATER = "P_GREATER"
    P_EQUAL = "P_EQUAL"
    P_NOT_EQUAL = "P_NOT_EQUAL"
    P_LESS_EQUAL = "P_LESS_EQUAL"
    P_GREATER_EQUAL = "P_GREATER_EQUAL"
    P_PLUS_EQUAL = "P_PLUS_EQUAL"
    P_MINUS_EQUAL = "P_MINUS_EQUAL"
    P_CARET_EQUAL = "P_CARET_EQUAL"
    P_LPAREN = "P_LPAREN"
    P_RPAREN = "P_RPAREN"
    P_LBRACKET = "P_LBRACKET"
    P_RBRACKET = "P_RBRACKET"
    P_COMMA = "P_COMMA"

    # tokens carrying a payload
    T_IDENTIFIER = "T_IDENTIFIER"
    T_CONSTANT = "T_CONSTANT"

    def __init__(self, type, line=0, index=0, value=None):
        super(Token, self).__init__()
        self.type = type
        self.line = line
        self.index = index
        # fixed tokens carry their source text, as the scanner emits them
        if value is None:
            value = spelling.get(type, "")
        self.value = value

    def __eq__(self, other):
        # position is diagnostic only, it never takes part in equality
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.type, self.value))

    def __str__(self):
        return self.toString()

    def __repr__(self):
        return "Token(Token.%s, %r, %r, %r)" % (
            self.type, self.line, self.index, self.value)

    def toString(self):
        return "%s<%s,%s,%r>" % (self.type, self.line, self.index, self.value)

    def describe(self):
        return describe(self.type, self.value)

# reserved words, matched against the whole accumulated text
keywords = {
    "int": Token.K_INT,
    "stack": Token.K_STACK,
    "procedure": Token.K_PROCEDURE,
    "if": Token.K_IF,
    "then": Token.K_THEN,
    "else": Token.K_ELSE,
    "fi": Token.K_FI,
    "from": Token.K_FROM,
    "do": Token.K_DO,
    "loop": Token.K_LOOP,
    "until": Token.K_UNTIL,
    "push": Token.K_PUSH,
    "pop": Token.K_POP,
    "local": Token.K_LOCAL,
    "delocal": Token.K_DELOCAL,
    "call": Token.K_CALL,
    "uncall": Token.K_UNCALL,
    "skip": Token.K_SKIP,
    "empty": Token.K_EMPTY,
    "top": Token.K_TOP,
    "nil": Token.K_NIL,
}

# operators and punctuation of length 1
operators1 = {
    "+": Token.P_PLUS,
    "-": Token.P_MINUS,
    "^": Token.P_CARET,
    "*": Token.P_ASTERISK,
    "/": Token.P_SLASH,
    "%": Token.P_PERCENT,
    "&": Token.P_AMPERSAND,
    "|": Token.P_BAR,
    "<": Token.P_LESS,
    ">": Token.P_GREATER,
    "=": Token.P_EQUAL,
    "(": Token.P_LPAREN,
    ")": Token.P_RPAREN,
    "[": Token.P_LBRACKET,
    "]": Token.P_RBRACKET,
    ",": Token.P_COMMA,
}

# operators of length 2, always tried before operators1
operators2 = {
    "&&": Token.P_AMPERSAND2,
    "||": Token.P_BAR2,
    "!=": Token.P_NOT_EQUAL,
    "<=": Token.P_LESS_EQUAL,
    ">=": Token.P_GREATER_EQUAL,
    "+=": Token.P_PLUS_EQUAL,
    "-=": Token.P_MINUS_EQUAL,
    "^=": Token.P_CARET_EQUAL,
}

# the source text of every fixed token type
spelling = {}
for _table in (keywords, operators1, operators2):
    for _text, _type in _table.items():
        spelling[_type] = _text
del _table, _text, _type

def describe(type, value=None):
    """ return a human readable name for a token type, or a token

    used to build 'expected X, found Y' messages
    """
    if type == Token.T_IDENTIFIER:
        if value is None:
            return "identifier"
        return "identifier `%s`" % value
    if type == Token.T_CONSTANT:
        if value is None:
            return "constant"
        return "constant `%s`" % value
    return "`%s`" % spelling.get(type, type)
