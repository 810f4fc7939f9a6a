"""
Predictive recursive-descent parser

Consumes the token sequence produced by the scanner, front to back,
exactly once, and builds a Prog tree. Every production is chosen by
looking at the next unconsumed token only. The first mismatch raises
a ParseError; there is no recovery.

Prog
    Main Other*

Main
    'procedure' 'main' '(' ')' ( 'int' d | 'stack' x )* s

Other
    'procedure' q '(' [ t x ( ',' t x )* ] ')' s

d
    x [ '[' c ']' ]

s
    s0 [ s ]

s0
    x [ '[' e ']' ] mod_op e
    'if' e 'then' s 'else' s 'fi' e
    'from' e 'do' s 'loop' s 'until' e
    'push' '(' x ',' x ')'
    'pop' '(' x ',' x ')'
    'local' t x '=' e s 'delocal' t x '=' e
    'call' q '(' [ x ( ',' x )* ] ')'
    'uncall' q '(' [ x ( ',' x )* ] ')'
    'skip'

e
    e0 [ op e ]

e0
    c | x | x '[' e ']' | 'empty' '(' x ')' | 'top' '(' x ')' | 'nil'

Operators have no precedence: a chain of binary operators always
nests to the right.
"""
import logging

from .token import Token, describe
from .exception import ParseError
from .nodes import Type, ModOp, Op, \
    Prog, Main, Other, Param, IntDecl, StackDecl, Scalar, Array, \
    AssignScalar, AssignArray, Conditional, Loop, Push, Pop, Local, \
    Call, Uncall, Skip, Sequence, \
    Constant, Variable, Index, BinOp, Empty, Top, Nil

log = logging.getLogger("revlang.parser")

# tokens which continue a statement sequence.
# `pop` is not a member: a pop can begin a body, but never follow
# another statement
statement_leaders = {
    Token.T_IDENTIFIER,
    Token.K_IF,
    Token.K_FROM,
    Token.K_PUSH,
    Token.K_LOCAL,
    Token.K_CALL,
    Token.K_UNCALL,
    Token.K_SKIP,
}

types = {
    Token.K_INT: Type.INT,
    Token.K_STACK: Type.STACK,
}

modifying_operators = {
    Token.P_PLUS_EQUAL: ModOp.ADD,
    Token.P_MINUS_EQUAL: ModOp.SUB,
    Token.P_CARET_EQUAL: ModOp.XOR,
}

binary_operators = {
    Token.P_PLUS: Op.ADD,
    Token.P_MINUS: Op.SUB,
    Token.P_CARET: Op.XOR,
    Token.P_ASTERISK: Op.MUL,
    Token.P_SLASH: Op.DIV,
    Token.P_PERCENT: Op.MOD,
    Token.P_AMPERSAND: Op.AND,
    Token.P_BAR: Op.OR,
    Token.P_AMPERSAND2: Op.AND2,
    Token.P_BAR2: Op.OR2,
    Token.P_LESS: Op.LESS,
    Token.P_GREATER: Op.GREATER,
    Token.P_EQUAL: Op.EQUAL,
    Token.P_NOT_EQUAL: Op.NOT_EQUAL,
    Token.P_LESS_EQUAL: Op.LESS_EQUAL,
    Token.P_GREATER_EQUAL: Op.GREATER_EQUAL,
}

class Parser(object):
    """
    build a Prog from a list of tokens

    after a failure, `tokens` and `position` describe how far the
    parser got, and `remaining()` returns the unconsumed tokens
    """
    def __init__(self):
        super(Parser, self).__init__()
        self.tokens = []
        self.position = 0
        self.tree = None

    def parse(self, tokens):

        self.tokens = list(tokens)
        self.position = 0
        self.tree = None

        self.tree = self._program()
        return self.tree

    def remaining(self):
        return self.tokens[self.position:]

    # token stream primitives

    def _peek(self):
        """ return the next token, or None when the source is exhausted """
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def _peek_type(self):
        token = self._peek()
        return None if token is None else token.type

    def _next(self):
        self.position += 1

    def _error(self, expected, found=None):
        """ build an error for an expected thing which was not found """
        if found is None:
            # point at the last token when the source ran out
            last = self.tokens[-1] if self.tokens else None
            return ParseError(last,
                "expected %s, found end of input" % expected)
        return ParseError(found,
            "expected %s, found %s" % (expected, found.describe()))

    def _front(self, expected):
        """ return the next token, which must exist """
        token = self._peek()
        if token is None:
            raise self._error(expected)
        return token

    def _step(self, type, value=None):
        """ consume the next token, which must match type (and value) """
        expected = describe(type, value)
        token = self._front(expected)
        if token.type != type or (value is not None and token.value != value):
            raise self._error(expected, token)
        self._next()
        return token

    def _step_identifier(self):
        return self._step(Token.T_IDENTIFIER).value

    def _step_close_or_comma(self):
        """ after a list item: consume ',' or leave ')' in place """
        token = self._front("`,` or `)`")
        if token.type == Token.P_COMMA:
            self._next()
        elif token.type != Token.P_RPAREN:
            raise self._error("`,` or `)`", token)

    # program structure

    def _program(self):
        main = self._main_procedure()
        others = []
        while self._peek() is not None:
            others.append(self._procedure())
        return Prog(main, others)

    def _main_procedure(self):
        self._step(Token.K_PROCEDURE)
        self._step(Token.T_IDENTIFIER, "main")
        self._step(Token.P_LPAREN)
        self._step(Token.P_RPAREN)

        declarations = []
        while True:
            token = self._front("declaration or statement")
            if token.type == Token.K_INT:
                self._next()
                declarations.append(IntDecl(self._declaration()))
            elif token.type == Token.K_STACK:
                self._next()
                declarations.append(StackDecl(self._variable()))
            else:
                break

        log.debug("main: %d declarations", len(declarations))

        return Main(declarations, self._statement())

    def _procedure(self):
        self._step(Token.K_PROCEDURE)
        name = self._procedure_id()
        self._step(Token.P_LPAREN)

        params = []
        while True:
            token = self._front("parameter or `)`")
            if token.type in types:
                type_ = self._type()
                params.append(Param(type_, self._variable()))
                self._step_close_or_comma()
            else:
                self._step(Token.P_RPAREN)
                break

        log.debug("procedure %s: %d parameters", name, len(params))

        return Other(name, params, self._statement())

    def _type(self):
        token = self._front("type")
        if token.type not in types:
            raise self._error("type", token)
        self._next()
        return types[token.type]

    def _declaration(self):
        var = self._variable()
        if self._peek_type() == Token.P_LBRACKET:
            self._next()
            size = self._constant()
            self._step(Token.P_RBRACKET)
            return Array(var, size)
        return Scalar(var)

    def _variable(self):
        return self._step_identifier()

    def _procedure_id(self):
        return self._step_identifier()

    def _constant(self):
        return Constant(self._step(Token.T_CONSTANT).value)

    # statements

    def _statement(self):
        statements = [self._statement_non_recursive()]
        while self._peek_type() in statement_leaders:
            statements.append(self._statement_non_recursive())

        stmt = statements.pop()
        while statements:
            stmt = Sequence(statements.pop(), stmt)
        return stmt

    def _statement_non_recursive(self):

        token = self._front("non-recursive statement")

        if token.type == Token.T_IDENTIFIER:
            var = self._variable()
            if self._peek_type() == Token.P_LBRACKET:
                self._next()
                index = self._expression()
                self._step(Token.P_RBRACKET)
                op = self._mod_op()
                return AssignArray(var, index, op, self._expression())
            op = self._mod_op()
            return AssignScalar(var, op, self._expression())

        elif token.type == Token.K_IF:
            self._next()
            test = self._expression()
            self._step(Token.K_THEN)
            then_branch = self._statement()
            self._step(Token.K_ELSE)
            else_branch = self._statement()
            self._step(Token.K_FI)
            assertion = self._expression()
            return Conditional(test, then_branch, else_branch, assertion)

        elif token.type == Token.K_FROM:
            self._next()
            entry = self._expression()
            self._step(Token.K_DO)
            do_body = self._statement()
            self._step(Token.K_LOOP)
            loop_body = self._statement()
            self._step(Token.K_UNTIL)
            exit_test = self._expression()
            return Loop(entry, do_body, loop_body, exit_test)

        elif token.type == Token.K_PUSH or token.type == Token.K_POP:
            self._next()
            self._step(Token.P_LPAREN)
            var = self._variable()
            self._step(Token.P_COMMA)
            stack = self._variable()
            self._step(Token.P_RPAREN)
            if token.type == Token.K_PUSH:
                return Push(var, stack)
            return Pop(var, stack)

        elif token.type == Token.K_LOCAL:
            self._next()
            local_type = self._type()
            local_var = self._variable()
            self._step(Token.P_EQUAL)
            local_value = self._expression()
            body = self._statement()
            self._step(Token.K_DELOCAL)
            delocal_type = self._type()
            delocal_var = self._variable()
            self._step(Token.P_EQUAL)
            delocal_value = self._expression()
            return Local(local_type, local_var, local_value, body,
                delocal_type, delocal_var, delocal_value)

        elif token.type == Token.K_CALL or token.type == Token.K_UNCALL:
            self._next()
            name = self._procedure_id()
            self._step(Token.P_LPAREN)

            args = []
            while True:
                if self._front("argument or `)`").type == Token.P_RPAREN:
                    self._next()
                    break
                args.append(self._variable())
                self._step_close_or_comma()

            if token.type == Token.K_CALL:
                return Call(name, args)
            return Uncall(name, args)

        elif token.type == Token.K_SKIP:
            self._next()
            return Skip()

        raise self._error("non-recursive statement", token)

    def _mod_op(self):
        token = self._front("modifying operator")
        if token.type not in modifying_operators:
            raise self._error("modifying operator", token)
        self._next()
        return modifying_operators[token.type]

    # expressions

    def _expression(self):
        operands = [self._expression_non_recursive()]
        operators = []
        while self._peek_type() in binary_operators:
            operators.append(self._op())
            operands.append(self._expression_non_recursive())

        expr = operands.pop()
        while operators:
            expr = BinOp(operands.pop(), operators.pop(), expr)
        return expr

    def _expression_non_recursive(self):

        token = self._front("non-recursive expression")

        if token.type == Token.T_CONSTANT:
            return self._constant()

        elif token.type == Token.T_IDENTIFIER:
            var = self._variable()
            if self._peek_type() == Token.P_LBRACKET:
                self._next()
                index = self._expression()
                self._step(Token.P_RBRACKET)
                return Index(var, index)
            return Variable(var)

        elif token.type == Token.K_EMPTY or token.type == Token.K_TOP:
            self._next()
            self._step(Token.P_LPAREN)
            var = self._variable()
            self._step(Token.P_RPAREN)
            if token.type == Token.K_EMPTY:
                return Empty(var)
            return Top(var)

        elif token.type == Token.K_NIL:
            self._next()
            return Nil()

        raise self._error("non-recursive expression", token)

    def _op(self):
        token = self._front("binary operator")
        if token.type not in binary_operators:
            raise self._error("binary operator", token)
        self._next()
        return binary_operators[token.type]

def parse(tokens):
    return Parser().parse(tokens)

def main():  # pragma: no cover
    import sys
    from .scanner import scan
    from .exception import TokenError

    logging.basicConfig(level=logging.INFO)

    path = sys.argv[1]
    if path == '-':
        text = sys.stdin.read()
    else:
        with open(path, "r") as src:
            text = src.read()

    parser = Parser()
    try:
        tree = parser.parse(scan(text))
        print(tree.toString(True))

    except ParseError as e:
        # dump the tokens which were not consumed
        for tok in parser.remaining():
            print(tok.toString())
        e.format(path, text)
    except TokenError as e:
        e.format(path, text)

if __name__ == '__main__': # pragma: no cover
    main()
