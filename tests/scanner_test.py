#! cd .. && python3 -m unittest tests.scanner_test

import io
import unittest

from revlang.token import Token
from revlang.scanner import Scanner, scan
from revlang.exception import ScanError

def tokcmp(expected, actual, debug=False):
    """ return the number of positions where the streams differ """
    errors = 0
    width = max(len(expected), len(actual))
    rows = []
    for i in range(width):
        a = actual[i] if i < len(actual) else None
        b = expected[i] if i < len(expected) else None
        same = a is not None and b is not None and a == b
        if not same:
            errors += 1
        rows.append((a, ' ' if same else '|', b))

    if errors > 0 or debug:
        print("\n%-50s | %-.50s" % ("    HYP", "    REF"))
        for a, c, b in rows:
            print("%-50r %s %-.50r" % (a, c, b))
    return errors

def ident(text):
    return Token(Token.T_IDENTIFIER, 0, 0, text)

def const(value):
    return Token(Token.T_CONSTANT, 0, 0, value)

def fixed(type, text):
    return Token(type, 0, 0, text)

class ScannerTestCase(unittest.TestCase):

    def test_001_empty(self):
        self.assertEqual(scan(""), [])
        self.assertEqual(scan(" \t\r\n "), [])

    def test_001_assign(self):

        text = "x += 123"
        expected = [
            ident('x'),
            fixed(Token.P_PLUS_EQUAL, '+='),
            const(123),
        ]
        self.assertFalse(tokcmp(expected, scan(text)))

    def test_001_assign_no_spaces(self):

        text1 = "x[i+1]^=y"
        text2 = "x [ i + 1 ] ^= y"
        expected = [
            ident('x'),
            fixed(Token.P_LBRACKET, '['),
            ident('i'),
            fixed(Token.P_PLUS, '+'),
            const(1),
            fixed(Token.P_RBRACKET, ']'),
            fixed(Token.P_CARET_EQUAL, '^='),
            ident('y'),
        ]
        self.assertFalse(tokcmp(expected, scan(text1)))
        self.assertFalse(tokcmp(expected, scan(text2)))

    def test_001_keywords(self):

        text = ("int stack procedure if then else fi from do loop until "
                "push pop local delocal call uncall skip empty top nil")
        expected_types = [
            Token.K_INT, Token.K_STACK, Token.K_PROCEDURE,
            Token.K_IF, Token.K_THEN, Token.K_ELSE, Token.K_FI,
            Token.K_FROM, Token.K_DO, Token.K_LOOP, Token.K_UNTIL,
            Token.K_PUSH, Token.K_POP, Token.K_LOCAL, Token.K_DELOCAL,
            Token.K_CALL, Token.K_UNCALL, Token.K_SKIP,
            Token.K_EMPTY, Token.K_TOP, Token.K_NIL,
        ]
        tokens = scan(text)
        self.assertEqual([tok.type for tok in tokens], expected_types)
        self.assertEqual([tok.value for tok in tokens], text.split())

    def test_001_keyword_prefix_is_identifier(self):

        self.assertFalse(tokcmp([ident('ifx')], scan("ifx")))
        self.assertFalse(tokcmp([ident('skip2')], scan("skip2")))
        self.assertFalse(tokcmp([ident('Int')], scan("Int")))

        expected = [fixed(Token.K_IF, 'if'), ident('x')]
        self.assertFalse(tokcmp(expected, scan("if x")))

    def test_002_maximal_munch(self):

        self.assertFalse(tokcmp([fixed(Token.P_PLUS_EQUAL, '+=')], scan("+=")))

        expected = [fixed(Token.P_PLUS, '+'), fixed(Token.P_EQUAL, '=')]
        self.assertFalse(tokcmp(expected, scan("+ =")))

    def test_002_operators2(self):

        text = "&& || != <= >= += -= ^="
        expected_types = [
            Token.P_AMPERSAND2, Token.P_BAR2, Token.P_NOT_EQUAL,
            Token.P_LESS_EQUAL, Token.P_GREATER_EQUAL,
            Token.P_PLUS_EQUAL, Token.P_MINUS_EQUAL, Token.P_CARET_EQUAL,
        ]
        self.assertEqual([tok.type for tok in scan(text)], expected_types)

    def test_002_operators1(self):

        text = "+-^*/%&|<>=()[],"
        expected_types = [
            Token.P_PLUS, Token.P_MINUS, Token.P_CARET, Token.P_ASTERISK,
            Token.P_SLASH, Token.P_PERCENT, Token.P_AMPERSAND, Token.P_BAR,
            Token.P_LESS, Token.P_GREATER, Token.P_EQUAL,
            Token.P_LPAREN, Token.P_RPAREN,
            Token.P_LBRACKET, Token.P_RBRACKET, Token.P_COMMA,
        ]
        self.assertEqual([tok.type for tok in scan(text)], expected_types)

    def test_002_operator_pairs(self):

        # '&&' wins, the trailing '&' stands alone
        expected = [
            ident('a'),
            fixed(Token.P_AMPERSAND2, '&&'),
            fixed(Token.P_AMPERSAND, '&'),
            ident('b'),
        ]
        self.assertFalse(tokcmp(expected, scan("a&&&b")))

        # '=' is never the first half of a pair
        expected = [
            fixed(Token.P_EQUAL, '='),
            fixed(Token.P_EQUAL, '='),
        ]
        self.assertFalse(tokcmp(expected, scan("==")))

    def test_002_exclamation(self):

        # '!' is only an operator as part of '!='
        expected = [ident('a'), fixed(Token.P_NOT_EQUAL, '!='), ident('b')]
        self.assertFalse(tokcmp(expected, scan("a!=b")))

        self.assertFalse(tokcmp([ident('!a')], scan("!a")))

    def test_003_constant(self):

        tokens = scan("0 7 0042 2147483647")
        self.assertEqual([tok.value for tok in tokens], [0, 7, 42, 2147483647])
        self.assertTrue(all(tok.type == Token.T_CONSTANT for tok in tokens))

    def test_003_constant_invalid(self):

        with self.assertRaises(ScanError):
            scan("12ab")

        with self.assertRaises(ScanError):
            scan("1_000")

    def test_003_constant_out_of_range(self):

        with self.assertRaises(ScanError):
            scan("2147483648")

    def test_003_quote_is_not_a_string(self):

        with self.assertRaises(ScanError):
            scan("'a'")

        with self.assertRaises(ScanError):
            scan('"1"')

    def test_003_error_keeps_tokens(self):

        scanner = Scanner()
        with self.assertRaises(ScanError) as ctx:
            scanner.scan("x += 9z")

        expected = [ident('x'), fixed(Token.P_PLUS_EQUAL, '+=')]
        self.assertFalse(tokcmp(expected, scanner.tokens))

        self.assertIn("9z", str(ctx.exception))
        self.assertEqual(ctx.exception.token.line, 1)
        self.assertEqual(ctx.exception.token.index, 5)

    def test_004_positions(self):

        text = "procedure main()\n  x += 10\n"
        tokens = scan(text)

        positions = [(tok.line, tok.index) for tok in tokens]
        self.assertEqual(positions, [
            (1, 0),   # procedure
            (1, 10),  # main
            (1, 14),  # (
            (1, 15),  # )
            (2, 2),   # x
            (2, 4),   # +=
            (2, 7),   # 10
        ])

    def test_004_whitespace(self):

        expected = [ident('a'), ident('b'), ident('c'), ident('d'), ident('e')]
        self.assertFalse(tokcmp(expected, scan("a b\tc\nd\r\ne")))

    def test_005_file_input(self):

        f = io.StringIO("skip\nx -= y")
        expected = [
            fixed(Token.K_SKIP, 'skip'),
            ident('x'),
            fixed(Token.P_MINUS_EQUAL, '-='),
            ident('y'),
        ]
        self.assertFalse(tokcmp(expected, scan(f)))

    def test_005_iterable_input(self):

        expected = [ident('x'), fixed(Token.P_MINUS_EQUAL, '-='), const(1)]
        self.assertFalse(tokcmp(expected, scan(list("x-=1"))))

    def test_006_token_equality(self):

        a = Token(Token.T_IDENTIFIER, 1, 0, 'x')
        b = Token(Token.T_IDENTIFIER, 5, 9, 'x')
        c = Token(Token.T_IDENTIFIER, 1, 0, 'y')

        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertEqual(len({a, b, c}), 2)

    def test_006_describe(self):

        self.assertEqual(fixed(Token.K_ELSE, 'else').describe(), "`else`")
        self.assertEqual(ident('x').describe(), "identifier `x`")
        self.assertEqual(const(4).describe(), "constant `4`")

    def test_006_token_default_value(self):

        # a fixed token built without a value carries its source text
        self.assertEqual(Token(Token.K_IF), scan("if")[0])
        self.assertEqual(Token(Token.P_PLUS_EQUAL).value, "+=")
        self.assertEqual(Token(Token.P_COMMA, 3, 4).value, ",")
        self.assertEqual(Token(Token.T_IDENTIFIER).value, "")

        expected = [Token(Token.K_PROCEDURE), ident("main"),
            Token(Token.P_LPAREN), Token(Token.P_RPAREN), Token(Token.K_SKIP)]
        self.assertFalse(tokcmp(expected, scan("procedure main() skip")))

    def test_007_long_input(self):

        tokens = scan(" ".join(["skip"] * 5000))
        self.assertEqual(len(tokens), 5000)
        self.assertTrue(all(tok == Token(Token.K_SKIP) for tok in tokens))

        tokens = scan("x += " + " + ".join(["a"] * 5000))
        self.assertEqual(len(tokens), 2 + 5000 + 4999)
        self.assertEqual(tokens[-1], ident("a"))
        self.assertEqual(sum(tok.type == Token.P_PLUS for tok in tokens), 4999)

        # lines are counted across a long file
        tokens = scan("skip\n" * 5000)
        self.assertEqual(tokens[-1].line, 5000)

def main():
    unittest.main()

if __name__ == '__main__':
    main()
