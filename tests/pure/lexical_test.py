import unittest

from rpncalc.lang.error import EmptyExpression, Overflow, UnmatchedParenthesis, UnrecognizedSymbol
from rpncalc.pure.lexical import parse, tokenize
from rpncalc.pure.numerical import INT8, UINT8
from rpncalc.pure.tokens import LeftParen, Number, Operator, OperatorKind, to_rpn


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        tokens = list(tokenize("12+(3)"))
        self.assertEqual([Number(12), Operator(OperatorKind.ADD), LeftParen()], tokens[:3])
        self.assertEqual(Number(3), tokens[3])
        self.assertEqual([0, 2, 3, 4, 5], [token.start for token in tokens])

    def test_digit_runs(self):
        should_pass = {"0": 0, "7": 7, "42": 42, "007": 7, "1234567890": 1234567890}
        for case, result in should_pass.items():
            self.assertEqual([Number(result)], list(tokenize(case)), case)


class ParseTestCase(unittest.TestCase):

    def test_parse(self):
        should_pass = {
            "6*((8+8)/2-1)": "6 8 8 + 2 / 1 - *",
            "2+3*4": "2 3 4 * +",
            "(2+3)*4": "2 3 + 4 *",
            "10-4-3": "10 4 - 3 -",
            "100/10/5": "100 10 / 5 /",
            "1*2+3": "1 2 * 3 +",
            "1+2*3-4/2": "1 2 3 * + 4 2 / -",
            "((((1))))": "1",
            "2*(3+4)*5": "2 3 4 + * 5 *",
        }
        for case, result in should_pass.items():
            self.assertEqual(result, to_rpn(parse(case)), case)

    def test_no_left_parens(self):
        for case in ["(1)", "(1+2)*(3-(4/5))", "((2))+((3))"]:
            self.assertFalse(any(isinstance(token, LeftParen) for token in parse(case)), case)

    def test_parenthesis_only_checked(self):
        # operand/operator placement is left for the evaluator to reject
        should_pass = {"1+": "1 +", "+": "+", "(1)(2)": "1 2", "()": "", "12 ": None}
        for case, result in should_pass.items():
            if result is None:
                self.assertRaises(UnrecognizedSymbol, parse, case)
            else:
                self.assertEqual(result, to_rpn(parse(case)), case)

    def test_empty(self):
        self.assertRaises(EmptyExpression, parse, "")

    def test_unrecognized_symbol(self):
        should_raise = {"1@2": ("@", 1), "1 + 2": (" ", 1), "1.5": (".", 1), "x": ("x", 0), "-٣": ("٣", 1),
                        "2^3": ("^", 1), "3+4\n": ("\n", 3)}
        for case, (symbol, start) in should_raise.items():
            with self.assertRaises(UnrecognizedSymbol, msg=case) as context:
                parse(case)
            self.assertEqual(symbol, context.exception.symbol, case)
            self.assertEqual(start, context.exception.start, case)

    def test_unmatched_parenthesis(self):
        should_raise = {"(1+2": ("(", 0), "1+2)": (")", 3), ")": (")", 0), ")(": (")", 0), "((1)": ("(", 0),
                        "(1))+(2": (")", 3), "1+(2*(3)": ("(", 2)}
        for case, (paren, start) in should_raise.items():
            with self.assertRaises(UnmatchedParenthesis, msg=case) as context:
                parse(case)
            self.assertEqual(paren, context.exception.paren, case)
            self.assertEqual(start, context.exception.start, case)

    def test_literal_overflow(self):
        self.assertEqual([Number(127)], parse("127", INT8))
        self.assertEqual([Number(255)], parse("255", UINT8))

        should_raise = {"128": INT8, "256": UINT8, "1+1000": UINT8}
        for case, policy in should_raise.items():
            self.assertRaises(Overflow, parse, case, policy)

        with self.assertRaises(Overflow) as context:
            parse("1+1000", UINT8)
        self.assertEqual(2, context.exception.start)


if __name__ == '__main__':
    unittest.main()
