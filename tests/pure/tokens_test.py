import unittest

from rpncalc.pure.tokens import Associativity, LeftParen, Number, Operator, OperatorKind, to_rpn


class OperatorKindTestCase(unittest.TestCase):

    def test_from_symbol(self):
        should_pass = {"+": OperatorKind.ADD, "-": OperatorKind.SUB, "*": OperatorKind.MUL, "/": OperatorKind.DIV}
        for case, result in should_pass.items():
            self.assertIs(result, OperatorKind.from_symbol(case), case)

        should_fail = ["(", ")", "%", "^", "1", ""]
        for case in should_fail:
            self.assertIsNone(OperatorKind.from_symbol(case), case)

    def test_precedence(self):
        self.assertEqual(OperatorKind.ADD.precedence, OperatorKind.SUB.precedence)
        self.assertEqual(OperatorKind.MUL.precedence, OperatorKind.DIV.precedence)
        self.assertEqual(2, OperatorKind.ADD.precedence)
        self.assertEqual(3, OperatorKind.MUL.precedence)

        for kind in OperatorKind:
            self.assertIs(Associativity.LEFT, kind.associativity, kind)


class TokenTestCase(unittest.TestCase):

    def test_equality_ignores_position(self):
        self.assertEqual(Number(8, 0), Number(8, 5))
        self.assertEqual(Operator(OperatorKind.ADD, 1), Operator(OperatorKind.ADD, 3))
        self.assertEqual(LeftParen(0), LeftParen(2))

        self.assertNotEqual(Number(8), Number(9))
        self.assertNotEqual(Operator(OperatorKind.ADD), Operator(OperatorKind.SUB))
        self.assertNotEqual(Number(1), LeftParen())

    def test_arity(self):
        self.assertEqual(0, Number(1).arity)
        self.assertEqual(2, Operator(OperatorKind.DIV).arity)
        self.assertFalse(hasattr(LeftParen(), "arity"))

    def test_frozen(self):
        token = Number(1)
        with self.assertRaises(AttributeError):
            token.value = 2

    def test_to_rpn(self):
        tokens = [Number(6), Number(8), Number(8), Operator(OperatorKind.ADD), Number(2), Operator(OperatorKind.DIV),
                  Number(1), Operator(OperatorKind.SUB), Operator(OperatorKind.MUL)]
        self.assertEqual("6 8 8 + 2 / 1 - *", to_rpn(tokens))
        self.assertEqual("", to_rpn([]))
        self.assertEqual("(", str(LeftParen()))


if __name__ == '__main__':
    unittest.main()
