import unittest
from climb.frontend.errors import *
from climb.frontend.tree import *
from climb.frontend.parser import parse
from climb.backend.evaluator import *

def calc(src):
    return evaluate(parse(src))

class TestEvaluate(unittest.TestCase):
    def test_literal(self):
        for n in [0, 1, 42, 2147483647]:
            self.assertEqual(calc(str(n)), n)

    def test_arithmetic(self):
        self.assertEqual(calc('1 + 2 * 3'), 7)
        self.assertEqual(calc('(1 + 2) * 3'), 9)
        self.assertEqual(calc('1 - 2 - 3'), -4)
        self.assertEqual(calc('--1 * 2'), 2)
        self.assertEqual(calc('+5 - -5'), 10)

    def test_exponent(self):
        self.assertEqual(calc('2 ^ 3 ^ 2'), 512)
        self.assertEqual(calc('2 ^ 0'), 1)
        self.assertEqual(calc('0 ^ 0'), 1)
        self.assertEqual(calc('-2 ^ 2'), -4)
        self.assertEqual(calc('(-2) ^ 3'), -8)
        self.assertEqual(calc('(-1) ^ 2147483647'), -1)

    def test_factorial(self):
        self.assertEqual(calc('9 !'), 362880)
        self.assertEqual(calc('0!'), 1)
        self.assertEqual(calc('1!'), 1)
        self.assertEqual(calc('3!!'), 720)
        self.assertEqual(calc('-3!'), -6)

    def test_division_truncates(self):
        self.assertEqual(calc('7 / 2'), 3)
        self.assertEqual(calc('-7 / 2'), -3)
        self.assertEqual(calc('7 / -2'), -3)
        self.assertEqual(calc('-7 / -2'), 3)

    def test_division_by_zero(self):
        with self.assertRaises(EvalError) as cm:
            calc('1/0')
        self.assertEqual(cm.exception.kind, ErrorKind.DIVISION_BY_ZERO)

    def test_symbol(self):
        with self.assertRaises(EvalError) as cm:
            calc('a')
        self.assertEqual(cm.exception.kind, ErrorKind.UNEVALUABLE_SYMBOL)

    def test_negative_exponent(self):
        with self.assertRaises(EvalError) as cm:
            calc('2 ^ -1')
        self.assertEqual(cm.exception.kind, ErrorKind.NEGATIVE_EXPONENT)

    def test_negative_factorial(self):
        with self.assertRaises(EvalError) as cm:
            calc('(-3)!')
        self.assertEqual(cm.exception.kind, ErrorKind.NEGATIVE_FACTORIAL)

    def test_overflow(self):
        for src in ['2147483647 + 1', '13!', '2 ^ 31', '65536 * 65536', '-2147483647 - 2']:
            with self.assertRaises(EvalError) as cm:
                calc(src)
            self.assertEqual(cm.exception.kind, ErrorKind.INTEGER_OVERFLOW)
        self.assertEqual(calc('-2147483647 - 1'), -2147483648)
        self.assertEqual(calc('12!'), 479001600)

class TestApply(unittest.TestCase):
    def test_sub_arity(self):
        self.assertEqual(apply(Operator.SUB, [4]), -4)
        self.assertEqual(apply(Operator.SUB, [4, 1]), 3)
        with self.assertRaises(EvalError) as cm:
            apply(Operator.SUB, [1, 2, 3])
        self.assertEqual(cm.exception.kind, ErrorKind.BAD_ARITY)

    def test_bad_arity(self):
        for op, args in [(Operator.DIV, [1]), (Operator.EXP, [2]),
                         (Operator.FAC, [1, 2]), (Operator.MUL, [3]),
                         (Operator.ADD, [])]:
            with self.assertRaises(EvalError) as cm:
                apply(op, args)
            self.assertEqual(cm.exception.kind, ErrorKind.BAD_ARITY)

    def test_malformed_tree(self):
        tree = OpNode(Operator.FAC, (Leaf(2), Leaf(3)))
        with self.assertRaises(EvalError):
            evaluate(tree)

    def test_deep_tree(self):
        tree = Leaf(1)
        for _ in range(5000):
            tree = OpNode(Operator.SUB, (tree,))
        with self.assertRaises(EvalError) as cm:
            evaluate(tree)
        self.assertEqual(cm.exception.kind, ErrorKind.TOO_DEEP)

    def test_factorial(self):
        self.assertEqual([factorial(n) for n in range(6)], [1, 1, 2, 6, 24, 120])

if __name__ == '__main__':
    unittest.main()
