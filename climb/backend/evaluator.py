#!/usr/bin/env python3

from __future__ import annotations
import logging
from functools import reduce
from typing import Sequence
from climb.frontend.errors import ErrorKind, EvalError
from climb.frontend.tree import Leaf, Node, OpNode, Operator

logger = logging.getLogger(__name__)

INT_MIN = -2**31
INT_MAX = 2**31 - 1

def checked(value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise EvalError(ErrorKind.INTEGER_OVERFLOW, f'Result {value} overflows a 32 bit integer')
    return value

def expect_arity(op: Operator, args: Sequence[int], *arities: int):
    if len(args) not in arities:
        raise EvalError(ErrorKind.BAD_ARITY,
                        f"Operator '{op}' applied to {len(args)} operand(s)")

def factorial(n: int) -> int:
    """Iterative factorial; negative input is an error rather than a bottomless recursion."""
    if n < 0:
        raise EvalError(ErrorKind.NEGATIVE_FACTORIAL, f'Factorial of negative number {n}')
    result = 1
    for i in range(2, n + 1):
        result = checked(result * i)
    return result

def divide(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise EvalError(ErrorKind.DIVISION_BY_ZERO, f'Division of {lhs} by zero')
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient # Truncates toward zero

def power(base: int, exponent: int) -> int:
    if exponent < 0:
        raise EvalError(ErrorKind.NEGATIVE_EXPONENT, f'Negative exponent in {base} ^ {exponent}')
    if base in (-1, 0, 1) and exponent > 0:
        return base if exponent % 2 else abs(base)
    result = 1
    for _ in range(exponent): # Overflows within 32 steps for |base| > 1
        result = checked(result * base)
    return result

def apply(op: Operator, args: Sequence[int]) -> int:
    if op == Operator.ADD:
        expect_arity(op, args, 1, 2)
        return checked(sum(args))
    elif op == Operator.SUB:
        expect_arity(op, args, 1, 2)
        return checked(-args[0] if len(args) == 1 else args[0] - args[1])
    elif op == Operator.MUL:
        expect_arity(op, args, 2)
        return checked(reduce(lambda x, y: x * y, args, 1))
    elif op == Operator.DIV:
        expect_arity(op, args, 2)
        return checked(divide(*args))
    elif op == Operator.EXP:
        expect_arity(op, args, 2)
        return power(*args)
    elif op == Operator.FAC:
        expect_arity(op, args, 1)
        return factorial(args[0])
    raise EvalError(ErrorKind.BAD_ARITY, f'Unknown operator {op}')

def evaluate_node(node: Node) -> int:
    if isinstance(node, Leaf):
        if node.is_symbol():
            raise EvalError(ErrorKind.UNEVALUABLE_SYMBOL, f"Cannot evaluate symbol '{node.value}'")
        return node.value

    args = [evaluate_node(child) for child in node.children]
    result = apply(node.op, args)
    logger.debug('%s -> %d', node, result)
    return result

def evaluate(node: Node) -> int:
    try:
        return evaluate_node(node)
    except RecursionError as e:
        raise EvalError(ErrorKind.TOO_DEEP, 'Expression nests too deeply to evaluate') from e
