from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union
from climb.frontend.utils import TokenId

class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    EXP = '^'
    FAC = '!'

    def __str__(self) -> str:
        return self.value

    def prefix_power(self) -> Optional[int]:
        return prefix_powers.get(self)

    def infix_power(self) -> Optional[Tuple[int, int]]:
        return infix_powers.get(self)

    def postfix_power(self) -> Optional[int]:
        return postfix_powers.get(self)

# Meaning of an operator token, before its position decides prefix/infix/postfix
token_operators = {
    TokenId.PLUS: Operator.ADD,
    TokenId.MINUS: Operator.SUB,
    TokenId.STAR: Operator.MUL,
    TokenId.SLASH: Operator.DIV,
    TokenId.CARET: Operator.EXP,
    TokenId.FAC: Operator.FAC,
}

# Binding powers, higher binds tighter. Infix pairs are (left, right):
# left < right chains to the left, left > right chains to the right.
prefix_powers: Dict[Operator, int] = {
    Operator.ADD: 5,
    Operator.SUB: 5,
}

infix_powers: Dict[Operator, Tuple[int, int]] = {
    Operator.ADD: (1, 2),
    Operator.SUB: (1, 2),
    Operator.MUL: (3, 4),
    Operator.DIV: (3, 4),
    Operator.EXP: (8, 7),
}

postfix_powers: Dict[Operator, int] = {
    Operator.FAC: 6,
}

@dataclass(frozen=True)
class Leaf:
    value: Union[int, str]

    def is_symbol(self) -> bool:
        return isinstance(self.value, str)

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class OpNode:
    op: Operator
    children: Tuple[Node, ...]

    def __str__(self) -> str:
        return render(self)

Node = Union[Leaf, OpNode]

def render(node: Node) -> str:
    """S-expression rendering, e.g. `(+ 1 (* 2 3))`.

    Walks an explicit stack so arbitrarily deep trees can be printed.
    """
    parts = []
    stack = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Leaf):
            parts.append(str(item.value))
        else:
            stack.append(')')
            for child in reversed(item.children):
                stack.extend([child, ' '])
            stack.append(f'({item.op}')
    return ''.join(parts)
