from __future__ import annotations
from enum import Enum, auto
from typing import Optional

class ErrorKind(Enum):
    # Lexing
    UNEXPECTED_BYTE = auto()
    NUMBER_OVERFLOW = auto()
    # Parsing
    EXPECTED_LITERAL = auto()
    EXPECTED_OPERATOR = auto()
    UNCLOSED_PAREN = auto()
    # Nesting deeper than the interpreter stack allows
    TOO_DEEP = auto()
    # Evaluation
    UNEVALUABLE_SYMBOL = auto()
    BAD_ARITY = auto()
    DIVISION_BY_ZERO = auto()
    NEGATIVE_EXPONENT = auto()
    NEGATIVE_FACTORIAL = auto()
    INTEGER_OVERFLOW = auto()

class CalcError(Exception):
    """Base class of every error raised while reading or evaluating a formula.

    `pos` is the byte offset in the source the error points at, when known.
    """

    def __init__(self, kind: ErrorKind, message: str, pos: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return self.message
        return f'{self.message} at {self.pos}'

class LexError(CalcError):
    pass

class NumberFormatError(LexError):
    pass

class ParseError(CalcError):
    pass

class EvalError(CalcError):
    pass
