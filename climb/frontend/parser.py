#!/usr/bin/env python3

from __future__ import annotations
import logging
from climb.frontend.utils import Token, TokenId
from climb.frontend.errors import ErrorKind, ParseError
from climb.frontend.lexer import Lexer, Source
from climb.frontend.tree import Leaf, Node, OpNode, token_operators

# Binding power parsing ("precedence climbing"): a single recursive function
# only consumes operators whose power is at least `min_power`. See tree.py for
# the power tables.
#
# expr    = primary, { postfix_op | infix_op, expr } ;
# primary = INT | SYM | "(", expr, ")" | prefix_op, expr ;

logger = logging.getLogger(__name__)

def expected(what: str, tok: Token) -> ParseError:
    kind = ErrorKind.EXPECTED_OPERATOR if what == 'operator' else ErrorKind.EXPECTED_LITERAL
    return ParseError(kind, f'Expected {what}, found {tok}', tok.pos)

def primary(lexer: Lexer) -> Node:
    tok = lexer.next()

    if tok.is_literal():
        return Leaf(tok.value)
    elif tok.token_id == TokenId.LPAREN:
        lhs = expr_bp(lexer, 0)
        closing = lexer.next()
        if closing.token_id != TokenId.RPAREN:
            raise ParseError(ErrorKind.UNCLOSED_PAREN,
                             f"Expected ')' to close '(' at {tok.pos}, found {closing}", closing.pos)
        return lhs

    op = token_operators.get(tok.token_id)
    power = op.prefix_power() if op is not None else None
    if power is None:
        raise expected('literal', tok)

    rhs = expr_bp(lexer, power)
    return OpNode(op, (rhs,))

def expr_bp(lexer: Lexer, min_power: int) -> Node:
    lhs = primary(lexer)

    while True:
        tok = lexer.peek()
        if tok.token_id in (TokenId.EOF, TokenId.RPAREN):
            break

        op = token_operators.get(tok.token_id)
        if op is None: # Two operands in a row
            raise expected('operator', tok)

        power = op.postfix_power()
        if power is not None:
            if power < min_power:
                break
            lexer.next()
            lhs = OpNode(op, (lhs,))
            continue

        left_power, right_power = op.infix_power()
        if left_power < min_power:
            break # Belongs to an enclosing call

        lexer.next()
        rhs = expr_bp(lexer, right_power)
        lhs = OpNode(op, (lhs, rhs))

    return lhs

def parse(source: Source) -> Node:
    lexer = Lexer(source)
    try:
        tree = expr_bp(lexer, 0)
    except RecursionError as e:
        raise ParseError(ErrorKind.TOO_DEEP, 'Expression nests too deeply', lexer.i) from e
    logger.debug('parsed %s', tree)
    return tree

