from __future__ import annotations
from enum import Enum, auto
from typing import Optional, Union

class TokenId(Enum):
    INT = auto()
    SYM = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()
    FAC = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()

class Token:
    def __init__(self, token_id: TokenId, value: Optional[Union[int, str]]=None, pos: int=0) -> None:
        self.token_id = token_id
        self.value = value
        self.pos = pos

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.token_id == other.token_id and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.token_id, self.value))

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value!r}, pos={self.pos})'

    def __str__(self) -> str:
        if self.token_id in (TokenId.INT, TokenId.SYM):
            return str(self.value)
        return token_text[self.token_id]

    def is_literal(self) -> bool:
        return self.token_id in (TokenId.INT, TokenId.SYM)

# Single byte tokens
byte_tokens = {
    ord('+'): TokenId.PLUS,
    ord('-'): TokenId.MINUS,
    ord('*'): TokenId.STAR,
    ord('/'): TokenId.SLASH,
    ord('^'): TokenId.CARET,
    ord('!'): TokenId.FAC,
    ord('('): TokenId.LPAREN,
    ord(')'): TokenId.RPAREN,
}

token_text = {tok: chr(byte) for byte, tok in byte_tokens.items()}
token_text[TokenId.EOF] = 'end of input'
